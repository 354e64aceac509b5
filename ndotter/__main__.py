"""Allow running ndotter with ``python -m ndotter``."""

import sys

from ndotter.cli import main

if __name__ == "__main__":
    sys.exit(main())
