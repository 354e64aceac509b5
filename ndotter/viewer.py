"""Open a written document with the platform's default handler."""

import logging
import os
import subprocess
import sys
from pathlib import Path

from ndotter.errors import PostProcessError

logger = logging.getLogger(__name__)


def _open_command(path: Path) -> "list[str]":
    if sys.platform == "darwin":
        return ["open", str(path)]
    return ["xdg-open", str(path)]


def open_document(path: str | Path) -> None:
    """Launch the default viewer for a file.

    Raises:
        PostProcessError: If the file is missing or no handler could be started
    """
    path = Path(path)
    if not path.exists():
        raise PostProcessError(f"Cannot open document: {path} does not exist")

    logger.debug(f"Opening {path}")
    try:
        if sys.platform.startswith("win"):
            os.startfile(path)  # type: ignore[attr-defined]
        else:
            subprocess.run(_open_command(path), check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        raise PostProcessError(f"Cannot open document: {e}") from e
