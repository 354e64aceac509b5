"""ndotter GUI - Main entry point."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from ndotter.ui.main_window import NdotterWindow


def main():
    """Launch the ndotter GUI."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = QApplication(sys.argv)

    app.setApplicationDisplayName("ndotter")
    app.setApplicationName("ndotter")

    window = NdotterWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
