"""Main application window."""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from ndotter.config_manager import ConfigManager
from ndotter.ui.conversion_panel import ConversionPanel
from ndotter.ui.state import GuiModel
from ndotter.ui.styles import FONTS, SIZES


class NdotterWindow(QMainWindow):
    """Main application window for image-to-dot conversion."""

    def __init__(self, config_manager: ConfigManager | None = None):
        super().__init__()
        self.setWindowTitle("ndotter")
        self.resize(*SIZES.WINDOW_SIZE)

        # Application state
        self.config_manager = config_manager or ConfigManager()
        self.model = GuiModel.from_defaults(self.config_manager.load())

        # UI component references (created in _setup_ui)
        self.conversion_panel: ConversionPanel

        self._setup_ui()

    def _setup_ui(self):
        """Initialize the user interface."""
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(
            SIZES.WINDOW_MARGIN, SIZES.WINDOW_MARGIN, SIZES.WINDOW_MARGIN, SIZES.WINDOW_MARGIN
        )

        heading = QLabel("CONVERT IMAGE TO N-DOT")
        heading.setFont(FONTS.HEADING)
        heading.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(heading)

        self.conversion_panel = ConversionPanel(self.model)
        layout.addWidget(self.conversion_panel, stretch=1)

        self.setCentralWidget(central)
