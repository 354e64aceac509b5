"""Conversion panel: file selection, options and the Process action."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QThread, pyqtSignal
from PyQt6.QtWidgets import (
    QFileDialog,
    QGroupBox,
    QLabel,
    QMessageBox,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ndotter.errors import NdotterError
from ndotter.image_processing import DotProcessor
from ndotter.models import (
    GUI_DOT_SIZE_RANGE,
    IMAGE_FILE_FILTER,
    SVG_FILE_FILTER,
    ConversionJob,
    ConversionResult,
)
from ndotter.ui.state import GuiModel, Msg, result_status, update
from ndotter.ui.styles import SIZES, status_stylesheet
from ndotter.ui.widgets import WidgetFactory

logger = logging.getLogger(__name__)


class ConversionThread(QThread):
    """Background thread for conversion to avoid blocking UI."""

    done = pyqtSignal(object)  # ConversionResult
    error = pyqtSignal(str)  # Error message
    progress = pyqtSignal(int)  # Progress percentage

    def __init__(self, job: ConversionJob):
        super().__init__()
        self.job = job

    def run(self):
        """Execute the conversion in background."""
        try:
            processor = DotProcessor(self.job.config)
            result = processor.process(self.job, progress=self.progress.emit)
        except NdotterError as e:
            logger.error(f"Conversion failed: {e}")
            self.error.emit(str(e))
            return
        except Exception as e:
            logger.exception("Unexpected conversion failure")
            self.error.emit(str(e))
            return

        self.done.emit(result)


class ConversionPanel(QGroupBox):
    """Panel holding every control of the conversion form."""

    def __init__(self, model: GuiModel, parent: QWidget | None = None):
        super().__init__(parent)
        self.model = model
        self.conversion_thread: ConversionThread | None = None

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()
        layout.setSpacing(SIZES.ROW_SPACING)

        # --- File Selection ---
        source_row, self.source_edit, self.source_btn = WidgetFactory.create_file_row(
            "Select source file"
        )
        layout.addLayout(source_row)

        dest_row, self.dest_edit, self.dest_btn = WidgetFactory.create_file_row(
            "Select destination file"
        )
        layout.addLayout(dest_row)

        # --- Options ---
        low, high = GUI_DOT_SIZE_RANGE
        self.dot_size_spin = WidgetFactory.create_int_spinbox(
            range_min=low,
            range_max=high,
            value=self.model.dot_size,
            tooltip="Size of each dot (changes viewport size proportionally)",
        )
        layout.addLayout(WidgetFactory.create_labeled_row("Dot size", self.dot_size_spin))

        self.inverted_check = WidgetFactory.create_checkbox(
            "Inversed",
            checked=self.model.inverted,
            tooltip="Use black pixels for processing instead of white",
        )
        layout.addWidget(self.inverted_check)

        self.open_check = WidgetFactory.create_checkbox(
            "Open",
            checked=self.model.open_after,
            tooltip="Open processed image after finishing",
        )
        layout.addWidget(self.open_check)

        # --- Action ---
        self.process_btn = QPushButton("Process")
        layout.addWidget(self.process_btn)

        # --- Progress and Status ---
        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        layout.addWidget(self.progress_bar)

        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        self.setLayout(layout)

    def _connect_signals(self):
        """Translate widget signals into model messages."""
        self.source_btn.clicked.connect(self._on_source_clicked)
        self.dest_btn.clicked.connect(self._on_destination_clicked)
        self.dot_size_spin.valueChanged.connect(
            lambda v: self._dispatch(Msg.SET_DOT_SIZE, v)
        )
        self.inverted_check.toggled.connect(
            lambda checked: self._dispatch(Msg.SET_INVERTED, checked)
        )
        self.open_check.toggled.connect(
            lambda checked: self._dispatch(Msg.SET_OPEN_AFTER, checked)
        )
        self.process_btn.clicked.connect(self._on_process_clicked)

    def _dispatch(self, msg: Msg, value=None):
        update(self.model, msg, value)
        self._refresh_paths()

    def _refresh_paths(self):
        """Mirror the model's paths in the read-only fields."""
        self.source_edit.setText(str(self.model.source) if self.model.source else "")
        self.dest_edit.setText(
            str(self.model.destination) if self.model.destination else ""
        )

    # === Event Handlers ===

    def _on_source_clicked(self):
        """Handle source select button click."""
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open a file", "", IMAGE_FILE_FILTER
        )
        self._dispatch(Msg.SET_SOURCE, file_path or None)

    def _on_destination_clicked(self):
        """Handle destination select button click."""
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Save as", "", SVG_FILE_FILTER
        )
        self._dispatch(Msg.SET_DESTINATION, file_path or None)

    def _on_process_clicked(self):
        """Start the conversion in a background thread."""
        try:
            job = update(self.model, Msg.PROCESS)
        except NdotterError as e:
            self._show_message(str(e), QMessageBox.Icon.Critical)
            return

        self._set_busy(True)
        self.status_label.setStyleSheet(status_stylesheet("IDLE"))
        self.status_label.setText("Processing image...")

        self.conversion_thread = ConversionThread(job)
        self.conversion_thread.done.connect(self._on_conversion_finished)
        self.conversion_thread.error.connect(self._on_conversion_error)
        self.conversion_thread.progress.connect(self.progress_bar.setValue)
        self.conversion_thread.start()

    def _on_conversion_finished(self, result: ConversionResult):
        """Handle completed conversion."""
        self._set_busy(False)

        state, text = result_status(result)
        self.status_label.setStyleSheet(status_stylesheet(state))
        self.status_label.setText(text)

        if result.open_error:
            self._show_message(result.open_error, QMessageBox.Icon.Warning)

        self._show_message("Finished", QMessageBox.Icon.Information)

    def _on_conversion_error(self, error_msg: str):
        """Handle conversion error."""
        self._set_busy(False)

        # format error message
        pretty_msg = error_msg.replace("\n", " ").strip()
        self.status_label.setStyleSheet(status_stylesheet("ERROR"))
        self.status_label.setText(f"Error: {pretty_msg}")
        self._show_message(pretty_msg, QMessageBox.Icon.Critical)

    # === Helpers ===

    def _set_busy(self, busy: bool):
        """Toggle controls while a conversion is running."""
        for widget in (
            self.process_btn,
            self.source_btn,
            self.dest_btn,
            self.dot_size_spin,
            self.inverted_check,
            self.open_check,
        ):
            widget.setEnabled(not busy)

        self.progress_bar.setValue(0)
        self.progress_bar.setVisible(busy)

    def _show_message(self, message: str, icon: QMessageBox.Icon):
        box = QMessageBox(self)
        box.setIcon(icon)
        box.setWindowTitle("ndotter")
        box.setText(message)
        box.exec()
