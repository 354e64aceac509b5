"""Widget factory for creating common UI patterns with reduced boilerplate.

This module provides factory functions for the labelled controls and file
selection rows used by the conversion panel.
"""

from typing import Tuple

from PyQt6.QtWidgets import (
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QWidget,
)

from ndotter.ui.styles import SIZES


class WidgetFactory:
    """Factory class for creating commonly used widget patterns."""

    @staticmethod
    def create_int_spinbox(
        range_min: int,
        range_max: int,
        value: int,
        tooltip: str = "",
    ) -> QSpinBox:
        """Create a configured QSpinBox.

        Args:
            range_min: Minimum value
            range_max: Maximum value
            value: Initial value
            tooltip: Tooltip text

        Returns:
            Configured QSpinBox
        """
        spinbox = QSpinBox()
        spinbox.setRange(range_min, range_max)
        spinbox.setValue(value)
        if tooltip:
            spinbox.setToolTip(tooltip)
        return spinbox

    @staticmethod
    def create_checkbox(text: str, checked: bool = False, tooltip: str = "") -> QCheckBox:
        """Create a QCheckBox with an initial state and tooltip."""
        checkbox = QCheckBox(text)
        checkbox.setChecked(checked)
        if tooltip:
            checkbox.setToolTip(tooltip)
        return checkbox

    @staticmethod
    def create_labeled_row(
        label_text: str,
        widget: QWidget,
    ) -> QHBoxLayout:
        """Create a horizontal layout with label and widget.

        Args:
            label_text: Text for the label
            widget: Widget to place after label

        Returns:
            QHBoxLayout with label and widget
        """
        layout = QHBoxLayout()
        layout.addWidget(QLabel(label_text), stretch=1)
        layout.addWidget(widget)
        return layout

    @staticmethod
    def create_file_row(placeholder: str) -> Tuple[QHBoxLayout, QLineEdit, QPushButton]:
        """Create a read-only path field with a "Select" button.

        Args:
            placeholder: Placeholder text shown while no file is chosen

        Returns:
            Tuple of (layout, line edit, select button)
        """
        layout = QHBoxLayout()

        path_edit = QLineEdit()
        path_edit.setReadOnly(True)
        path_edit.setPlaceholderText(placeholder)
        layout.addWidget(path_edit, stretch=1)

        select_btn = QPushButton("Select")
        select_btn.setMinimumWidth(SIZES.SELECT_BUTTON_MIN_WIDTH)
        layout.addWidget(select_btn)

        return layout, path_edit, select_btn
