"""Centralized styling constants for the ndotter UI.

This module consolidates colors, fonts, and sizes used throughout the application
to ensure consistency and easier maintenance.
"""

from PyQt6.QtGui import QFont


class StatusColors:
    """Status label colors."""

    SUCCESS = "green"
    WARNING = "orange"
    ERROR = "red"
    IDLE = "gray"


class Fonts:
    """Standard application fonts."""

    HEADING = QFont("Nothing Font (5x7)", 24)


class Sizes:
    """Standard widget sizes and constraints."""

    # Main window
    WINDOW_SIZE = (360, 270)
    WINDOW_MARGIN = 20

    # Buttons and controls
    SELECT_BUTTON_MIN_WIDTH = 70
    ROW_SPACING = 10


# Convenience aliases
FONTS = Fonts
SIZES = Sizes


def status_stylesheet(state: str) -> str:
    """Generate status label stylesheet.

    Args:
        state: One of 'SUCCESS', 'WARNING', 'ERROR', 'IDLE'

    Returns:
        CSS stylesheet string with appropriate color
    """
    color = getattr(StatusColors, state.upper(), StatusColors.IDLE)
    return f"color: {color};"
