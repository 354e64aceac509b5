"""GUI state and the messages that change it.

AIDEV-NOTE: Keep this module free of Qt imports. The window only translates
widget signals into update() calls, so the state machine is testable
without a display.
"""

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Any

from ndotter.config_manager import Defaults
from ndotter.errors import ConversionError
from ndotter.models import (
    GUI_DOT_SIZE_RANGE,
    SVG_SUFFIX,
    ConversionConfig,
    ConversionJob,
    ConversionResult,
)


class Msg(Enum):
    """User actions understood by the GUI model."""

    SET_SOURCE = auto()
    SET_DESTINATION = auto()
    SET_DOT_SIZE = auto()
    SET_INVERTED = auto()
    SET_OPEN_AFTER = auto()
    PROCESS = auto()


@dataclass
class GuiModel:
    """Current GUI selections."""

    source: "Path | None" = None
    destination: "Path | None" = None
    dot_size: int = GUI_DOT_SIZE_RANGE[0]
    inverted: bool = False
    open_after: bool = False

    @classmethod
    def from_defaults(cls, defaults: Defaults) -> "GuiModel":
        model = cls(inverted=defaults.inverted, open_after=defaults.open_after)
        if defaults.dot_size is not None:
            low, high = GUI_DOT_SIZE_RANGE
            model.dot_size = min(max(defaults.dot_size, low), high)
        return model


def update(model: GuiModel, msg: Msg, value: Any = None) -> "ConversionJob | None":
    """Apply one user action to the model.

    Args:
        model: GUI model, mutated in place
        msg: Action to apply
        value: Payload for SET_* messages. A None path means the file dialog
            was cancelled and leaves the current selection untouched.

    Returns:
        The ConversionJob to run for PROCESS, otherwise None

    Raises:
        ConversionError: On PROCESS without a source, or with invalid settings
    """
    if msg is Msg.SET_SOURCE:
        if value is not None:
            model.source = Path(value)
    elif msg is Msg.SET_DESTINATION:
        if value is not None:
            model.destination = Path(value).with_suffix(SVG_SUFFIX)
    elif msg is Msg.SET_DOT_SIZE:
        model.dot_size = int(value)
    elif msg is Msg.SET_INVERTED:
        model.inverted = bool(value)
    elif msg is Msg.SET_OPEN_AFTER:
        model.open_after = bool(value)
    elif msg is Msg.PROCESS:
        if model.source is None:
            raise ConversionError("Source file not chosen!")
        return ConversionJob(
            source=model.source,
            destination=model.destination,
            open_after=model.open_after,
            config=ConversionConfig(dot_size=model.dot_size, inverted=model.inverted),
        )
    return None


def result_status(result: ConversionResult) -> "tuple[str, str]":
    """Status label state and text for a finished run.

    A failed open step is reported as a warning.
    """
    text = f"{result.dot_count} dots written to {result.destination.name}"
    if result.open_error:
        return "WARNING", f"{text} (not opened)"
    return "SUCCESS", text
