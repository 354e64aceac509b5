"""Data models and constants for ndotter."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ndotter.errors import ConversionError, ZeroDotSize

# AIDEV-NOTE: Classification constants are fixed, not user configurable.
# Weights are stored as integers (per mille) so the threshold compare is exact.
LUMA_WEIGHTS = (299, 587, 114)
LUMA_SCALE = 1000
LUMA_THRESHOLD = 128.0

DOT_FILL = "white"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
SVG_SUFFIX = ".svg"

DEFAULT_DOT_SIZE = 10
GUI_DOT_SIZE_RANGE = (1, 50)

# Configuration file path (read-only defaults)
CONFIG_FILE = Path.home() / ".ndotter_config.json"

IMAGE_FILE_FILTER = "Image files (*.png *.jpg *.jpeg *.gif);;All Files (*)"
SVG_FILE_FILTER = "SVG file (*.svg)"


class BrightnessClass(Enum):
    """Binary luminance class of a pixel."""

    DARK = "dark"
    LIGHT = "light"


@dataclass(frozen=True)
class PixelSample:
    """One RGBA sample (0-255 per channel) read from the source grid."""

    r: int
    g: int
    b: int
    a: int = 255


@dataclass
class ConversionConfig:
    """Per-invocation conversion settings.

    AIDEV-NOTE: Validated as soon as it is constructed. The GUI mutates the
    same object through its state machine, so convert() validates again
    before reading any pixel.
    """

    dot_size: int = DEFAULT_DOT_SIZE  # output units per source pixel
    inverted: bool = False  # emit dots for dark pixels instead of light ones

    # Filled in once the source grid is decoded
    source_dimensions: "tuple[int, int] | None" = None

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Check the configuration preconditions.

        Raises:
            ZeroDotSize: If dot_size is 0
            ConversionError: If dot_size is not a positive integer
        """
        if isinstance(self.dot_size, bool) or not isinstance(self.dot_size, int):
            raise ConversionError(
                f"Dot size must be an integer, got {self.dot_size!r}"
            )
        if self.dot_size == 0:
            raise ZeroDotSize()
        if self.dot_size < 0:
            raise ConversionError(f"Dot size must be positive, got {self.dot_size}")


@dataclass(frozen=True)
class DotGeometry:
    """Center and radius of one output dot, in output units."""

    cx: float
    cy: float
    r: float


@dataclass(frozen=True)
class VectorDocument:
    """Finished dot document.

    Dots are stored in insertion order, which is the row-major scan order
    of the source grid.
    """

    width: int  # canvas width (source width * dot_size)
    height: int  # canvas height (source height * dot_size)
    dots: "tuple[DotGeometry, ...]" = ()

    @property
    def dot_count(self) -> int:
        return len(self.dots)


@dataclass
class ConversionJob:
    """Everything a front end hands to the processor for one run."""

    source: Path
    destination: "Path | None" = None
    open_after: bool = False
    config: ConversionConfig = field(default_factory=ConversionConfig)

    def resolved_destination(self) -> Path:
        """Destination path, defaulting to the source with an .svg suffix."""
        if self.destination is not None:
            return Path(self.destination)
        return Path(self.source).with_suffix(SVG_SUFFIX)


@dataclass
class ConversionResult:
    """Outcome of a completed run."""

    destination: Path
    document: VectorDocument

    # Statistics
    elapsed: float = 0.0  # seconds spent decoding, converting and writing

    # Set when the optional open step failed (non-fatal)
    open_error: "str | None" = None

    @property
    def dot_count(self) -> int:
        return self.document.dot_count
