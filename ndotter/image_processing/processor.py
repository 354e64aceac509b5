"""Main processor orchestrating a complete conversion run.

AIDEV-NOTE: Both front ends (CLI and GUI) go through DotProcessor.process().
It decodes the source, runs the dot pipeline, writes the SVG and optionally
opens it. Only the open step is allowed to fail without failing the run.
"""

import logging
import time
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from ndotter.errors import ImageDecodeError, PostProcessError
from ndotter.models import (
    ConversionConfig,
    ConversionJob,
    ConversionResult,
    VectorDocument,
)
from ndotter.viewer import open_document

from .rendering import ProgressCallback, convert
from .svg_writer import save_document

logger = logging.getLogger(__name__)


def load_image(file_path: str | Path) -> Image.Image:
    """Load and decode an image file.

    Args:
        file_path: Path to image file (PNG, JPG, GIF, etc.)

    Returns:
        PIL Image in RGBA mode (first frame for animated formats)

    Raises:
        ImageDecodeError: If the file is missing, unreadable, not an image
            or over the decompression bomb limit
    """
    try:
        with Image.open(file_path) as image:
            # AIDEV-NOTE: Always convert to RGBA for consistent processing.
            # convert() also forces the lazy decode while the file is open.
            return image.convert("RGBA")
    except FileNotFoundError as e:
        raise ImageDecodeError(f"Cannot load image: {file_path} not found") from e
    except UnidentifiedImageError as e:
        raise ImageDecodeError(f"Cannot load image: unsupported format ({e})") from e
    except Image.DecompressionBombError as e:
        raise ImageDecodeError(f"Cannot load image: {e}") from e
    except (OSError, ValueError) as e:
        raise ImageDecodeError(f"Cannot load image: {e}") from e


class DotProcessor:
    """Converts images into dot documents."""

    def __init__(self, config: ConversionConfig | None = None):
        self.config = config or ConversionConfig()

    def load_image(self, file_path: str | Path) -> Image.Image:
        """Decode the source and record its dimensions on the config."""
        image = load_image(file_path)
        self.config.source_dimensions = image.size
        return image

    def convert(
        self,
        image: Image.Image,
        progress: ProgressCallback | None = None,
    ) -> VectorDocument:
        """Run the dot pipeline on an already decoded image."""
        return convert(image, self.config, progress)

    def process(
        self,
        job: ConversionJob,
        progress: ProgressCallback | None = None,
    ) -> ConversionResult:
        """Execute a complete conversion run.

        Args:
            job: Source, destination and options for this run
            progress: Optional percentage callback

        Returns:
            ConversionResult with the written document and statistics

        Raises:
            ZeroDotSize: If the dot size is 0 (nothing is read or written)
            ImageDecodeError: If the source cannot be decoded
            DocumentWriteError: If the SVG cannot be written
        """
        self.config = job.config
        # Reject bad settings before touching the source file
        self.config.validate()

        destination = job.resolved_destination()
        logger.info(
            f"Converting {job.source} -> {destination} "
            f"(dot size {self.config.dot_size}, inverted={self.config.inverted}, "
            f"open={job.open_after})"
        )
        start = time.time()

        image = self.load_image(job.source)
        width, height = image.size
        logger.info(f"Loaded image with size: {width}x{height} pixels.")

        document = self.convert(image, progress)
        save_document(document, destination)

        elapsed = time.time() - start
        logger.info(
            f"Wrote {document.dot_count} dots to {destination} in {elapsed:.3f}s"
        )

        result = ConversionResult(
            destination=destination,
            document=document,
            elapsed=elapsed,
        )

        if job.open_after:
            try:
                open_document(destination)
            except PostProcessError as e:
                logger.warning(str(e))
                result.open_error = str(e)

        return result
