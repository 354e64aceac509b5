"""Dot rendering: turns a decoded pixel grid into a dot document.

AIDEV-NOTE: This is the conversion pipeline proper. It never touches the
filesystem; decoding happens before it and serialization after it.
"""

import logging
import math
from typing import Callable

import numpy as np
from PIL import Image

from ndotter.models import ConversionConfig, VectorDocument

from .svg_writer import DotDocumentBuilder
from .utils import classify_rows, map_pixel_to_dot

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]


def convert(
    image: Image.Image,
    config: ConversionConfig,
    progress: ProgressCallback | None = None,
) -> VectorDocument:
    """Convert a decoded image into a dot document.

    Every pixel is visited once in row-major order. A pixel produces a dot
    when it is LIGHT and the config is not inverted, or DARK and inverted.

    Args:
        image: Decoded PIL image (any mode, converted to RGBA)
        config: Conversion settings
        progress: Optional callback receiving the percentage of pixels
            scanned after each row

    Returns:
        Finalized VectorDocument

    Raises:
        ZeroDotSize: If config.dot_size is 0 (before any pixel is read)
    """
    config.validate()

    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    width, height = rgba.size
    dot_size = config.dot_size
    inverted = config.inverted

    builder = DotDocumentBuilder(width, height, dot_size)
    pixels = np.asarray(rgba)
    total = width * height

    logger.debug(
        f"Scanning {width}x{height} grid (dot size {dot_size}, "
        f"inverted={inverted})"
    )

    # Precompute values for efficiency
    append = builder.append

    for y in range(height):
        light = classify_rows(pixels[y])
        included = ~light if inverted else light

        for x in np.flatnonzero(included):
            append(map_pixel_to_dot(int(x), y, dot_size))

        if progress is not None:
            progress(math.ceil((y + 1) * width * 100 / total) if total else 100)

    document = builder.finalize()
    logger.debug(f"Scan complete: {document.dot_count} of {total} pixels included")
    return document
