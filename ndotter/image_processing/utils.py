"""Pixel classification and coordinate mapping helpers.

AIDEV-NOTE: This module contains the per-pixel rules used by the conversion
pipeline: brightness classification and the pixel-to-dot coordinate mapping.
The scalar and vectorized classifiers must always agree.
"""

import numpy as np

from ndotter.models import (
    LUMA_SCALE,
    LUMA_THRESHOLD,
    LUMA_WEIGHTS,
    BrightnessClass,
    DotGeometry,
    PixelSample,
)

# Threshold in weighted-sum units (128.0 * 1000)
_WEIGHTED_THRESHOLD = int(LUMA_THRESHOLD * LUMA_SCALE)


def _weighted_sum(r: int, g: int, b: int) -> int:
    wr, wg, wb = LUMA_WEIGHTS
    return wr * r + wg * g + wb * b


def luminance(sample: PixelSample) -> float:
    """Perceived brightness of a sample.

    Args:
        sample: RGBA pixel sample (alpha is ignored)

    Returns:
        Luminance from 0.0 (black) to 255.0 (white)
    """
    return _weighted_sum(sample.r, sample.g, sample.b) / LUMA_SCALE


def classify(sample: PixelSample) -> BrightnessClass:
    """Classify a sample as light or dark.

    A sample is LIGHT only if its luminance is strictly greater than 128.0.
    """
    if _weighted_sum(sample.r, sample.g, sample.b) > _WEIGHTED_THRESHOLD:
        return BrightnessClass.LIGHT
    return BrightnessClass.DARK


def classify_rows(pixels: np.ndarray) -> np.ndarray:
    """Vectorized form of classify() for a block of RGBA pixels.

    Args:
        pixels: uint8 array shaped (..., 4) or (..., 3)

    Returns:
        Boolean array shaped like pixels[..., 0], True where the pixel is LIGHT
    """
    # Widen before multiplying so uint8 channels cannot overflow
    channels = pixels[..., :3].astype(np.int32)
    weights = np.array(LUMA_WEIGHTS, dtype=np.int32)
    return channels @ weights > _WEIGHTED_THRESHOLD


def map_pixel_to_dot(x: int, y: int, dot_size: int) -> DotGeometry:
    """Map a pixel's grid position to the dot that represents it.

    Args:
        x: Pixel column
        y: Pixel row
        dot_size: Output units per source pixel

    Returns:
        DotGeometry centered in the pixel's cell, radius dot_size / 2
    """
    half = dot_size / 2.0
    return DotGeometry(
        cx=float(x * dot_size) + half,
        cy=float(y * dot_size) + half,
        r=half,
    )
