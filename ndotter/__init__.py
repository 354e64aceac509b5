"""ndotter - convert raster images into N-dot SVG art."""

from ndotter.errors import (
    ConversionError,
    DocumentWriteError,
    ImageDecodeError,
    NdotterError,
    PostProcessError,
    ZeroDotSize,
)
from ndotter.image_processing import DotProcessor, convert
from ndotter.models import ConversionConfig, ConversionJob, VectorDocument

__version__ = "1.0.0"

__all__ = [
    "ConversionConfig",
    "ConversionError",
    "ConversionJob",
    "DocumentWriteError",
    "DotProcessor",
    "ImageDecodeError",
    "NdotterError",
    "PostProcessError",
    "VectorDocument",
    "ZeroDotSize",
    "convert",
]
