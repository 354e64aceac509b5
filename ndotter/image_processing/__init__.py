"""Image processing pipeline for image-to-dot conversion.

AIDEV-NOTE: This package handles the complete pipeline from raster image
to dot SVG. Organized into modular components:
- processor: DotProcessor orchestrator and the image decoder
- rendering: the conversion pipeline (pixel scan and inclusion policy)
- svg_writer: document assembly and SVG serialization
- utils: brightness classification and coordinate mapping
"""

from .processor import DotProcessor, load_image
from .rendering import convert
from .svg_writer import DotDocumentBuilder, save_document, to_svg
from .utils import classify, luminance, map_pixel_to_dot

__all__ = [
    "DotProcessor",
    "DotDocumentBuilder",
    "classify",
    "convert",
    "load_image",
    "luminance",
    "map_pixel_to_dot",
    "save_document",
    "to_svg",
]
