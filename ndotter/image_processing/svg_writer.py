"""Dot document assembly and SVG serialization."""

import logging
from pathlib import Path

import svg

from ndotter.errors import ConversionError, DocumentWriteError
from ndotter.models import DOT_FILL, SVG_NAMESPACE, DotGeometry, VectorDocument

logger = logging.getLogger(__name__)


class DotDocumentBuilder:
    """Accumulates dots for one conversion run.

    AIDEV-NOTE: append() is the only mutator. Dots keep insertion order,
    and the pipeline appends in row-major scan order, so the document order
    is part of the output contract.
    """

    def __init__(self, source_width: int, source_height: int, dot_size: int):
        self.width = source_width * dot_size
        self.height = source_height * dot_size
        self._dots: list[DotGeometry] = []
        self._finalized = False

    def append(self, dot: DotGeometry) -> None:
        """Add one dot to the document."""
        if self._finalized:
            raise ConversionError("Cannot append to a finalized document")
        self._dots.append(dot)

    def __len__(self) -> int:
        return len(self._dots)

    def finalize(self) -> VectorDocument:
        """Freeze the accumulated dots into a VectorDocument."""
        self._finalized = True
        return VectorDocument(
            width=self.width,
            height=self.height,
            dots=tuple(self._dots),
        )


def document_to_svg(document: VectorDocument) -> svg.SVG:
    """Build the svg.py element tree for a document.

    Args:
        document: Finished dot document

    Returns:
        SVG root with one filled circle per dot
    """
    elements: list[svg.Element] = [
        svg.Circle(cx=dot.cx, cy=dot.cy, r=dot.r, fill=DOT_FILL)
        for dot in document.dots
    ]

    return svg.SVG(
        xmlns=SVG_NAMESPACE,
        viewBox=svg.ViewBoxSpec(0, 0, document.width, document.height),
        elements=elements,
    )


def to_svg(document: VectorDocument) -> str:
    """Serialize a document to SVG text."""
    return document_to_svg(document).as_str()


def save_document(document: VectorDocument, destination: str | Path) -> Path:
    """Write a document to disk as SVG.

    Args:
        document: Finished dot document
        destination: Output file path

    Returns:
        The path that was written

    Raises:
        DocumentWriteError: If the file cannot be written
    """
    path = Path(destination)
    content = to_svg(document)

    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise DocumentWriteError(f"Cannot write document: {e}") from e

    logger.debug(f"Wrote {len(content)} characters to {path}")
    return path
