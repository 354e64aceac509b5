"""End-to-end runs through DotProcessor."""

import xml.etree.ElementTree as ET

import pytest
from PIL import Image

from conftest import BLACK, WHITE
from ndotter.errors import DocumentWriteError, ImageDecodeError, PostProcessError, ZeroDotSize
from ndotter.image_processing import DotProcessor, load_image, to_svg
from ndotter.image_processing import processor as processor_module
from ndotter.models import SVG_NAMESPACE, ConversionConfig, ConversionJob


def _job(source, **kwargs):
    config = kwargs.pop("config", ConversionConfig(dot_size=2))
    return ConversionJob(source=source, config=config, **kwargs)


def test_load_image_returns_rgba(make_image, write_image):
    path = write_image(make_image([[WHITE, BLACK]]).convert("RGB"))
    image = load_image(path)

    assert image.mode == "RGBA"
    assert image.size == (2, 1)


def test_load_image_missing_file(tmp_path):
    with pytest.raises(ImageDecodeError, match="not found"):
        load_image(tmp_path / "nope.png")


def test_load_image_rejects_non_image(tmp_path):
    path = tmp_path / "notes.png"
    path.write_text("definitely not a png", encoding="utf-8")

    with pytest.raises(ImageDecodeError, match="Cannot load image"):
        load_image(path)


def test_process_writes_default_destination(checkerboard, write_image):
    source = write_image(checkerboard)
    result = DotProcessor().process(_job(source))

    assert result.destination == source.with_suffix(".svg")
    assert result.destination.is_file()
    assert result.dot_count == 3
    assert result.open_error is None

    root = ET.fromstring(result.destination.read_text(encoding="utf-8"))
    assert root.tag == f"{{{SVG_NAMESPACE}}}svg"
    assert len(root.findall(f"{{{SVG_NAMESPACE}}}circle")) == 3


def test_process_honours_explicit_destination(checkerboard, write_image, tmp_path):
    source = write_image(checkerboard)
    destination = tmp_path / "art" / "dots.svg"
    destination.parent.mkdir()

    result = DotProcessor().process(_job(source, destination=destination))

    assert result.destination == destination
    assert destination.read_text(encoding="utf-8") == to_svg(result.document)
    assert not source.with_suffix(".svg").exists()


def test_process_records_source_dimensions(checkerboard, write_image):
    processor = DotProcessor()
    processor.process(_job(write_image(checkerboard)))

    assert processor.config.source_dimensions == (3, 2)


def test_process_jpeg_source(write_image):
    source = write_image(Image.new("RGB", (4, 3), (255, 255, 255)), "white.jpg")
    result = DotProcessor().process(_job(source))

    assert (result.document.width, result.document.height) == (8, 6)
    assert result.dot_count == 12


def test_zero_dot_size_produces_no_output(checkerboard, write_image):
    source = write_image(checkerboard)
    config = ConversionConfig(dot_size=1)
    config.dot_size = 0

    with pytest.raises(ZeroDotSize):
        DotProcessor().process(_job(source, config=config))
    assert not source.with_suffix(".svg").exists()


def test_decode_failure_produces_no_output(tmp_path):
    source = tmp_path / "broken.gif"
    source.write_bytes(b"\x00\x01 not an image at all")

    with pytest.raises(ImageDecodeError):
        DotProcessor().process(_job(source))
    assert not source.with_suffix(".svg").exists()


def test_unwritable_destination(checkerboard, write_image, tmp_path):
    job = _job(write_image(checkerboard), destination=tmp_path / "no_dir" / "out.svg")

    with pytest.raises(DocumentWriteError):
        DotProcessor().process(job)


def test_open_after_calls_viewer(checkerboard, write_image, monkeypatch):
    opened = []
    monkeypatch.setattr(processor_module, "open_document", opened.append)

    result = DotProcessor().process(_job(write_image(checkerboard), open_after=True))

    assert opened == [result.destination]
    assert result.open_error is None


def test_open_failure_is_not_fatal(checkerboard, write_image, monkeypatch):
    def failing_open(path):
        raise PostProcessError("Cannot open document: no viewer")

    monkeypatch.setattr(processor_module, "open_document", failing_open)

    result = DotProcessor().process(_job(write_image(checkerboard), open_after=True))

    assert result.destination.is_file()
    assert result.open_error == "Cannot open document: no viewer"


def test_viewer_not_called_without_open_flag(checkerboard, write_image, monkeypatch):
    opened = []
    monkeypatch.setattr(processor_module, "open_document", opened.append)

    DotProcessor().process(_job(write_image(checkerboard)))

    assert opened == []


def test_load_image_rejects_oversized_image(write_image, monkeypatch):
    path = write_image(Image.new("RGB", (100, 100), (255, 255, 255)))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)

    with pytest.raises(ImageDecodeError, match="Cannot load image"):
        load_image(path)


def test_oversized_image_produces_no_output(write_image, monkeypatch):
    source = write_image(Image.new("RGB", (100, 100), (255, 255, 255)))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)

    with pytest.raises(ImageDecodeError):
        DotProcessor().process(_job(source))
    assert not source.with_suffix(".svg").exists()
