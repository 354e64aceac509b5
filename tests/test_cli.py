"""Command-line front end."""

import json
import xml.etree.ElementTree as ET

import pytest

from ndotter.cli import build_job, create_parser, main
from ndotter.models import DEFAULT_DOT_SIZE, SVG_NAMESPACE


@pytest.fixture
def source(checkerboard, write_image):
    return write_image(checkerboard)


def _run(*args, config):
    return main([*args, "--config", str(config)])


def _viewbox(path):
    root = ET.fromstring(path.read_text(encoding="utf-8"))
    assert root.tag == f"{{{SVG_NAMESPACE}}}svg"
    return [float(v) for v in root.get("viewBox").split()]


def test_convert_prints_banner_and_finishes(source, no_config, capsys):
    assert _run("-s", str(source), "--dot-size", "2", config=no_config) == 0

    out = capsys.readouterr().out
    assert "======== NDOTTER ========" in out
    assert f"destination: {source.with_suffix('.svg')}" in out
    assert "Processing image: 100%" in out
    assert out.rstrip().endswith("Finished.")
    assert _viewbox(source.with_suffix(".svg")) == [0, 0, 6, 4]


def test_default_dot_size(source, no_config):
    assert _run("-s", str(source), config=no_config) == 0
    assert _viewbox(source.with_suffix(".svg")) == [0, 0, 3 * DEFAULT_DOT_SIZE, 2 * DEFAULT_DOT_SIZE]


def test_explicit_destination(source, no_config, tmp_path):
    destination = tmp_path / "out.svg"

    assert _run("-s", str(source), "-d", str(destination), config=no_config) == 0
    assert destination.is_file()
    assert not source.with_suffix(".svg").exists()


def test_zero_dot_size_is_reported(source, no_config, capsys):
    assert _run("-s", str(source), "--dot-size", "0", config=no_config) == 1

    assert "Dot size must not be 0" in capsys.readouterr().err
    assert not source.with_suffix(".svg").exists()


def test_missing_source_is_reported(tmp_path, no_config, capsys):
    assert _run("-s", str(tmp_path / "absent.png"), config=no_config) == 1
    assert "Cannot load image" in capsys.readouterr().err


def test_negative_dot_size_is_a_usage_error(source, no_config):
    with pytest.raises(SystemExit) as exc:
        _run("-s", str(source), "--dot-size", "-1", config=no_config)
    assert exc.value.code == 2


def test_source_is_required(no_config):
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(no_config)])
    assert exc.value.code == 2


def test_version_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.startswith("ndotter ")


@pytest.mark.parametrize("flag", ["-i", "--inverted", "--inversed"])
def test_inversion_flags(source, no_config, flag):
    args = create_parser().parse_args(["-s", str(source), flag, "--config", str(no_config)])
    assert build_job(args).config.inverted is True


def test_inverted_output_has_dark_pixels(source, no_config):
    assert _run("-s", str(source), "--inversed", "--dot-size", "1", config=no_config) == 0

    root = ET.fromstring(source.with_suffix(".svg").read_text(encoding="utf-8"))
    circles = root.findall(f"{{{SVG_NAMESPACE}}}circle")
    assert [(float(c.get("cx")), float(c.get("cy"))) for c in circles] == [
        (1.5, 0.5),
        (0.5, 1.5),
        (2.5, 1.5),
    ]


def test_config_file_supplies_defaults(source, tmp_path):
    config = tmp_path / "ndotter.json"
    config.write_text(json.dumps({"dot_size": 3, "inverted": True}), encoding="utf-8")

    args = create_parser().parse_args(["-s", str(source), "--config", str(config)])
    job = build_job(args)
    assert job.config.dot_size == 3
    assert job.config.inverted is True

    assert _run("-s", str(source), config=config) == 0
    assert _viewbox(source.with_suffix(".svg")) == [0, 0, 9, 6]


def test_flags_override_config_file(source, tmp_path):
    config = tmp_path / "ndotter.json"
    config.write_text(json.dumps({"dot_size": 3}), encoding="utf-8")

    args = create_parser().parse_args(
        ["-s", str(source), "--dot-size", "7", "--config", str(config)]
    )
    assert build_job(args).config.dot_size == 7


def test_open_failure_only_warns(source, no_config, monkeypatch, capsys):
    from ndotter.errors import PostProcessError
    from ndotter.image_processing import processor as processor_module

    def failing_open(path):
        raise PostProcessError("Cannot open document: no viewer")

    monkeypatch.setattr(processor_module, "open_document", failing_open)

    assert _run("-s", str(source), "--open", config=no_config) == 0

    captured = capsys.readouterr()
    assert "Finished." in captured.out
    assert "Warning: Cannot open document: no viewer" in captured.err


def test_oversized_image_is_reported(write_image, no_config, monkeypatch, capsys):
    from PIL import Image

    source = write_image(Image.new("RGB", (100, 100), (255, 255, 255)))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)

    assert _run("-s", str(source), config=no_config) == 1
    assert "Cannot load image" in capsys.readouterr().err
    assert not source.with_suffix(".svg").exists()
