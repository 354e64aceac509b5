# tests/conftest.py
from pathlib import Path

import pytest
from PIL import Image

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def image_from_rows(rows, mode: str = "RGBA") -> Image.Image:
    """Build an image from a list of rows of RGBA tuples."""
    height = len(rows)
    width = len(rows[0]) if rows else 0
    image = Image.new("RGBA", (width, height))
    for y, row in enumerate(rows):
        for x, color in enumerate(row):
            image.putpixel((x, y), color)
    return image if mode == "RGBA" else image.convert(mode)


@pytest.fixture
def make_image():
    return image_from_rows


@pytest.fixture
def checkerboard() -> Image.Image:
    """3x2 grid, white in the top-left corner."""
    return image_from_rows(
        [
            [WHITE, BLACK, WHITE],
            [BLACK, WHITE, BLACK],
        ]
    )


@pytest.fixture
def write_image(tmp_path):
    """Save an image into tmp_path and return its path."""

    def _write(image: Image.Image, name: str = "source.png") -> Path:
        path = tmp_path / name
        image.save(path)
        return path

    return _write


@pytest.fixture
def no_config(tmp_path) -> Path:
    """Config path that does not exist, so user defaults never leak in."""
    return tmp_path / "missing_config.json"
