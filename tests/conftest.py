"""Test configuration and fixtures for fast_thumbnail.

This module provides:
- Pytest configuration (markers)
- Factories writing synthetic images in every supported format
- Sample files for the error paths (plain text, truncated image)
"""

from collections.abc import Callable
from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image, ImageDraw

# Pillow save() format name per file extension used by the factories
SAVE_FORMATS: dict[str, str] = {
    "jpg": "JPEG",
    "png": "PNG",
    "gif": "GIF",
    "webp": "WEBP",
    "bmp": "BMP",
    "ico": "ICO",
    "tiff": "TIFF",
}

ImageFactory = Callable[..., Path]


# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: end-to-end pipeline tests touching the filesystem",
    )


# ============================================================================
# Image Factories
# ============================================================================


def draw_test_pattern(width: int, height: int, mode: str = "RGB") -> Image.Image:
    """Grid with a centered ellipse, so crops and resizes have content to move."""
    img = Image.new("RGB", (width, height), color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    for i in range(0, width, 25):
        draw.line([(i, 0), (i, height)], fill=(255, 255, 255), width=2)
    for i in range(0, height, 25):
        draw.line([(0, i), (width, i)], fill=(255, 255, 255), width=2)

    draw.ellipse(
        [width // 4, height // 4, 3 * width // 4, 3 * height // 4],
        fill=(200, 100, 100),
    )

    if mode != "RGB":
        img = img.convert(mode)
    return img


def encode_test_image(img: Image.Image, extension: str) -> bytes:
    out = BytesIO()
    if extension == "ico":
        # One entry at the native size instead of Pillow's square size ladder
        img.save(out, "ICO", sizes=[img.size])
    else:
        img.save(out, SAVE_FORMATS[extension])
    return out.getvalue()


@pytest.fixture
def make_image(tmp_path: Path) -> ImageFactory:
    """Factory writing a test pattern image to ``tmp_path``.

    Usage:
        path = make_image("png", 300, 200)
        path = make_image("png", 64, 64, mode="RGBA", name="icon.png")
    """

    def _make(
        extension: str,
        width: int,
        height: int,
        *,
        mode: str = "RGB",
        name: str | None = None,
    ) -> Path:
        path = tmp_path / (name or f"source_{width}x{height}.{extension}")
        _ = path.write_bytes(encode_test_image(draw_test_pattern(width, height, mode), extension))
        return path

    return _make


@pytest.fixture
def synthetic_image(make_image: ImageFactory) -> Path:
    """800x600 JPEG test pattern."""
    return make_image("jpg", 800, 600)


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    path = tmp_path / "notes.txt"
    _ = path.write_text("this is definitely not an image\n" * 20, encoding="utf-8")
    return path


@pytest.fixture
def truncated_png(tmp_path: Path) -> Path:
    """PNG with a valid header whose pixel stream is cut in half."""
    noise = Image.effect_noise((256, 256), 64).convert("RGB")
    data = encode_test_image(noise, "png")

    path = tmp_path / "truncated.png"
    _ = path.write_bytes(data[: len(data) // 2])
    return path
