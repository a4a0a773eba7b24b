"""Decode supported image bytes into an RGBA8 source image."""

from io import BytesIO

from PIL import Image

from ....common.errors import DecodeError
from ....utils.media_types import ImageFormat
from ....utils.profiling import timed
from ..schema import SourceImage


@timed
def decode_image(data: bytes, source_format: ImageFormat) -> SourceImage:
    """
    Decode the first frame of an encoded image and normalize it to RGBA.

    Pillow is restricted to the already detected format, so a file whose body
    disagrees with its header fails here instead of being decoded as
    something else.

    Args:
        data: Encoded file contents
        source_format: Format reported by detect_format()

    Returns:
        SourceImage holding an RGBA copy of frame 0

    Raises:
        DecodeError: If the pixel data is truncated or corrupt
    """
    try:
        with Image.open(BytesIO(data), formats=[source_format.pil_format]) as img:
            img.load()
            rgba = img.convert("RGBA")
    except Image.DecompressionBombError as exc:
        raise DecodeError(f"image too large to decode safely: {exc}") from exc
    except (OSError, SyntaxError, ValueError, EOFError) as exc:
        # UnidentifiedImageError is an OSError
        raise DecodeError(f"corrupt {source_format.value} data: {exc}") from exc

    width, height = rgba.size
    if width == 0 or height == 0:
        raise DecodeError(f"image has no pixels ({width}x{height})")

    return SourceImage(width=width, height=height, format=source_format, image=rgba)
