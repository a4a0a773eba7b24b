from enum import StrEnum
from pathlib import Path

import magic

from ..common.errors import ImageOpenError, UnsupportedFormatError

# libmagic only needs the leading bytes to classify an image
HEADER_SIZE = 2048


class ImageFormat(StrEnum):
    JPEG = "jpeg"
    PNG = "png"
    GIF = "gif"
    WEBP = "webp"
    BMP = "bmp"
    ICO = "ico"
    TIFF = "tiff"

    @property
    def pil_format(self) -> str:
        """Format name as registered with Pillow."""
        return _PIL_FORMATS[self]

    @classmethod
    def from_mime(cls, file_type: str) -> "ImageFormat":
        image_format = _MIME_TYPES.get(file_type.split(";")[0].strip().lower())
        if image_format is None:
            raise UnsupportedFormatError(file_type)
        return image_format


_PIL_FORMATS: dict[ImageFormat, str] = {
    ImageFormat.JPEG: "JPEG",
    ImageFormat.PNG: "PNG",
    ImageFormat.GIF: "GIF",
    ImageFormat.WEBP: "WEBP",
    ImageFormat.BMP: "BMP",
    ImageFormat.ICO: "ICO",
    ImageFormat.TIFF: "TIFF",
}

# libmagic reports different aliases depending on its version
_MIME_TYPES: dict[str, ImageFormat] = {
    "image/jpeg": ImageFormat.JPEG,
    "image/pjpeg": ImageFormat.JPEG,
    "image/png": ImageFormat.PNG,
    "image/gif": ImageFormat.GIF,
    "image/webp": ImageFormat.WEBP,
    "image/x-webp": ImageFormat.WEBP,
    "image/bmp": ImageFormat.BMP,
    "image/x-bmp": ImageFormat.BMP,
    "image/x-ms-bmp": ImageFormat.BMP,
    "image/vnd.microsoft.icon": ImageFormat.ICO,
    "image/x-icon": ImageFormat.ICO,
    "image/ico": ImageFormat.ICO,
    "image/tiff": ImageFormat.TIFF,
}


def read_source(path: str | Path) -> bytes:
    """Read the whole source file.

    Raises:
        ImageOpenError: If the path is missing, a directory, or unreadable
    """
    path = Path(path)
    try:
        return path.read_bytes()
    except FileNotFoundError as exc:
        raise ImageOpenError(f"input file not found: {path}") from exc
    except OSError as exc:
        raise ImageOpenError(f"cannot read {path}: {exc.strerror or exc}") from exc


def determine_mime(data: bytes) -> str:
    if not data:
        return "application/x-empty"
    mime = magic.Magic(mime=True)
    file_type = mime.from_buffer(data[:HEADER_SIZE])
    if not file_type:
        file_type = "application/octet-stream"
    return file_type


def detect_format(data: bytes) -> ImageFormat:
    """Classify encoded image bytes by their magic header.

    Args:
        data: Raw file contents (only the first ``HEADER_SIZE`` bytes are inspected)

    Returns:
        The detected ImageFormat

    Raises:
        UnsupportedFormatError: If the header is empty, truncated, or not one of
            jpeg, png, gif, webp, bmp, ico, tiff
    """
    return ImageFormat.from_mime(determine_mime(data))
