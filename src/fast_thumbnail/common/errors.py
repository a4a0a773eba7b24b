"""Error taxonomy for the thumbnail pipeline.

Every failure surfaces as a ``ThumbnailError`` subclass whose ``stage`` names
the pipeline step that failed. ``str(err)`` is ``"<stage>: <message>"`` so the
text alone tells a caller where the invocation stopped.
"""

from typing import ClassVar

from typing_extensions import override


class ThumbnailError(Exception):
    """Base class for thumbnail pipeline errors."""

    stage: ClassVar[str] = "thumbnail error"

    def __init__(self, message: str):
        self.message: str = message
        super().__init__(message)

    @override
    def __str__(self) -> str:
        return f"{self.stage}: {self.message}"


class ImageOpenError(ThumbnailError):
    """Source file is missing or unreadable."""

    stage = "open error"


class UnsupportedFormatError(ThumbnailError):
    stage = "unsupported format"

    def __init__(self, detected: str | None):
        self.detected: str = detected or "unknown"
        super().__init__(f"'{self.detected}' is not a supported image format")


class DecodeError(ThumbnailError):
    """Header was recognized but the pixel data is corrupt or truncated."""

    stage = "decode error"


class CropGeometryError(ThumbnailError):
    stage = "crop error"


class ResizeError(ThumbnailError):
    stage = "resize error"


class EncodeError(ThumbnailError):
    stage = "encode error"


class ImageWriteError(ThumbnailError):
    """Destination path is not writable."""

    stage = "write error"


class UnknownModeError(ThumbnailError):
    stage = "unknown mode"

    def __init__(self, mode: str):
        self.mode: str = mode
        super().__init__(f"'{mode}' (expected one of: base64, webp, overwrite)")


class MissingOriginalFormatError(ThumbnailError):
    stage = "missing original format"

    def __init__(self, path: str):
        self.path: str = path
        super().__init__(f"cannot overwrite '{path}' without its detected source format")


class ConfigError(ThumbnailError):
    """FAST_THUMBNAIL_* settings failed validation."""

    stage = "config error"
