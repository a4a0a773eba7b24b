"""fast_thumbnail - Square center-cropped thumbnails as base64 WEBP, sibling files or in place."""

from .common import (
    DEFAULT_ENCODE_CONFIG,
    ComputeModule,
    ConfigError,
    CropGeometryError,
    DecodeError,
    EncodeConfig,
    EncodeError,
    ImageOpenError,
    ImageWriteError,
    MissingOriginalFormatError,
    ResizeError,
    TaskResult,
    ThumbnailError,
    UnknownModeError,
    UnsupportedFormatError,
    WebpPreset,
)
from .config import Settings, get_settings, load_encode_config
from .plugins.thumbnail import (
    PipelineStage,
    ThumbnailMode,
    ThumbnailOutput,
    ThumbnailParams,
    ThumbnailPipeline,
    ThumbnailTask,
    create_thumbnail,
)
from .utils.media_types import ImageFormat, detect_format

__version__ = "0.1.0"

__all__ = [
    "create_thumbnail",
    "ThumbnailPipeline",
    "PipelineStage",
    "ThumbnailMode",
    "ThumbnailTask",
    "ThumbnailParams",
    "ThumbnailOutput",
    "ComputeModule",
    "TaskResult",
    "EncodeConfig",
    "WebpPreset",
    "DEFAULT_ENCODE_CONFIG",
    "ImageFormat",
    "detect_format",
    "Settings",
    "get_settings",
    "load_encode_config",
    "ThumbnailError",
    "ConfigError",
    "ImageOpenError",
    "UnsupportedFormatError",
    "DecodeError",
    "CropGeometryError",
    "ResizeError",
    "EncodeError",
    "ImageWriteError",
    "UnknownModeError",
    "MissingOriginalFormatError",
    "__version__",
]
