"""Common module - errors, schemas, and base classes."""

from .compute_module import ComputeModule
from .errors import (
    ConfigError,
    CropGeometryError,
    DecodeError,
    EncodeError,
    ImageOpenError,
    ImageWriteError,
    MissingOriginalFormatError,
    ResizeError,
    ThumbnailError,
    UnknownModeError,
    UnsupportedFormatError,
)
from .schemas import DEFAULT_ENCODE_CONFIG, BaseTaskParams, EncodeConfig, TaskResult, WebpPreset

__all__ = [
    "ComputeModule",
    "BaseTaskParams",
    "TaskResult",
    "EncodeConfig",
    "WebpPreset",
    "DEFAULT_ENCODE_CONFIG",
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
]
