"""Square thumbnail plugin."""

from .pipeline import PipelineStage, ThumbnailPipeline, create_thumbnail
from .schema import (
    CropRegion,
    EncodedPayload,
    SourceImage,
    ThumbnailBuffer,
    ThumbnailMode,
    ThumbnailOutput,
    ThumbnailParams,
)
from .task import ThumbnailTask

__all__ = [
    "ThumbnailTask",
    "ThumbnailParams",
    "ThumbnailOutput",
    "ThumbnailMode",
    "ThumbnailPipeline",
    "PipelineStage",
    "CropRegion",
    "SourceImage",
    "ThumbnailBuffer",
    "EncodedPayload",
    "create_thumbnail",
]
