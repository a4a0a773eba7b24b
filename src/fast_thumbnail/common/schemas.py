"""Pydantic schemas shared by compute tasks."""

from collections.abc import Mapping
from enum import StrEnum
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

# ─────────────────────────────────────────────────────────────
# Base task params
# ─────────────────────────────────────────────────────────────


class BaseTaskParams(BaseModel):
    """Base parameters for all compute tasks.

    All task-specific parameter classes should extend this.
    """

    input_path: str = Field(..., description="Absolute path to the input file")


# ─────────────────────────────────────────────────────────────
# Encoder tuning
# ─────────────────────────────────────────────────────────────


class WebpPreset(StrEnum):
    DEFAULT = "default"
    PICTURE = "picture"
    PHOTO = "photo"
    DRAWING = "drawing"
    ICON = "icon"
    TEXT = "text"


class EncodeConfig(BaseModel):
    """WEBP tuning applied in the base64 and webp modes."""

    quality: int = Field(default=75, ge=0, le=100, description="Lossy quality factor")
    method: int = Field(
        default=3, ge=0, le=6, description="Compression effort (0=fast, 6=slower-better)"
    )
    preset: WebpPreset = Field(default=WebpPreset.PHOTO, description="Perceptual content hint")
    sns_strength: int = Field(
        default=70, ge=0, le=100, description="Spatial noise shaping strength"
    )
    filter_sharpness: int = Field(
        default=2, ge=0, le=7, description="Deblocking filter sharpness"
    )
    filter_strength: int = Field(
        default=25, ge=0, le=100, description="Deblocking filter strength"
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


DEFAULT_ENCODE_CONFIG = EncodeConfig()


# ─────────────────────────────────────────────────────────────
# Task output (loosely structured but not Any)
# ─────────────────────────────────────────────────────────────

TaskOutput = Mapping[str, object]


# ─────────────────────────────────────────────────────────────
# Task execution result
# ─────────────────────────────────────────────────────────────
class TaskResult(BaseModel):
    """Result returned by ComputeModule.execute().

    Exactly one of ``task_output`` (status "ok") or ``error`` (status "error")
    is set.
    """

    status: Literal["ok", "error"]
    task_output: TaskOutput | None = None
    error: str | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    @classmethod
    def ok(cls, task_output: TaskOutput) -> "TaskResult":
        return cls(status="ok", task_output=task_output)

    @classmethod
    def failed(cls, error: str) -> "TaskResult":
        return cls(status="error", error=error)
