"""Thumbnail pipeline records and task schemas."""

from enum import StrEnum
from typing import ClassVar, Self

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ...common.errors import UnknownModeError
from ...common.schemas import BaseTaskParams, EncodeConfig
from ...utils.media_types import ImageFormat


class ThumbnailMode(StrEnum):
    """Where the encoded thumbnail goes.

    BASE64 returns the WEBP bytes as base64 text, WEBP writes them next to the
    source as ``<path>.webp`` and OVERWRITE replaces the source file, keeping
    its original format.
    """

    BASE64 = "base64"
    WEBP = "webp"
    OVERWRITE = "overwrite"

    @classmethod
    def parse(cls, value: "str | ThumbnailMode") -> "ThumbnailMode":
        try:
            return cls(value)
        except ValueError as exc:
            raise UnknownModeError(str(value)) from exc


class CropRegion(BaseModel):
    """Axis-aligned square inside the source image."""

    left: int = Field(..., ge=0)
    top: int = Field(..., ge=0)
    side: int = Field(..., gt=0)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def box(self) -> tuple[int, int, int, int]:
        """(left, upper, right, lower) box as used by Pillow."""
        return (self.left, self.top, self.left + self.side, self.top + self.side)


class SourceImage(BaseModel):
    """Decoded source, normalized to RGBA8."""

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    format: ImageFormat
    image: Image.Image

    model_config: ClassVar[ConfigDict] = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @model_validator(mode="after")
    def validate_rgba(self) -> Self:
        if self.image.mode != "RGBA":
            raise ValueError(f"Source image must be RGBA, got {self.image.mode}")
        if self.image.size != (self.width, self.height):
            raise ValueError(
                f"Image size {self.image.size} does not match {(self.width, self.height)}"
            )
        return self

    @property
    def pixels(self) -> bytes:
        """Contiguous RGBA8 buffer, ``width * height * 4`` bytes."""
        return self.image.tobytes()


class ThumbnailBuffer(BaseModel):
    """Square RGBA8 thumbnail produced by the resizer."""

    size: int = Field(..., gt=0)
    image: Image.Image

    model_config: ClassVar[ConfigDict] = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @model_validator(mode="after")
    def validate_square(self) -> Self:
        if self.image.mode != "RGBA":
            raise ValueError(f"Thumbnail must be RGBA, got {self.image.mode}")
        if self.image.size != (self.size, self.size):
            raise ValueError(f"Thumbnail must be {self.size}x{self.size}, got {self.image.size}")
        return self


class EncodedPayload(BaseModel):
    """Encoded thumbnail bytes tagged with their format."""

    data: bytes
    format: ImageFormat

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class ThumbnailParams(BaseTaskParams):
    """Parameters for the thumbnail task.

    Attributes:
        input_path: Absolute path to the source image
        width: Side length of the square thumbnail in pixels
        mode: "base64", "webp" or "overwrite"
        encode_config: WEBP tuning override (None = configured defaults)
    """

    width: int = Field(..., description="Thumbnail side length in pixels")
    mode: str = Field(default=ThumbnailMode.BASE64.value, description="Output mode")
    encode_config: EncodeConfig | None = None


class ThumbnailOutput(BaseModel):
    result: str = Field(..., description="Base64 text, sibling .webp path, or original path")
    mode: ThumbnailMode
    source_format: ImageFormat
