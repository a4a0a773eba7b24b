"""Environment-based configuration for fast_thumbnail."""

from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .common.errors import ConfigError
from .common.schemas import EncodeConfig, WebpPreset


class Settings(BaseSettings):
    """WEBP encode defaults loaded from FAST_THUMBNAIL_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FAST_THUMBNAIL_",
        case_sensitive=False,
    )

    webp_quality: int = Field(default=75, ge=0, le=100)
    webp_method: int = Field(default=3, ge=0, le=6)
    webp_preset: WebpPreset = WebpPreset.PHOTO
    webp_sns_strength: int = Field(default=70, ge=0, le=100)
    webp_filter_sharpness: int = Field(default=2, ge=0, le=7)
    webp_filter_strength: int = Field(default=25, ge=0, le=100)

    def encode_config(self) -> EncodeConfig:
        return EncodeConfig(
            quality=self.webp_quality,
            method=self.webp_method,
            preset=self.webp_preset,
            sns_strength=self.webp_sns_strength,
            filter_sharpness=self.webp_filter_sharpness,
            filter_strength=self.webp_filter_strength,
        )


def get_settings() -> Settings:
    """Create and return settings from the current environment."""
    return Settings()


def load_encode_config() -> EncodeConfig:
    """
    Read the WEBP tuning from the environment.

    Raises:
        ConfigError: If a FAST_THUMBNAIL_* variable is malformed or out of range
    """
    try:
        return get_settings().encode_config()
    except ValidationError as exc:
        raise ConfigError(f"invalid FAST_THUMBNAIL_* settings: {exc}") from exc
