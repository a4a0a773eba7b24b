"""Encode thumbnails as tuned WEBP or back into the source format."""

from io import BytesIO

import webp
from loguru import logger
from PIL import Image

from ....common.errors import EncodeError
from ....common.schemas import DEFAULT_ENCODE_CONFIG, EncodeConfig
from ....utils.media_types import ImageFormat
from ....utils.profiling import timed
from ..schema import EncodedPayload, ThumbnailBuffer

# Largest entry an ICO directory can describe
MAX_ICO_SIZE = 256


def webp_encoder_config(config: EncodeConfig) -> webp.WebPConfig:
    """
    Build the libwebp encoder configuration for a lossy encode.

    The preset is loaded first, then every explicit tuning field is written
    over it, so the preset only acts as a content hint for the fields
    EncodeConfig does not carry.

    Raises:
        EncodeError: If libwebp rejects the resulting configuration
    """
    try:
        webp_config = webp.WebPConfig.new(
            preset=webp.WebPPreset[config.preset.name],
            quality=config.quality,
            lossless=False,
            method=config.method,
        )
    except webp.WebPError as exc:
        raise EncodeError(f"invalid webp configuration: {exc}") from exc

    webp_config.ptr.sns_strength = config.sns_strength
    webp_config.ptr.filter_sharpness = config.filter_sharpness
    webp_config.ptr.filter_strength = config.filter_strength

    if not webp_config.validate():
        raise EncodeError(f"invalid webp configuration: {config!r}")
    return webp_config


def native_save_kwargs(
    image: Image.Image, target_format: ImageFormat
) -> tuple[Image.Image, dict[str, object]]:
    """Adapt an RGBA thumbnail to what ``target_format`` can store.

    The format's own encoder defaults are kept; only the pixel mode and, for
    ICO, the single directory entry are set.

    Raises:
        EncodeError: If an ICO thumbnail is larger than MAX_ICO_SIZE
    """
    save_kwargs: dict[str, object] = {"format": target_format.pil_format}

    # JPEG does not support alpha channel
    if target_format == ImageFormat.JPEG:
        image = image.convert("RGB")

    if target_format == ImageFormat.ICO:
        if image.width > MAX_ICO_SIZE:
            raise EncodeError(
                f"ico entries are at most {MAX_ICO_SIZE}x{MAX_ICO_SIZE}, "
                + f"cannot store {image.width}x{image.height}"
            )
        save_kwargs["sizes"] = [image.size]

    return image, save_kwargs


def _encode_native(image: Image.Image, target_format: ImageFormat) -> bytes:
    image, save_kwargs = native_save_kwargs(image, target_format)
    out = BytesIO()
    try:
        image.save(out, **save_kwargs)
    except (OSError, ValueError, KeyError, MemoryError) as exc:
        raise EncodeError(f"{target_format.value} encoder failed: {exc}") from exc
    return out.getvalue()


def _encode_webp(image: Image.Image, config: EncodeConfig) -> bytes:
    webp_config = webp_encoder_config(config)
    try:
        picture = webp.WebPPicture.from_pil(image)
        return bytes(picture.encode(webp_config).buffer())
    # webp formats its encoder error code with str + int
    except (webp.WebPError, TypeError, ValueError, MemoryError) as exc:
        raise EncodeError(f"webp encoder failed: {exc}") from exc


@timed
def encode_thumbnail(
    buffer: ThumbnailBuffer,
    target_format: ImageFormat,
    config: EncodeConfig | None = None,
    *,
    native: bool = False,
) -> EncodedPayload:
    """
    Encode a thumbnail buffer.

    Args:
        buffer: Square RGBA thumbnail
        target_format: Output format; must be WEBP unless ``native`` is set
        config: WEBP tuning (defaults to DEFAULT_ENCODE_CONFIG)
        native: Encode with the format's own defaults instead of the WEBP
            tuning, used when overwriting the source in place

    Returns:
        EncodedPayload tagged with ``target_format``

    Raises:
        EncodeError: If the format cannot hold the image or the encoder fails
    """
    if native:
        data = _encode_native(buffer.image, target_format)
    elif target_format == ImageFormat.WEBP:
        config = config or DEFAULT_ENCODE_CONFIG
        logger.debug(
            f"WEBP encode {buffer.size}x{buffer.size}: quality={config.quality} "
            + f"method={config.method} preset={config.preset} sns={config.sns_strength} "
            + f"sharpness={config.filter_sharpness} strength={config.filter_strength}"
        )
        data = _encode_webp(buffer.image, config)
    else:
        raise EncodeError(f"tuned encoding is only available for webp, not {target_format}")

    return EncodedPayload(data=data, format=target_format)
