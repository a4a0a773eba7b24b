"""Single-pass crop-and-resample of the source image."""

from PIL import Image

from ....common.errors import ResizeError
from ....utils.profiling import timed
from ..schema import CropRegion, SourceImage, ThumbnailBuffer

# Upper bound on thumbnail area; larger requests are rejected before Pillow allocates
MAX_THUMBNAIL_PIXELS = 16384 * 16384


@timed
def resize_region(source: SourceImage, region: CropRegion, target: int) -> ThumbnailBuffer:
    """
    Resample ``region`` of ``source`` into a ``target x target`` RGBA buffer.

    The crop box is handed to Pillow's resampler directly, so no intermediate
    cropped image is created. Lanczos is used for both down- and upscaling.

    Args:
        source: Decoded RGBA source
        region: Square to read from, must lie inside the source
        target: Output side length in pixels

    Returns:
        ThumbnailBuffer of size ``target``

    Raises:
        ResizeError: If ``target`` is not positive, too large, or resampling fails
    """
    if target <= 0:
        raise ResizeError(f"target width must be positive, got {target}")
    if target * target > MAX_THUMBNAIL_PIXELS:
        raise ResizeError(f"target {target}x{target} exceeds {MAX_THUMBNAIL_PIXELS} pixels")

    left, top, right, bottom = region.box
    if right > source.width or bottom > source.height:
        raise ResizeError(f"crop box {region.box} exceeds {source.width}x{source.height} source")

    try:
        thumbnail = source.image.resize(
            (target, target),
            Image.Resampling.LANCZOS,
            box=(left, top, right, bottom),
        )
    except (MemoryError, ValueError) as exc:
        raise ResizeError(f"resampling to {target}x{target} failed: {exc}") from exc

    return ThumbnailBuffer(size=target, image=thumbnail)
