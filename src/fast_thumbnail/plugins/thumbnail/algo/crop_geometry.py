"""Centered square crop geometry."""

from ....common.errors import CropGeometryError
from ..schema import CropRegion


def center_crop(width: int, height: int) -> CropRegion:
    """Largest square centered in a ``width x height`` image.

    Margins use floor division, so an odd leftover pixel is dropped from the
    right or bottom edge: ``center_crop(101, 50)`` is ``left=25, top=0,
    side=50``.
    """
    if width <= 0 or height <= 0:
        raise CropGeometryError(f"cannot crop a {width}x{height} image")

    side = min(width, height)
    return CropRegion(left=(width - side) // 2, top=(height - side) // 2, side=side)
