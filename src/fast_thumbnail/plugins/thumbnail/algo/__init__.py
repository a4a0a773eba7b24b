"""Thumbnail pipeline stages."""

from .crop_geometry import center_crop
from .decoder import decode_image
from .encoder import encode_thumbnail
from .output_sink import emit, sibling_path
from .resizer import resize_region

__all__ = [
    "center_crop",
    "decode_image",
    "emit",
    "encode_thumbnail",
    "resize_region",
    "sibling_path",
]
