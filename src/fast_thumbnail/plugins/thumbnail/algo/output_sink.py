"""Route an encoded thumbnail to its destination."""

import base64
from pathlib import Path

from ....common.errors import EncodeError, ImageWriteError, MissingOriginalFormatError
from ....utils.media_types import ImageFormat
from ..schema import EncodedPayload, ThumbnailMode

SIBLING_SUFFIX = ".webp"


def sibling_path(original_path: str | Path) -> str:
    """``/tmp/a.png`` -> ``/tmp/a.png.webp``"""
    return f"{original_path}{SIBLING_SUFFIX}"


def write_payload(payload: EncodedPayload, output_path: str | Path) -> None:
    try:
        _ = Path(output_path).write_bytes(payload.data)
    except OSError as exc:
        raise ImageWriteError(f"cannot write {output_path}: {exc.strerror or exc}") from exc


def emit(
    payload: EncodedPayload,
    mode: ThumbnailMode,
    original_path: str | Path,
    source_format: ImageFormat | None = None,
) -> str:
    """
    Deliver ``payload`` according to ``mode``.

    Args:
        payload: Encoded thumbnail
        mode: Output mode
        original_path: Path of the source image
        source_format: Detected format of the source; required for OVERWRITE

    Returns:
        Base64 text (BASE64), the sibling ``.webp`` path (WEBP), or
        ``original_path`` (OVERWRITE)

    Raises:
        MissingOriginalFormatError: OVERWRITE without a source format
        EncodeError: OVERWRITE with a payload in a different format
        ImageWriteError: If the destination cannot be written
    """
    if mode == ThumbnailMode.BASE64:
        return base64.b64encode(payload.data).decode("ascii")

    if mode == ThumbnailMode.WEBP:
        output_path = sibling_path(original_path)
        write_payload(payload, output_path)
        return output_path

    if source_format is None:
        raise MissingOriginalFormatError(str(original_path))
    if payload.format != source_format:
        raise EncodeError(
            f"refusing to overwrite {source_format.value} source with {payload.format.value} data"
        )

    # In place, no backup and no atomic rename
    write_payload(payload, original_path)
    return str(original_path)
