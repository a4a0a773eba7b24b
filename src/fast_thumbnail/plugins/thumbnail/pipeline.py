"""Thumbnail pipeline: detect, decode, crop, resize, encode, emit."""

from enum import StrEnum
from pathlib import Path

from loguru import logger

from ...common.errors import ThumbnailError
from ...common.schemas import EncodeConfig
from ...config import load_encode_config
from ...utils.media_types import ImageFormat, detect_format, read_source
from .algo import (
    center_crop,
    decode_image,
    emit,
    encode_thumbnail,
    resize_region,
)
from .schema import ThumbnailMode


class PipelineStage(StrEnum):
    DETECTING = "detecting"
    DECODING = "decoding"
    CROPPING = "cropping"
    RESIZING = "resizing"
    ENCODING = "encoding"
    EMITTING = "emitting"
    DONE = "done"
    FAILED = "failed"


class ThumbnailPipeline:
    """One thumbnail invocation.

    Stages run strictly in order, each at most once. The first
    ``ThumbnailError`` moves the pipeline to FAILED, records the stage it
    happened in and is re-raised; no later stage runs. EMITTING is the only
    stage that touches the filesystem for writing, so a failed run never
    leaves partial output behind.

    Example:
        pipeline = ThumbnailPipeline("/tmp/a.png", 128, ThumbnailMode.WEBP)
        pipeline.run()  # "/tmp/a.png.webp"
    """

    def __init__(
        self,
        path: str | Path,
        width: int,
        mode: ThumbnailMode,
        config: EncodeConfig | None = None,
    ):
        self.path: str = str(path)
        self.width: int = width
        self.mode: ThumbnailMode = mode
        # Environment tuning is validated up front so a bad setting does no I/O
        if config is None and mode != ThumbnailMode.OVERWRITE:
            config = load_encode_config()
        self.config: EncodeConfig | None = config
        self.stage: PipelineStage = PipelineStage.DETECTING
        self.failed_stage: PipelineStage | None = None
        # Set once by DETECTING, needed again by OVERWRITE
        self.source_format: ImageFormat | None = None
        self._started: bool = False

    def _enter(self, stage: PipelineStage) -> None:
        logger.debug(f"{self.path}: {self.stage} -> {stage}")
        self.stage = stage

    def run(self) -> str:
        """Execute all stages and return the emitted result.

        Raises:
            ThumbnailError: Subclass matching the failing stage
            RuntimeError: If the pipeline has already been run
        """
        if self._started:
            raise RuntimeError("ThumbnailPipeline.run() may only be called once")
        self._started = True

        try:
            data = read_source(self.path)
            self.source_format = detect_format(data)

            self._enter(PipelineStage.DECODING)
            source = decode_image(data, self.source_format)

            self._enter(PipelineStage.CROPPING)
            region = center_crop(source.width, source.height)

            self._enter(PipelineStage.RESIZING)
            buffer = resize_region(source, region, self.width)

            self._enter(PipelineStage.ENCODING)
            if self.mode == ThumbnailMode.OVERWRITE:
                payload = encode_thumbnail(buffer, self.source_format, native=True)
            else:
                payload = encode_thumbnail(buffer, ImageFormat.WEBP, self.config)

            self._enter(PipelineStage.EMITTING)
            result = emit(payload, self.mode, self.path, self.source_format)

        except ThumbnailError as exc:
            self.failed_stage = self.stage
            self.stage = PipelineStage.FAILED
            logger.warning(f"Thumbnail failed while {self.failed_stage}: {exc}")
            raise

        self._enter(PipelineStage.DONE)
        logger.info(
            f"Thumbnail {self.width}x{self.width} of {self.path} "
            + f"({self.source_format}) emitted as {self.mode}"
        )
        return result


def create_thumbnail(
    path: str | Path,
    width: int,
    mode: str | ThumbnailMode,
    *,
    config: EncodeConfig | None = None,
) -> str:
    """
    Create a square center-cropped thumbnail of ``path``.

    Args:
        path: Existing, readable image file (jpeg, png, gif, webp, bmp, ico, tiff)
        width: Side length of the thumbnail in pixels
        mode: "base64" returns WEBP bytes as base64 text, "webp" writes
            ``<path>.webp`` and returns that path, "overwrite" replaces
            ``path`` in its original format and returns it
        config: WEBP tuning; defaults come from FAST_THUMBNAIL_* settings

    Returns:
        Base64 text, the new file path, or the original path

    Raises:
        UnknownModeError: If ``mode`` is not a known literal (nothing is read)
        ConfigError: If ``config`` is None and the FAST_THUMBNAIL_* settings
            are invalid (nothing is read)
        ThumbnailError: Subclass naming the stage that failed
    """
    return ThumbnailPipeline(path, width, ThumbnailMode.parse(mode), config).run()
