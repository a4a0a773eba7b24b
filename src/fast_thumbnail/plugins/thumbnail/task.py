"""Thumbnail task implementation."""

import asyncio
from typing import Callable, cast

from typing_extensions import override

from ...common.compute_module import ComputeModule
from ...utils.media_types import ImageFormat
from .pipeline import ThumbnailPipeline
from .schema import ThumbnailMode, ThumbnailOutput, ThumbnailParams


class ThumbnailTask(ComputeModule[ThumbnailParams, ThumbnailOutput]):
    """Compute module running the thumbnail pipeline on a worker thread."""

    schema: type[ThumbnailParams] = ThumbnailParams

    @property
    @override
    def task_type(self) -> str:
        return "thumbnail"

    @override
    async def run(
        self,
        params: ThumbnailParams,
        progress_callback: Callable[[int], None] | None = None,
    ) -> ThumbnailOutput:
        mode = ThumbnailMode.parse(params.mode)

        pipeline = ThumbnailPipeline(
            params.input_path, params.width, mode, params.encode_config
        )

        # Decoding, resampling and file I/O all block
        result = await asyncio.to_thread(pipeline.run)

        if progress_callback:
            progress_callback(100)

        return ThumbnailOutput(
            result=result,
            mode=mode,
            source_format=cast(ImageFormat, pipeline.source_format),
        )
