"""POST /api/segment — segment a tile supplied as raw band values."""

from __future__ import annotations

import asyncio
import logging
import time

import numpy as np
from fastapi import APIRouter, HTTPException

from regiongrow.engine import SegmentationConfig, SegmentationError, SegmentationGrid, Segmentor
from regiongrow.imaging import ArrayImage
from regiongrow.models.requests import SegmentRequest
from regiongrow.models.responses import SegmentResponse, SegmentSummary

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_image(req: SegmentRequest) -> ArrayImage:
    size = 1 << req.n
    try:
        data = np.asarray(req.pixels, dtype=np.int64)
    except OverflowError as e:
        raise HTTPException(status_code=400, detail=f"Band value out of range: {e}") from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Ragged pixel array: {e}") from e

    if data.ndim != 3 or data.shape[:2] != (size, size) or data.shape[2] == 0:
        raise HTTPException(
            status_code=400,
            detail=f"Expected pixels of shape {size}x{size}xbands, got {'x'.join(map(str, data.shape))}",
        )
    try:
        return ArrayImage(data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


def _summarise(grid: SegmentationGrid) -> tuple[list[list[int]], list[SegmentSummary]]:
    labels = grid.labels()
    _, first_index = np.unique(labels.ravel(), return_index=True)
    summaries = []
    for label, idx in enumerate(first_index):
        y, x = divmod(int(idx), grid.size)
        segment = grid[x, y]
        summaries.append(SegmentSummary(
            label=label,
            pixel_count=len(segment),
            standard_deviations=list(segment.standard_deviations()),
        ))
    return labels.tolist(), summaries


@router.post("/segment", response_model=SegmentResponse)
async def segment(req: SegmentRequest) -> SegmentResponse:
    start = time.perf_counter()
    image = _to_image(req)

    def _run() -> Segmentor:
        segmentor = Segmentor(image, req.n, req.threshold, SegmentationConfig(max_passes=req.max_passes))
        segmentor.segment_image()
        return segmentor

    try:
        segmentor = await asyncio.to_thread(_run)
    except SegmentationError as e:
        logger.warning("Segmentation failed: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e

    labels, summaries = _summarise(segmentor.grid)
    return SegmentResponse(
        size=segmentor.size,
        segment_count=len(segmentor.grid),
        passes=segmentor.passes,
        labels=labels,
        segments=summaries,
        processing_time_ms=round((time.perf_counter() - start) * 1000, 2),
    )
