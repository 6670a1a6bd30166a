"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class SegmentSummary(BaseModel):
    label: int
    pixel_count: int
    standard_deviations: list[float] = Field(default_factory=list)


class SegmentResponse(BaseModel):
    size: int
    segment_count: int
    passes: int = 0
    labels: list[list[int]] = Field(default_factory=list)
    segments: list[SegmentSummary] = Field(default_factory=list)
    processing_time_ms: float = 0.0
