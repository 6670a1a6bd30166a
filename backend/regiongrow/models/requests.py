"""API request models."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

BandValue = Annotated[int, Field(ge=0, le=255)]


class SegmentRequest(BaseModel):
    n: int = Field(..., ge=0, le=5, description="Tile-size exponent (tile side is 2^n, at most 32)")
    threshold: float = Field(..., ge=0, description="Merge-cost ceiling")
    pixels: list[list[list[BandValue]]] = Field(
        ...,
        description="Band values indexed [y][x][band], each in 0-255, shape 2^n x 2^n x bands",
    )
    max_passes: int | None = Field(default=None, ge=1, description="Optional bound on passes")
