"""Segmentation engine configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SegmentationConfig:
    """Controls how long the growth loop may run and how chatty it is."""

    # Upper bound on full dither passes, None = run to fixpoint
    max_passes: int | None = None

    # Log a summary line after each pass (INFO) instead of only at the end
    log_every_pass: bool = False

    def __post_init__(self) -> None:
        if self.max_passes is not None and self.max_passes < 1:
            raise ValueError(f"max_passes must be >= 1, got {self.max_passes}")
