"""Engine exceptions. None of these are retryable: each one signals a bug or bad input."""

from __future__ import annotations


class SegmentationError(Exception):
    """Base class for all segmentation engine errors."""


class SegmentConstructionError(SegmentationError, ValueError):
    """A Segment was built without pixels, or with pixels lacking band data."""


class CoordinateOutOfBoundsError(SegmentationError, IndexError):
    """A grid lookup fell outside [0, size)."""

    def __init__(self, x: int, y: int, size: int) -> None:
        super().__init__(f"Coordinate ({x}, {y}) outside tile of size {size}")
        self.x = x
        self.y = y
        self.size = size


class NonConvergenceError(SegmentationError, RuntimeError):
    """Growth did not reach a fixpoint within the allowed bound."""
