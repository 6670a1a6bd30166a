"""RegionGrow segmentation engine."""

from regiongrow.engine.config import SegmentationConfig
from regiongrow.engine.dither import dither_coordinates
from regiongrow.engine.errors import (
    CoordinateOutOfBoundsError,
    NonConvergenceError,
    SegmentConstructionError,
    SegmentationError,
)
from regiongrow.engine.grid import ColourSource, SegmentationGrid
from regiongrow.engine.neighbours import best_neighbours, neighbours
from regiongrow.engine.pixel import Coordinate, Pixel
from regiongrow.engine.segment import Segment, merge_cost
from regiongrow.engine.segmentor import Segmentor, segment_image

__all__ = [
    "SegmentationConfig",
    "dither_coordinates",
    "SegmentationError",
    "SegmentConstructionError",
    "CoordinateOutOfBoundsError",
    "NonConvergenceError",
    "ColourSource",
    "SegmentationGrid",
    "neighbours",
    "best_neighbours",
    "Coordinate",
    "Pixel",
    "Segment",
    "merge_cost",
    "Segmentor",
    "segment_image",
]
