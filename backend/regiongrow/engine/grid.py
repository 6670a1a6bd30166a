"""SegmentationGrid — maps every tile coordinate to the segment that owns it.

Segments live in an arena keyed by integer id; the grid itself is a numpy
array of ids indexed [y, x]. A merge installs the new segment under a fresh
id and re-points all of its coordinates in a single array assignment, so no
coordinate is ever left pointing at a parent segment.
"""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

import numpy as np
from numpy.typing import NDArray

from regiongrow.engine.errors import CoordinateOutOfBoundsError
from regiongrow.engine.pixel import Coordinate, Pixel
from regiongrow.engine.segment import Segment

logger = logging.getLogger(__name__)


class ColourSource(Protocol):
    """Anything that can supply the colour bands of a pixel."""

    def get_colour_bands(self, x: int, y: int) -> Sequence[int]: ...


class SegmentationGrid:
    def __init__(self, n: int) -> None:
        if not isinstance(n, int) or n < 0:
            raise ValueError(f"Tile exponent must be a non-negative int, got {n!r}")
        self.n = n
        self.size = 1 << n
        self._ids: NDArray[np.int64] = np.full((self.size, self.size), -1, dtype=np.int64)
        self._arena: dict[int, Segment] = {}
        self._next_id = 0

    @classmethod
    def from_image(cls, image: ColourSource, n: int) -> SegmentationGrid:
        """Initial segmentation: one leaf segment per pixel of the top-left 2^n tile."""
        grid = cls(n)
        for y in range(grid.size):
            for x in range(grid.size):
                pixel = Pixel.at(x, y, image.get_colour_bands(x, y))
                grid._install(Segment.leaf(pixel))
        logger.debug("Initialised %dx%d grid with %d leaf segments", grid.size, grid.size, len(grid))
        return grid

    # ── Lookup ──

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def segment_id_at(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise CoordinateOutOfBoundsError(x, y, self.size)
        return int(self._ids[y, x])

    def segment_by_id(self, segment_id: int) -> Segment:
        return self._arena[segment_id]

    def id_of(self, segment: Segment) -> int:
        """Arena id of a live segment (looked up through its first pixel)."""
        first = segment.pixels[0]
        return self.segment_id_at(first.x, first.y)

    def __getitem__(self, key: Coordinate | tuple[int, int]) -> Segment:
        x, y = key
        return self._arena[self.segment_id_at(x, y)]

    def __len__(self) -> int:
        return len(self._arena)

    def segments(self) -> list[Segment]:
        """Distinct live segments, oldest first."""
        return list(self._arena.values())

    # ── Mutation ──

    def merge(self, a: Segment, b: Segment) -> Segment:
        """Replace live segments a and b with their concatenation (a first)."""
        id_a = self.id_of(a)
        id_b = self.id_of(b)
        if id_a == id_b:
            raise ValueError(f"Cannot merge {a!r} with itself")
        if self._arena[id_a] != a or self._arena[id_b] != b:
            raise ValueError("Merge requested for a segment that is no longer in the grid")

        merged = Segment.merged(self._arena[id_a], self._arena[id_b])
        del self._arena[id_a]
        del self._arena[id_b]
        self._install(merged)
        return merged

    def _install(self, segment: Segment) -> int:
        segment_id = self._next_id
        self._next_id += 1
        self._arena[segment_id] = segment
        xs = np.fromiter((p.x for p in segment.pixels), dtype=np.int64, count=len(segment))
        ys = np.fromiter((p.y for p in segment.pixels), dtype=np.int64, count=len(segment))
        self._ids[ys, xs] = segment_id
        return segment_id

    # ── Export ──

    def labels(self) -> NDArray[np.int64]:
        """Read-only [y, x] array of compact labels, numbered in raster first-seen order."""
        flat = self._ids.ravel()
        _, first_index, inverse = np.unique(flat, return_index=True, return_inverse=True)
        order = np.argsort(first_index)
        rank = np.empty_like(order)
        rank[order] = np.arange(len(order))
        labels = rank[inverse.reshape(-1)].reshape(self._ids.shape)
        labels.setflags(write=False)
        return labels

    def to_lists(self) -> list[list[Segment]]:
        """Nested lists indexed [x][y], one Segment reference per coordinate."""
        return [[self[x, y] for y in range(self.size)] for x in range(self.size)]
