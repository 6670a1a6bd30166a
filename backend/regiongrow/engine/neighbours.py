"""Neighbour discovery and best-neighbour selection.

Neighbours are returned in discovery order: pixels in segment order, and
for each pixel the adjacent coordinates left, right, up, down. The growth
engine breaks ties by taking the first candidate in this order, so the
order is part of the algorithm's determinism.
"""

from __future__ import annotations

from regiongrow.engine.grid import SegmentationGrid
from regiongrow.engine.segment import Segment, merge_cost

# 4-connected, no diagonals
_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def adjacent_coordinates(grid: SegmentationGrid, x: int, y: int) -> list[tuple[int, int]]:
    """Horizontally and vertically adjacent coordinates that lie inside the tile."""
    return [(x + dx, y + dy) for dx, dy in _OFFSETS if grid.in_bounds(x + dx, y + dy)]


def neighbours(grid: SegmentationGrid, segment: Segment) -> list[Segment]:
    """Distinct segments owning a coordinate adjacent to any pixel of ``segment``.

    The segment itself is usually among them; callers filter it out.
    """
    seen: dict[int, None] = {}
    for pixel in segment.pixels:
        for nx, ny in adjacent_coordinates(grid, pixel.x, pixel.y):
            seen.setdefault(grid.segment_id_at(nx, ny))
    return [grid.segment_by_id(i) for i in seen]


def best_neighbours(grid: SegmentationGrid, segment: Segment, threshold: float) -> list[Segment]:
    """Neighbours tied for the lowest merge cost, ignoring any above ``threshold``."""
    candidates: list[tuple[Segment, float]] = []
    for other in neighbours(grid, segment):
        if other == segment:
            continue
        cost = merge_cost(segment, other)
        if cost <= threshold:
            candidates.append((other, cost))

    if not candidates:
        return []
    lowest = min(cost for _, cost in candidates)
    return [other for other, cost in candidates if cost == lowest]
