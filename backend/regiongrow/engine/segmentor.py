"""Segmentor — greedy region growing to a fixpoint.

Every coordinate is visited in dither order and the segment that owns it is
given a chance to grow. Growing means finding a mutually optimal neighbour
(each is the other's cheapest eligible merge) and merging the two. When the
current segment has no mutual partner, the attempt moves to its best
neighbour and tries again from there ("gradient descent"). Full passes repeat
until one pass merges nothing.

Tie-break policy: wherever several candidates are equally good, the first in
neighbour discovery order wins (see regiongrow.engine.neighbours).
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Generator
from typing import Any

from regiongrow.engine.config import SegmentationConfig
from regiongrow.engine.dither import dither_coordinates
from regiongrow.engine.errors import NonConvergenceError
from regiongrow.engine.grid import ColourSource, SegmentationGrid
from regiongrow.engine.neighbours import best_neighbours
from regiongrow.engine.segment import Segment

logger = logging.getLogger(__name__)


class Segmentor:
    """Owns one segmentation grid and grows it until no merge is possible."""

    def __init__(
        self,
        image: ColourSource,
        n: int,
        threshold: float,
        config: SegmentationConfig | None = None,
    ) -> None:
        if not isinstance(n, int) or n < 0:
            raise ValueError(f"Tile exponent must be a non-negative int, got {n!r}")
        if math.isnan(threshold) or threshold < 0:
            raise ValueError(f"Threshold must be non-negative, got {threshold!r}")

        self.n = n
        self.size = 1 << n
        self.threshold = float(threshold)
        self.config = config or SegmentationConfig()
        self.grid = SegmentationGrid.from_image(image, n)
        self.passes = 0
        self.merges = 0
        self._stuck: set[int] = set()

    def segment_image(self) -> SegmentationGrid:
        """Grow segments until a full pass changes nothing, then return the grid."""
        start = time.perf_counter()
        for _ in self.iter_passes():
            pass
        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Segmentation complete: %d segments from %d pixels, %d merges in %d passes (%.0fms)",
            len(self.grid),
            self.size * self.size,
            self.merges,
            self.passes,
            total,
        )
        return self.grid

    def iter_passes(self) -> Generator[dict[str, Any], None, None]:
        """Run full passes, yielding a progress dict after each one.

        The generator ends after the first pass that merges nothing. Raises
        NonConvergenceError if ``config.max_passes`` would be exceeded.
        """
        while True:
            if self.config.max_passes is not None and self.passes >= self.config.max_passes:
                raise NonConvergenceError(
                    f"No fixpoint after {self.passes} passes ({len(self.grid)} segments remain)"
                )

            t0 = time.perf_counter()
            merges_before = self.merges
            changed = self.grow_all()
            self.passes += 1
            elapsed_ms = round((time.perf_counter() - t0) * 1000, 1)

            progress = {
                "pass_index": self.passes,
                "merges": self.merges - merges_before,
                "segment_count": len(self.grid),
                "elapsed_ms": elapsed_ms,
                "changed": changed,
            }
            if self.config.log_every_pass:
                logger.info(
                    "Pass %d: %d merges, %d segments (%.1fms)",
                    progress["pass_index"],
                    progress["merges"],
                    progress["segment_count"],
                    elapsed_ms,
                )
            yield progress

            if not changed:
                return

    def grow_all(self) -> bool:
        """One pass: try to grow the owner of every coordinate, in dither order."""
        changed = False
        # Segments with no eligible neighbour stay stuck until some merge happens
        self._stuck = set()
        for coord in dither_coordinates(self.n):
            segment_id = self.grid.segment_id_at(*coord)
            if segment_id in self._stuck:
                continue
            if self.try_grow(self.grid.segment_by_id(segment_id)):
                changed = True
            else:
                self._stuck.add(segment_id)
        return changed

    def try_grow(self, segment: Segment) -> bool:
        """Attempt one merge starting from ``segment``. Returns True if the grid changed."""
        visited: set[int] = set()
        subject = segment

        # Each hop lands on a segment not seen before, so the walk is bounded
        for _ in range(len(self.grid)):
            best = best_neighbours(self.grid, subject, self.threshold)
            if not best:
                return False

            mutual = [
                b
                for b in best
                if b != subject and subject in best_neighbours(self.grid, b, self.threshold)
            ]
            if len(mutual) == 1:
                self._merge(subject, mutual[0])
                return True

            visited.add(self.grid.id_of(subject))
            if not mutual:
                # Gradient descent: retry from the best neighbour
                subject = best[0]
                continue

            unvisited = [b for b in mutual if self.grid.id_of(b) not in visited]
            if not unvisited:
                # Every tied partner already tried; settle on the first
                self._merge(subject, mutual[0])
                return True
            subject = unvisited[0]

        raise NonConvergenceError(
            f"Growth attempt from {segment!r} exceeded {len(self.grid)} hops"
        )

    def _merge(self, a: Segment, b: Segment) -> Segment:
        merged = self.grid.merge(a, b)
        self.merges += 1
        self._stuck.clear()
        logger.debug("Merged %d + %d pixels -> %d (%d segments)", len(a), len(b), len(merged), len(self.grid))
        return merged


def segment_image(
    image: ColourSource,
    n: int,
    threshold: float,
    config: SegmentationConfig | None = None,
) -> SegmentationGrid:
    """Segment the top-left 2^n × 2^n tile of ``image``."""
    return Segmentor(image, n, threshold, config).segment_image()
