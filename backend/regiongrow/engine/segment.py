"""Segment — an immutable, ordered group of pixels with cached colour statistics.

A segment is either a leaf (one pixel) or the concatenation of two existing
segments, first then second. Membership never changes after construction, so
the per-band standard deviations are computed at most once.

Equality is structural: two segments are equal when they hold the same
pixels in the same order. The structural hash is computed at construction
so lookups stay O(1) regardless of segment size.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

import numpy as np
from numpy.typing import NDArray

from regiongrow.engine.errors import SegmentConstructionError
from regiongrow.engine.pixel import Pixel


class Segment:
    __slots__ = ("pixels", "_hash", "_bands", "_std_devs")

    def __init__(self, pixels: Sequence[Pixel]) -> None:
        pixels = tuple(pixels)
        if not pixels:
            raise SegmentConstructionError("Segment does not contain pixels")
        band_counts = {len(p.bands) for p in pixels}
        if 0 in band_counts:
            raise SegmentConstructionError("Segment contains a pixel without band data")
        if len(band_counts) > 1:
            raise SegmentConstructionError(
                f"Segment pixels disagree on band count: {sorted(band_counts)}"
            )
        self.pixels: tuple[Pixel, ...] = pixels
        self._hash = hash(pixels)
        self._bands: NDArray[np.float64] | None = None
        self._std_devs: tuple[float, ...] | None = None

    @classmethod
    def leaf(cls, pixel: Pixel) -> Segment:
        return cls((pixel,))

    @classmethod
    def merged(cls, first: Segment, second: Segment) -> Segment:
        seg = cls(first.pixels + second.pixels)
        if first._bands is not None and second._bands is not None:
            seg._bands = np.concatenate((first._bands, second._bands))
        return seg

    @property
    def num_bands(self) -> int:
        return len(self.pixels[0].bands)

    def band_matrix(self) -> NDArray[np.float64]:
        """Band samples as a [num_pixels][num_bands] float array (cached)."""
        if self._bands is None:
            self._bands = np.array([p.bands for p in self.pixels], dtype=np.float64)
        return self._bands

    def standard_deviations(self) -> tuple[float, ...]:
        """Population standard deviation of each colour band, e.g. (red, green, blue)."""
        if self._std_devs is None:
            # Transpose to [num_bands][num_pixels] so each row is one band
            per_band = self.band_matrix().T
            self._std_devs = tuple(float(s) for s in np.std(per_band, axis=1))
        return self._std_devs

    def weight(self) -> float:
        """Summed band deviation scaled by pixel count."""
        return sum(self.standard_deviations()) * len(self.pixels)

    def coordinates(self) -> list[tuple[int, int]]:
        return [(p.x, p.y) for p in self.pixels]

    def __len__(self) -> int:
        return len(self.pixels)

    def __iter__(self) -> Iterator[Pixel]:
        return iter(self.pixels)

    def __contains__(self, pixel: object) -> bool:
        return pixel in self.pixels

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Segment):
            return NotImplemented
        if self._hash != other._hash or len(self.pixels) != len(other.pixels):
            return False
        return self.pixels == other.pixels

    def __repr__(self) -> str:
        first = self.pixels[0].coord
        return f"Segment(pixels={len(self.pixels)}, first={first})"


def merge_cost(a: Segment, b: Segment) -> float:
    """Increase in size-weighted colour dispersion caused by merging a and b.

    weight(merged) - weight(a) - weight(b), where weight is the sum of the
    per-band standard deviations times the pixel count. Smaller is more
    compatible. The pair is evaluated in coordinate order so that the result
    does not depend on argument order, not even in the last bit.
    """
    if _ordering_key(b) < _ordering_key(a):
        a, b = b, a
    weight_a = a.weight()
    weight_b = b.weight()
    combined = Segment.merged(a, b)
    return combined.weight() - weight_a - weight_b


def _ordering_key(segment: Segment) -> tuple:
    return tuple(p.coord for p in segment.pixels)
