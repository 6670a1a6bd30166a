"""Coordinates and pixels — the leaf values of a segmentation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import NamedTuple


class Coordinate(NamedTuple):
    x: int
    y: int

    def __str__(self) -> str:
        return f"Coord({self.x},{self.y})"


@dataclass(frozen=True)
class Pixel:
    """A coordinate plus its colour band samples.

    Equality and hashing use the coordinate only: two pixels at the same
    position in one image always carry the same bands.
    """

    coord: Coordinate
    bands: tuple[int, ...] = field(compare=False)

    @classmethod
    def at(cls, x: int, y: int, bands: Iterable[int]) -> Pixel:
        return cls(Coordinate(x, y), tuple(int(b) for b in bands))

    @property
    def x(self) -> int:
        return self.coord.x

    @property
    def y(self) -> int:
        return self.coord.y

    @property
    def num_bands(self) -> int:
        return len(self.bands)

    def __getitem__(self, band: int) -> int:
        return self.bands[band]
