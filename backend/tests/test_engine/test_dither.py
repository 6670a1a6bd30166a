"""Tests for the dither traversal order."""

import pytest

from regiongrow.engine.dither import dither_coordinates
from regiongrow.engine.pixel import Coordinate


def test_single_pixel_tile():
    assert list(dither_coordinates(0)) == [Coordinate(0, 0)]


def test_order_for_2x2():
    assert list(dither_coordinates(1)) == [(0, 0), (1, 1), (0, 1), (1, 0)]


def test_not_raster_order():
    coords = list(dither_coordinates(2))
    assert coords[:2] == [(0, 0), (2, 2)]


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_visits_every_coordinate_once(n):
    size = 1 << n
    coords = list(dither_coordinates(n))
    assert len(coords) == size * size
    assert len(set(coords)) == size * size
    assert all(0 <= x < size and 0 <= y < size for x, y in coords)


def test_restartable_and_deterministic():
    first = dither_coordinates(3)
    second = dither_coordinates(3)
    assert list(first) == list(second)
    assert list(first) == []  # exhausted generator stays exhausted
    assert list(dither_coordinates(3)) == list(dither_coordinates(3))


def test_negative_exponent_rejected():
    with pytest.raises(ValueError):
        dither_coordinates(-1)
