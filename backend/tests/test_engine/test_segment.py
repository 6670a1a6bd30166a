"""Tests for Segment construction, statistics and merge cost."""

import pytest

from regiongrow.engine.errors import SegmentConstructionError
from regiongrow.engine.pixel import Coordinate, Pixel
from regiongrow.engine.segment import Segment, merge_cost
from tests.conftest import noisy_tile


def _leaf(x, y, *bands):
    return Segment.leaf(Pixel.at(x, y, bands))


def _row(values):
    """Single-band segment of pixels (0,0), (1,0), ... built by successive merges."""
    seg = _leaf(0, 0, values[0])
    for x, v in enumerate(values[1:], start=1):
        seg = Segment.merged(seg, _leaf(x, 0, v))
    return seg


# ── Pixel ──

def test_pixel_equality_compares_both_coordinates():
    # x == other.x and y == other.y, not x == other.y
    assert Pixel.at(1, 2, [5]) != Pixel.at(1, 1, [5])
    assert Pixel.at(1, 2, [5]) == Pixel.at(1, 2, [9])
    assert hash(Pixel.at(3, 4, [0])) == hash(Pixel.at(3, 4, [255]))


def test_pixel_accessors():
    p = Pixel.at(3, 4, (1, 2, 3))
    assert p.coord == Coordinate(3, 4)
    assert (p.x, p.y) == (3, 4)
    assert p[2] == 3
    assert p.num_bands == 3


# ── Construction ──

def test_empty_segment_rejected():
    with pytest.raises(SegmentConstructionError):
        Segment([])


def test_pixel_without_bands_rejected():
    with pytest.raises(SegmentConstructionError):
        Segment.leaf(Pixel.at(0, 0, []))


def test_inconsistent_band_counts_rejected():
    with pytest.raises(ValueError):
        Segment([Pixel.at(0, 0, [1, 2, 3]), Pixel.at(1, 0, [1])])


def test_merged_concatenates_first_then_second():
    a = _leaf(0, 0, 1)
    b = _leaf(1, 0, 2)
    merged = Segment.merged(a, b)
    assert merged.coordinates() == [(0, 0), (1, 0)]
    assert len(merged) == 2
    assert Pixel.at(1, 0, [2]) in merged


def test_iteration_yields_pixels_in_order():
    merged = Segment.merged(_leaf(1, 0, 7), _leaf(0, 0, 3))
    assert [p.coord for p in merged] == [Coordinate(1, 0), Coordinate(0, 0)]
    assert [p.bands for p in merged] == [(7,), (3,)]


def test_pixel_at_accepts_any_band_iterable():
    assert Pixel.at(0, 0, iter([1, 2])).bands == (1, 2)


# ── Equality ──

def test_structural_equality():
    a = _leaf(0, 0, 10)
    b = _leaf(1, 0, 20)
    first = Segment.merged(a, b)
    second = Segment.merged(_leaf(0, 0, 10), _leaf(1, 0, 20))
    assert first == second
    assert hash(first) == hash(second)
    assert first is not second


def test_equality_depends_on_pixel_order():
    a = _leaf(0, 0, 10)
    b = _leaf(1, 0, 20)
    assert Segment.merged(a, b) != Segment.merged(b, a)


def test_different_lengths_not_equal():
    assert _row([1, 2]) != _row([1, 2, 3])
    assert _leaf(0, 0, 1) != "segment"


# ── Statistics ──

def test_population_standard_deviation():
    seg = _row([2, 4, 4, 4, 5, 5, 7, 9])
    assert seg.standard_deviations() == (2.0,)


def test_leaf_has_zero_deviation():
    assert _leaf(0, 0, 10, 20, 30).standard_deviations() == (0.0, 0.0, 0.0)


def test_bands_computed_independently_when_bands_differ_from_pixels():
    # 3 bands, 2 pixels: the band/pixel transpose must be [bands][pixels]
    seg = Segment.merged(_leaf(0, 0, 0, 10, 20), _leaf(1, 0, 2, 30, 60))
    assert seg.standard_deviations() == (1.0, 10.0, 20.0)


def test_statistics_cached():
    seg = _row([3, 8, 1, 9])
    first = seg.standard_deviations()
    second = seg.standard_deviations()
    assert first is second
    assert first == second


def test_weight_scales_by_pixel_count():
    seg = _row([10, 200])
    assert seg.weight() == pytest.approx(95.0 * 2)


# ── Merge cost ──

def test_merge_cost_of_identical_values_is_zero():
    assert merge_cost(_leaf(0, 0, 7, 7, 7), _leaf(1, 0, 7, 7, 7)) == 0.0


def test_merge_cost_of_two_leaves():
    assert merge_cost(_leaf(0, 0, 10), _leaf(0, 1, 200)) == 190.0


def test_merge_cost_subtracts_parent_weights():
    top = Segment.merged(_leaf(0, 0, 10), _leaf(1, 0, 10))
    bottom = Segment.merged(_leaf(0, 1, 200), _leaf(1, 1, 200))
    assert merge_cost(top, bottom) == pytest.approx(380.0)


def test_merge_cost_symmetric():
    tile = noisy_tile(n=2)
    leaves = [Segment.leaf(Pixel.at(x, y, tile[y, x])) for y in range(4) for x in range(4)]
    a = Segment.merged(Segment.merged(leaves[0], leaves[1]), leaves[4])
    b = Segment.merged(leaves[2], leaves[3])
    c = Segment.merged(Segment.merged(leaves[9], leaves[5]), leaves[10])
    for first, second in [(a, b), (a, c), (b, c), (leaves[7], c)]:
        assert merge_cost(first, second) == merge_cost(second, first)


def test_merge_cost_leaves_parents_untouched():
    a = _row([1, 5])
    b = Segment.merged(_leaf(0, 1, 9), _leaf(1, 1, 4))
    cached = a.standard_deviations()
    merge_cost(a, b)
    assert a.standard_deviations() is cached
    assert len(a) == 2 and len(b) == 2
