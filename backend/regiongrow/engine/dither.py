"""Dither traversal order over a 2^N × 2^N tile.

Reversing the bits of a running index and splitting the result into
alternating bit positions spreads consecutive visits across the tile, so
early growth attempts are distributed evenly instead of sweeping row by row.
"""

from __future__ import annotations

from collections.abc import Iterator

from regiongrow.engine.pixel import Coordinate


def _is_bit_set(v: int, pos: int) -> bool:
    return (v >> pos) & 1 == 1


def _reverse_bits(v: int, length: int) -> int:
    """Reverse the lowest ``length`` bits of v."""
    r = 0
    for i in range(length):
        if _is_bit_set(v, i):
            r |= 1 << (length - i - 1)
    return r


def _even_bits(v: int, n: int) -> int:
    r = 0
    for i in range(n):
        if _is_bit_set(v, 2 * i):
            r |= 1 << i
    return r


def _odd_bits(v: int, n: int) -> int:
    r = 0
    for i in range(n):
        if _is_bit_set(v, 2 * i + 1):
            r |= 1 << i
    return r


def dither_coordinates(n: int) -> Iterator[Coordinate]:
    """Yield every coordinate of a 2^n × 2^n tile exactly once, in dither order.

    Each call returns a fresh generator, so the sequence can be restarted.
    """
    if not isinstance(n, int) or n < 0:
        raise ValueError(f"Tile exponent must be a non-negative int, got {n!r}")
    return _generate(n)


def _generate(n: int) -> Iterator[Coordinate]:
    for i in range(1 << (2 * n)):
        r = _reverse_bits(i, 2 * n)
        x = _odd_bits(r, n)
        y = x ^ _even_bits(r, n)
        yield Coordinate(x, y)
