"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from regiongrow.imaging import ArrayImage


# Tiles are indexed [y][x][band]

# (0,0)=10 (1,0)=10 / (0,1)=200 (1,1)=200: two uniform rows
BIMODAL_2X2 = [
    [[10], [10]],
    [[200], [200]],
]

# Every adjacent pair differs
CHECKER_2X2 = [
    [[10], [200]],
    [[200], [10]],
]

# Left half black, right half white
HALVES_4X4 = [[[0, 0, 0]] * 2 + [[255, 255, 255]] * 2 for _ in range(4)]

# (0,0)=0 (1,0)=100 / (0,1)=255 (1,1)=110: the best partner of (0,0) prefers (1,1)
DESCENT_2X2 = [
    [[0], [100]],
    [[255], [110]],
]


def noisy_tile(n: int = 3, bands: int = 3, seed: int = 7) -> np.ndarray:
    size = 1 << n
    return np.random.default_rng(seed).integers(0, 256, size=(size, size, bands), dtype=np.uint8)


@pytest.fixture
def bimodal_image() -> ArrayImage:
    return ArrayImage(np.array(BIMODAL_2X2))


@pytest.fixture
def checker_image() -> ArrayImage:
    return ArrayImage(np.array(CHECKER_2X2))


@pytest.fixture
def halves_image() -> ArrayImage:
    return ArrayImage(np.array(HALVES_4X4))


@pytest.fixture
def uniform_image() -> ArrayImage:
    return ArrayImage(np.full((4, 4, 3), 77, dtype=np.uint8))


@pytest.fixture
def descent_image() -> ArrayImage:
    return ArrayImage(np.array(DESCENT_2X2))


@pytest.fixture
def noisy_image() -> ArrayImage:
    return ArrayImage(noisy_tile())
