"""Boundary overlay — paint segment edges over the source tile."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from regiongrow.engine.grid import SegmentationGrid
from regiongrow.imaging.tiff_image import TiffImage

BLUE = (0, 0, 255)


def boundary_mask(grid: SegmentationGrid) -> NDArray[np.bool_]:
    """[y, x] mask of pixels on the tile border or on a segment edge.

    A pixel is an edge pixel when its segment differs from the segment of
    the pixel to its left or above it.
    """
    labels = grid.labels()
    mask = np.zeros(labels.shape, dtype=bool)
    mask[0, :] = mask[-1, :] = True
    mask[:, 0] = mask[:, -1] = True
    mask[:, 1:] |= labels[:, 1:] != labels[:, :-1]
    mask[1:, :] |= labels[1:, :] != labels[:-1, :]
    return mask


def overlay_segmentation(image: TiffImage, n: int, grid: SegmentationGrid) -> TiffImage:
    """Copy of the top-left 2^n tile of ``image`` with boundaries in blue."""
    if grid.n != n:
        raise ValueError(f"Grid covers a 2^{grid.n} tile, overlay requested for 2^{n}")
    tile = image.crop_tile(n).data.copy()
    tile[boundary_mask(grid)] = BLUE
    return TiffImage(tile)
