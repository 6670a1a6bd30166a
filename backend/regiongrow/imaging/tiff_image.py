"""Image collaborators — supply per-pixel colour bands to the engine, persist results.

ArrayImage wraps an in-memory H×W×bands uint8 array. TiffImage adds file
loading and saving through Pillow; despite the name it reads anything
Pillow can decode and always writes TIFF.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image

_ALPHA = 0xFF


class ArrayImage:
    """Colour source backed by a numpy array indexed [y, x, band]."""

    def __init__(self, data: NDArray) -> None:
        data = np.asarray(data)
        if data.ndim == 2:
            data = data[:, :, np.newaxis]
        if data.ndim != 3 or data.shape[2] == 0:
            raise ValueError(f"Expected an H×W×bands array, got shape {data.shape}")
        if data.size and (data.min() < 0 or data.max() > 255):
            raise ValueError("Band values must lie in [0, 255]")
        self.data: NDArray[np.uint8] = data.astype(np.uint8)

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    @property
    def num_bands(self) -> int:
        return int(self.data.shape[2])

    def get_colour_bands(self, x: int, y: int) -> tuple[int, ...]:
        """One byte per colour band for pixel (x, y), e.g. (red, green, blue)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return tuple(int(v) for v in self.data[y, x])

    def crop_tile(self, n: int):
        """Top-left 2^n × 2^n tile as a new image of the same type."""
        size = 1 << n
        if size > self.width or size > self.height:
            raise ValueError(
                f"Tile of size {size} does not fit in {self.width}x{self.height} image"
            )
        return type(self)(self.data[:size, :size].copy())


class TiffImage(ArrayImage):
    """RGB image loaded from and saved to disk."""

    def __init__(self, data: NDArray) -> None:
        super().__init__(data)
        if self.num_bands != 3:
            raise ValueError(f"TiffImage holds RGB data, got {self.num_bands} bands")

    @classmethod
    def load(cls, path: str | Path) -> TiffImage:
        with Image.open(path) as img:
            return cls(np.array(img.convert("RGB")))

    def get_colour(self, x: int, y: int) -> int:
        """32-bit colour of pixel (x, y) packed in ABGR byte order."""
        r, g, b = self.get_colour_bands(x, y)
        return (_ALPHA << 24) | (b << 16) | (g << 8) | r

    def to_pil(self) -> Image.Image:
        alpha = np.full((self.height, self.width, 1), _ALPHA, dtype=np.uint8)
        return Image.fromarray(np.concatenate([self.data, alpha], axis=2))

    def save(self, path: str | Path) -> None:
        """Write as an RGBA TIFF with LZW compression."""
        self.to_pil().save(path, format="TIFF", compression="tiff_lzw")

    def overlay_segmentation(self, path: str | Path, n: int, grid) -> TiffImage:
        """Save the top-left tile with segment boundaries drawn in blue."""
        from regiongrow.imaging.overlay import overlay_segmentation

        overlaid = overlay_segmentation(self, n, grid)
        overlaid.save(path)
        return overlaid
