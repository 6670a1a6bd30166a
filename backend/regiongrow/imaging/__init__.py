"""Image loading, saving and segmentation rendering."""

from regiongrow.imaging.illustrator import render_segment_sizes
from regiongrow.imaging.overlay import boundary_mask, overlay_segmentation
from regiongrow.imaging.tiff_image import ArrayImage, TiffImage

__all__ = [
    "ArrayImage",
    "TiffImage",
    "boundary_mask",
    "overlay_segmentation",
    "render_segment_sizes",
]
