"""RegionGrow — greedy region-growing segmentation of 2^N × 2^N image tiles."""

__version__ = "0.1.0"
