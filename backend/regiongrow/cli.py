"""
RegionGrow command line — segment the top-left 2^N × 2^N tile of an image.

Usage:
  regiongrow photo.tif                          # segment a 32x32 tile, log the result
  regiongrow photo.tif -n 4 -t 250 -o seg.tif   # 16x16 tile, overlay boundaries in blue
  regiongrow photo.tif --show-sizes             # print each pixel's segment size
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from regiongrow.config import settings
from regiongrow.engine import SegmentationConfig, SegmentationError, Segmentor
from regiongrow.imaging import TiffImage, render_segment_sizes

logger = logging.getLogger("regiongrow.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="RegionGrow — greedy region-growing segmentation")
    parser.add_argument("input", help="Image file to segment")
    parser.add_argument(
        "-n", type=int, default=settings.default_n,
        help="Tile-size exponent: the top-left 2^N x 2^N pixels are segmented",
    )
    parser.add_argument(
        "-t", "--threshold", type=float, default=settings.default_threshold,
        help="Merge-cost ceiling; higher values give fewer, larger segments",
    )
    parser.add_argument("-o", "--output", help="Write the tile with segment boundaries to this TIFF")
    parser.add_argument(
        "--max-passes", type=int, default=settings.max_passes,
        help="Fail if no fixpoint is reached within this many passes",
    )
    parser.add_argument("--show-sizes", action="store_true", help="Print the segment size table")
    parser.add_argument("--log-level", default=settings.regiongrow_log_level, help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if not os.path.exists(args.input):
        logger.error("Input not found: %s", args.input)
        return 1

    try:
        image = TiffImage.load(args.input)
    except OSError as e:
        logger.error("Cannot read %s: %s", args.input, e)
        return 1

    try:
        config = SegmentationConfig(max_passes=args.max_passes)
        segmentor = Segmentor(image.crop_tile(args.n), args.n, args.threshold, config)
        grid = segmentor.segment_image()
    except (SegmentationError, ValueError) as e:
        logger.error("Segmentation failed: %s", e)
        return 1

    logger.info("%s: %d segments in %dx%d tile", args.input, len(grid), grid.size, grid.size)

    if args.show_sizes:
        print(render_segment_sizes(grid))

    if args.output:
        image.overlay_segmentation(args.output, args.n, grid)
        logger.info("Saved overlay: %s", args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
