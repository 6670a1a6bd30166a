"""Text illustration of a segmentation: each cell shows its segment's pixel count."""

from __future__ import annotations

from regiongrow.engine.grid import SegmentationGrid


def render_segment_sizes(grid: SegmentationGrid) -> str:
    """Table with x across, y down, and the owning segment's size in each cell.

    Example for a 2×2 tile merged into two rows:

          | 0 1
        --+----
        0 | 2 2
        1 | 2 2
    """
    size = grid.size
    width = max(len(str(size * size)), len(str(size - 1))) + 1
    label_width = len(str(size - 1))

    header = " " * label_width + " |" + "".join(f"{x:>{width}}" for x in range(size))
    rule = "-" * (label_width + 1) + "+" + "-" * (width * size)
    lines = [header, rule]
    for y in range(size):
        cells = "".join(f"{len(grid[x, y]):>{width}}" for x in range(size))
        lines.append(f"{y:>{label_width}} |{cells}")
    return "\n".join(lines)
