"""Text dumps of a grid and its gradient for debug logs."""

from __future__ import annotations

from typing import List, Optional

from wavefront.grid import OccupancyGrid
from wavefront.types import Coord


def ascii_gradient(
    grid: OccupancyGrid,
    center: Optional[Coord] = None,
    radius: Optional[int] = None,
) -> str:
    """Return the grid as text: ``#`` obstacle, ``.`` unvisited, ring mod 10 otherwise.

    With ``center`` and ``radius`` only the clipped window around ``center`` is
    drawn, and ``center`` itself is shown as ``@``.
    """
    r0, r1, c0, c1 = 0, grid.height, 0, grid.width
    if center is not None and radius is not None:
        cr, cc = center
        r0 = max(0, cr - radius)
        r1 = min(grid.height, cr + radius + 1)
        c0 = max(0, cc - radius)
        c1 = min(grid.width, cc + radius + 1)
    lines: List[str] = []
    for r in range(r0, r1):
        cells: List[str] = []
        for c in range(c0, c1):
            if center is not None and (r, c) == tuple(center):
                cells.append("@")
            elif not grid.passable[r, c]:
                cells.append("#")
            elif grid.gradient[r, c] == 0:
                cells.append(".")
            else:
                cells.append(str(int(grid.gradient[r, c]) % 10))
        lines.append("".join(cells))
    return "\n".join(lines)
