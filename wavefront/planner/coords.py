"""Conversion from continuous map coordinates to integer grid cells."""

from __future__ import annotations

import math

from wavefront.errors import InvalidGoalOrTargetError
from wavefront.types import Coord


def cell_from_point(x: float, y: float) -> Coord:
    """Truncate an ``(x, y)`` point to its ``(row, col)`` cell."""
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidGoalOrTargetError(f"point ({x}, {y}) is not finite")
    # int() truncates towards zero, so (-0.5, y) would alias column 0.
    if x < 0 or y < 0:
        raise InvalidGoalOrTargetError(f"point ({x}, {y}) has a negative component")
    return (int(y), int(x))


__all__ = ["cell_from_point"]
