"""Wavefront (grassfire) distance fields over raster occupancy maps."""

from .errors import (
    GradientWriteError,
    InvalidGoalOrTargetError,
    OutOfBoundsError,
    RasterFormatError,
    WavefrontError,
)
from .grid import OccupancyGrid, classify
from .planner import WavefrontConfig, WavefrontEngine, cell_from_point, propagate
from .types import Coord, Passability, PropagationResult

__all__ = [
    "Coord",
    "GradientWriteError",
    "InvalidGoalOrTargetError",
    "OccupancyGrid",
    "OutOfBoundsError",
    "Passability",
    "PropagationResult",
    "RasterFormatError",
    "WavefrontConfig",
    "WavefrontEngine",
    "WavefrontError",
    "cell_from_point",
    "classify",
    "propagate",
]
