"""Grid exports."""

from .occupancy import FREE_INTENSITY, OBSTACLE_INTENSITY, OccupancyGrid, classify, free_mask

__all__ = [
    "FREE_INTENSITY",
    "OBSTACLE_INTENSITY",
    "OccupancyGrid",
    "classify",
    "free_mask",
]
