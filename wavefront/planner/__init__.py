"""Planner exports."""

from .coords import cell_from_point
from .engine import WavefrontConfig, WavefrontEngine, propagate

__all__ = [
    "WavefrontConfig",
    "WavefrontEngine",
    "cell_from_point",
    "propagate",
]
