"""Dense occupancy grid with a parallel write-once gradient field."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from wavefront.errors import GradientWriteError, OutOfBoundsError
from wavefront.types import Coord, Passability

LOGGER = logging.getLogger(__name__)

# Brightest 8-bit intensity; the only value treated as open space.
FREE_INTENSITY: int = 255
OBSTACLE_INTENSITY: int = 0


def free_mask(raw: Sequence[Sequence[int]] | np.ndarray | int) -> np.ndarray:
    """Free-space rule over any array of intensities: white is free, the rest is wall."""
    return np.asarray(raw) == FREE_INTENSITY


def classify(raw_byte: int) -> Passability:
    """Map a single raw pixel intensity to passability."""
    return Passability.FREE if bool(free_mask(int(raw_byte))) else Passability.OBSTACLE


class OccupancyGrid:
    """Passability and gradient arrays over ``height x width`` cells.

    ``raw`` keeps the source intensities so rendering can reproduce obstacle and
    unvisited cells unchanged. ``gradient`` is 0 for unvisited cells and ``k``
    for cells labelled in ring ``k``; each cell is written at most once.
    """

    def __init__(self, raw: Sequence[Sequence[int]] | np.ndarray):
        arr = np.asarray(raw)
        if arr.ndim != 2 or arr.shape[0] == 0 or arr.shape[1] == 0:
            raise ValueError(f"occupancy grid needs a non-empty 2D array, got shape {arr.shape}")
        if arr.min() < 0 or arr.max() > 255:
            raise ValueError("raw intensities must lie in 0..255")
        self.raw = arr.astype(np.uint8)
        self.passable = free_mask(self.raw)
        self.gradient = np.zeros(self.raw.shape, dtype=np.int32)
        LOGGER.debug(
            "Occupancy grid %sx%s with %s free cells",
            self.height,
            self.width,
            int(self.passable.sum()),
        )

    @classmethod
    def from_passable(cls, mask: Sequence[Sequence[bool]] | np.ndarray) -> "OccupancyGrid":
        """Build a grid from a boolean mask (True = free)."""
        arr = np.asarray(mask, dtype=bool)
        raw = np.where(arr, FREE_INTENSITY, OBSTACLE_INTENSITY).astype(np.uint8)
        return cls(raw)

    # ------------------------------------------------------------------ shape
    @property
    def height(self) -> int:
        return int(self.raw.shape[0])

    @property
    def width(self) -> int:
        return int(self.raw.shape[1])

    @property
    def shape(self) -> Coord:
        return (self.height, self.width)

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.height and 0 <= c < self.width

    def _check_bounds(self, r: int, c: int) -> None:
        if not self.in_bounds(r, c):
            raise OutOfBoundsError(f"cell ({r}, {c}) outside grid {self.height}x{self.width}")

    # ------------------------------------------------------------------ cells
    def passability(self, r: int, c: int) -> Passability:
        self._check_bounds(r, c)
        return Passability.FREE if self.passable[r, c] else Passability.OBSTACLE

    def is_free(self, r: int, c: int) -> bool:
        self._check_bounds(r, c)
        return bool(self.passable[r, c])

    def gradient_at(self, r: int, c: int) -> int:
        self._check_bounds(r, c)
        return int(self.gradient[r, c])

    def set_gradient(self, r: int, c: int, value: int) -> None:
        self._check_bounds(r, c)
        if value < 1:
            raise GradientWriteError(f"gradient labels start at 1, got {value}")
        if not self.passable[r, c]:
            raise GradientWriteError(f"cell ({r}, {c}) is an obstacle")
        current = int(self.gradient[r, c])
        if current != 0:
            raise GradientWriteError(f"cell ({r}, {c}) already labelled with ring {current}")
        self.gradient[r, c] = value

    def reset_gradient(self) -> None:
        self.gradient.fill(0)

    @property
    def max_gradient(self) -> int:
        return int(self.gradient.max())


__all__ = [
    "FREE_INTENSITY",
    "OBSTACLE_INTENSITY",
    "OccupancyGrid",
    "classify",
    "free_mask",
]
