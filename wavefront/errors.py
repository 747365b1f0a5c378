"""Exception hierarchy for grid access, propagation and raster I/O."""

from __future__ import annotations


class WavefrontError(Exception):
    """Base class for every error raised by the package."""


class OutOfBoundsError(WavefrontError, IndexError):
    """A cell coordinate falls outside ``[0, height) x [0, width)``."""


class InvalidGoalOrTargetError(WavefrontError, ValueError):
    """Goal or target is outside the grid or not a free cell."""


class GradientWriteError(WavefrontError, ValueError):
    """A gradient write would break the write-once discipline."""


class RasterFormatError(WavefrontError, ValueError):
    """Malformed raster or text map input."""


__all__ = [
    "WavefrontError",
    "OutOfBoundsError",
    "InvalidGoalOrTargetError",
    "GradientWriteError",
    "RasterFormatError",
]
