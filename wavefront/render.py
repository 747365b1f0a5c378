"""Render a propagated gradient field as an 8-bit graymap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from wavefront.grid import OccupancyGrid

# Brightness ceiling for labelled cells; 255 stays reserved for open space.
DEFAULT_SCALE: int = 200


@dataclass(slots=True)
class RenderConfig:
    scale: int = DEFAULT_SCALE
    unreached_value: Optional[int] = None  # None keeps the raw intensity.

    def __post_init__(self) -> None:
        if not 1 <= self.scale <= 254:
            raise ValueError(f"scale must lie in 1..254, got {self.scale}")
        if self.unreached_value is not None and not 0 <= self.unreached_value <= 255:
            raise ValueError(f"unreached_value must lie in 0..255, got {self.unreached_value}")


def render_gradient(
    grid: OccupancyGrid,
    max_gradient: int,
    config: RenderConfig | None = None,
) -> np.ndarray:
    """Return a ``uint8`` image: labelled cells shaded by ring, the rest unchanged."""
    config = config or RenderConfig()
    out = grid.raw.copy()
    visited = grid.passable & (grid.gradient > 0)
    if config.unreached_value is not None:
        out[grid.passable & (grid.gradient == 0)] = config.unreached_value
    if max_gradient < 1:
        return out
    shade = grid.gradient[visited].astype(np.float64) * config.scale / float(max_gradient)
    out[visited] = np.clip(shade, 0, config.scale).astype(np.uint8)
    return out


__all__ = ["DEFAULT_SCALE", "RenderConfig", "render_gradient"]
