"""Ring-by-ring wavefront (grassfire) propagation over an occupancy grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set

from wavefront.errors import GradientWriteError, InvalidGoalOrTargetError
from wavefront.grid import OccupancyGrid
from wavefront.types import Coord, PropagationResult

LOGGER = logging.getLogger(__name__)

# Side of the square window scanned around each perimeter cell.
WINDOW: int = 3


@dataclass(slots=True)
class WavefrontConfig:
    """Configuration for wavefront propagation."""

    log_every: int = 0  # Emit a DEBUG line every N rings (0 disables).


class WavefrontEngine:
    """Grow concentric 8-connected rings from a goal cell until a target is labelled."""

    def __init__(self, grid: OccupancyGrid, config: WavefrontConfig | None = None):
        self.grid = grid
        self.config = config or WavefrontConfig()

    def propagate(self, goal: Coord, target: Coord) -> PropagationResult:
        goal = self._validate_endpoint("goal", goal)
        target = self._validate_endpoint("target", target)
        if self.grid.max_gradient != 0:
            raise GradientWriteError("grid already carries a gradient; call reset_gradient() first")

        ring = 1
        self.grid.set_gradient(goal[0], goal[1], ring)
        perimeter: List[Coord] = [goal]
        labelled = 1
        LOGGER.info("Wavefront start goal=%s target=%s grid=%s", goal, target, self.grid.shape)

        while target not in perimeter:
            ring += 1
            frontier = self._expand(perimeter, ring)
            if not frontier:
                LOGGER.info(
                    "Wavefront exhausted at ring %s without reaching %s (labelled=%s)",
                    ring - 1,
                    target,
                    labelled,
                )
                return PropagationResult(
                    status="UNREACHABLE",
                    rings=None,
                    max_gradient=ring - 1,
                    labelled=labelled,
                )
            labelled += len(frontier)
            if self.config.log_every and ring % self.config.log_every == 0:
                LOGGER.debug("Ring %s frontier=%s labelled=%s", ring, len(frontier), labelled)
            perimeter = frontier

        LOGGER.info("Wavefront reached %s in %s rings (labelled=%s)", target, ring, labelled)
        return PropagationResult(
            status="REACHED",
            rings=ring,
            max_gradient=ring,
            labelled=labelled,
        )

    # ----------------------------------------------------------------- helpers
    def _expand(self, perimeter: Iterable[Coord], ring: int) -> List[Coord]:
        """Label every unvisited free neighbour of the perimeter with ``ring``."""
        frontier: List[Coord] = []
        queued: Set[Coord] = set()
        grid = self.grid
        for cell in perimeter:
            for neighbor in self._window(cell):
                r, c = neighbor
                if not grid.in_bounds(r, c):
                    continue
                if not grid.passable[r, c] or grid.gradient[r, c] != 0:
                    continue
                if neighbor in queued:
                    continue
                grid.set_gradient(r, c, ring)
                queued.add(neighbor)
                frontier.append(neighbor)
        return frontier

    @staticmethod
    def _window(cell: Coord) -> Iterable[Coord]:
        r0, c0 = cell[0] - 1, cell[1] - 1
        for i in range(WINDOW * WINDOW):
            yield (r0 + i // WINDOW, c0 + i % WINDOW)

    def _validate_endpoint(self, name: str, cell: Coord) -> Coord:
        r, c = int(cell[0]), int(cell[1])
        if not self.grid.in_bounds(r, c):
            raise InvalidGoalOrTargetError(
                f"{name} {cell} outside grid {self.grid.height}x{self.grid.width}"
            )
        if not self.grid.is_free(r, c):
            raise InvalidGoalOrTargetError(f"{name} {cell} is not a free cell")
        return (r, c)


def propagate(
    grid: OccupancyGrid,
    goal: Coord,
    target: Coord,
    config: Optional[WavefrontConfig] = None,
) -> PropagationResult:
    """Run one propagation from ``goal`` towards ``target`` over ``grid``."""
    return WavefrontEngine(grid, config).propagate(goal, target)


__all__ = [
    "WavefrontConfig",
    "WavefrontEngine",
    "propagate",
]
