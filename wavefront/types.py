"""Core data contracts shared by the grid, engine and renderer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Literal, Optional, Tuple

Coord = Tuple[int, int]  # (row, col)

PropagationStatus = Literal["REACHED", "UNREACHABLE"]


class Passability(Enum):
    FREE = auto()
    OBSTACLE = auto()


@dataclass(slots=True, frozen=True)
class PropagationResult:
    """Outcome of one wavefront propagation."""

    status: PropagationStatus
    rings: Optional[int]  # Ring in which the target was labelled.
    max_gradient: int  # Highest ring written to the grid.
    labelled: int

    def __post_init__(self) -> None:
        if self.status == "REACHED" and (self.rings is None or self.rings < 1):
            raise ValueError("REACHED results require a positive ring count")
        if self.status == "UNREACHABLE" and self.rings is not None:
            raise ValueError("UNREACHABLE results carry no ring count")

    @property
    def reachable(self) -> bool:
        return self.status == "REACHED"

    @property
    def steps(self) -> Optional[int]:
        """Number of 8-connected moves between goal and target."""
        if self.rings is None:
            return None
        return self.rings - 1


__all__ = [
    "Coord",
    "Passability",
    "PropagationResult",
    "PropagationStatus",
]
