"""Map loaders and raster writers."""

from __future__ import annotations

from pathlib import Path

from wavefront.grid import OccupancyGrid

from .pnm import Raster, SUPPORTED_MAGIC, encode_pnm, parse_pnm, read_pnm, write_pnm
from .text_map import FREE_CHAR, parse_text_map, read_text_map

TEXT_SUFFIXES = (".txt",)


def load_grid(path: Path | str) -> OccupancyGrid:
    """Load an occupancy grid from a text map or a PNM graymap."""
    path = Path(path)
    if path.suffix.lower() in TEXT_SUFFIXES:
        return OccupancyGrid.from_passable(read_text_map(path))
    return OccupancyGrid(read_pnm(path).pixels)


__all__ = [
    "FREE_CHAR",
    "Raster",
    "SUPPORTED_MAGIC",
    "TEXT_SUFFIXES",
    "encode_pnm",
    "load_grid",
    "parse_pnm",
    "parse_text_map",
    "read_pnm",
    "read_text_map",
    "write_pnm",
]
