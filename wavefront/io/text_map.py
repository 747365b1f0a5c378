"""Character maps: one row per line, ``'0'`` free, anything else blocked."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import numpy as np

from wavefront.errors import RasterFormatError

LOGGER = logging.getLogger(__name__)

FREE_CHAR = "0"


def parse_text_map(text: str) -> np.ndarray:
    rows: List[str] = [line.rstrip("\r") for line in text.split("\n")]
    while rows and not rows[-1].strip():
        rows.pop()
    if not rows:
        raise RasterFormatError("text map is empty")
    width = len(rows[0])
    for idx, row in enumerate(rows):
        if len(row) != width:
            raise RasterFormatError(
                f"text map row {idx} has {len(row)} cells, expected {width}"
            )
    if width == 0:
        raise RasterFormatError("text map rows are empty")
    return np.array([[ch == FREE_CHAR for ch in row] for row in rows], dtype=bool)


def read_text_map(path: Path | str) -> np.ndarray:
    path = Path(path)
    mask = parse_text_map(path.read_text(encoding="utf-8"))
    LOGGER.debug("Read %sx%s text map from %s", mask.shape[0], mask.shape[1], path)
    return mask


__all__ = ["FREE_CHAR", "parse_text_map", "read_text_map"]
