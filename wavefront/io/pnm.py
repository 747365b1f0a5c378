"""PNM graymap codec: Pillow reads binary P5 and plain P2, P5 is written directly."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

import numpy as np
from PIL import Image, UnidentifiedImageError

from wavefront.errors import RasterFormatError

LOGGER = logging.getLogger(__name__)

SUPPORTED_MAGIC: Tuple[str, ...] = ("P5", "P2")
FULL_SCALE: int = 255


@dataclass(slots=True)
class Raster:
    magic: str
    width: int
    height: int
    maxval: int
    pixels: np.ndarray  # (height, width), uint8 rescaled to 0..255


def parse_pnm(data: bytes) -> Raster:
    """Decode a P5/P2 graymap; samples are rescaled by Pillow from ``0..maxval`` to ``0..255``."""
    magic = data[:2].decode("ascii", errors="replace")
    if magic not in SUPPORTED_MAGIC:
        raise RasterFormatError(f"unsupported PNM magic {magic!r}; expected one of {SUPPORTED_MAGIC}")
    try:
        with Image.open(io.BytesIO(data), formats=["PPM"]) as img:
            if img.mode != "L":
                raise RasterFormatError(f"only 8-bit graymaps are supported, got mode {img.mode}")
            width, height = img.size
            # load() clears the tile list, so read the payload layout first.
            codec, _, offset, args = img.tile[0]
            maxval = int(args[1]) if codec in ("ppm", "ppm_plain") else FULL_SCALE
            if magic == "P5":
                _check_binary_payload(data[offset:], width, height, maxval)
            img.load()
            pixels = np.asarray(img, dtype=np.uint8).copy()
    except RasterFormatError:
        raise
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        raise RasterFormatError(f"unreadable {magic} graymap: {exc}") from exc
    if width <= 0 or height <= 0:
        raise RasterFormatError(f"PNM dimensions must be positive, got {width}x{height}")
    if pixels.shape != (height, width):
        raise RasterFormatError(f"PNM payload decoded to {pixels.shape}, expected {(height, width)}")
    return Raster(magic=magic, width=width, height=height, maxval=maxval, pixels=pixels)


def _check_binary_payload(payload: bytes, width: int, height: int, maxval: int) -> None:
    total = width * height
    if len(payload) < total:
        raise RasterFormatError(
            f"PNM payload holds {len(payload)} bytes, expected {total} ({width}x{height})"
        )
    # Pillow clamps out-of-range binary samples instead of rejecting them.
    peak = int(np.frombuffer(payload[:total], dtype=np.uint8).max())
    if peak > maxval:
        raise RasterFormatError(f"PNM sample {peak} exceeds maxval {maxval}")


def read_pnm(path: Path | str) -> Raster:
    path = Path(path)
    raster = parse_pnm(path.read_bytes())
    LOGGER.debug(
        "Read %s %sx%s maxval=%s from %s",
        raster.magic,
        raster.width,
        raster.height,
        raster.maxval,
        path,
    )
    return raster


def encode_pnm(pixels: np.ndarray, maxval: int = 255) -> bytes:
    arr = np.asarray(pixels)
    if arr.ndim != 2:
        raise ValueError(f"expected a 2D pixel array, got shape {arr.shape}")
    if not 0 < maxval <= 255:
        raise ValueError(f"maxval must lie in 1..255, got {maxval}")
    height, width = arr.shape
    header = f"P5\n{width} {height}\n{maxval}\n".encode("ascii")
    return header + arr.astype(np.uint8).tobytes()


def write_pnm(path: Path | str, pixels: np.ndarray, maxval: int = 255) -> Path:
    path = Path(path)
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(encode_pnm(pixels, maxval))
    LOGGER.debug("Wrote %sx%s graymap to %s", pixels.shape[1], pixels.shape[0], path)
    return path


__all__ = [
    "Raster",
    "SUPPORTED_MAGIC",
    "encode_pnm",
    "parse_pnm",
    "read_pnm",
    "write_pnm",
]
