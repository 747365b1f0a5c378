"""Entry-point: load a map, propagate a wavefront and render the gradient."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

import yaml
from dotenv import load_dotenv

from wavefront.errors import WavefrontError
from wavefront.io import load_grid, write_pnm
from wavefront.planner import WavefrontConfig, WavefrontEngine, cell_from_point
from wavefront.render import DEFAULT_SCALE, RenderConfig, render_gradient
from wavefront.utils import ascii_gradient

LOGGER = logging.getLogger("wavefront")

CONFIG_ENV_VAR = "WAVEFRONT_CONFIG"
DEFAULT_CONFIG = Path("configs/default.yaml")
DEFAULT_MAP = "maps/hospital_section.pnm"
DEFAULT_OUTPUT = "output_wavefront.pnm"
DEFAULT_GOAL: Tuple[float, float] = (700.0, 400.0)
DEFAULT_START: Tuple[float, float] = (50.0, 50.0)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Wavefront distance field over a raster map")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to YAML config (default: ${CONFIG_ENV_VAR} or {DEFAULT_CONFIG})",
    )
    parser.add_argument(
        "--map",
        type=Path,
        default=None,
        help="Override input map path (PNM graymap or .txt character map)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Override output graymap path",
    )
    parser.add_argument(
        "--goal",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        default=None,
        help="Goal point the wavefront grows from",
    )
    parser.add_argument(
        "--start",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        default=None,
        help="Start point whose ring distance is reported",
    )
    parser.add_argument(
        "--scale",
        type=int,
        default=None,
        help="Brightness ceiling for labelled cells (1..254)",
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Log an ASCII dump of the gradient (small maps only)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Python logging level",
    )
    return parser.parse_args(argv)


def load_config(path: Optional[Path]) -> dict[str, Any]:
    """Read the YAML config; a missing default file yields an empty config."""
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        path = Path(env_path) if env_path else DEFAULT_CONFIG
        if not path.exists():
            LOGGER.debug("No config at %s; using built-in defaults", path)
            return {}
    with path.open("r", encoding="utf-8") as handle:
        cfg = yaml.safe_load(handle) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"config {path} must be a mapping, got {type(cfg).__name__}")
    return cfg


def _section(cfg: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a config section; an empty section reads as no overrides."""
    section = cfg.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"config section {name!r} must be a mapping, got {section!r}")
    return section


def _point(value: Any, fallback: Tuple[float, float]) -> Tuple[float, float]:
    if value is None:
        return fallback
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"point must be an [x, y] pair, got {value!r}")
    try:
        return (float(value[0]), float(value[1]))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"point must hold two numbers, got {value!r}") from exc


def build_wavefront_config(cfg: dict[str, Any]) -> WavefrontConfig:
    planner_cfg = _section(cfg, "planner")
    return WavefrontConfig(log_every=int(planner_cfg.get("log_every", 0)))


def build_render_config(cfg: dict[str, Any], args: argparse.Namespace) -> RenderConfig:
    render_cfg = _section(cfg, "render")
    scale = args.scale if args.scale is not None else int(render_cfg.get("scale", DEFAULT_SCALE))
    unreached = render_cfg.get("unreached_value")
    return RenderConfig(
        scale=scale,
        unreached_value=int(unreached) if unreached is not None else None,
    )


def run(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    map_cfg = _section(cfg, "map")
    planner_cfg = _section(cfg, "planner")
    map_path = Path(args.map) if args.map else Path(map_cfg.get("path", DEFAULT_MAP))
    output_path = (
        Path(args.output) if args.output else Path(_section(cfg, "output").get("path", DEFAULT_OUTPUT))
    )
    goal_xy = _point(args.goal, _point(planner_cfg.get("goal"), DEFAULT_GOAL))
    start_xy = _point(args.start, _point(planner_cfg.get("start"), DEFAULT_START))

    render_config = build_render_config(cfg, args)
    grid = load_grid(map_path)
    LOGGER.info("Loaded map %s (%sx%s)", map_path, grid.height, grid.width)

    goal = cell_from_point(*goal_xy)
    start = cell_from_point(*start_xy)
    engine = WavefrontEngine(grid, build_wavefront_config(cfg))
    result = engine.propagate(goal, start)
    if result.reachable:
        LOGGER.info("Start %s reached in %s rings (%s steps)", start, result.rings, result.steps)
    else:
        LOGGER.warning("Start %s unreachable from goal %s", start, goal)

    if args.ascii:
        LOGGER.info("Gradient:\n%s", ascii_gradient(grid))

    image = render_gradient(grid, result.max_gradient, render_config)
    write_pnm(output_path, image)
    LOGGER.info("Gradient written to %s", output_path)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    load_dotenv()
    try:
        return run(args)
    except (WavefrontError, OSError, ValueError, yaml.YAMLError) as exc:
        LOGGER.error("Wavefront run failed: %s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
