"""Entry-point for demo/debug runs over a synthetic heightmap."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, List, Optional, Tuple

from tripath.grid import Grid, HeightmapTerrain, SphereObstacles, TerrainConfig
from tripath.runtime import (
    EngineConfig,
    PassResult,
    RecordingSink,
    RunCoordinator,
    build_engine_config,
    load_config,
)
from tripath.utils import ascii_grid_map

LOGGER = logging.getLogger("tripath")


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare wave, Dijkstra and A* paths on a grid")
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("configs/default.yaml"),
        help="Path to YAML config",
    )
    parser.add_argument("--width", type=int, default=None, help="Override grid width")
    parser.add_argument("--height", type=int, default=None, help="Override grid height")
    parser.add_argument("--weight", type=float, default=None, help="Override elevation weight")
    parser.add_argument("--seed", type=int, default=None, help="Override terrain seed")
    parser.add_argument(
        "--passes",
        type=int,
        default=1,
        help="Number of passes to run (>=1)",
    )
    parser.add_argument("--no-wave", action="store_true", help="Disable wave search")
    parser.add_argument("--no-dijkstra", action="store_true", help="Disable Dijkstra search")
    parser.add_argument("--no-astar", action="store_true", help="Disable A* search")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Python logging level",
    )
    return parser.parse_args(argv)


def build_terrain(cfg: dict[str, Any], args: argparse.Namespace) -> HeightmapTerrain:
    grid_cfg = cfg.get("grid", {})
    ter_cfg = cfg.get("terrain", {})
    width = args.width or int(grid_cfg.get("width", 16))
    height = args.height or int(grid_cfg.get("height", 16))
    seed = args.seed if args.seed is not None else ter_cfg.get("seed")
    config = TerrainConfig(
        spacing=float(ter_cfg.get("spacing", 20.0)),
        hover=float(ter_cfg.get("hover", 25.0)),
        amplitude=float(ter_cfg.get("amplitude", 30.0)),
        smoothing=int(ter_cfg.get("smoothing", 3)),
        seed=None if seed is None else int(seed),
    )
    return HeightmapTerrain.random(width, height, config)


def build_obstacles(cfg: dict[str, Any], terrain: HeightmapTerrain) -> SphereObstacles:
    obs_cfg = cfg.get("obstacles", {})
    centers: List[Tuple[float, float, float]] = []
    for cell in obs_cfg.get("cells", []):
        centers.append(terrain.sample((int(cell[0]), int(cell[1]))))
    return SphereObstacles(
        centers,
        radius=float(obs_cfg.get("radius", 1.0)),
        probe_radius=float(obs_cfg.get("probe_radius", 1.0)),
    )


def build_coordinator_config(cfg: dict[str, Any], args: argparse.Namespace) -> EngineConfig:
    config = build_engine_config(cfg)
    if args.weight is not None:
        config.elevation_weight = args.weight
    if args.no_wave:
        config.wave_enabled = False
    if args.no_dijkstra:
        config.dijkstra_enabled = False
    if args.no_astar:
        config.astar_enabled = False
    return config


def _log_pass(grid: Grid, result: PassResult) -> None:
    for name, res in result.results().items():
        if res.found:
            LOGGER.info("%-8s cost=%10.2f nodes=%3d expansions=%d", name, res.cost, len(res.path), res.expansions)
        else:
            LOGGER.info("%-8s unreachable (expansions=%d)", name, res.expansions)
    paths = {name: res.coords for name, res in result.results().items()}
    LOGGER.info("Pass %d map:\n%s", result.pass_idx, ascii_grid_map(grid, paths, result.start, result.finish))


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    cfg = load_config(args.config) if args.config.exists() else {}
    if not cfg:
        LOGGER.warning("Config %s missing or empty; using defaults", args.config)
    terrain = build_terrain(cfg, args)
    obstacles = build_obstacles(cfg, terrain)
    width, height = terrain.shape
    grid = Grid.build(width, height, terrain.sample)
    sink = RecordingSink()
    coordinator = RunCoordinator(
        grid,
        config=build_coordinator_config(cfg, args),
        sink=sink,
        position_source=terrain.position_of,
        walkable_source=obstacles.is_walkable,
    )
    drift = tuple(float(v) for v in cfg.get("obstacles", {}).get("drift", (0.0, 0.0, 0.0)))
    start, finish = (0, 0), grid.upper_corner()
    try:
        for _ in range(max(1, args.passes)):
            sink.clear()
            if not coordinator.request_run(start, finish):
                LOGGER.warning("Run request dropped; pass still in flight")
                continue
            result = coordinator.wait()
            if result is not None:
                _log_pass(grid, result)
            obstacles.move(drift)
    finally:
        coordinator.shutdown()


if __name__ == "__main__":
    main()
