"""Heightmap-backed position source and sphere-collider walkability source.

These stand in for the host application's terrain sampling and physics
overlap queries so the engine can be driven from the CLI and tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from tripath.types import Coord, Node, Point3

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class TerrainConfig:
    spacing: float = 20.0
    hover: float = 25.0  # Nodes float above the sampled surface.
    amplitude: float = 30.0
    smoothing: int = 3
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.spacing <= 0:
            raise ValueError("spacing must be positive")
        if self.smoothing < 0:
            raise ValueError("smoothing must be non-negative")


class HeightmapTerrain:
    """Samples `heights[x, z]` and lifts nodes by `hover` above the surface."""

    def __init__(self, heights: np.ndarray, spacing: float = 20.0, hover: float = 25.0):
        heights = np.asarray(heights, dtype=np.float64)
        if heights.ndim != 2:
            raise ValueError(f"heightmap must be 2D, got shape {heights.shape}")
        self.heights = heights
        self.spacing = float(spacing)
        self.hover = float(hover)

    @classmethod
    def flat(cls, width: int, height: int, spacing: float = 1.0, hover: float = 0.0) -> "HeightmapTerrain":
        return cls(np.zeros((width, height)), spacing=spacing, hover=hover)

    @classmethod
    def random(cls, width: int, height: int, config: TerrainConfig | None = None) -> "HeightmapTerrain":
        config = config or TerrainConfig()
        rng = np.random.default_rng(config.seed)
        heights = rng.random((width, height))
        kernel = np.ones(3) / 3.0
        for _ in range(config.smoothing):
            padded = np.pad(heights, 1, mode="edge")
            heights = np.apply_along_axis(lambda row: np.convolve(row, kernel, mode="valid"), 0, padded)
            heights = np.apply_along_axis(lambda col: np.convolve(col, kernel, mode="valid"), 1, heights)
        span = float(heights.max() - heights.min())
        if span > 0:
            heights = (heights - heights.min()) / span
        return cls(heights * config.amplitude, spacing=config.spacing, hover=config.hover)

    @property
    def shape(self) -> Coord:
        w, h = self.heights.shape
        return (int(w), int(h))

    def sample(self, coord: Coord) -> Point3:
        x, z = coord
        y = float(self.heights[x, z]) + self.hover
        return (x * self.spacing, y, z * self.spacing)

    def position_of(self, node: Node) -> Point3:
        return self.sample(node.coord)


class SphereObstacles:
    """Sphere colliders; a node is blocked when its probe sphere overlaps one."""

    def __init__(
        self,
        centers: Sequence[Sequence[float]] | np.ndarray = (),
        radius: float = 1.0,
        probe_radius: float = 1.0,
    ):
        arr = np.asarray(centers, dtype=np.float64)
        self.centers = arr.reshape(-1, 3)
        self.radius = float(radius)
        self.probe_radius = float(probe_radius)

    def __len__(self) -> int:
        return int(self.centers.shape[0])

    def overlaps(self, point: Point3) -> bool:
        if not len(self):
            return False
        deltas = self.centers - np.asarray(point, dtype=np.float64)
        dists = np.linalg.norm(deltas, axis=1)
        return bool(np.any(dists < self.radius + self.probe_radius))

    def is_walkable(self, node: Node) -> bool:
        return not self.overlaps(node.position)

    def move(self, offset: Tuple[float, float, float]) -> None:
        self.centers = self.centers + np.asarray(offset, dtype=np.float64)
        LOGGER.debug("Moved %d obstacles by %s", len(self), offset)
