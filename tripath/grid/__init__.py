"""Grid exports."""

from .model import Grid
from .neighbors import is_adjacent, neighbors
from .terrain import HeightmapTerrain, SphereObstacles, TerrainConfig

__all__ = [
    "Grid",
    "neighbors",
    "is_adjacent",
    "HeightmapTerrain",
    "SphereObstacles",
    "TerrainConfig",
]
