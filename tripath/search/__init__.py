"""Search strategy exports."""

from typing import Dict

from tripath.types import AlgorithmName

from .astar import astar_node_search, astar_search
from .base import SearchFn
from .cost import DEFAULT_ELEVATION_WEIGHT, weighted_cost
from .dijkstra import dijkstra_search
from .paths import is_contiguous, path_cost, reconstruct_path
from .wave import wave_search

SEARCHES: Dict[AlgorithmName, SearchFn] = {
    "wave": wave_search,
    "dijkstra": dijkstra_search,
    "astar": astar_search,
    "astar_nodes": astar_node_search,
}

__all__ = [
    "SEARCHES",
    "SearchFn",
    "DEFAULT_ELEVATION_WEIGHT",
    "weighted_cost",
    "wave_search",
    "dijkstra_search",
    "astar_search",
    "astar_node_search",
    "reconstruct_path",
    "path_cost",
    "is_contiguous",
]
