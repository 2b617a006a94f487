"""Grid pathfinding engine comparing wave, Dijkstra and A* searches."""

from tripath.grid import Grid
from tripath.runtime import EngineConfig, PassResult, PresentationSink, RunCoordinator
from tripath.types import Coord, Node, SearchResult

__all__ = [
    "Coord",
    "Node",
    "SearchResult",
    "Grid",
    "EngineConfig",
    "PassResult",
    "PresentationSink",
    "RunCoordinator",
]
