"""Core data contracts shared across the pathfinding stack."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple

Coord = Tuple[int, int]
Point3 = Tuple[float, float, float]

AlgorithmName = Literal["wave", "dijkstra", "astar", "astar_nodes"]
AStarVariant = Literal["map", "node"]


@dataclass(slots=True)
class Node:
    """Grid cell with a refreshed world position and per-run search scratch."""

    coord: Coord
    position: Point3
    walkable: bool = True
    distance: float = math.inf  # Accumulated cost from start; run-scoped.
    parent: Optional[Coord] = None  # Back-link; start links to itself.

    def reset_search_state(self) -> None:
        self.distance = math.inf
        self.parent = None


@dataclass(slots=True)
class SearchResult:
    """Outcome of one algorithm invocation (empty path when unreachable)."""

    algorithm: AlgorithmName
    path: List[Node] = field(default_factory=list)
    cost: float = math.inf
    expansions: int = 0

    def __post_init__(self) -> None:
        if self.expansions < 0:
            raise ValueError("expansions must be non-negative")

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def coords(self) -> List[Coord]:
        return [node.coord for node in self.path]


__all__ = [
    "Coord",
    "Point3",
    "AlgorithmName",
    "AStarVariant",
    "Node",
    "SearchResult",
]
