"""Back-link path reconstruction and path metrics."""

from __future__ import annotations

import math
from typing import Callable, List, Optional, Sequence

from tripath.grid import Grid, is_adjacent
from tripath.types import Coord, Node

from .cost import DEFAULT_ELEVATION_WEIGHT, weighted_cost

ParentOf = Callable[[Coord], Optional[Coord]]


def reconstruct_path(grid: Grid, parent_of: ParentOf, start: Coord, finish: Coord) -> List[Node]:
    """Walk back-links from `finish` to `start` and return nodes start-first.

    Every strategy records the start as its own parent, so the walk ends on
    reaching `start`. A missing link means the finish was never reached, and
    the result is an empty path.
    """
    coords: List[Coord] = [finish]
    cur = finish
    limit = len(grid)
    while cur != start:
        prev = parent_of(cur)
        if prev is None:
            return []
        coords.append(prev)
        if len(coords) > limit:
            raise RuntimeError(f"back-link cycle while reconstructing {start} -> {finish}")
        cur = prev
    coords.reverse()
    return [grid[c] for c in coords]


def path_cost(path: Sequence[Node], weight: float = DEFAULT_ELEVATION_WEIGHT) -> float:
    if not path:
        return math.inf
    return sum(weighted_cost(a, b, weight) for a, b in zip(path, path[1:]))


def is_contiguous(path: Sequence[Node]) -> bool:
    return all(is_adjacent(a.coord, b.coord) for a, b in zip(path, path[1:]))
