"""Wave propagation: FIFO frontier gated on distance improvement."""

from __future__ import annotations

from collections import deque

from tripath.grid import Grid
from tripath.types import Coord, SearchResult

from .base import conclude, precheck
from .cost import DEFAULT_ELEVATION_WEIGHT, weighted_cost

NAME = "wave"


def wave_search(
    grid: Grid,
    start: Coord,
    finish: Coord,
    weight: float = DEFAULT_ELEVATION_WEIGHT,
) -> SearchResult:
    trivial = precheck(grid, NAME, start, finish)
    if trivial is not None:
        return trivial

    grid.reset_search_state()
    origin = grid[start]
    origin.distance = 0.0
    origin.parent = start

    queue: deque[Coord] = deque([start])
    expansions = 0
    while queue:
        current = queue.popleft()
        expansions += 1
        if current == finish:
            break
        c = grid[current]
        for coord in grid.neighbors(current):
            n = grid[coord]
            if not n.walkable:
                continue
            candidate = c.distance + weighted_cost(n, c, weight)
            # Re-enqueueing an already queued coordinate is allowed.
            if n.distance > candidate:
                n.distance = candidate
                n.parent = current
                queue.append(coord)

    return conclude(grid, NAME, lambda coord: grid[coord].parent, start, finish, weight, expansions)
