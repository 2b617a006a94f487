"""Uniform-cost search over node-held distances with lazy deletion."""

from __future__ import annotations

import heapq
from itertools import count
from typing import List, Tuple

from tripath.grid import Grid
from tripath.types import Coord, SearchResult

from .base import conclude, precheck
from .cost import DEFAULT_ELEVATION_WEIGHT, weighted_cost

NAME = "dijkstra"


def dijkstra_search(
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

    seq = count()
    heap: List[Tuple[float, int, Coord]] = [(0.0, next(seq), start)]
    expansions = 0
    while heap:
        priority, _, current = heapq.heappop(heap)
        c = grid[current]
        if priority > c.distance:
            continue  # superseded by a later relaxation
        expansions += 1
        if current == finish:
            break
        for coord in grid.neighbors(current):
            n = grid[coord]
            if not n.walkable:
                continue
            candidate = c.distance + weighted_cost(n, c, weight)
            if candidate < n.distance:
                n.distance = candidate
                n.parent = current
                heapq.heappush(heap, (candidate, next(seq), coord))

    return conclude(grid, NAME, lambda coord: grid[coord].parent, start, finish, weight, expansions)
