"""A* search in two formulations.

`astar_search` keeps its bookkeeping in coordinate-keyed dicts and leaves the
nodes untouched; `astar_node_search` writes `distance`/`parent` on the nodes
the same way Dijkstra does. The heuristic is the weighted cost from a
neighbor to the finish, so both variants expand identically.
"""

from __future__ import annotations

import heapq
from itertools import count
from typing import Dict, List, Tuple

from tripath.grid import Grid
from tripath.types import Coord, SearchResult

from .base import conclude, precheck
from .cost import DEFAULT_ELEVATION_WEIGHT, weighted_cost

NAME = "astar"
NODE_NAME = "astar_nodes"


def astar_search(
    grid: Grid,
    start: Coord,
    finish: Coord,
    weight: float = DEFAULT_ELEVATION_WEIGHT,
) -> SearchResult:
    trivial = precheck(grid, NAME, start, finish)
    if trivial is not None:
        return trivial

    goal = grid[finish]
    came_from: Dict[Coord, Coord] = {start: start}
    cost_so_far: Dict[Coord, float] = {start: 0.0}

    seq = count()
    heap: List[Tuple[float, int, float, Coord]] = [(0.0, next(seq), 0.0, start)]
    expansions = 0
    while heap:
        _, _, g, current = heapq.heappop(heap)
        if g > cost_so_far[current]:
            continue  # superseded by a later relaxation
        expansions += 1
        if current == finish:
            break
        c = grid[current]
        for coord in grid.neighbors(current):
            n = grid[coord]
            if not n.walkable:
                continue
            new_cost = cost_so_far[current] + weighted_cost(c, n, weight)
            if coord not in cost_so_far or new_cost < cost_so_far[coord]:
                cost_so_far[coord] = new_cost
                came_from[coord] = current
                priority = new_cost + weighted_cost(n, goal, weight)
                heapq.heappush(heap, (priority, next(seq), new_cost, coord))

    return conclude(grid, NAME, came_from.get, start, finish, weight, expansions)


def astar_node_search(
    grid: Grid,
    start: Coord,
    finish: Coord,
    weight: float = DEFAULT_ELEVATION_WEIGHT,
) -> SearchResult:
    trivial = precheck(grid, NODE_NAME, start, finish)
    if trivial is not None:
        return trivial

    grid.reset_search_state()
    goal = grid[finish]
    origin = grid[start]
    origin.distance = 0.0
    origin.parent = start

    seq = count()
    heap: List[Tuple[float, int, float, Coord]] = [(0.0, next(seq), 0.0, start)]
    expansions = 0
    while heap:
        _, _, g, current = heapq.heappop(heap)
        c = grid[current]
        if g > c.distance:
            continue
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
                priority = candidate + weighted_cost(n, goal, weight)
                heapq.heappush(heap, (priority, next(seq), candidate, coord))

    return conclude(grid, NODE_NAME, lambda coord: grid[coord].parent, start, finish, weight, expansions)
