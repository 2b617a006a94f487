"""Pre/post steps common to every search strategy."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from tripath.grid import Grid
from tripath.types import AlgorithmName, Coord, SearchResult

from .paths import ParentOf, path_cost, reconstruct_path

LOGGER = logging.getLogger(__name__)

SearchFn = Callable[[Grid, Coord, Coord, float], SearchResult]


def precheck(grid: Grid, algorithm: AlgorithmName, start: Coord, finish: Coord) -> Optional[SearchResult]:
    """Validate endpoints; short-circuit `start == finish` to a one-node path."""
    grid.require_in_bounds(start, "start")
    grid.require_in_bounds(finish, "finish")
    if start == finish:
        return SearchResult(algorithm=algorithm, path=[grid[start]], cost=0.0, expansions=0)
    return None


def conclude(
    grid: Grid,
    algorithm: AlgorithmName,
    parent_of: ParentOf,
    start: Coord,
    finish: Coord,
    weight: float,
    expansions: int,
) -> SearchResult:
    path = reconstruct_path(grid, parent_of, start, finish)
    if not path:
        LOGGER.warning(
            "[%s] finish %s unreachable from %s (expansions=%d)", algorithm, finish, start, expansions
        )
        return SearchResult(algorithm=algorithm, expansions=expansions)
    cost = path_cost(path, weight)
    LOGGER.debug(
        "[%s] path %s -> %s: nodes=%d cost=%.3f expansions=%d",
        algorithm,
        start,
        finish,
        len(path),
        cost,
        expansions,
    )
    return SearchResult(algorithm=algorithm, path=path, cost=cost, expansions=expansions)
