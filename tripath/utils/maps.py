"""Helpers for ASCII grid maps used in debug logs."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from tripath.grid import Grid
from tripath.types import Coord

PATH_MARKS: Dict[str, str] = {
    "wave": "w",
    "dijkstra": "d",
    "astar": "a",
}


def ascii_grid_map(
    grid: Grid,
    paths: Mapping[str, Sequence[Coord]],
    start: Optional[Coord] = None,
    finish: Optional[Coord] = None,
) -> str:
    """Return the grid with blocked cells and paths marked, highest y first."""
    cell_marks: Dict[Coord, str] = {}
    for name, coords in paths.items():
        mark = PATH_MARKS.get(name, "?")
        for coord in coords:
            prev = cell_marks.get(coord)
            cell_marks[coord] = mark if prev in (None, mark) else "*"
    lines: List[str] = []
    for y in range(grid.height - 1, -1, -1):
        cells: List[str] = []
        for x in range(grid.width):
            key = (x, y)
            if key == start:
                cell = "S"
            elif key == finish:
                cell = "F"
            elif not grid[key].walkable:
                cell = "#"
            else:
                cell = cell_marks.get(key, ".")
            cells.append(cell)
        lines.append("".join(cells))
    return "\n".join(lines)
