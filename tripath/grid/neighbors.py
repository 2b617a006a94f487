"""8-directional neighbor enumeration over a fixed-size lattice."""

from __future__ import annotations

from typing import List

from tripath.types import Coord


def neighbors(width: int, height: int, coord: Coord) -> List[Coord]:
    """Return in-bounds coordinates around `coord`, x-major scan order."""
    cx, cy = coord
    out: List[Coord] = []
    for x in range(cx - 1, cx + 2):
        if x < 0 or x >= width:
            continue
        for y in range(cy - 1, cy + 2):
            if y < 0 or y >= height:
                continue
            if x == cx and y == cy:
                continue
            out.append((x, y))
    return out


def is_adjacent(a: Coord, b: Coord) -> bool:
    return a != b and abs(a[0] - b[0]) <= 1 and abs(a[1] - b[1]) <= 1
