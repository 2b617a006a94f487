"""Elevation-weighted edge cost shared by every search strategy."""

from __future__ import annotations

import math

from tripath.types import Node

DEFAULT_ELEVATION_WEIGHT = 40.0


def weighted_cost(a: Node, b: Node, weight: float = DEFAULT_ELEVATION_WEIGHT) -> float:
    """Straight-line distance plus `weight` times the vertical (y) gap.

    Positions change between passes, so this is always computed fresh.
    """
    return math.dist(a.position, b.position) + weight * abs(a.position[1] - b.position[1])
