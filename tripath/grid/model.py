"""Fixed-size grid of nodes owned by the embedding application."""

from __future__ import annotations

from typing import Callable, Iterator, List

from tripath.types import Coord, Node, Point3

from .neighbors import neighbors


class Grid:
    """Width x height lattice; never resized after construction."""

    def __init__(self, nodes: List[List[Node]]):
        if not nodes or not nodes[0]:
            raise ValueError("grid must have at least one node")
        height = len(nodes[0])
        for x, column in enumerate(nodes):
            if len(column) != height:
                raise ValueError(f"column {x} has {len(column)} nodes, expected {height}")
            for y, node in enumerate(column):
                if node.coord != (x, y):
                    raise ValueError(f"node at {(x, y)} carries coord {node.coord}")
        self._nodes = nodes
        self.width = len(nodes)
        self.height = height

    @classmethod
    def build(cls, width: int, height: int, position_fn: Callable[[Coord], Point3]) -> "Grid":
        if width <= 0 or height <= 0:
            raise ValueError(f"grid size must be positive, got {(width, height)}")
        nodes = [
            [Node(coord=(x, y), position=position_fn((x, y))) for y in range(height)]
            for x in range(width)
        ]
        return cls(nodes)

    # --------------------------------------------------------------------- API
    def __getitem__(self, coord: Coord) -> Node:
        x, y = coord
        if not self.in_bounds(coord):
            raise IndexError(f"{coord} outside grid {(self.width, self.height)}")
        return self._nodes[x][y]

    def __iter__(self) -> Iterator[Node]:
        for column in self._nodes:
            yield from column

    def __len__(self) -> int:
        return self.width * self.height

    @property
    def shape(self) -> Coord:
        return (self.width, self.height)

    def in_bounds(self, coord: Coord) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def require_in_bounds(self, coord: Coord, label: str = "coord") -> None:
        if not self.in_bounds(coord):
            raise ValueError(f"{label} {coord} outside grid {(self.width, self.height)}")

    def neighbors(self, coord: Coord) -> List[Coord]:
        return neighbors(self.width, self.height, coord)

    def reset_search_state(self) -> None:
        for node in self:
            node.reset_search_state()

    def upper_corner(self) -> Coord:
        return (self.width - 1, self.height - 1)
