"""Presentation sink interface consumed by the run coordinator."""

from __future__ import annotations

from typing import Dict, List, Tuple

from tripath.types import Coord, Node


class PresentationSink:
    """No-op base; embedders override the callbacks they render."""

    def on_default(self, node: Node) -> None:
        pass

    def on_blocked(self, node: Node) -> None:
        pass

    def on_path_wave(self, node: Node) -> None:
        pass

    def on_path_dijkstra(self, node: Node) -> None:
        pass

    def on_path_astar(self, node: Node) -> None:
        pass


class RecordingSink(PresentationSink):
    """Keeps every callback in order along with the last mark per node."""

    def __init__(self):
        self.calls: List[Tuple[str, Coord]] = []
        self.marks: Dict[Coord, str] = {}

    def _record(self, kind: str, node: Node) -> None:
        self.calls.append((kind, node.coord))
        self.marks[node.coord] = kind

    def on_default(self, node: Node) -> None:
        self._record("default", node)

    def on_blocked(self, node: Node) -> None:
        self._record("blocked", node)

    def on_path_wave(self, node: Node) -> None:
        self._record("wave", node)

    def on_path_dijkstra(self, node: Node) -> None:
        self._record("dijkstra", node)

    def on_path_astar(self, node: Node) -> None:
        self._record("astar", node)

    def coords_for(self, kind: str) -> List[Coord]:
        return [coord for k, coord in self.calls if k == kind]

    def clear(self) -> None:
        self.calls.clear()
        self.marks.clear()
