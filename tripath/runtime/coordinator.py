"""Run coordinator: one search pass in flight, results applied on the caller thread.

`request_run` snapshots config, refreshes the grid from the external sources
and hands the searches to a background worker. The caller then polls (e.g.
once per frame) at a safe point; presentation callbacks fire from `poll` or
`wait`, never from the worker.
"""

from __future__ import annotations

import logging
import threading
from concurrent import futures
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Set, Tuple

from tripath.grid import Grid
from tripath.search import SEARCHES
from tripath.types import Coord, Node, Point3, SearchResult

from .config import EngineConfig
from .presentation import PresentationSink

LOGGER = logging.getLogger(__name__)

PositionSource = Callable[[Node], Point3]
WalkableSource = Callable[[Node], bool]


@dataclass(slots=True)
class PassResult:
    pass_idx: int
    start: Coord
    finish: Coord
    config: EngineConfig
    wave: Optional[SearchResult] = None
    dijkstra: Optional[SearchResult] = None
    astar: Optional[SearchResult] = None

    def results(self) -> Dict[str, SearchResult]:
        out: Dict[str, SearchResult] = {}
        for name in ("wave", "dijkstra", "astar"):
            res = getattr(self, name)
            if res is not None:
                out[name] = res
        return out

    def on_path(self) -> Set[Coord]:
        coords: Set[Coord] = set()
        for res in self.results().values():
            coords.update(res.coords)
        return coords


@dataclass(slots=True)
class PendingPass:
    future: Future
    pass_idx: int
    claimed: bool = False


def _keep_position(node: Node) -> Point3:
    return node.position


def _keep_walkable(node: Node) -> bool:
    return node.walkable


class RunCoordinator:
    def __init__(
        self,
        grid: Grid,
        config: EngineConfig | None = None,
        sink: PresentationSink | None = None,
        position_source: PositionSource | None = None,
        walkable_source: WalkableSource | None = None,
        executor: Executor | None = None,
    ):
        self.grid = grid
        self.config = config or EngineConfig()
        self.sink = sink or PresentationSink()
        self.position_source = position_source or _keep_position
        self.walkable_source = walkable_source or _keep_walkable
        self._owns_pool = executor is None
        self._pool = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="tripath")
        self._lock = threading.Lock()
        self._pending: Optional[PendingPass] = None
        self._claimed = False  # Slot reserved while sources are being read.
        self._pass_count = 0

    @property
    def running(self) -> bool:
        with self._lock:
            return self._claimed or self._pending is not None

    def request_run(self, start: Coord, finish: Coord) -> bool:
        """Start a pass. Returns False (and does nothing) if one is in flight."""
        self.grid.require_in_bounds(start, "start")
        self.grid.require_in_bounds(finish, "finish")
        with self._lock:
            if self._claimed or self._pending is not None:
                LOGGER.debug("Pass %d still running; dropping request %s -> %s", self._pass_count, start, finish)
                return False
            self._claimed = True
        # Sources are caller code and may read `running`, so the lock is not held here.
        try:
            config = self.config.snapshot()
            self._refresh_grid()
        except Exception:
            with self._lock:
                self._claimed = False
            raise
        with self._lock:
            self._pass_count += 1
            pass_idx = self._pass_count
            try:
                fut = self._pool.submit(self._search_batch, pass_idx, start, finish, config)
            finally:
                self._claimed = False
            self._pending = PendingPass(future=fut, pass_idx=pass_idx)
        LOGGER.debug("Pass %d scheduled: %s -> %s (%s)", pass_idx, start, finish, ", ".join(config.enabled_algorithms()))
        return True

    def poll(self) -> Optional[PassResult]:
        """Apply and return the finished pass; None while running or idle."""
        with self._lock:
            job = self._pending
            if job is None or job.claimed or not job.future.done():
                return None
            job.claimed = True
        return self._complete(job)

    def wait(self, timeout: Optional[float] = None) -> Optional[PassResult]:
        """Block until the in-flight pass finishes, then apply it like `poll`."""
        with self._lock:
            job = self._pending
        if job is None:
            return None
        done, _ = futures.wait([job.future], timeout=timeout)
        if not done:
            return None
        return self.poll()

    def shutdown(self) -> None:
        if self._owns_pool:
            self._pool.shutdown(wait=True)

    # ------------------------------------------------------------------ helpers
    def _refresh_grid(self) -> None:
        # Read every source first; the grid is only written once all reads succeed.
        snapshot: List[Tuple[Node, Point3, bool]] = []
        for node in self.grid:
            position = tuple(float(v) for v in self.position_source(node))
            walkable = bool(self.walkable_source(node))
            snapshot.append((node, position, walkable))
        blocked = 0
        for node, position, walkable in snapshot:
            node.reset_search_state()
            node.position = position
            node.walkable = walkable
            if not walkable:
                blocked += 1
        LOGGER.debug("Refreshed %d nodes (%d blocked)", len(self.grid), blocked)

    def _search_batch(self, pass_idx: int, start: Coord, finish: Coord, config: EngineConfig) -> PassResult:
        result = PassResult(pass_idx=pass_idx, start=start, finish=finish, config=config)
        # Node-state searches share distance/parent, so they run one after another.
        for name in config.enabled_algorithms():
            res = SEARCHES[name](self.grid, start, finish, config.elevation_weight)
            slot = "astar" if name.startswith("astar") else name
            setattr(result, slot, res)
        return result

    def _complete(self, job: PendingPass) -> PassResult:
        try:
            result = job.future.result()
        except Exception as exc:
            LOGGER.warning("Pass %d failed: %s", job.pass_idx, exc)
            self._release(job)
            raise
        try:
            self._present(result)
        finally:
            self._release(job)
        for name, res in result.results().items():
            LOGGER.info(
                "Pass %d %s: nodes=%d cost=%.3f expansions=%d",
                result.pass_idx,
                name,
                len(res.path),
                res.cost,
                res.expansions,
            )
        return result

    def _release(self, job: PendingPass) -> None:
        with self._lock:
            if self._pending is job:
                self._pending = None

    def _present(self, result: PassResult) -> None:
        on_path = result.on_path()
        for node in self.grid:
            if not node.walkable:
                self.sink.on_blocked(node)
            elif node.coord not in on_path:
                self.sink.on_default(node)
        callbacks = (
            (result.wave, self.sink.on_path_wave),
            (result.dijkstra, self.sink.on_path_dijkstra),
            (result.astar, self.sink.on_path_astar),
        )
        for res, callback in callbacks:
            if res is None:
                continue
            for node in res.path:
                callback(node)
