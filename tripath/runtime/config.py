"""Engine configuration and YAML loading."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, List

import yaml

from tripath.search import DEFAULT_ELEVATION_WEIGHT
from tripath.types import AlgorithmName, AStarVariant

_ASTAR_VARIANTS = ("map", "node")


@dataclass(slots=True)
class EngineConfig:
    """Externally toggled knobs; snapshotted once per pass."""

    wave_enabled: bool = True
    dijkstra_enabled: bool = True
    astar_enabled: bool = True
    elevation_weight: float = DEFAULT_ELEVATION_WEIGHT
    astar_variant: AStarVariant = "map"

    def __post_init__(self) -> None:
        if self.elevation_weight < 0:
            raise ValueError("elevation_weight must be non-negative")
        if self.astar_variant not in _ASTAR_VARIANTS:
            raise ValueError(f"astar_variant must be one of {_ASTAR_VARIANTS}, got {self.astar_variant!r}")

    def snapshot(self) -> "EngineConfig":
        """Validated copy that later mutations of `self` cannot reach."""
        return replace(self)

    def enabled_algorithms(self) -> List[AlgorithmName]:
        names: List[AlgorithmName] = []
        if self.wave_enabled:
            names.append("wave")
        if self.dijkstra_enabled:
            names.append("dijkstra")
        if self.astar_enabled:
            names.append("astar" if self.astar_variant == "map" else "astar_nodes")
        return names


def load_config(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def build_engine_config(cfg: dict[str, Any]) -> EngineConfig:
    eng_cfg = cfg.get("engine", {})
    return EngineConfig(
        wave_enabled=bool(eng_cfg.get("wave", True)),
        dijkstra_enabled=bool(eng_cfg.get("dijkstra", True)),
        astar_enabled=bool(eng_cfg.get("astar", True)),
        elevation_weight=float(eng_cfg.get("elevation_weight", DEFAULT_ELEVATION_WEIGHT)),
        astar_variant=str(eng_cfg.get("astar_variant", "map")),
    )
