import pytest

from tripath.runtime import EngineConfig, build_engine_config, load_config


def test_defaults_enable_everything():
    config = EngineConfig()
    assert config.elevation_weight == 40.0
    assert config.enabled_algorithms() == ["wave", "dijkstra", "astar"]


def test_node_variant_selects_node_state_astar():
    config = EngineConfig(astar_variant="node", wave_enabled=False)
    assert config.enabled_algorithms() == ["dijkstra", "astar_nodes"]


def test_invalid_values_are_rejected():
    with pytest.raises(ValueError):
        EngineConfig(elevation_weight=-1.0)
    with pytest.raises(ValueError):
        EngineConfig(astar_variant="fast")


def test_snapshot_is_detached_and_revalidated():
    config = EngineConfig()
    snap = config.snapshot()
    config.dijkstra_enabled = False
    assert snap.dijkstra_enabled is True
    config.elevation_weight = -5.0
    with pytest.raises(ValueError):
        config.snapshot()


def test_yaml_round_trip(tmp_path):
    path = tmp_path / "engine.yaml"
    path.write_text(
        "engine:\n  wave: false\n  elevation_weight: 12.5\n  astar_variant: node\n",
        encoding="utf-8",
    )
    config = build_engine_config(load_config(path))
    assert config.wave_enabled is False
    assert config.dijkstra_enabled is True
    assert config.elevation_weight == 12.5
    assert config.astar_variant == "node"


def test_empty_yaml_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert build_engine_config(load_config(path)) == EngineConfig()
