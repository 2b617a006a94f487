from tripath.main import _parse_args, build_coordinator_config, main


def test_cli_overrides_engine_config():
    args = _parse_args(["--weight", "5", "--no-wave"])
    config = build_coordinator_config({"engine": {"astar_variant": "node"}}, args)
    assert config.elevation_weight == 5.0
    assert config.wave_enabled is False
    assert config.astar_variant == "node"


def test_main_runs_passes(tmp_path, caplog):
    path = tmp_path / "demo.yaml"
    path.write_text(
        "grid:\n  width: 6\n  height: 5\n"
        "terrain:\n  seed: 3\n"
        "obstacles:\n  radius: 5.0\n  cells: [[2, 2], [3, 2]]\n  drift: [0.0, 0.0, 20.0]\n",
        encoding="utf-8",
    )
    caplog.set_level("INFO", logger="tripath")
    main(["--config", str(path), "--passes", "2"])
    assert "Pass 2 map" in caplog.text
