import numpy as np
import pytest

from tripath.grid import Grid, HeightmapTerrain, SphereObstacles, TerrainConfig


def test_flat_sample_uses_spacing():
    terrain = HeightmapTerrain.flat(4, 4, spacing=2.0, hover=1.0)
    assert terrain.sample((2, 3)) == (4.0, 1.0, 6.0)
    assert terrain.shape == (4, 4)


def test_random_heightmap_is_seeded_and_bounded():
    config = TerrainConfig(amplitude=10.0, seed=42)
    a = HeightmapTerrain.random(6, 5, config)
    b = HeightmapTerrain.random(6, 5, config)
    assert a.heights.shape == (6, 5)
    np.testing.assert_allclose(a.heights, b.heights)
    assert a.heights.min() >= 0.0
    assert a.heights.max() <= 10.0 + 1e-9


def test_bad_terrain_config_rejected():
    with pytest.raises(ValueError):
        TerrainConfig(spacing=0.0)
    with pytest.raises(ValueError):
        HeightmapTerrain(np.zeros(4))


def test_obstacles_block_overlapping_nodes_and_move():
    terrain = HeightmapTerrain.flat(3, 3, spacing=10.0)
    grid = Grid.build(3, 3, terrain.sample)
    obstacles = SphereObstacles([terrain.sample((1, 1))], radius=2.0)
    assert not obstacles.is_walkable(grid[(1, 1)])
    assert obstacles.is_walkable(grid[(1, 2)])
    obstacles.move((0.0, 0.0, 10.0))
    assert obstacles.is_walkable(grid[(1, 1)])
    assert not obstacles.is_walkable(grid[(1, 2)])


def test_no_obstacles_means_all_walkable():
    obstacles = SphereObstacles()
    assert len(obstacles) == 0
    assert not obstacles.overlaps((0.0, 0.0, 0.0))
