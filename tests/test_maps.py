from tripath.grid import Grid
from tripath.utils import ascii_grid_map


def _flat(width, height):
    return Grid.build(width, height, lambda c: (float(c[0]), 0.0, float(c[1])))


def test_map_marks_blocked_cells_and_paths():
    grid = _flat(3, 3)
    grid[(1, 1)].walkable = False
    paths = {
        "wave": [(0, 0), (1, 0), (2, 1), (2, 2)],
        "dijkstra": [(0, 0), (0, 1), (1, 2), (2, 2)],
    }
    rendered = ascii_grid_map(grid, paths, start=(0, 0), finish=(2, 2))
    assert rendered.splitlines() == [".dF", "d#w", "Sw."]


def test_shared_cells_are_starred():
    grid = _flat(3, 1)
    paths = {"dijkstra": [(0, 0), (1, 0), (2, 0)], "astar": [(0, 0), (1, 0), (2, 0)]}
    assert ascii_grid_map(grid, paths) == "***"
