from tripath.grid import Grid, is_adjacent, neighbors


def _flat(width, height):
    return Grid.build(width, height, lambda c: (float(c[0]), 0.0, float(c[1])))


def test_corner_has_three_neighbors():
    assert neighbors(3, 3, (0, 0)) == [(0, 1), (1, 0), (1, 1)]


def test_center_scans_x_major():
    assert neighbors(3, 3, (1, 1)) == [
        (0, 0),
        (0, 1),
        (0, 2),
        (1, 0),
        (1, 2),
        (2, 0),
        (2, 1),
        (2, 2),
    ]


def test_single_cell_grid_has_no_neighbors():
    assert neighbors(1, 1, (0, 0)) == []


def test_grid_delegates_to_enumerator():
    grid = _flat(4, 2)
    assert grid.neighbors((3, 1)) == [(2, 0), (2, 1), (3, 0)]


def test_adjacency_excludes_self_and_far_cells():
    assert is_adjacent((1, 1), (2, 2))
    assert not is_adjacent((1, 1), (1, 1))
    assert not is_adjacent((0, 0), (0, 2))
