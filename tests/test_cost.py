import pytest

from tripath.search import weighted_cost
from tripath.types import Node


def test_flat_cost_is_euclidean():
    a = Node((0, 0), (0.0, 0.0, 0.0))
    b = Node((1, 1), (3.0, 0.0, 4.0))
    assert weighted_cost(a, b) == pytest.approx(5.0)


def test_elevation_gap_is_penalised_symmetrically():
    low = Node((0, 0), (0.0, 0.0, 0.0))
    high = Node((0, 1), (0.0, 2.0, 0.0))
    assert weighted_cost(low, high) == pytest.approx(2.0 + 40.0 * 2.0)
    assert weighted_cost(high, low) == weighted_cost(low, high)
    assert weighted_cost(low, high, weight=0.0) == pytest.approx(2.0)


def test_cost_tracks_position_changes():
    a = Node((0, 0), (0.0, 0.0, 0.0))
    b = Node((1, 0), (1.0, 0.0, 0.0))
    before = weighted_cost(a, b)
    b.position = (1.0, 1.0, 0.0)
    assert weighted_cost(a, b) > before
