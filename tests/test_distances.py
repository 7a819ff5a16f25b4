import numpy as np
import pytest

from models import Path, ReservedSlot
from queries import path_distance, refresh_path_distances


def assigned(path):
    return [path.waypoints[i] for i in path.assigned_indices()]


def test_refresh_open_path(open_path):
    refreshed = refresh_path_distances(open_path)
    waypoints = assigned(refreshed)

    assert np.allclose([wp.distance_from_previous_assigned for wp in waypoints], [0.0, 10.0, 10.0])
    assert np.allclose([wp.distance_cumulative for wp in waypoints], [0.0, 10.0, 20.0])
    assert np.isclose(refreshed.total_distance, 20.0)


def test_refresh_leaves_input_untouched(open_path):
    refresh_path_distances(open_path)
    assert open_path.total_distance == 0.0
    assert all(wp.distance_cumulative == 0.0 for wp in assigned(open_path))


def test_refresh_closed_path_stores_loop_on_first_waypoint(closed_path):
    refreshed = refresh_path_distances(closed_path)
    first = refreshed.waypoints[0]

    assert refreshed.total_distance >= 40.0 - 1e-9
    assert np.isclose(first.distance_cumulative, refreshed.total_distance)
    assert np.isclose(first.distance_from_previous_assigned, refreshed.total_distance - 20.0)


@pytest.mark.parametrize("fixture_name", ["open_path", "closed_path", "reserved_path"])
def test_segment_distances_sum_to_total(request, fixture_name):
    refreshed = refresh_path_distances(request.getfixturevalue(fixture_name))
    total = sum(wp.distance_from_previous_assigned for wp in assigned(refreshed))
    assert np.isclose(total, refreshed.total_distance)


def test_refresh_keeps_reserved_slots(reserved_path):
    refreshed = refresh_path_distances(reserved_path)
    assert isinstance(refreshed.waypoints[1], ReservedSlot)
    assert isinstance(refreshed.waypoints[3], ReservedSlot)
    assert np.isclose(refreshed.waypoints[4].distance_cumulative, 20.0)


def test_refresh_missing_path():
    assert refresh_path_distances(None) is None


def test_refresh_empty_and_single(single_path):
    assert refresh_path_distances(Path()).total_distance == 0.0

    refreshed = refresh_path_distances(single_path)
    assert refreshed.total_distance == 0.0
    assert refreshed.waypoints[1].distance_cumulative == 0.0


def test_path_distance_forward(open_path):
    refreshed = refresh_path_distances(open_path)
    assert np.isclose(path_distance(refreshed, 0, 2), 20.0)
    assert np.isclose(path_distance(refreshed, 1, 2), 10.0)


def test_path_distance_wraps_on_closed_circuit(closed_path):
    refreshed = refresh_path_distances(closed_path)
    loop = refreshed.total_distance

    assert np.isclose(path_distance(refreshed, 2, 0), loop - 20.0)
    assert np.isclose(path_distance(refreshed, 2, 1), loop - 10.0)
    assert np.isclose(path_distance(refreshed, 0, 2) + path_distance(refreshed, 2, 0), loop)


@pytest.mark.parametrize("from_index, to_index", [(1, 1), (-1, 2), (0, 9), (1, 2)])
def test_path_distance_invalid_indices(reserved_path, from_index, to_index):
    refreshed = refresh_path_distances(reserved_path)
    assert path_distance(refreshed, from_index, to_index) == 0.0


if __name__ == "__main__":
    pytest.main([__file__])
