import logging

import numpy as np
import pytest

from curves import Segment, curvature, position, segment_length
from queries import refresh_path_distances
from search import advance


def first_segment(path):
    return Segment.from_path(path, 0, 1)


@pytest.mark.parametrize("distance", [0.0, 1e-9, -3.0])
def test_zero_distance_is_identity(open_path, distance):
    segment = first_segment(open_path)
    result = advance(open_path, segment, 0.3, distance)

    assert result.index == 0
    assert result.t == 0.3
    assert np.allclose(result.point, position(segment, 0.3))
    assert np.isclose(result.curvature, curvature(segment, 0.3))
    assert not result.reached_end


def test_advance_within_segment(open_path):
    result = advance(open_path, first_segment(open_path), 0.0, 2.5)
    assert result.index == 0
    assert 0.0 < result.t < 1.0
    assert np.allclose(result.point, [2.5, 0.0, 0.0], atol=5e-2)


def test_advance_from_mid_segment(open_path):
    segment = first_segment(open_path)
    result = advance(open_path, segment, 0.5, 2.0)
    assert result.index == 0
    assert np.allclose(result.point, [7.0, 0.0, 0.0], atol=5e-2)


def test_advance_across_segment_boundary(open_path):
    result = advance(open_path, first_segment(open_path), 0.0, 15.0)
    assert result.index == 1
    assert np.allclose(result.point, [15.0, 0.0, 0.0], atol=5e-2)
    assert not result.reached_end


def test_more_iterations_are_more_accurate(open_path):
    coarse = advance(open_path, first_segment(open_path), 0.0, 3.3, iterations=1)
    fine = advance(open_path, first_segment(open_path), 0.0, 3.3, iterations=50)
    assert abs(fine.point[0] - 3.3) <= abs(coarse.point[0] - 3.3)


@pytest.mark.parametrize("iterations", [0, -4])
def test_iterations_below_one_still_march(open_path, iterations):
    result = advance(open_path, first_segment(open_path), 0.0, 5.0, iterations=iterations)
    assert np.allclose(result.point, [5.0, 0.0, 0.0], atol=0.5)


def test_open_path_reports_end(open_path, caplog):
    with caplog.at_level(logging.DEBUG, logger="search.marching"):
        result = advance(open_path, first_segment(open_path), 0.0, 100.0)

    assert result.reached_end
    assert result.index == 1
    assert result.t == 1.0
    assert np.allclose(result.point, [20.0, 0.0, 0.0])
    assert "Reached end of open path" in caplog.text


def test_closed_path_wraps_past_last_waypoint(closed_path):
    result = advance(closed_path, first_segment(closed_path), 0.0, 25.0)
    assert not result.reached_end
    assert result.index == 2
    assert 0.0 < result.t < 1.0


def test_reserved_slots_are_skipped(reserved_path):
    segment = Segment.from_path(reserved_path, 0, 2)
    result = advance(reserved_path, segment, 0.0, 15.0)
    assert result.index == 2
    assert np.allclose(result.point, [15.0, 0.0, 0.0], atol=5e-2)


def test_cached_distances_give_same_point(open_path):
    refreshed = refresh_path_distances(open_path)
    plain = advance(open_path, first_segment(open_path), 0.0, 17.0)
    cached = advance(refreshed, first_segment(refreshed), 0.0, 17.0)

    assert cached.index == plain.index
    assert np.allclose(cached.point, plain.point, atol=1e-3)


def test_t_never_leaves_unit_interval(curved_segment):
    from models import Path, Waypoint

    path = Path(
        waypoints=[
            Waypoint(position=curved_segment.p0, out_control_point=curved_segment.p1),
            Waypoint(position=curved_segment.p3, in_control_point=curved_segment.p2),
        ]
    )
    for distance in np.linspace(0.5, 14.0, 12):
        result = advance(path, Segment.from_path(path, 0, 1), 0.1, distance)
        assert 0.0 <= result.t <= 1.0


def test_degenerate_closed_loop_terminates(caplog):
    from models import Path, Waypoint

    path = Path(
        waypoints=[Waypoint(position=(1.0, 1.0, 1.0)), Waypoint(position=(1.0, 1.0, 1.0))],
        is_closed_circuit=True,
    )
    segment = Segment.from_path(path, 0, 1)
    # coincident points still measure a few 1e-15 in floating point
    assert segment_length(segment) < 1e-12

    with caplog.at_level(logging.DEBUG, logger="search.marching"):
        result = advance(path, segment, 0.0, 5.0)
    assert np.allclose(result.point, [1.0, 1.0, 1.0])
    assert "stopping after one lap" in caplog.text


def test_tiny_closed_loop_with_zero_epsilon_terminates():
    from models import Path, Waypoint

    path = Path(
        waypoints=[Waypoint(position=(0.0, 0.0, 0.0)), Waypoint(position=(1e-9, 0.0, 0.0))],
        is_closed_circuit=True,
    )
    result = advance(path, Segment.from_path(path, 0, 1), 0.0, 5.0, distance_epsilon=0.0)
    assert 0.0 <= result.t <= 1.0
    assert np.allclose(result.point, [0.0, 0.0, 0.0], atol=1e-6)


@pytest.mark.parametrize("laps", [1, 3, 1000])
def test_whole_laps_are_skipped(closed_path, laps):
    loop = sum(
        segment_length(Segment.from_path(closed_path, start, end))
        for start, end in ((0, 1), (1, 2), (2, 0))
    )
    short = advance(closed_path, first_segment(closed_path), 0.0, 5.0)
    long = advance(closed_path, first_segment(closed_path), 0.0, laps * loop + 5.0)

    assert long.index == short.index
    assert np.allclose(long.point, short.point, atol=1e-3)


if __name__ == "__main__":
    pytest.main([__file__])
