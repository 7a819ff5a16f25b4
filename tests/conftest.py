import numpy as np
import pytest

from curves import Segment
from models import Path, ReservedSlot, Waypoint


def straight_waypoint(x: float) -> Waypoint:
    # handles 1 m either side along X, so each 10 m segment stays on the X axis
    return Waypoint(
        position=(x, 0.0, 0.0),
        out_control_point=(x + 1.0, 0.0, 0.0),
        in_control_point=(x - 1.0, 0.0, 0.0),
    )


@pytest.fixture
def straight_segment():
    return Segment(
        p0=np.array([0.0, 0.0, 0.0]),
        p1=np.array([1.0, 0.0, 0.0]),
        p2=np.array([9.0, 0.0, 0.0]),
        p3=np.array([10.0, 0.0, 0.0]),
        start_index=0,
        end_index=1,
    )


@pytest.fixture
def curved_segment():
    # planar arc in XY, B' and B'' orthogonal at t = 0.5
    return Segment(
        p0=np.array([0.0, 0.0, 0.0]),
        p1=np.array([5.0, 0.0, 0.0]),
        p2=np.array([10.0, 5.0, 0.0]),
        p3=np.array([10.0, 10.0, 0.0]),
    )


@pytest.fixture
def open_path():
    return Path(waypoints=[straight_waypoint(0.0), straight_waypoint(10.0), straight_waypoint(20.0)])


@pytest.fixture
def closed_path():
    return Path(
        waypoints=[straight_waypoint(0.0), straight_waypoint(10.0), straight_waypoint(20.0)],
        is_closed_circuit=True,
    )


@pytest.fixture
def reserved_path():
    return Path(
        waypoints=[
            straight_waypoint(0.0),
            ReservedSlot(),
            straight_waypoint(10.0),
            ReservedSlot(),
            straight_waypoint(20.0),
        ]
    )


@pytest.fixture
def single_path():
    return Path(waypoints=[ReservedSlot(), Waypoint(position=(3.0, 4.0, 5.0))])
