# queries/api.py
"""
Public path queries.

Every query takes a path, a cursor (`last_index`: the slot index of the
waypoint starting the current segment) and a segment-local t-value. Queries
never raise for paths they cannot answer (no waypoints, cursor out of range,
open path exhausted): they log the reason at DEBUG level and return None.
`resolve_segment` exposes the same checks as exceptions for callers that
need the reason.
"""
import functools
import logging
from typing import Optional
import numpy as np

from curves import bezier
from curves.arc_length import segment_length
from curves.segment import Segment
from kinematics.velocity import velocity_at
from models.index import next_assigned_index
from models.results import ClosestPoint, FrenetFrame, MarchResult
from models.waypoint import Path, is_assigned
from search.closest_point import closest_on_path, closest_on_segment
from search.marching import advance

from .config import DEFAULT_CONFIG, PathQueryConfig
from .errors import (
    IndexOutOfRangeError,
    InvalidPathError,
    NoNextWaypointError,
    PathError,
    UnassignedCursorError,
)

logger = logging.getLogger(__name__)


def _none_on_path_error(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PathError as err:
            logger.debug("%s rejected: %s (%s)", func.__name__, err, type(err).__name__)
            return None
    return wrapper


def _check_path(path: Path, min_assigned: int) -> int:
    if path is None:
        raise InvalidPathError("path is None")
    count = path.assigned_count
    if count < min_assigned:
        raise InvalidPathError(f"{count} assigned waypoint(s), at least {min_assigned} required")
    return count


def _single_waypoint_index(path: Path) -> Optional[int]:
    """Index of the only assigned waypoint, None if there are several."""
    if _check_path(path, 1) == 1:
        return path.assigned_indices()[0]
    return None


def _clamp_t(t: float) -> float:
    return float(np.clip(t, 0.0, 1.0))


def resolve_segment(path: Path, last_index: int, min_assigned: int = 2) -> Segment:
    """
    Segment starting at the cursor.

    Raises:
        InvalidPathError: Path is None or has fewer than `min_assigned`
            assigned waypoints.
        IndexOutOfRangeError: Cursor outside the waypoint list.
        UnassignedCursorError: Cursor on a reserved slot.
        NoNextWaypointError: No assigned waypoint after the cursor.
    """
    _check_path(path, min_assigned)
    n = len(path.waypoints)
    if last_index < 0 or last_index >= n:
        raise IndexOutOfRangeError(f"cursor {last_index} outside [0, {n})")
    if not is_assigned(path.waypoints[last_index]):
        raise UnassignedCursorError(f"cursor {last_index} is a reserved slot")

    next_index = next_assigned_index(path, last_index, True)
    if next_index is None:
        raise NoNextWaypointError(f"no assigned waypoint after {last_index}")
    return Segment.from_path(path, last_index, next_index)


# ============================================================================
# POINT AND FRAME QUERIES
# ============================================================================

@_none_on_path_error
def point_on_path(path: Path, last_index: int, t: float) -> Optional[np.ndarray]:
    """
    Position on the path at (last_index, t).

    A path with a single assigned waypoint returns that waypoint whatever
    the cursor.
    """
    single = _single_waypoint_index(path)
    if single is not None:
        return path.waypoints[single].position.copy()
    segment = resolve_segment(path, last_index)
    return bezier.position(segment, _clamp_t(t))


@_none_on_path_error
def frenet_frame(path: Path, last_index: int, t: float) -> Optional[FrenetFrame]:
    """Tangent, normal and binormal at (last_index, t) in one evaluation."""
    return bezier.frenet_frame(resolve_segment(path, last_index), _clamp_t(t))


@_none_on_path_error
def tangent(path: Path, last_index: int, t: float) -> Optional[np.ndarray]:
    return bezier.tangent(resolve_segment(path, last_index), _clamp_t(t))


@_none_on_path_error
def normal(path: Path, last_index: int, t: float) -> Optional[np.ndarray]:
    return bezier.normal(resolve_segment(path, last_index), _clamp_t(t))


@_none_on_path_error
def curvature(path: Path, last_index: int, t: float) -> Optional[float]:
    """
    Curvature K [1/m] at (last_index, t).

    Precondition: the segment has no cusp at t (|B'| > 0), otherwise the
    result is nan or inf.
    """
    return bezier.curvature(resolve_segment(path, last_index), _clamp_t(t))


@_none_on_path_error
def curvature_in_plane(
    path: Path,
    last_index: int,
    t: float,
    plane_normal,
) -> Optional[float]:
    """Curvature K [1/m] of the path projected on the plane orthogonal to `plane_normal`."""
    return bezier.curvature_in_plane(resolve_segment(path, last_index), _clamp_t(t), plane_normal)


@_none_on_path_error
def radius_of_curvature(path: Path, last_index: int, t: float) -> Optional[float]:
    """Radius of curvature 1/K [m] at (last_index, t); inf on a straight section."""
    return bezier.radius_of_curvature(bezier.curvature(resolve_segment(path, last_index), _clamp_t(t)))


@_none_on_path_error
def velocity_at_point(path: Path, point) -> Optional[np.ndarray]:
    """
    World velocity of a point carried by the (possibly moving) path frame.

    Like every query it needs at least one assigned waypoint.
    """
    _check_path(path, 1)
    return velocity_at(path, point)


# ============================================================================
# SEARCH QUERIES
# ============================================================================

@_none_on_path_error
def closest_point_on_segment(
    path: Path,
    last_index: int,
    target,
    config: PathQueryConfig = DEFAULT_CONFIG,
) -> Optional[ClosestPoint]:
    """Closest point to `target` on the segment starting at the cursor."""
    single = _single_waypoint_index(path)
    if single is not None:
        return ClosestPoint(point=path.waypoints[single].position.copy(), t=0.0, index=single)

    segment = resolve_segment(path, last_index)
    point, t = closest_on_segment(segment, target, config.coarse_samples, config.t_accuracy)
    return ClosestPoint(point=point, t=t, index=last_index)


@_none_on_path_error
def closest_point(path: Path, target, config: PathQueryConfig = DEFAULT_CONFIG) -> Optional[ClosestPoint]:
    """
    Closest point to `target` on the whole path, when the cursor is unknown.

    The returned `index` is the cursor to use for later queries.
    """
    _check_path(path, 1)
    return closest_on_path(path, target, config.coarse_samples, config.t_accuracy)


@_none_on_path_error
def advance_by_distance(
    path: Path,
    last_index: int,
    t: float,
    distance: float,
    iterations: int = 10,
    config: PathQueryConfig = DEFAULT_CONFIG,
) -> Optional[MarchResult]:
    """
    Point `distance` further along the path from (last_index, t).

    Args:
        path: Path to follow.
        last_index: Cursor of the start point.
        t: t-value of the start point.
        distance: Arc length to travel forward.
        iterations: Approximate number of polyline steps in the final segment.
        config: Numerical tuning.

    Returns:
        Optional[MarchResult]: New point, curvature there, new cursor and
            t-value; `reached_end` is set when an open path runs out.
    """
    single = _single_waypoint_index(path)
    if single is not None:
        return MarchResult(point=path.waypoints[single].position.copy(), curvature=0.0, index=single, t=0.0)

    segment = resolve_segment(path, last_index)
    return advance(
        path,
        segment,
        _clamp_t(t),
        distance,
        iterations=iterations,
        line_segments=config.line_segments,
        min_t_step=config.min_t_step,
        distance_epsilon=config.distance_epsilon,
    )


@_none_on_path_error
def distance_between_waypoints(
    path: Path,
    last_index: int,
    sample_count: int = 10,
) -> Optional[float]:
    """Arc length of the segment starting at the cursor, measured with `sample_count` steps."""
    return segment_length(resolve_segment(path, last_index), 0.0, 1.0, sample_count)


@_none_on_path_error
def sample_array(path: Path, samples_per_segment: int = 20) -> Optional[np.ndarray]:
    """
    Sample every segment of the path.

    Returns a numpy array of shape (N, 6):
    [index, t, x, y, z, kappa]
    with `samples_per_segment + 1` rows per segment (both ends included).
    """
    if samples_per_segment < 1:
        raise ValueError(f"samples_per_segment must be >= 1, got {samples_per_segment}")
    _check_path(path, 2)

    rows = []
    for start in path.assigned_indices():
        end = next_assigned_index(path, start, True)
        if end is None:
            continue
        segment = Segment.from_path(path, start, end)
        for t in np.linspace(0.0, 1.0, samples_per_segment + 1):
            p = bezier.position(segment, t)
            rows.append([start, t, p[0], p[1], p[2], bezier.curvature(segment, t)])
    return np.array(rows)
