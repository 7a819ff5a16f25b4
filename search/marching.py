# search/marching.py
import logging
import numpy as np

from curves.arc_length import segment_length
from curves.bezier import curvature, position
from curves.segment import Segment
from models.index import last_assigned_index, next_assigned_index, previous_assigned_index
from models.results import MarchResult
from models.waypoint import Path

logger = logging.getLogger(__name__)


def _result_at(segment: Segment, t: float, reached_end: bool = False) -> MarchResult:
    return MarchResult(
        point=position(segment, t),
        curvature=curvature(segment, t),
        index=segment.start_index,
        t=t,
        reached_end=reached_end,
    )


def _march_within_segment(
    segment: Segment,
    start_t: float,
    distance: float,
    distance_to_end: float,
    iterations: int,
    min_t_step: float,
) -> float:
    """
    t-value reached after travelling `distance` from `start_t` inside one segment.

    The step size assumes arc length is roughly linear in t, so that about
    `iterations` polyline steps cover the distance. The final t is linearly
    interpolated between the last two samples.
    """
    expected_t = start_t + (1.0 - start_t) * (distance / distance_to_end) if distance_to_end > 0.0 else 1.0
    t_step = max((expected_t - start_t) / iterations, min_t_step)

    t_prev = start_t
    p_prev = position(segment, t_prev)
    travelled = 0.0
    while True:
        t_next = min(t_prev + t_step, 1.0)
        p_next = position(segment, t_next)
        step_length = float(np.linalg.norm(p_next - p_prev))

        if travelled + step_length >= distance or t_next >= 1.0:
            if step_length > 0.0:
                fraction = min(max((distance - travelled) / step_length, 0.0), 1.0)
            else:
                fraction = 1.0
            return t_prev + (t_next - t_prev) * fraction

        travelled += step_length
        t_prev, p_prev = t_next, p_next


def advance(
    path: Path,
    segment: Segment,
    start_t: float,
    added_distance: float,
    iterations: int = 10,
    line_segments: int = 10,
    min_t_step: float = 1e-3,
    distance_epsilon: float = 1e-6,
) -> MarchResult:
    """
    Locate the point `added_distance` further along the path.

    Whole segments are skipped using the cached
    `distance_from_previous_assigned` of each waypoint (sampled when the
    cache is empty), then the remaining distance is marched inside the
    target segment with roughly `iterations` polyline steps. On an open
    path the march stops at the last assigned waypoint with
    `reached_end=True`. On a closed circuit whole laps are skipped, and a
    circuit no longer than `distance_epsilon` stops after one lap.

    Args:
        path: Path being followed.
        segment: Segment holding the start point (already resolved).
        start_t: t-value of the start point in `segment`.
        added_distance: Arc length to travel forward.
        iterations: Approximate number of polyline steps in the last segment.
        line_segments: Polyline steps used to measure the rest of the first
            segment and any segment without a cached length.
        min_t_step: Smallest t increment of the march.
        distance_epsilon: Distances at or below this are treated as zero.

    Returns:
        MarchResult: position, curvature, cursor and t of the new point.
    """
    if added_distance <= distance_epsilon:
        return _result_at(segment, start_t)

    iterations = max(1, int(iterations))
    last_idx = last_assigned_index(path)
    remaining = added_distance
    t = start_t
    distance_to_next = segment_length(segment, t, 1.0, line_segments)
    # first waypoint reached on a closed circuit, and the length covered since
    lap_start = None
    lap_length = 0.0

    while distance_to_next < remaining:
        if not path.is_closed_circuit and segment.end_index == last_idx:
            logger.debug(
                "Reached end of open path at waypoint %d with %.3f distance left",
                last_idx, remaining - distance_to_next,
            )
            end_start = previous_assigned_index(path, last_idx, False)
            return _result_at(Segment.from_path(path, end_start, last_idx), 1.0, reached_end=True)

        remaining -= distance_to_next
        start_idx = segment.end_index
        segment = Segment.from_path(path, start_idx, next_assigned_index(path, start_idx, True))
        t = 0.0

        distance_to_next = path.waypoints[segment.end_index].distance_from_previous_assigned
        if distance_to_next <= 0.0:
            distance_to_next = segment_length(segment, 0.0, 1.0, line_segments)

        if path.is_closed_circuit:
            if lap_start is None:
                lap_start = start_idx
            elif start_idx == lap_start:
                if lap_length <= distance_epsilon:
                    logger.debug("Closed circuit of length %.3g, stopping after one lap", lap_length)
                    return _result_at(segment, 0.0)
                # whole laps bring the march back here
                remaining = float(np.fmod(remaining, lap_length))
                lap_length = 0.0
            lap_length += distance_to_next

    new_t = _march_within_segment(segment, t, remaining, distance_to_next, iterations, min_t_step)
    return _result_at(segment, new_t)
