# queries/distances.py
"""
Precomputation of the cached distances stored on waypoints.

The marcher skips whole segments using `distance_from_previous_assigned`, so
refreshing the caches after editing a path makes long advances cheaper.
"""
import dataclasses
import logging
from typing import Optional

from curves.arc_length import estimate_line_segments, segment_length
from curves.segment import Segment
from models.index import first_assigned_index, next_assigned_index
from models.waypoint import Path, is_assigned

from .config import DEFAULT_CONFIG, PathQueryConfig

logger = logging.getLogger(__name__)


def _measure(path: Path, start: int, end: int, config: PathQueryConfig) -> float:
    segment = Segment.from_path(path, start, end)
    known = path.waypoints[end].distance_from_previous_assigned
    n_segments = estimate_line_segments(
        segment,
        known_distance=known,
        estimate_segments=config.estimate_segments,
        path_precision=config.path_precision,
        max_precision_length=config.max_precision_length,
    )
    return segment_length(segment, 0.0, 1.0, n_segments)


def refresh_path_distances(path: Optional[Path], config: PathQueryConfig = DEFAULT_CONFIG) -> Optional[Path]:
    """
    Return a copy of `path` with fresh cached distances.

    Every assigned waypoint gets the arc length from the previous assigned
    waypoint and from the start of the path. On a closed circuit the first
    assigned waypoint holds the wrap-around segment length and the total loop
    length. `total_distance` of the returned path is the spline length.

    Args:
        path: Path to measure. Left untouched.
        config: Precision settings of the measurement.

    Returns:
        Optional[Path]: New path with updated waypoints and total distance,
            None when no path is given.
    """
    if path is None:
        return None
    slots = list(path.waypoints)
    first = first_assigned_index(path)
    if first is None:
        return dataclasses.replace(path, total_distance=0.0)

    slots[first] = slots[first].with_distances(0.0, 0.0)
    cumulative = 0.0
    current = first
    while True:
        following = next_assigned_index(path, current, False)
        if following is None:
            break
        length = _measure(path, current, following, config)
        cumulative += length
        slots[following] = slots[following].with_distances(length, cumulative)
        current = following

    if path.is_closed_circuit and current != first:
        length = _measure(path, current, first, config)
        cumulative += length
        slots[first] = slots[first].with_distances(length, cumulative)

    logger.debug("Refreshed distances of %d waypoints, total %.3f", path.assigned_count, cumulative)
    return dataclasses.replace(path, waypoints=tuple(slots), total_distance=cumulative)


def path_distance(path: Path, from_index: int, to_index: int) -> float:
    """
    Distance along the path between two assigned waypoints, from the cached
    cumulative distances. A `to_index` before `from_index` means the path is
    followed past its end and wraps back to the start.

    Returns 0.0 for equal, out-of-range or unassigned indices.
    """
    if path is None or from_index == to_index:
        return 0.0
    n = len(path.waypoints)
    for index in (from_index, to_index):
        if index < 0 or index >= n or not is_assigned(path.waypoints[index]):
            return 0.0

    first = first_assigned_index(path)

    def cumulative(index: int) -> float:
        # on a closed circuit the first waypoint stores the loop length
        if index == first:
            return 0.0
        return path.waypoints[index].distance_cumulative

    if to_index > from_index:
        return cumulative(to_index) - cumulative(from_index)
    return path.total_distance - cumulative(from_index) + cumulative(to_index)
