# search/closest_point.py
from typing import Tuple
import numpy as np

from curves.bezier import position
from curves.segment import Segment
from models.index import next_assigned_index, previous_assigned_index
from models.results import ClosestPoint
from models.waypoint import Path


def _sqr_distance(a: np.ndarray, b: np.ndarray) -> float:
    d = a - b
    return float(np.dot(d, d))


def closest_on_segment(
    segment: Segment,
    target,
    coarse_samples: int = 5,
    t_accuracy: float = 1e-4,
) -> Tuple[np.ndarray, float]:
    """
    Closest point of a single segment to a target point.

    A coarse pass over `coarse_samples + 1` evenly spaced t-values brackets
    the minimum, then a local search refines it: probe t +/- window, adopt
    any closer probe (keeping the window), otherwise halve the window, until
    the window drops below `t_accuracy`.

    This is a local method. If the distance to the target has several minima
    inside one coarse interval (sharp S-bends), the result may be a local
    minimum rather than the global one.

    Args:
        segment: Bezier segment to search.
        target: Point to match, shape (3,).
        coarse_samples: Number of coarse intervals (6 samples for 5).
        t_accuracy: Half-window size at which refinement stops.

    Returns:
        (point, t): Closest point found and its t-value in [0, 1].
    """
    target = np.asarray(target, dtype=float)
    step = 1.0 / coarse_samples

    best_t = 0.0
    best_point = position(segment, 0.0)
    best_sqr = _sqr_distance(best_point, target)
    for i in range(1, coarse_samples + 1):
        t = i * step
        point = position(segment, t)
        sqr = _sqr_distance(point, target)
        if sqr < best_sqr:
            best_t, best_point, best_sqr = t, point, sqr

    window = 0.5 * step
    while window > t_accuracy:
        found_closer = False
        new_t = best_t
        for t in (min(best_t + window, 1.0), max(best_t - window, 0.0)):
            point = position(segment, t)
            sqr = _sqr_distance(point, target)
            if sqr < best_sqr:
                new_t, best_point, best_sqr = t, point, sqr
                found_closer = True

        if found_closer:
            best_t = new_t
        else:
            window *= 0.5

    return best_point, best_t


def find_nearest_waypoint(path: Path, target) -> int:
    """Slot index of the assigned waypoint whose position is nearest to target."""
    indices = path.assigned_indices()
    positions = np.stack([path.waypoints[i].position for i in indices])
    diffs = positions - np.asarray(target, dtype=float)
    sqr_dists = np.einsum("ij,ij->i", diffs, diffs)
    return indices[int(np.argmin(sqr_dists))]


def closest_on_path(
    path: Path,
    target,
    coarse_samples: int = 5,
    t_accuracy: float = 1e-4,
) -> ClosestPoint:
    """
    Closest point of a whole path to a target, without a known cursor.

    The nearest waypoint position is found first. Of its two assigned
    neighbours, the one nearer to the target picks the segment (before or
    after the nearest waypoint), which is then refined with
    `closest_on_segment`. This costs O(n) waypoint checks plus one segment
    refinement, at the price of global correctness: a segment that passes
    close to the target between two distant waypoints can be missed.

    The path must hold at least one assigned waypoint.
    """
    target = np.asarray(target, dtype=float)
    nearest = find_nearest_waypoint(path, target)

    if path.assigned_count == 1:
        return ClosestPoint(point=path.waypoints[nearest].position.copy(), t=0.0, index=nearest)

    prev_idx = previous_assigned_index(path, nearest, True)
    next_idx = next_assigned_index(path, nearest, True)

    sqr_prev = np.inf if prev_idx is None else _sqr_distance(path.waypoints[prev_idx].position, target)
    sqr_next = np.inf if next_idx is None else _sqr_distance(path.waypoints[next_idx].position, target)

    if sqr_prev < sqr_next:
        start_idx, end_idx = prev_idx, nearest
    else:
        start_idx, end_idx = nearest, next_idx

    segment = Segment.from_path(path, start_idx, end_idx)
    point, t = closest_on_segment(segment, target, coarse_samples, t_accuracy)
    return ClosestPoint(point=point, t=t, index=start_idx)
