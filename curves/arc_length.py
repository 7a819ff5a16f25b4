# curves/arc_length.py
import numpy as np

from .bezier import position
from .segment import Segment


def segment_length(segment: Segment, t_start: float = 0.0, t_end: float = 1.0, line_segments: int = 10) -> float:
    """
    Approximate the arc length between two t-values with a polyline.

    Args:
        segment: Bezier segment to measure.
        t_start: Start t-value.
        t_end: End t-value.
        line_segments: Number of equal t steps. More steps, more accuracy.

    Returns:
        float: Sum of the straight-line distances between the samples.
    """
    if line_segments < 1:
        raise ValueError(f"line_segments must be >= 1, got {line_segments}")

    dt = (t_end - t_start) / line_segments
    distance = 0.0
    previous = position(segment, t_start)
    for i in range(1, line_segments + 1):
        current = position(segment, t_start + i * dt)
        distance += float(np.linalg.norm(current - previous))
        previous = current
    return distance


def estimate_line_segments(
    segment: Segment,
    known_distance: float = 0.0,
    estimate_segments: int = 8,
    path_precision: float = 0.5,
    max_precision_length: float = 0.5,
) -> int:
    """
    Number of polyline steps needed to measure a segment accurately.

    When the segment length is unknown (`known_distance <= 0`) a quick
    estimate is made first with `estimate_segments` steps. The result is
    never below `estimate_segments`.

    Args:
        segment: Bezier segment to measure.
        known_distance: Previously measured length, 0 if unknown.
        estimate_segments: Steps used for the quick estimate, also the minimum.
        path_precision: Precision factor in (0, 1].
        max_precision_length: Polyline step length at precision 1.
    """
    distance = known_distance
    if distance <= 0.0:
        distance = segment_length(segment, 0.0, 1.0, estimate_segments)

    # round half up
    n_segments = int(0.5 + path_precision * distance / max_precision_length)
    return max(n_segments, estimate_segments)
