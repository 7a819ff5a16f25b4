# curves/__init__.py

from .segment import Segment
from .bezier import (
    FrenetFrame,
    position,
    first_derivative,
    second_derivative,
    tangent,
    normal,
    frenet_frame,
    curvature,
    curvature_in_plane,
    project_on_plane,
    radius_of_curvature,
)
from .arc_length import segment_length, estimate_line_segments

__all__ = [
    "Segment",
    "FrenetFrame",
    "position",
    "first_derivative",
    "second_derivative",
    "tangent",
    "normal",
    "frenet_frame",
    "curvature",
    "curvature_in_plane",
    "project_on_plane",
    "radius_of_curvature",
    "segment_length",
    "estimate_line_segments",
]
