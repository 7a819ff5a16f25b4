# queries/__init__.py

from .api import (
    resolve_segment,
    point_on_path,
    frenet_frame,
    tangent,
    normal,
    curvature,
    curvature_in_plane,
    radius_of_curvature,
    velocity_at_point,
    closest_point_on_segment,
    closest_point,
    advance_by_distance,
    distance_between_waypoints,
    sample_array,
)
from .config import DEFAULT_CONFIG, PathQueryConfig
from .distances import path_distance, refresh_path_distances
from .errors import (
    IndexOutOfRangeError,
    InvalidPathError,
    NoNextWaypointError,
    PathError,
    UnassignedCursorError,
)

__all__ = [
    "resolve_segment",
    "point_on_path",
    "frenet_frame",
    "tangent",
    "normal",
    "curvature",
    "curvature_in_plane",
    "radius_of_curvature",
    "velocity_at_point",
    "closest_point_on_segment",
    "closest_point",
    "advance_by_distance",
    "distance_between_waypoints",
    "sample_array",
    "DEFAULT_CONFIG",
    "PathQueryConfig",
    "path_distance",
    "refresh_path_distances",
    "IndexOutOfRangeError",
    "InvalidPathError",
    "NoNextWaypointError",
    "PathError",
    "UnassignedCursorError",
]
