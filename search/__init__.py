# search/__init__.py

from .closest_point import closest_on_segment, closest_on_path, find_nearest_waypoint
from .marching import advance

__all__ = [
    "closest_on_segment",
    "closest_on_path",
    "find_nearest_waypoint",
    "advance",
]
