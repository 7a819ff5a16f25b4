# models/__init__.py

from .waypoint import Path, ReservedSlot, Slot, Waypoint, as_vector, is_assigned
from .index import (
    next_assigned_index,
    previous_assigned_index,
    first_assigned_index,
    last_assigned_index,
)
from .results import ClosestPoint, FrenetFrame, MarchResult

__all__ = [
    "Path",
    "ReservedSlot",
    "Slot",
    "Waypoint",
    "as_vector",
    "is_assigned",
    "next_assigned_index",
    "previous_assigned_index",
    "first_assigned_index",
    "last_assigned_index",
    "ClosestPoint",
    "FrenetFrame",
    "MarchResult",
]
