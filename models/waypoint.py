from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, Union
import numpy as np


def as_vector(value) -> np.ndarray:
    """Return a read-only float copy of a 3D point or vector."""
    vec = np.array(value, dtype=float).reshape(3)
    vec.setflags(write=False)
    return vec


@dataclass(frozen=True, eq=False)
class Waypoint:
    """
    Assigned path control point with Bezier handles.

    Attributes:
        position: World-space position of the waypoint, shape (3,).
        out_control_point: Outgoing Bezier handle (direction of departure).
            Defaults to `position`.
        in_control_point: Incoming Bezier handle (direction of arrival).
            Defaults to `position`.
        distance_from_previous_assigned: Cached arc length to the previous
            assigned waypoint. On a closed circuit the first assigned
            waypoint holds the length of the wrap-around segment.
        distance_cumulative: Cached arc length from the start of the path.
            On a closed circuit the first assigned waypoint holds the total
            loop length.
    """
    position: np.ndarray
    out_control_point: Optional[np.ndarray] = None
    in_control_point: Optional[np.ndarray] = None
    distance_from_previous_assigned: float = 0.0
    distance_cumulative: float = 0.0

    def __post_init__(self):
        position = as_vector(self.position)
        out_cp = position if self.out_control_point is None else as_vector(self.out_control_point)
        in_cp = position if self.in_control_point is None else as_vector(self.in_control_point)
        # frozen dataclass: bypass __setattr__ to store the normalised arrays
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "out_control_point", out_cp)
        object.__setattr__(self, "in_control_point", in_cp)
        object.__setattr__(self, "distance_from_previous_assigned", float(self.distance_from_previous_assigned))
        object.__setattr__(self, "distance_cumulative", float(self.distance_cumulative))

    def with_distances(self, from_previous: float, cumulative: float) -> "Waypoint":
        return replace(
            self,
            distance_from_previous_assigned=from_previous,
            distance_cumulative=cumulative,
        )


@dataclass(frozen=True)
class ReservedSlot:
    """A reserved but empty waypoint slot. Skipped by every path query."""


Slot = Union[Waypoint, ReservedSlot]


def _zero_vector() -> np.ndarray:
    return as_vector((0.0, 0.0, 0.0))


@dataclass(frozen=True, eq=False)
class Path:
    """
    Ordered sequence of waypoint slots plus the rigid frame it is attached to.

    Attributes:
        waypoints: Slots in insertion order. Each one is a `Waypoint` or a
            `ReservedSlot`.
        is_closed_circuit: Whether the last assigned waypoint connects back
            to the first one.
        anchor_point: Origin of the moving frame (e.g. a docking station).
        world_velocity: Linear velocity of the frame [m/s].
        world_angular_velocity: Angular velocity of the frame [rad/s].
        total_distance: Cached spline length of the whole path.
    """
    waypoints: Tuple[Slot, ...] = ()
    is_closed_circuit: bool = False
    anchor_point: np.ndarray = field(default_factory=_zero_vector)
    world_velocity: np.ndarray = field(default_factory=_zero_vector)
    world_angular_velocity: np.ndarray = field(default_factory=_zero_vector)
    total_distance: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "waypoints", tuple(self.waypoints or ()))
        object.__setattr__(self, "anchor_point", as_vector(self.anchor_point))
        object.__setattr__(self, "world_velocity", as_vector(self.world_velocity))
        object.__setattr__(self, "world_angular_velocity", as_vector(self.world_angular_velocity))
        object.__setattr__(self, "total_distance", float(self.total_distance))

    def __len__(self) -> int:
        return len(self.waypoints)

    def assigned_indices(self) -> Tuple[int, ...]:
        return tuple(i for i, slot in enumerate(self.waypoints) if is_assigned(slot))

    @property
    def assigned_count(self) -> int:
        return sum(1 for slot in self.waypoints if is_assigned(slot))


def is_assigned(slot) -> bool:
    return isinstance(slot, Waypoint)
