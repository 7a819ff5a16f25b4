# curves/segment.py
from dataclasses import dataclass
import numpy as np

from models.waypoint import Path, Waypoint


@dataclass(frozen=True, eq=False)
class Segment:
    """
    Cubic Bezier segment between two consecutive assigned waypoints.

    Attributes:
        p0: Start waypoint position.
        p1: Outgoing control point of the start waypoint.
        p2: Incoming control point of the end waypoint.
        p3: End waypoint position.
        start_index: Slot index of the start waypoint (the cursor).
        end_index: Slot index of the end waypoint.
    """
    p0: np.ndarray
    p1: np.ndarray
    p2: np.ndarray
    p3: np.ndarray
    start_index: int = 0
    end_index: int = 0

    @classmethod
    def from_waypoints(cls, start: Waypoint, end: Waypoint, start_index: int = 0, end_index: int = 0) -> "Segment":
        return cls(
            p0=start.position,
            p1=start.out_control_point,
            p2=end.in_control_point,
            p3=end.position,
            start_index=start_index,
            end_index=end_index,
        )

    @classmethod
    def from_path(cls, path: Path, start_index: int, end_index: int) -> "Segment":
        """Build the segment for two assigned slot indices (not validated here)."""
        return cls.from_waypoints(
            path.waypoints[start_index],
            path.waypoints[end_index],
            start_index,
            end_index,
        )

    def control_points(self) -> np.ndarray:
        """Control polygon as an array of shape (4, 3)."""
        return np.stack([self.p0, self.p1, self.p2, self.p3])
