from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True, eq=False)
class FrenetFrame:
    """
    Orthonormal frame describing the curve orientation at a point.

    Attributes:
        tangent (np.ndarray): Unit direction of travel, shape (3,).
        normal (np.ndarray): Unit Frenet normal (direction of B''), shape (3,).
        binormal (np.ndarray): tangent x normal, shape (3,).
    """
    tangent: np.ndarray
    normal: np.ndarray
    binormal: np.ndarray

    def to_dict(self) -> dict:
        return dict(
            tangent=self.tangent.tolist(),
            normal=self.normal.tolist(),
            binormal=self.binormal.tolist(),
        )


@dataclass(frozen=True, eq=False)
class ClosestPoint:
    """
    Closest point on a path to a target point.

    Attributes:
        point (np.ndarray): Position of the closest point, shape (3,).
        t (float): Segment-local t-value of the closest point.
        index (int): Slot index of the waypoint starting the segment.
    """
    point: np.ndarray
    t: float
    index: int

    def to_dict(self) -> dict:
        return dict(point=self.point.tolist(), t=self.t, index=self.index)


@dataclass(frozen=True, eq=False)
class MarchResult:
    """
    Point reached after travelling a given arc length along a path.

    Attributes:
        point (np.ndarray): Position of the new point, shape (3,).
        curvature (float): Path curvature K at the new point [1/m].
        index (int): Slot index of the waypoint starting the new segment.
        t (float): Segment-local t-value of the new point.
        reached_end (bool): True when an open path ran out before the full
            distance was travelled. The point is then the last waypoint.
    """
    point: np.ndarray
    curvature: float
    index: int
    t: float
    reached_end: bool = False

    def to_dict(self) -> dict:
        return dict(
            point=self.point.tolist(),
            curvature=self.curvature,
            index=self.index,
            t=self.t,
            reached_end=self.reached_end,
        )
