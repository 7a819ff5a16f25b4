# kinematics/velocity.py
import numpy as np

from models.waypoint import Path


def velocity_at(path: Path, world_point) -> np.ndarray:
    """
    World velocity of a point rigidly attached to the path frame.

    The path may sit on a moving platform (e.g. a docking station), so a
    point on it moves with the frame's linear velocity plus the rotational
    component:

        v = v_frame + omega x (p - anchor)

    Args:
        path: Path carrying `world_velocity`, `world_angular_velocity` and
            `anchor_point`.
        world_point: Point attached to the path frame, shape (3,).

    Returns:
        np.ndarray: Velocity [m/s], shape (3,).
    """
    radius = np.asarray(world_point, dtype=float) - path.anchor_point
    return path.world_velocity + np.cross(path.world_angular_velocity, radius)
