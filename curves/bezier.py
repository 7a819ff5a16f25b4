# curves/bezier.py
"""
Closed-form evaluation of a single cubic Bezier segment.

    B(t)   = (1-t)^3 p0 + 3(1-t)^2 t p1 + 3(1-t) t^2 p2 + t^3 p3
    B'(t)  = 3(1-t)^2 (p1-p0) + 6(1-t) t (p2-p1) + 3 t^2 (p3-p2)
    B''(t) = 6(1-t) (p2-2p1+p0) + 6 t (p3-2p2+p1)
    K      = |B' x B''| / |B'|^3

p0 and p3 are the waypoint positions, p1 is the outgoing handle of the start
waypoint (direction at p0 is towards p1), p2 the incoming handle of the end
waypoint (direction at p3 is away from p2).

None of these functions guard against |B'| = 0 (a cusp, or coincident
control points at an end of the segment): the result is nan/inf.
"""
import numpy as np

from models.results import FrenetFrame
from .segment import Segment


def position(segment: Segment, t: float) -> np.ndarray:
    mt = 1.0 - t
    return (
        mt * mt * mt * segment.p0
        + 3.0 * mt * mt * t * segment.p1
        + 3.0 * mt * t * t * segment.p2
        + t * t * t * segment.p3
    )


def first_derivative(segment: Segment, t: float) -> np.ndarray:
    """Unnormalised tangent dB/dt."""
    mt = 1.0 - t
    return (
        3.0 * mt * mt * (segment.p1 - segment.p0)
        + 6.0 * mt * t * (segment.p2 - segment.p1)
        + 3.0 * t * t * (segment.p3 - segment.p2)
    )


def second_derivative(segment: Segment, t: float) -> np.ndarray:
    return (
        6.0 * (1.0 - t) * (segment.p2 - 2.0 * segment.p1 + segment.p0)
        + 6.0 * t * (segment.p3 - 2.0 * segment.p2 + segment.p1)
    )


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.sqrt(np.dot(v, v))


def tangent(segment: Segment, t: float) -> np.ndarray:
    return _normalize(first_derivative(segment, t))


def normal(segment: Segment, t: float) -> np.ndarray:
    """
    Unit Frenet normal.

    Taken as the normalised second derivative, which matches the principal
    normal wherever B' and B'' are orthogonal. On a straight segment B'' may
    be zero and the result is nan.
    """
    return _normalize(second_derivative(segment, t))


def frenet_frame(segment: Segment, t: float) -> FrenetFrame:
    tan = tangent(segment, t)
    nor = normal(segment, t)
    # cross product of two unit vectors, no renormalisation
    return FrenetFrame(tangent=tan, normal=nor, binormal=np.cross(tan, nor))


def _curvature_from_derivatives(d1: np.ndarray, d2: np.ndarray) -> float:
    speed = np.sqrt(np.dot(d1, d1))
    return float(np.linalg.norm(np.cross(d1, d2)) / (speed * speed * speed))


def curvature(segment: Segment, t: float) -> float:
    """
    Curvature K = |B' x B''| / |B'|^3 at t, in 1/length units.

    Use `radius_of_curvature` for the reciprocal.
    """
    return _curvature_from_derivatives(first_derivative(segment, t), second_derivative(segment, t))


def project_on_plane(v: np.ndarray, plane_normal: np.ndarray) -> np.ndarray:
    """v - (v.n) n, with n the unit plane normal."""
    return v - np.dot(v, plane_normal) * plane_normal


def curvature_in_plane(segment: Segment, t: float, plane_normal) -> float:
    """
    Curvature of the curve projected on the plane orthogonal to `plane_normal`.

    Useful for the turn rate seen from above (plane_normal = up axis).
    The plane normal is normalised before projecting.
    """
    n = _normalize(np.asarray(plane_normal, dtype=float))
    d1 = project_on_plane(first_derivative(segment, t), n)
    d2 = project_on_plane(second_derivative(segment, t), n)
    return _curvature_from_derivatives(d1, d2)


def radius_of_curvature(kappa: float) -> float:
    """Radius of the osculating circle, inf for a straight line."""
    if kappa == 0.0:
        return float("inf")
    return 1.0 / kappa
