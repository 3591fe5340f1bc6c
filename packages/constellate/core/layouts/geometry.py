"""Shared vector geometry for layout strategies.

Points and directions are plain length-3 numpy arrays. Strategies convert
back to float tuples when building LayoutTarget values.
"""

from __future__ import annotations

import math

import numpy as np

from constellate.core.layouts.models import Vec3

_EPSILON = 1e-12


def as_vector(point: Vec3 | np.ndarray) -> np.ndarray:
    """Convert a 3-tuple or array to a float64 vector."""
    return np.asarray(point, dtype=np.float64).reshape(3)


def as_tuple(vector: np.ndarray) -> Vec3:
    """Convert a vector to a plain (x, y, z) float tuple."""
    return (float(vector[0]), float(vector[1]), float(vector[2]))


def normalize(vector: np.ndarray) -> np.ndarray:
    """Return the unit vector pointing along vector.

    A zero-length vector is returned unchanged rather than divided by zero.
    """
    length = float(np.linalg.norm(vector))
    if length < _EPSILON:
        return np.zeros(3)
    result: np.ndarray = vector / length
    return result


def face_normal(v1: np.ndarray, v2: np.ndarray, v3: np.ndarray) -> np.ndarray:
    """Compute the unit normal of triangle (v1, v2, v3).

    The normal is (v2 - v1) x (v3 - v1), so its direction follows the
    winding order of the corners.

    Args:
        v1: First corner.
        v2: Second corner.
        v3: Third corner.

    Returns:
        Unit normal vector.
    """
    return normalize(np.cross(v2 - v1, v3 - v1))


def outward_face_normal(
    v1: np.ndarray, v2: np.ndarray, v3: np.ndarray, solid_center: np.ndarray
) -> np.ndarray:
    """Compute the face normal that points away from a solid's center.

    Args:
        v1: First corner.
        v2: Second corner.
        v3: Third corner.
        solid_center: Any interior point of the convex solid the face bounds.

    Returns:
        Unit normal oriented away from solid_center.
    """
    normal = face_normal(v1, v2, v3)
    face_center = (v1 + v2 + v3) / 3.0
    if float(np.dot(normal, face_center - solid_center)) < 0.0:
        normal = -normal
    return normal


def barycentric_point(
    u: float, v: float, w: float, v1: np.ndarray, v2: np.ndarray, v3: np.ndarray
) -> np.ndarray:
    """Interpolate u*v1 + v*v2 + w*v3."""
    result: np.ndarray = u * v1 + v * v2 + w * v3
    return result


def barycentric_coordinates(
    point: np.ndarray, v1: np.ndarray, v2: np.ndarray, v3: np.ndarray
) -> tuple[float, float, float]:
    """Project point onto the plane of a triangle and return its weights.

    The result (u, v, w) satisfies u + v + w == 1 and
    u*v1 + v*v2 + w*v3 == projection of point onto the triangle's plane.
    All three weights are >= 0 exactly when the projection lies inside
    the triangle.

    Args:
        point: Point to express.
        v1: First corner.
        v2: Second corner.
        v3: Third corner.

    Returns:
        Barycentric weights (u, v, w) for (v1, v2, v3).
    """
    e1 = v1 - v3
    e2 = v2 - v3
    d = point - v3
    d11 = float(np.dot(e1, e1))
    d12 = float(np.dot(e1, e2))
    d22 = float(np.dot(e2, e2))
    d1p = float(np.dot(e1, d))
    d2p = float(np.dot(e2, d))
    denom = d11 * d22 - d12 * d12
    if abs(denom) < _EPSILON:
        raise ValueError("Degenerate triangle has no barycentric frame")
    u = (d22 * d1p - d12 * d2p) / denom
    v = (d11 * d2p - d12 * d1p) / denom
    return (u, v, 1.0 - u - v)


def orientation_towards(direction: np.ndarray) -> Vec3:
    """Euler rotation that turns an entity to face along direction.

    pitch is the angle between direction and the horizontal XZ plane,
    yaw is the heading of direction's horizontal projection measured
    from +Z towards +X. Roll is always zero.

    Args:
        direction: Facing direction; need not be normalised.

    Returns:
        (pitch, yaw, 0.0) in radians.
    """
    x, y, z = (float(c) for c in direction)
    pitch = math.atan2(y, math.hypot(x, z))
    yaw = math.atan2(x, z)
    return (pitch, yaw, 0.0)
