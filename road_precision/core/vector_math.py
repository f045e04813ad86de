"""2D/3D vector math and direction utilities.

Directions used for angle measurement live in the horizontal plane: a
world point ``(x, y, z)`` projects to the planar vector ``(x, z)``.
"""

from __future__ import annotations

import math

from ..models.types import Point3D, Vector2D, Vector3D
from .tolerances import MIN_SEGMENT_LENGTH, ZERO_MAGNITUDE


def planar(v: Point3D | Vector3D) -> Vector2D:
    """Project a 3D point or vector onto the horizontal plane."""
    return (v[0], v[2])


def dot_2d(v1: Vector2D, v2: Vector2D) -> float:
    return v1[0] * v2[0] + v1[1] * v2[1]


def length_2d(v: Vector2D) -> float:
    return math.hypot(v[0], v[1])


def subtract(p1: Point3D, p2: Point3D) -> Vector3D:
    """Return ``p1 - p2``."""
    return (p1[0] - p2[0], p1[1] - p2[1], p1[2] - p2[2])


def negate(v: Vector3D) -> Vector3D:
    return (-v[0], -v[1], -v[2])


def perpendicular_2d(v: Vector2D) -> Vector2D:
    """Rotate a planar vector 90 degrees counter-clockwise."""
    return (-v[1], v[0])


def distance_between_points(p1: Point3D, p2: Point3D) -> float:
    """
    Calculate the Euclidean distance between two 3D points.

    Args:
        p1: First point (x, y, z)
        p2: Second point (x, y, z)

    Returns:
        Distance between points
    """
    return math.sqrt(
        (p2[0] - p1[0])**2 +
        (p2[1] - p1[1])**2 +
        (p2[2] - p1[2])**2
    )


def planar_distance(p1: Point3D, p2: Point3D) -> float:
    """Distance between two points ignoring elevation."""
    return math.hypot(p2[0] - p1[0], p2[2] - p1[2])


def normalize_safe(v: Vector2D) -> Vector2D | None:
    """
    Normalize a planar vector.

    Args:
        v: Planar vector

    Returns:
        Unit vector, or None if the vector is (near) zero length
    """
    mag = length_2d(v)
    if mag < ZERO_MAGNITUDE:
        return None
    return (v[0] / mag, v[1] / mag)


def safe_direction(start: Point3D, end: Point3D) -> Vector2D | None:
    """
    Planar unit direction from ``start`` towards ``end``.

    Args:
        start: Segment start point
        end: Segment end point

    Returns:
        Unit vector in the horizontal plane, or None when the planar
        distance does not exceed MIN_SEGMENT_LENGTH
    """
    seg_length = planar_distance(start, end)
    if seg_length <= MIN_SEGMENT_LENGTH:
        return None
    return ((end[0] - start[0]) / seg_length, (end[2] - start[2]) / seg_length)


def angle_between(dir_a: Vector2D, dir_b: Vector2D) -> float:
    """
    Calculate the angle between two unit directions in degrees.

    Inputs are expected to be normalized already.

    Args:
        dir_a: First unit direction
        dir_b: Second unit direction

    Returns:
        Angle in degrees (0-180)
    """
    cos_angle = dot_2d(dir_a, dir_b)
    cos_angle = max(-1.0, min(1.0, cos_angle))  # Clamp for floating point errors
    return math.degrees(math.acos(cos_angle))
