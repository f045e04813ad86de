"""Interior angles between consecutive control points of a drawn path."""

from __future__ import annotations

from collections.abc import Sequence

from .. import config
from ..models.network import PathPoint
from ..models.tooltip_data import AngleCandidate
from ..models.types import Point3D, Vector2D
from .tolerances import MAX_INTERIOR_ANGLE_DEG, MIN_INTERIOR_ANGLE_DEG
from .vector_math import angle_between, normalize_safe, perpendicular_2d, safe_direction


def is_displayable_angle(angle: float) -> bool:
    """Check if an interior angle is neither collapsed nor near-straight."""
    return MIN_INTERIOR_ANGLE_DEG < angle < MAX_INTERIOR_ANGLE_DEG


def offset_label_position(vertex: Point3D, dir1: Vector2D, dir2: Vector2D) -> Point3D:
    """
    World position for showing an angle next to its vertex.

    Moves the vertex sideways off the bisector of the two directions and
    lifts it slightly, so the label does not sit on top of the road.

    Args:
        vertex: Point where the two directions meet
        dir1: First unit direction leaving the vertex
        dir2: Second unit direction leaving the vertex

    Returns:
        Offset world position (the vertex itself if the bisector is undefined)
    """
    bisector = normalize_safe((dir1[0] + dir2[0], dir1[1] + dir2[1]))
    if bisector is None:
        return vertex
    side = perpendicular_2d(bisector)
    return (
        vertex[0] + side[0] * config.CANDIDATE_PERPENDICULAR_OFFSET,
        vertex[1] + config.CANDIDATE_VERTICAL_OFFSET,
        vertex[2] + side[1] * config.CANDIDATE_PERPENDICULAR_OFFSET,
    )


def calculate_control_point_angles(points: Sequence[PathPoint]) -> list[AngleCandidate]:
    """
    Calculate the interior angle at every inner control point.

    For each consecutive triple the angle is measured between the
    direction back along the first segment and the direction forward
    along the second. Triples with a collapsed segment are skipped, and
    near-straight or near-zero angles are discarded.

    Args:
        points: Ordered control points of the path being drawn

    Returns:
        Candidate angles in path order. Fewer than 3 points yields an
        empty list.
    """
    candidates: list[AngleCandidate] = []

    for i in range(2, len(points)):
        vertex = points[i - 1].position
        dir1 = safe_direction(vertex, points[i - 2].position)
        dir2 = safe_direction(vertex, points[i].position)
        if dir1 is None or dir2 is None:
            continue

        angle = angle_between(dir1, dir2)
        if not is_displayable_angle(angle):
            continue

        candidates.append(AngleCandidate(
            value=angle,
            position=offset_label_position(vertex, dir1, dir2),
        ))

    return candidates
