"""Angles where a drawn path connects to the existing road network.

A path endpoint snapped to an existing edge or node forms an angle with
the existing road. The host shows whichever of the angle or its
supplement matches its drawing convention, so both are produced.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..models.network import CubicBezier, EdgeData, GeometryProvider, PathPoint
from ..models.tooltip_data import AngleCandidate
from ..models.types import EntityId, Point3D, Vector2D
from .bezier import end_tangent, start_tangent
from .control_point_angles import offset_label_position
from .vector_math import (
    angle_between,
    distance_between_points,
    negate,
    normalize_safe,
    planar,
    safe_direction,
)


def new_segment_direction(points: Sequence[PathPoint], index: int) -> Vector2D | None:
    """
    Direction of the new path segment touching an endpoint.

    Only the first and last points of the path are connection points;
    the direction always follows the path's traversal order.

    Args:
        points: Ordered control points
        index: Index of the endpoint

    Returns:
        Planar unit direction, or None for interior points, single-point
        paths and collapsed segments
    """
    last = len(points) - 1
    if index == 0 and last > 0:
        return safe_direction(points[0].position, points[1].position)
    if index == last and index > 0:
        return safe_direction(points[index - 1].position, points[index].position)
    return None


def edge_direction_near_point(curve: CubicBezier, point: Point3D) -> Vector2D | None:
    """
    Outward direction of an edge at whichever end is nearer to a point.

    Args:
        curve: Curve of the existing edge
        point: Snap point on or near the edge

    Returns:
        Planar unit direction leaving that end of the edge, or None if
        the tangent has no horizontal component
    """
    if distance_between_points(point, curve.a) < distance_between_points(point, curve.d):
        tangent = start_tangent(curve)
    else:
        tangent = negate(end_tangent(curve))
    return normalize_safe(planar(tangent))


def edge_direction_at_node(edge: EdgeData, curve: CubicBezier, node: EntityId) -> Vector2D | None:
    """Outward direction of an edge leaving the given node."""
    if edge.start == node:
        tangent = start_tangent(curve)
    else:
        tangent = negate(end_tangent(curve))
    return normalize_safe(planar(tangent))


def supplementary_angles(existing_dir: Vector2D, new_dir: Vector2D) -> list[float]:
    """
    Angle between an existing road and the new segment, plus its supplement.

    Args:
        existing_dir: Unit direction of the existing road
        new_dir: Unit direction of the new segment

    Returns:
        [angle, 180 - angle], each kept only if it lies in (0, 180]
    """
    angle = angle_between(existing_dir, new_dir)
    return [a for a in (angle, 180.0 - angle) if 0.0 < a <= 180.0]


def _pair_candidates(
    position: Point3D,
    existing_dir: Vector2D,
    new_dir: Vector2D,
) -> list[AngleCandidate]:
    label_pos = offset_label_position(position, existing_dir, new_dir)
    return [
        AngleCandidate(value=angle, position=label_pos)
        for angle in supplementary_angles(existing_dir, new_dir)
    ]


def _edge_anchor_candidates(
    provider: GeometryProvider,
    point: PathPoint,
    new_dir: Vector2D,
) -> list[AngleCandidate]:
    curve = provider.lookup_curve(point.anchor)
    if curve is None:
        return []
    existing_dir = edge_direction_near_point(curve, point.position)
    if existing_dir is None:
        return []
    return _pair_candidates(point.position, existing_dir, new_dir)


def _node_anchor_candidates(
    provider: GeometryProvider,
    point: PathPoint,
    new_dir: Vector2D,
) -> list[AngleCandidate]:
    candidates: list[AngleCandidate] = []
    for edge_entity in provider.connected_edges(point.anchor):
        edge = provider.lookup_edge(edge_entity)
        curve = provider.lookup_curve(edge_entity)
        if edge is None or curve is None:
            continue
        existing_dir = edge_direction_at_node(edge, curve, point.anchor)
        if existing_dir is None:
            continue
        candidates.extend(_pair_candidates(point.position, existing_dir, new_dir))
    return candidates


def calculate_connection_angles(
    points: Sequence[PathPoint],
    provider: GeometryProvider,
) -> list[AngleCandidate]:
    """
    Calculate angles between the drawn path and the roads it snaps to.

    Edge anchors compare against the edge's tangent at its nearer end.
    Node anchors compare against every edge connected to the node, so a
    corner with N edges yields up to 2N candidates.

    Args:
        points: Ordered control points of the path being drawn
        provider: Read-only lookup into the existing network

    Returns:
        Candidate angles; angle/supplement pairs are adjacent
    """
    candidates: list[AngleCandidate] = []

    for i, point in enumerate(points):
        if point.anchor is None:
            continue

        if provider.lookup_edge(point.anchor) is not None:
            new_dir = new_segment_direction(points, i)
            if new_dir is not None:
                candidates.extend(_edge_anchor_candidates(provider, point, new_dir))
        elif provider.lookup_node(point.anchor) is not None:
            new_dir = new_segment_direction(points, i)
            if new_dir is not None:
                candidates.extend(_node_anchor_candidates(provider, point, new_dir))

    return candidates
