"""
Shared test helpers for Road Precision tests.

This module contains mock host objects and builders used across multiple
test files.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from models.course import CoursePosFlags, CoursePosition, CreationFlags, NetCourse
from models.network import CubicBezier, EdgeData, NodeData, PathPoint
from models.types import EntityId, Point3D, ScreenPoint


def straight_curve(start: Point3D, end: Point3D) -> CubicBezier:
    """A straight curve with evenly spaced handles (uniform speed)."""
    return CubicBezier(
        a=start,
        b=tuple(s + (e - s) / 3.0 for s, e in zip(start, end)),
        c=tuple(s + 2.0 * (e - s) / 3.0 for s, e in zip(start, end)),
        d=end,
    )


def path(*positions: Point3D, anchors: dict[int, EntityId] | None = None) -> list[PathPoint]:
    """Build path points, optionally snapping some indices to entities."""
    anchors = anchors or {}
    return [PathPoint(position=p, anchor=anchors.get(i)) for i, p in enumerate(positions)]


def make_course(
    start: Point3D,
    end: Point3D,
    length: float | None = None,
    start_flags: CoursePosFlags = CoursePosFlags.NONE,
    creation_flags: CreationFlags = CreationFlags.NONE,
    original: EntityId | None = None,
) -> NetCourse:
    """A straight course covering its whole curve."""
    if length is None:
        length = ((end[0] - start[0]) ** 2 + (end[2] - start[2]) ** 2) ** 0.5
    return NetCourse(
        start=CoursePosition(position=start, course_delta=0.0, flags=start_flags),
        end=CoursePosition(position=end, course_delta=1.0),
        curve=straight_curve(start, end),
        length=length,
        creation_flags=creation_flags,
        original=original,
    )


@dataclass
class MockGeometryProvider:
    """Dict-backed GeometryProvider for testing without the host."""

    edges: dict[EntityId, EdgeData] = field(default_factory=dict)
    curves: dict[EntityId, CubicBezier] = field(default_factory=dict)
    nodes: dict[EntityId, NodeData] = field(default_factory=dict)
    node_edges: dict[EntityId, list[EntityId]] = field(default_factory=dict)

    def add_edge(self, entity: EntityId, start_node: EntityId, end_node: EntityId, curve: CubicBezier) -> None:
        self.edges[entity] = EdgeData(start=start_node, end=end_node)
        self.curves[entity] = curve
        for node, position in ((start_node, curve.a), (end_node, curve.d)):
            self.nodes.setdefault(node, NodeData(position=position))
            self.node_edges.setdefault(node, []).append(entity)

    def lookup_edge(self, entity: EntityId) -> EdgeData | None:
        return self.edges.get(entity)

    def lookup_curve(self, entity: EntityId) -> CubicBezier | None:
        return self.curves.get(entity)

    def lookup_node(self, entity: EntityId) -> NodeData | None:
        return self.nodes.get(entity)

    def connected_edges(self, entity: EntityId) -> Sequence[EntityId]:
        return self.node_edges.get(entity, [])


@dataclass
class MockProjector:
    """ScreenProjector that maps world (x, z) straight to the screen."""

    visible: bool = True
    calls: list[Point3D] = field(default_factory=list)

    def world_to_tooltip_pos(self, point: Point3D) -> tuple[ScreenPoint, bool]:
        self.calls.append(point)
        return (point[0], point[2]), self.visible
