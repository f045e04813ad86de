"""Road network data models: curves, edges, nodes and path points."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from .types import EntityId, Point3D


@dataclass(frozen=True, slots=True)
class CubicBezier:
    """A cubic Bezier curve defined by four control points.

    ``a`` and ``d`` are the curve endpoints; ``b`` and ``c`` shape the
    tangents at those endpoints.
    """

    a: Point3D
    b: Point3D
    c: Point3D
    d: Point3D

    @property
    def control_points(self) -> tuple[Point3D, Point3D, Point3D, Point3D]:
        return (self.a, self.b, self.c, self.d)


@dataclass(frozen=True, slots=True)
class EdgeData:
    """An existing road edge between two nodes."""

    start: EntityId
    end: EntityId


@dataclass(frozen=True, slots=True)
class NodeData:
    """An existing road node (intersection, corner or dead end)."""

    position: Point3D


@dataclass(frozen=True, slots=True)
class PathPoint:
    """A control point of the path currently being drawn.

    Attributes:
        position: World position of the point
        anchor: Entity the point is snapped to (edge or node), or None
    """

    position: Point3D
    anchor: EntityId | None = field(default=None)


class GeometryProvider(Protocol):
    """Read-only view of the existing road network for one update cycle.

    Implemented by a host adapter. Lookups return None when the entity
    does not carry the requested data (e.g. asking a node for a curve).
    """

    def lookup_edge(self, entity: EntityId) -> EdgeData | None: ...

    def lookup_curve(self, entity: EntityId) -> CubicBezier | None: ...

    def lookup_node(self, entity: EntityId) -> NodeData | None: ...

    def connected_edges(self, entity: EntityId) -> Sequence[EntityId]: ...
