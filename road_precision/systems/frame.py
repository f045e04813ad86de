"""Per-cycle input snapshots handed over by the host.

Host data for one refresh cycle may still be produced by a parallel
preparation step when the cycle starts. Such inputs arrive as futures and
are completed before any calculation reads them.
"""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Protocol, TypeVar

from ..models.course import NetCourse
from ..models.network import PathPoint
from ..models.tooltip_data import ReferenceTooltip
from ..models.types import Point3D, ScreenPoint

_T = TypeVar('_T')


def complete(dependency: _T | Future[_T]) -> _T:
    """Block until an input is ready and return it."""
    if isinstance(dependency, Future):
        return dependency.result()
    return dependency


@dataclass(slots=True)
class GuideLineFrame:
    """Inputs of the guide-line tooltip system for one cycle.

    Attributes:
        control_points: Ordered control points of the path being drawn
        tooltips: Rounded tooltips produced by the host renderer
        tool_active: Whether the road construction tool is the active tool
    """

    control_points: Sequence[PathPoint] | Future[Sequence[PathPoint]] = field(default_factory=tuple)
    tooltips: Sequence[ReferenceTooltip] | Future[Sequence[ReferenceTooltip]] = field(default_factory=tuple)
    tool_active: bool = True


@dataclass(slots=True)
class NetCourseFrame:
    """Inputs of the net course tooltip system for one cycle.

    Attributes:
        courses: Courses of the road currently being placed, unordered
        tool_active: Whether the road construction tool is the active tool
        replace_mode: Whether the tool is replacing existing roads
    """

    courses: Sequence[NetCourse] | Future[Sequence[NetCourse]] = field(default_factory=tuple)
    tool_active: bool = True
    replace_mode: bool = False


class ScreenProjector(Protocol):
    """Projects world positions to tooltip screen positions."""

    def world_to_tooltip_pos(self, point: Point3D) -> tuple[ScreenPoint, bool]:
        """Return the screen position and whether it is on screen."""
        ...
