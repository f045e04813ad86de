"""Precise path length and slope for the road being placed.

The host shows a rounded total length and slope for a multi-segment road
while it is placed. This system aggregates the placed courses itself and
emits a precise length and slope pair at the middle of the path.
"""

from __future__ import annotations

from .. import config
from ..core.course_aggregation import CourseSummary, aggregate_courses
from ..lib import addin_utils as autil
from ..models.settings import PrecisionSettings
from ..models.tooltip_data import RefinedTooltip, TooltipAnchor, TooltipCategory
from ..models.types import Point3D, ScreenPoint
from .frame import NetCourseFrame, ScreenProjector, complete
from .tooltip_buffer import TooltipBuffer


class NetCourseTooltipSystem:
    """Emits the path-level length and slope tooltips.

    Without a projector the tooltips are anchored to the world midpoint
    and the overlay projects them. With one, they are placed on screen
    beside the host's own tooltip, or follow the pointer when the
    midpoint is off screen.
    """

    def __init__(self, projector: ScreenProjector | None = None) -> None:
        """
        Initialize the system.

        Args:
            projector: Optional world-to-screen projection
        """
        self._projector = projector
        self._buffer = TooltipBuffer(capacity=2)
        self._summary: CourseSummary | None = None

        autil.log('NetCourseTooltipSystem created')

    @property
    def last_summary(self) -> CourseSummary | None:
        """Aggregation result of the last cycle, if any."""
        return self._summary

    def _place(self, midpoint: Point3D) -> tuple[ScreenPoint | Point3D | None, TooltipAnchor]:
        if self._projector is None:
            return midpoint, TooltipAnchor.WORLD

        screen_pos, visible = self._projector.world_to_tooltip_pos(midpoint)
        if not visible:
            return None, TooltipAnchor.POINTER
        return (screen_pos[0] + config.NET_COURSE_TOOLTIP_OFFSET_X, screen_pos[1]), TooltipAnchor.SCREEN

    def update(self, frame: NetCourseFrame, settings: PrecisionSettings) -> tuple[RefinedTooltip, ...]:
        """
        Run one refresh cycle.

        Args:
            frame: Host inputs for this cycle
            settings: Display settings in force for this cycle

        Returns:
            The length and slope tooltips, or an empty tuple when the tool
            is inactive, replacing roads, or the path is too short
        """
        self._buffer.reset()
        self._summary = None

        if not frame.tool_active or frame.replace_mode:
            return self._buffer.snapshot()

        self._summary = aggregate_courses(complete(frame.courses))
        summary = self._summary
        if summary is None or summary.slope is None or summary.midpoint is None:
            return self._buffer.snapshot()

        position, anchor = self._place(summary.midpoint)
        self._buffer.emit(
            TooltipCategory.LENGTH,
            summary.curve_length,
            settings.length_places,
            position,
            anchor,
        )
        # Slope shares the angle precision setting
        self._buffer.emit(
            TooltipCategory.SLOPE,
            summary.slope,
            settings.angle_places,
            position,
            anchor,
        )
        return self._buffer.snapshot()
