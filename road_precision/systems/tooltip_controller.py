"""Runs both precision tooltip systems once per host refresh.

This module is the single entry point a host adapter calls every frame.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.value_matching import AngleMatchMode
from ..lib import addin_utils as autil
from ..models.network import GeometryProvider
from ..models.tooltip_data import RefinedTooltip
from .frame import GuideLineFrame, NetCourseFrame, ScreenProjector
from .guide_line_tooltips import GuideLineTooltipSystem
from .net_course_tooltips import NetCourseTooltipSystem
from .settings_monitor import SettingsMonitor, SettingsSource


@dataclass(slots=True)
class CycleOutput:
    """Tooltips produced by one refresh cycle."""

    guide_line_tooltips: tuple[RefinedTooltip, ...]
    net_course_tooltips: tuple[RefinedTooltip, ...]
    settings_changed: bool = False


class PrecisionTooltipController:
    """Owns the settings monitor and both tooltip systems.

    Usage:
        controller = PrecisionTooltipController(provider, lambda: host_settings)
        every frame:
            output = controller.update(guide_frame, course_frame)
    """

    def __init__(
        self,
        provider: GeometryProvider,
        settings_source: SettingsSource,
        projector: ScreenProjector | None = None,
        match_mode: AngleMatchMode = AngleMatchMode.STRICT,
    ) -> None:
        self.settings_monitor = SettingsMonitor(settings_source)
        self.guide_lines = GuideLineTooltipSystem(provider, match_mode)
        self.net_courses = NetCourseTooltipSystem(projector)
        autil.log('Precision tooltip systems registered')

    def update(self, guide_frame: GuideLineFrame, course_frame: NetCourseFrame) -> CycleOutput:
        """
        Run one refresh cycle of both systems.

        Args:
            guide_frame: Inputs of the guide-line system
            course_frame: Inputs of the net course system

        Returns:
            All tooltips produced this cycle
        """
        changed = self.settings_monitor.tick()
        settings = self.settings_monitor.settings

        return CycleOutput(
            guide_line_tooltips=self.guide_lines.update(guide_frame, settings),
            net_course_tooltips=self.net_courses.update(course_frame, settings),
            settings_changed=changed,
        )
