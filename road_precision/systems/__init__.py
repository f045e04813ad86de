"""Per-cycle tooltip systems driven by the host."""

from .frame import GuideLineFrame, NetCourseFrame, ScreenProjector, complete
from .tooltip_buffer import TooltipBuffer
from .settings_monitor import SettingsMonitor, SettingsSource
from .guide_line_tooltips import GuideLineTooltipSystem
from .net_course_tooltips import NetCourseTooltipSystem
from .tooltip_controller import CycleOutput, PrecisionTooltipController

__all__ = [
    'GuideLineFrame',
    'NetCourseFrame',
    'ScreenProjector',
    'complete',
    'TooltipBuffer',
    'SettingsMonitor',
    'SettingsSource',
    'GuideLineTooltipSystem',
    'NetCourseTooltipSystem',
    'CycleOutput',
    'PrecisionTooltipController',
]
