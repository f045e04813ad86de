"""Precise replacements for the guide-line angle and length tooltips.

While a road is drawn the host shows rounded angle and length tooltips
along its guide lines. Every cycle this system recomputes the angles
from the control points, matches them to the host's rounded values and
emits refined tooltips just below the host ones.
"""

from __future__ import annotations

import logging

from .. import config
from ..core.connection_angles import calculate_connection_angles
from ..core.control_point_angles import calculate_control_point_angles
from ..core.value_matching import AngleMatchMode, refine_reference_value
from ..lib import addin_utils as autil
from ..models.network import GeometryProvider
from ..models.settings import PrecisionSettings
from ..models.tooltip_data import (
    AngleCandidate,
    RefinedTooltip,
    TooltipAnchor,
    TooltipCategory,
)
from .frame import GuideLineFrame, complete
from .tooltip_buffer import TooltipBuffer


class GuideLineTooltipSystem:
    """Refines the host's guide-line tooltips.

    Responsible for:
    - Collecting precise angle candidates from the drawn path
    - Matching angle tooltips to candidates (or showing all candidates)
    - Reformatting length tooltips at the configured precision
    """

    def __init__(
        self,
        provider: GeometryProvider,
        match_mode: AngleMatchMode = AngleMatchMode.STRICT,
        capacity: int = 8,
    ) -> None:
        """
        Initialize the system.

        Args:
            provider: Read-only lookup into the existing road network
            match_mode: How angle tooltips are refined
            capacity: Output slots to allocate up front
        """
        self._provider = provider
        self._match_mode = match_mode
        self._buffer = TooltipBuffer(capacity)
        self._candidates: list[AngleCandidate] = []

        autil.log(f'GuideLineTooltipSystem created (match mode: {match_mode.value})')

    @property
    def match_mode(self) -> AngleMatchMode:
        return self._match_mode

    @property
    def candidates(self) -> list[AngleCandidate]:
        """Angle candidates computed in the last cycle."""
        return self._candidates

    def update(self, frame: GuideLineFrame, settings: PrecisionSettings) -> tuple[RefinedTooltip, ...]:
        """
        Run one refresh cycle.

        Args:
            frame: Host inputs for this cycle
            settings: Display settings in force for this cycle

        Returns:
            Refined tooltips for this cycle
        """
        self._buffer.reset()
        self._candidates = []

        if frame.tool_active:
            points = complete(frame.control_points)
            self._candidates = calculate_control_point_angles(points)
            self._candidates.extend(calculate_connection_angles(points, self._provider))

        references = complete(frame.tooltips)
        candidate_values = [candidate.value for candidate in self._candidates]
        angle_places = settings.angle_places

        for reference in references:
            is_angle = reference.category is TooltipCategory.ANGLE
            if is_angle and self._match_mode is AngleMatchMode.SHOW_ALL:
                continue

            value = refine_reference_value(reference, candidate_values)
            if value is None:
                autil.log(
                    f'Suppressed {reference.category.value} tooltip {reference.value}: no match',
                    logging.DEBUG,
                )
                continue
            places = angle_places if is_angle else settings.length_places

            x, y = reference.position
            self._buffer.emit(
                reference.category,
                value,
                places,
                (x, y + config.GUIDE_LINE_TOOLTIP_OFFSET_Y),
                TooltipAnchor.SCREEN,
            )

        if self._match_mode is AngleMatchMode.SHOW_ALL:
            for candidate in self._candidates:
                self._buffer.emit(
                    TooltipCategory.ANGLE,
                    candidate.value,
                    angle_places,
                    candidate.position,
                    TooltipAnchor.WORLD,
                )

        return self._buffer.snapshot()
