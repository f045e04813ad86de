"""
Tests for the guide-line tooltip system - runs without the host.
"""
from __future__ import annotations

import logging
import math
from concurrent.futures import Future

import pytest

from helpers import MockGeometryProvider, path, straight_curve
from core.value_matching import AngleMatchMode
from models.settings import PrecisionSettings
from models.tooltip_data import ReferenceTooltip, TooltipAnchor, TooltipCategory
from systems.frame import GuideLineFrame
from systems.guide_line_tooltips import GuideLineTooltipSystem

RIGHT_ANGLE_PATH = path((0.0, 0.0, 0.0), (10.0, 0.0, 0.0), (10.0, 0.0, 10.0))


def _angle(value: float, x: float = 100.0, y: float = 200.0) -> ReferenceTooltip:
    return ReferenceTooltip(TooltipCategory.ANGLE, value, (x, y))


def _length(value: float, x: float = 50.0, y: float = 60.0) -> ReferenceTooltip:
    return ReferenceTooltip(TooltipCategory.LENGTH, value, (x, y))


@pytest.fixture
def provider() -> MockGeometryProvider:
    mock = MockGeometryProvider()
    mock.add_edge('E1', 'N1', 'N2', straight_curve((0.0, 0.0, 0.0), (20.0, 0.0, 0.0)))
    return mock


@pytest.fixture
def system(provider: MockGeometryProvider) -> GuideLineTooltipSystem:
    return GuideLineTooltipSystem(provider)


class TestStrictMode:
    """Test the default match-or-suppress behavior."""

    def test_matched_angle_is_refined(self, system: GuideLineTooltipSystem) -> None:
        frame = GuideLineFrame(control_points=RIGHT_ANGLE_PATH, tooltips=[_angle(90.0)])

        (tooltip,) = system.update(frame, PrecisionSettings())

        assert tooltip.category is TooltipCategory.ANGLE
        assert tooltip.text == "[P] 90.00°"
        assert tooltip.position == (100.0, 255.0)
        assert tooltip.anchor is TooltipAnchor.SCREEN

    def test_length_is_reformatted(self, system: GuideLineTooltipSystem) -> None:
        frame = GuideLineFrame(control_points=RIGHT_ANGLE_PATH, tooltips=[_length(10.4567)])

        (tooltip,) = system.update(frame, PrecisionSettings(distance_decimal_places=3))

        assert tooltip.text == "[P] 10.457m"
        assert tooltip.position == (50.0, 115.0)

    def test_unmatched_angle_is_suppressed(self, system: GuideLineTooltipSystem) -> None:
        frame = GuideLineFrame(
            control_points=RIGHT_ANGLE_PATH,
            tooltips=[_angle(45.0), _length(10.0)],
        )
        tooltips = system.update(frame, PrecisionSettings())
        assert [t.category for t in tooltips] == [TooltipCategory.LENGTH]

    def test_suppression_logged_in_debug(
        self,
        system: GuideLineTooltipSystem,
        caplog: pytest.LogCaptureFixture,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        import road_precision.config as config
        monkeypatch.setattr(config, 'DEBUG', True)
        caplog.set_level(logging.DEBUG)

        frame = GuideLineFrame(control_points=RIGHT_ANGLE_PATH, tooltips=[_angle(45.0)])
        system.update(frame, PrecisionSettings())

        assert 'Suppressed angle tooltip 45.0: no match' in caplog.text

    def test_reference_order_is_kept(self, system: GuideLineTooltipSystem) -> None:
        frame = GuideLineFrame(
            control_points=RIGHT_ANGLE_PATH,
            tooltips=[_length(10.0), _angle(90.0), _length(10.0, y=0.0)],
        )
        tooltips = system.update(frame, PrecisionSettings())
        assert [t.category for t in tooltips] == [
            TooltipCategory.LENGTH,
            TooltipCategory.ANGLE,
            TooltipCategory.LENGTH,
        ]

    def test_connection_angle_matched(self, system: GuideLineTooltipSystem) -> None:
        points = path(
            (0.0, 0.0, 0.0),
            (10.0 * math.cos(math.radians(30.0)), 0.0, 5.0),
            anchors={0: 'E1'},
        )
        frame = GuideLineFrame(control_points=points, tooltips=[_angle(150.0), _angle(30.0)])

        tooltips = system.update(frame, PrecisionSettings(angle_decimal_places=1))

        assert [t.text for t in tooltips] == ["[P] 150.0°", "[P] 30.0°"]

    def test_angle_places_follow_toggle(self, system: GuideLineTooltipSystem) -> None:
        frame = GuideLineFrame(control_points=RIGHT_ANGLE_PATH, tooltips=[_angle(90.0)])
        settings = PrecisionSettings(angle_decimal_places=3, enable_float_angle=False)
        (tooltip,) = system.update(frame, settings)
        assert tooltip.text == "[P] 90°"

    def test_candidates_exposed(self, system: GuideLineTooltipSystem) -> None:
        system.update(GuideLineFrame(control_points=RIGHT_ANGLE_PATH), PrecisionSettings())
        assert [c.value for c in system.candidates] == pytest.approx([90.0])


class TestInactiveAndEmpty:
    """Test cycles without a usable path."""

    def test_empty_frame(self, system: GuideLineTooltipSystem) -> None:
        assert system.update(GuideLineFrame(), PrecisionSettings()) == ()

    def test_tool_inactive_drops_angles(self, system: GuideLineTooltipSystem) -> None:
        frame = GuideLineFrame(
            control_points=RIGHT_ANGLE_PATH,
            tooltips=[_angle(90.0), _length(10.0)],
            tool_active=False,
        )
        tooltips = system.update(frame, PrecisionSettings())
        assert system.candidates == []
        assert [t.category for t in tooltips] == [TooltipCategory.LENGTH]

    def test_short_path_has_no_angle_candidates(self, system: GuideLineTooltipSystem) -> None:
        frame = GuideLineFrame(
            control_points=path((0.0, 0.0, 0.0), (10.0, 0.0, 0.0)),
            tooltips=[_angle(90.0)],
        )
        assert system.update(frame, PrecisionSettings()) == ()


class TestShowAllMode:
    """Test the show-every-candidate mode."""

    def test_candidates_shown_at_vertices(self, provider: MockGeometryProvider) -> None:
        system = GuideLineTooltipSystem(provider, match_mode=AngleMatchMode.SHOW_ALL)
        frame = GuideLineFrame(
            control_points=RIGHT_ANGLE_PATH,
            tooltips=[_angle(90.0), _length(10.0)],
        )

        tooltips = system.update(frame, PrecisionSettings())

        assert system.match_mode is AngleMatchMode.SHOW_ALL
        assert [t.category for t in tooltips] == [TooltipCategory.LENGTH, TooltipCategory.ANGLE]
        candidate = tooltips[1]
        assert candidate.anchor is TooltipAnchor.WORLD
        assert candidate.text == "[P] 90.00°"
        assert candidate.position == system.candidates[0].position

    def test_unmatched_candidates_still_shown(self, provider: MockGeometryProvider) -> None:
        system = GuideLineTooltipSystem(provider, match_mode=AngleMatchMode.SHOW_ALL)
        frame = GuideLineFrame(control_points=RIGHT_ANGLE_PATH, tooltips=[_angle(12.0)])
        tooltips = system.update(frame, PrecisionSettings())
        assert [t.value for t in tooltips] == pytest.approx([90.0])


class TestCycles:
    """Test behavior across consecutive cycles."""

    def test_futures_are_completed(self, system: GuideLineTooltipSystem) -> None:
        points: Future = Future()
        points.set_result(RIGHT_ANGLE_PATH)
        references: Future = Future()
        references.set_result([_angle(90.0)])

        tooltips = system.update(GuideLineFrame(points, references), PrecisionSettings())

        assert [t.text for t in tooltips] == ["[P] 90.00°"]

    def test_output_reflects_only_current_cycle(self, system: GuideLineTooltipSystem) -> None:
        busy = GuideLineFrame(
            control_points=RIGHT_ANGLE_PATH,
            tooltips=[_angle(90.0), _length(1.0), _length(2.0)],
        )
        system.update(busy, PrecisionSettings())

        quiet = GuideLineFrame(control_points=RIGHT_ANGLE_PATH, tooltips=[_length(3.0)])
        tooltips = system.update(quiet, PrecisionSettings())

        assert [t.text for t in tooltips] == ["[P] 3.00m"]
