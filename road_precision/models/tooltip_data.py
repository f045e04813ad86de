"""Tooltip data models exchanged with the host overlay."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .types import Point3D, ScreenPoint


class TooltipCategory(Enum):
    """What a tooltip measures."""

    ANGLE = 'angle'
    LENGTH = 'length'
    SLOPE = 'slope'


class TooltipAnchor(Enum):
    """How the overlay should interpret a refined tooltip's position."""

    SCREEN = 'screen'  # position is a screen point
    WORLD = 'world'  # position is a world point, overlay projects it
    POINTER = 'pointer'  # follow the mouse pointer, position unused


@dataclass(frozen=True, slots=True)
class ReferenceTooltip:
    """A coarse, pre-rounded tooltip produced by the host renderer.

    Attributes:
        category: ANGLE or LENGTH
        value: Value as shown by the host (rounded to whole units)
        position: Screen position of the host tooltip
    """

    category: TooltipCategory
    value: float
    position: ScreenPoint


@dataclass(slots=True)
class RefinedTooltip:
    """A precise tooltip handed to the overlay.

    Instances are owned by a TooltipBuffer and overwritten in place on
    every cycle.
    """

    category: TooltipCategory
    value: float
    decimal_places: int
    position: ScreenPoint | Point3D | None
    anchor: TooltipAnchor
    display_tag: str
    text: str = ""

    def __repr__(self) -> str:
        return f"RefinedTooltip({self.category.value}, {self.text!r}, {self.anchor.value})"


@dataclass(frozen=True, slots=True)
class AngleCandidate:
    """A precisely computed angle and where it was measured.

    Attributes:
        value: Angle in degrees
        position: World position next to the measured vertex
    """

    value: float
    position: Point3D
