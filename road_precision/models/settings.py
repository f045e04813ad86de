"""User display settings for precision tooltips."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypedDict

from .. import config
from ..core.formatting import effective_decimal_places


class SettingsDict(TypedDict):
    """Type definition for PrecisionSettings serialization."""

    distance_decimal_places: int
    angle_decimal_places: int
    enable_float_distance: bool
    enable_float_angle: bool


def validate_decimal_places(name: str, value: int) -> None:
    """Validate a decimal-place setting.

    Args:
        name: Setting name used in the error message
        value: Number of decimal places

    Raises:
        ValueError: If the value is not an int in the supported range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if not config.MIN_DECIMAL_PLACES <= value <= config.MAX_DECIMAL_PLACES:
        raise ValueError(
            f"{name} must be between {config.MIN_DECIMAL_PLACES} and "
            f"{config.MAX_DECIMAL_PLACES}, got {value}"
        )


def _clamp_places(raw: Any, default: int) -> int:
    try:
        places = int(raw)
    except (TypeError, ValueError):
        return default
    return max(config.MIN_DECIMAL_PLACES, min(config.MAX_DECIMAL_PLACES, places))


@dataclass(frozen=True, slots=True)
class PrecisionSettings:
    """
    Display precision configuration.

    Attributes:
        distance_decimal_places: Decimal places for lengths (0-4)
        angle_decimal_places: Decimal places for angles and slopes (0-4)
        enable_float_distance: When off, lengths display as integers
        enable_float_angle: When off, angles and slopes display as integers
    """

    distance_decimal_places: int = config.DEFAULT_DISTANCE_DECIMAL_PLACES
    angle_decimal_places: int = config.DEFAULT_ANGLE_DECIMAL_PLACES
    enable_float_distance: bool = config.DEFAULT_ENABLE_FLOAT_DISTANCE
    enable_float_angle: bool = config.DEFAULT_ENABLE_FLOAT_ANGLE

    def __post_init__(self) -> None:
        validate_decimal_places('distance_decimal_places', self.distance_decimal_places)
        validate_decimal_places('angle_decimal_places', self.angle_decimal_places)

    @property
    def length_places(self) -> int:
        """Decimal places actually used for lengths."""
        return effective_decimal_places(self.distance_decimal_places, self.enable_float_distance)

    @property
    def angle_places(self) -> int:
        """Decimal places actually used for angles and slopes."""
        return effective_decimal_places(self.angle_decimal_places, self.enable_float_angle)

    def to_dict(self) -> SettingsDict:
        return SettingsDict(
            distance_decimal_places=self.distance_decimal_places,
            angle_decimal_places=self.angle_decimal_places,
            enable_float_distance=self.enable_float_distance,
            enable_float_angle=self.enable_float_angle,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PrecisionSettings:
        """
        Build settings from raw host values.

        Missing keys fall back to defaults and out-of-range decimal counts
        are clamped, since the host options page is the source of truth.
        """
        return cls(
            distance_decimal_places=_clamp_places(
                data.get('distance_decimal_places'),
                config.DEFAULT_DISTANCE_DECIMAL_PLACES,
            ),
            angle_decimal_places=_clamp_places(
                data.get('angle_decimal_places'),
                config.DEFAULT_ANGLE_DECIMAL_PLACES,
            ),
            enable_float_distance=bool(
                data.get('enable_float_distance', config.DEFAULT_ENABLE_FLOAT_DISTANCE)
            ),
            enable_float_angle=bool(
                data.get('enable_float_angle', config.DEFAULT_ENABLE_FLOAT_ANGLE)
            ),
        )
