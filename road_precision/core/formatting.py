"""Formatting utilities for precise tooltip values."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from .. import config
from ..models.tooltip_data import TooltipCategory
from ..models.types import UnitSuffix

UNIT_SUFFIXES: dict[TooltipCategory, UnitSuffix] = {
    TooltipCategory.LENGTH: 'm',
    TooltipCategory.ANGLE: '°',
    TooltipCategory.SLOPE: '%',
}


def effective_decimal_places(decimal_places: int, enable_float: bool) -> int:
    """
    Decimal places to actually display.

    Args:
        decimal_places: Configured decimal places
        enable_float: Whether fractional display is enabled for the category

    Returns:
        ``decimal_places``, or 0 when fractional display is disabled
    """
    return decimal_places if enable_float else 0


def format_value(value: float, decimal_places: int) -> str:
    """
    Format a value with a fixed number of decimal places.

    Rounds half away from zero on the value's shortest decimal
    representation and always uses '.' as the decimal separator.

    Args:
        value: Value to format
        decimal_places: Number of decimal places (0 = integer)

    Returns:
        Formatted string like "12.35" or "12"
        Returns "ERROR" if value is NaN or infinity
    """
    # Guard against invalid float values
    if math.isnan(value) or math.isinf(value):
        return "ERROR"

    exact = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-decimal_places)
    with localcontext() as ctx:
        # Enough digits for the integer part plus every decimal place
        ctx.prec = max(ctx.prec, exact.adjusted() + decimal_places + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        # Don't show "-0.00" for tiny negative values
        rounded = abs(rounded)
    return f"{rounded:f}"


def format_with_unit(category: TooltipCategory, value: float, decimal_places: int) -> str:
    """Format a value followed by its category's unit suffix, e.g. "12.35m"."""
    return f"{format_value(value, decimal_places)}{UNIT_SUFFIXES[category]}"


def format_label(
    category: TooltipCategory,
    value: float,
    decimal_places: int,
    display_tag: str = config.DISPLAY_TAG,
) -> str:
    """
    Full tooltip text including the display tag and unit suffix.

    Args:
        category: What the value measures
        value: Precise value
        decimal_places: Number of decimal places
        display_tag: Tag marking the value as refined

    Returns:
        Text like "[P] 12.35m"
    """
    text = format_with_unit(category, value, decimal_places)
    if not display_tag:
        return text
    return f"{display_tag} {text}"
