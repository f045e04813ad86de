"""Reconcile precise values with the host's rounded reference values.

The host emits its rounded angle tooltips independently of the order in
which angles are computed here, so candidates are matched by value: a
precise angle belongs to a reference tooltip only if it rounds to the
same whole number the host displays.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from ..models.tooltip_data import ReferenceTooltip, TooltipCategory


class AngleMatchMode(Enum):
    """How angle reference tooltips are refined.

    STRICT: each reference gets the candidate that rounds to its value;
        references without one are suppressed.
    SHOW_ALL: references are not matched; every candidate is shown at
        the position it was measured.
    """

    STRICT = 'strict'
    SHOW_ALL = 'show_all'


def match_angle(reference_value: float, candidates: Iterable[float]) -> float | None:
    """
    Pick the precise angle consistent with a rounded reference.

    Only candidates with ``round(candidate) == round(reference_value)``
    qualify; among those the one closest to the reference wins, with the
    earliest candidate kept on ties.

    Args:
        reference_value: Value shown by the host tooltip
        candidates: Precise angles computed this cycle

    Returns:
        The matching precise angle, or None if no candidate rounds to the
        reference (the tooltip should not be shown)
    """
    target = round(reference_value)
    best: float | None = None
    smallest_diff = float('inf')

    for candidate in candidates:
        if round(candidate) != target:
            continue
        diff = abs(candidate - reference_value)
        if diff < smallest_diff:
            smallest_diff = diff
            best = candidate

    return best


def refine_reference_value(
    reference: ReferenceTooltip,
    candidates: Iterable[float],
) -> float | None:
    """
    Precise value to display for a reference tooltip.

    Lengths already carry full precision and are passed through. Angles
    go through match_angle().

    Returns:
        The value to display, or None if the tooltip is suppressed
    """
    if reference.category is TooltipCategory.LENGTH:
        return reference.value
    if reference.category is TooltipCategory.ANGLE:
        return match_angle(reference.value, candidates)
    return None
