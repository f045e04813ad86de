"""Reusable output buffer for refined tooltips."""

from __future__ import annotations

from .. import config
from ..core.formatting import format_label
from ..models.tooltip_data import RefinedTooltip, TooltipAnchor, TooltipCategory
from ..models.types import Point3D, ScreenPoint


class TooltipBuffer:
    """
    Owns the RefinedTooltip objects a system produces.

    The buffer is reset at the start of each cycle and refilled in place:
    existing slots are overwritten and new ones are only allocated when a
    cycle needs more tooltips than any previous one.

    Usage:
        buffer = TooltipBuffer(capacity=4)
        buffer.reset()
        buffer.emit(TooltipCategory.LENGTH, 12.345, 2, (10.0, 20.0), TooltipAnchor.SCREEN)
        tooltips = buffer.snapshot()
    """

    def __init__(self, capacity: int = 0) -> None:
        """
        Initialize the buffer.

        Args:
            capacity: Number of slots to allocate up front
        """
        self._slots: list[RefinedTooltip] = [self._blank() for _ in range(capacity)]
        self._count = 0

    @staticmethod
    def _blank() -> RefinedTooltip:
        return RefinedTooltip(
            category=TooltipCategory.LENGTH,
            value=0.0,
            decimal_places=0,
            position=None,
            anchor=TooltipAnchor.POINTER,
            display_tag=config.DISPLAY_TAG,
        )

    def __len__(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        """Number of allocated slots."""
        return len(self._slots)

    def reset(self) -> None:
        """Start a new cycle. Slots are kept for reuse."""
        self._count = 0

    def emit(
        self,
        category: TooltipCategory,
        value: float,
        decimal_places: int,
        position: ScreenPoint | Point3D | None,
        anchor: TooltipAnchor,
        display_tag: str = config.DISPLAY_TAG,
    ) -> RefinedTooltip:
        """
        Write the next tooltip of this cycle.

        Returns:
            The slot that was written
        """
        if self._count < len(self._slots):
            slot = self._slots[self._count]
        else:
            slot = self._blank()
            self._slots.append(slot)

        slot.category = category
        slot.value = value
        slot.decimal_places = decimal_places
        slot.position = position
        slot.anchor = anchor
        slot.display_tag = display_tag
        slot.text = format_label(category, value, decimal_places, display_tag)

        self._count += 1
        return slot

    def snapshot(self) -> tuple[RefinedTooltip, ...]:
        """
        Tooltips written this cycle.

        The tuple is only valid until the next reset(); the tooltip
        objects are overwritten by the following cycle.
        """
        return tuple(self._slots[:self._count])
