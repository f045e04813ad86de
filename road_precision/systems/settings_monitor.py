"""Periodic polling of the user's precision settings."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .. import config
from ..lib import addin_utils as autil
from ..models.settings import PrecisionSettings

# Returns the current host settings, or None while they are unavailable
SettingsSource = Callable[[], PrecisionSettings | None]


class SettingsMonitor:
    """
    Re-reads settings every ``interval`` cycles and detects changes.

    The host has no change notification for the options page, so the
    settings are polled. A change is picked up at the next checkpoint,
    i.e. within ``interval`` cycles.

    Usage:
        monitor = SettingsMonitor(lambda: host.settings)
        every cycle:
            monitor.tick()
            system.update(frame, monitor.settings)
    """

    def __init__(
        self,
        source: SettingsSource,
        interval: int = config.SETTINGS_CHECK_INTERVAL,
        name: str = 'Tooltip',
    ) -> None:
        """
        Initialize the monitor and read the settings once.

        Args:
            source: Callable returning the current settings
            interval: Number of cycles between checks (must be positive)
            name: Label used in log messages
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")

        self._source = source
        self._interval = interval
        self._name = name
        self._frame_counter = 0
        self._settings = self._read() or PrecisionSettings()

        autil.log(f'{self._name} settings: {self._describe(self._settings)}')

    @property
    def settings(self) -> PrecisionSettings:
        """Settings currently in force."""
        return self._settings

    @staticmethod
    def _describe(settings: PrecisionSettings) -> str:
        return (
            f'LengthDecimals={settings.length_places}, '
            f'AngleDecimals={settings.angle_places}, '
            f'EnableFloatDistance={settings.enable_float_distance}, '
            f'EnableFloatAngle={settings.enable_float_angle}'
        )

    def _read(self) -> PrecisionSettings | None:
        try:
            return self._source()
        except Exception:
            autil.handle_error(f'{self._name} settings source')
            return None

    def tick(self) -> bool:
        """
        Advance one cycle and re-check the settings on checkpoints.

        Returns:
            True if a change of the displayed decimal places was detected
        """
        self._frame_counter += 1
        if self._frame_counter < self._interval:
            return False
        self._frame_counter = 0

        new_settings = self._read()
        if new_settings is None:
            return False

        old_places = (self._settings.length_places, self._settings.angle_places)
        new_places = (new_settings.length_places, new_settings.angle_places)
        self._settings = new_settings

        if new_places == old_places:
            return False

        autil.log(f'{self._name} settings updated: {self._describe(new_settings)}')
        autil.log(f'{self._name} previous decimals: {old_places}', logging.DEBUG)
        return True
