"""
Battery readings from the Linux power_supply sysfs class.

Every read goes straight to the kernel-exposed files. Nothing is cached and
nothing is retried: a failed read or an unexpected value raises.
"""

import os
from typing import Optional

from loguru import logger

import config


class BatteryError(Exception):
    """Base class for battery source failures."""


class BatteryNotFoundError(BatteryError):
    """No power supply directory could be located."""


class BatteryReadError(BatteryError):
    """A sysfs file could not be read."""


class BatteryParseError(BatteryError):
    """A sysfs file held a value that could not be interpreted."""


class BatterySource:
    """
    Reads charging status and energy counters for a single battery.

    Args:
        battery_path: Power supply directory to read from. When omitted, the
            first existing entry of ``config.BATTERY_PATHS`` is used.
    """

    def __init__(self, battery_path: Optional[str] = None) -> None:
        self.battery_path: str = battery_path or self._find_battery_path()
        logger.debug(f"Using battery at {self.battery_path}")

    def _find_battery_path(self) -> str:
        """
        Find the battery path from the configured paths.

        Returns:
            The path to the battery directory.

        Raises:
            BatteryNotFoundError: If none of the configured paths exist.
        """
        for path in config.BATTERY_PATHS:
            if os.path.exists(path):
                return path
        raise BatteryNotFoundError(
            f"No battery found (tried {', '.join(config.BATTERY_PATHS)})"
        )

    def _read_battery_file(self, filename: str) -> str:
        """
        Read a file from the battery sysfs directory.

        Args:
            filename: The name of the file to read.

        Returns:
            The contents of the file stripped of whitespace.
        """
        filepath = os.path.join(self.battery_path, filename)
        try:
            with open(filepath, "r") as f:
                return f.read().strip()
        except (OSError, UnicodeDecodeError) as e:
            raise BatteryReadError(f"Failed to read {filepath}: {e}") from e

    def _read_counter(self, energy_name: str, charge_name: str) -> int:
        # Some batteries only report charge (uAh) instead of energy (uWh).
        filename = energy_name
        if not os.path.exists(os.path.join(self.battery_path, energy_name)) and \
                os.path.exists(os.path.join(self.battery_path, charge_name)):
            filename = charge_name

        raw = self._read_battery_file(filename)
        if not (raw.isascii() and raw.isdigit()):
            raise BatteryParseError(f"Invalid value in {filename}: {raw!r}")
        return int(raw)

    def is_charging(self) -> bool:
        """
        Get the current charging status.

        Returns:
            True only when the battery reports "Charging".

        Raises:
            BatteryParseError: If the status string is not a known one.
        """
        status = self._read_battery_file("status")
        if status in config.CHARGING_STATUSES:
            return True
        if status in config.NOT_CHARGING_STATUSES:
            return False
        raise BatteryParseError(f"Invalid charging status: {status!r}")

    def energy_now(self) -> int:
        """Current stored energy, in the battery's native unit."""
        return self._read_counter("energy_now", "charge_now")

    def energy_full(self) -> int:
        """Stored energy when fully charged, in the battery's native unit."""
        return self._read_counter("energy_full", "charge_full")
