"""Charge level value type and the battery level sampler."""

import math
from dataclasses import dataclass
from typing import Iterator

from loguru import logger

from battery_source import BatterySource


@dataclass(frozen=True, order=True)
class ChargeLevel:
    """
    Battery state of charge as a whole percentage.

    The value must already be within 0-100; out-of-range values are
    rejected rather than clamped.
    """

    percent: int

    def __post_init__(self) -> None:
        if isinstance(self.percent, bool) or not isinstance(self.percent, int):
            raise ValueError(f"Charge level must be an integer, got {self.percent!r}")
        if not 0 <= self.percent <= 100:
            raise ValueError(f"Charge level must be within 0-100, got {self.percent}")

    def __str__(self) -> str:
        return f"{self.percent}%"


def calc_battery_level(current: float, total: float) -> ChargeLevel:
    """
    Convert raw energy readings into a charge level.

    The percentage is rounded half away from zero and capped at 100.

    Args:
        current: Energy currently stored.
        total: Energy stored when full. Must be non-zero.

    Returns:
        The resulting ChargeLevel.
    """
    percentage = current * 100.0 / total
    level = int(math.floor(percentage + 0.5))
    return ChargeLevel(min(level, 100))


def level_samples(source: BatterySource) -> Iterator[ChargeLevel]:
    """
    Yield the battery level each time the iterator is advanced.

    The full-charge energy is read once, on the first advance. Any read
    failure propagates and ends the iteration.
    """
    total = source.energy_full()
    logger.debug(f"Battery full energy: {total}")

    while True:
        current = source.energy_now()
        yield calc_battery_level(current, total)
