"""
Decides when a battery alert should be shown.

Each sample is checked against the critical and low thresholds, and the
time of the last alert is remembered so repeats are held back until the
matching cooldown has elapsed. Plugging the charger in clears everything.
"""

import enum
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from loguru import logger

import config
from levels import ChargeLevel

CRITICAL_BATTERY_LEVEL = ChargeLevel(config.CRITICAL_BATTERY_THRESHOLD)
LOW_BATTERY_LEVEL = ChargeLevel(config.LOW_BATTERY_THRESHOLD)


class Severity(enum.Enum):
    LOW = "low"
    CRITICAL = "critical"


@dataclass(frozen=True)
class NeverNotified:
    pass


@dataclass(frozen=True)
class Charging:
    pass


@dataclass(frozen=True)
class NotifiedLow:
    at: float


@dataclass(frozen=True)
class NotifiedCritical:
    at: float


NotificationState = Union[NeverNotified, Charging, NotifiedLow, NotifiedCritical]


def _within(state: NotificationState, kind: type, now: float, window: float) -> bool:
    return isinstance(state, kind) and now - state.at < window


def decide(
    state: NotificationState, now: float, level: ChargeLevel, charging: bool
) -> Tuple[NotificationState, Optional[Severity]]:
    """
    Work out the next state and which alert, if any, to show.

    Args:
        state: State left by the previous sample.
        now: Monotonic time of this sample, in seconds.
        level: Battery level of this sample.
        charging: Whether the battery is charging.

    Returns:
        Tuple of (next_state, severity). severity is None when no alert
        should be shown, in which case next_state may be the same object.
    """
    if charging:
        return Charging(), None

    if level <= CRITICAL_BATTERY_LEVEL and not _within(
        state, NotifiedCritical, now, config.CRITICAL_COOLDOWN
    ):
        return NotifiedCritical(now), Severity.CRITICAL

    # A recent critical alert also holds back the low alert, for the full
    # low cooldown rather than the critical one.
    if (
        level <= LOW_BATTERY_LEVEL
        and not _within(state, NotifiedLow, now, config.LOW_COOLDOWN)
        and not _within(state, NotifiedCritical, now, config.LOW_COOLDOWN)
    ):
        return NotifiedLow(now), Severity.LOW

    return state, None


class DebounceStateMachine:
    """
    Holds the notification state across samples and drives the notifier.

    The notifier must provide ``notify(severity, level)``.
    """

    def __init__(self, notifier, state: Optional[NotificationState] = None) -> None:
        self.notifier = notifier
        self.state: NotificationState = state if state is not None else NeverNotified()

    def observe(self, level: ChargeLevel, charging: bool, now: float) -> Optional[Severity]:
        """
        Feed one sample through the state machine.

        The state only moves to the new value after the notifier succeeds;
        a notifier error propagates and leaves the state as it was.

        Returns:
            The severity of the alert that was shown, or None.
        """
        new_state, severity = decide(self.state, now, level, charging)

        if severity is not None:
            logger.warning(f"Battery {severity.value}! ({level})")
            self.notifier.notify(severity, level)

        if new_state != self.state:
            logger.debug(f"Notification state: {self.state} -> {new_state}")
        self.state = new_state
        return severity
