"""
Desktop notifications through libnotify.

NotificationService is a context manager: libnotify is initialised on
entry and released on exit, whichever way the block is left.
"""

import gi
gi.require_version('Notify', '0.7')
from gi.repository import GLib, Notify

from loguru import logger

import config
from debounce import Severity
from levels import ChargeLevel


class NotificationError(Exception):
    """libnotify could not be initialised or a notification failed to show."""


class NotificationService:
    """Shows persistent low and critical battery notifications."""

    def __init__(self, app_name: str = config.APP_NAME) -> None:
        self.app_name = app_name

    def __enter__(self) -> "NotificationService":
        if not Notify.init(self.app_name):
            raise NotificationError(f"Failed to initialize libnotify for {self.app_name}")
        logger.debug("libnotify initialized")
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        Notify.uninit()
        logger.debug("libnotify released")

    def _show(self, summary: str, body: str, icon: str, urgency: Notify.Urgency) -> None:
        notification = Notify.Notification.new(summary, body, icon)
        notification.set_urgency(urgency)
        notification.set_timeout(Notify.EXPIRES_NEVER)
        try:
            shown = notification.show()
        except GLib.Error as e:
            raise NotificationError(f"Failed to show notification: {e}") from e
        if not shown:
            raise NotificationError(f"Failed to show notification: {summary}")

    def notify_critical_battery(self, level: ChargeLevel) -> None:
        self._show(
            "Battery Critical!",
            f"Battery critical at {level}",
            config.CRITICAL_BATTERY_ICON,
            Notify.Urgency.CRITICAL,
        )

    def notify_low_battery(self, level: ChargeLevel) -> None:
        self._show(
            "Battery Low!",
            f"Battery low at {level}",
            config.LOW_BATTERY_ICON,
            Notify.Urgency.NORMAL,
        )

    def notify(self, severity: Severity, level: ChargeLevel) -> None:
        """
        Show the notification matching a severity.

        Args:
            severity: Which alert to show.
            level: Battery level to include in the message.

        Raises:
            NotificationError: If the notification could not be shown.
        """
        if severity is Severity.CRITICAL:
            self.notify_critical_battery(level)
        else:
            self.notify_low_battery(level)
