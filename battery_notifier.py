#!/usr/bin/env python3
"""
Battery Notifier

Polls the laptop battery once a minute and shows a desktop notification
when the charge drops to the low or critical level.
"""

import argparse
import os
import sys
import time
from typing import Callable, Optional

from loguru import logger

import config
from battery_source import BatteryError, BatterySource
from debounce import DebounceStateMachine
from levels import level_samples


def setup_logging(verbose: bool = False) -> None:
    """
    Setup logging configuration.

    Args:
        verbose: Enable verbose logging
    """
    logger.remove()

    level = "DEBUG" if verbose else "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    )


def run(
    source: BatterySource,
    notifier,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
    interval: float = config.POLL_INTERVAL,
) -> None:
    """
    Sample the battery forever, notifying on low and critical levels.

    Charging status is read separately from the level on every cycle. The
    sleep between cycles is fixed and does not account for time spent
    reading or notifying.

    Args:
        source: Where battery readings come from.
        notifier: Object providing ``notify(severity, level)``.
        clock: Monotonic time source, in seconds.
        sleep: Called with ``interval`` after each cycle.
        interval: Seconds to wait between cycles.

    Raises:
        BatteryError: If a battery reading fails.
        NotificationError: If a notification cannot be shown.
    """
    machine = DebounceStateMachine(notifier)

    for level in level_samples(source):
        logger.info(f"Current battery: {level}")
        now = clock()
        charging = source.is_charging()

        machine.observe(level, charging, now)

        sleep(interval)


def parse_arguments(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Desktop notifications for low and critical battery levels"
    )
    parser.add_argument(
        "--battery",
        help="Power supply directory to monitor (default: first of "
        + ", ".join(config.BATTERY_PATHS)
        + ")",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv: Optional[list] = None) -> None:
    """Main entry point for the battery notifier."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    # Check if running on a system with a display
    if not os.environ.get('DISPLAY') and not os.environ.get('WAYLAND_DISPLAY'):
        logger.error("No display server found. Notifications require X11 or Wayland.")
        sys.exit(1)

    # libnotify is only needed once a desktop session is confirmed
    from notifier import NotificationError, NotificationService

    try:
        source = BatterySource(args.battery)
        with NotificationService(config.APP_NAME) as notifier:
            run(source, notifier)
    except (BatteryError, NotificationError, ZeroDivisionError) as e:
        logger.error(f"Battery notifier stopped: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Exiting...")
        sys.exit(0)


if __name__ == "__main__":
    main()
