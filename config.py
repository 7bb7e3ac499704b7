"""
Configuration options for the battery notifier.

These values are fixed at import time. Thresholds and cooldowns are
deliberately not exposed on the command line.
"""

# Application name registered with the notification daemon
APP_NAME: str = "battery-notifier"

# Poll interval in seconds (how often to sample the battery)
POLL_INTERVAL: int = 60

# Battery threshold percentages for notifications
LOW_BATTERY_THRESHOLD: int = 15  # Show warning notification at or below this level
CRITICAL_BATTERY_THRESHOLD: int = 6  # Show critical notification at or below this level

# Minimum seconds between repeated notifications
LOW_COOLDOWN: int = 5 * 60
CRITICAL_COOLDOWN: int = 60

# Battery paths (will try these in order)
BATTERY_PATHS: list = [
    "/sys/class/power_supply/BAT0",
    "/sys/class/power_supply/BAT1",
]

# Contents of the sysfs "status" file
CHARGING_STATUSES: tuple = ("Charging",)
NOT_CHARGING_STATUSES: tuple = ("Unknown", "Discharging", "Not charging", "Full")

# Notification icons
LOW_BATTERY_ICON: str = "battery-low"
CRITICAL_BATTERY_ICON: str = "battery-caution"
