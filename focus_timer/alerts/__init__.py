"""
Alert output for alarms.
"""

from focus_timer.alerts.backends import TerminalBell
from focus_timer.alerts.channel import DEFAULT_VIBRATION_PATTERN, AlertChannel

__all__ = [
    "AlertChannel",
    "DEFAULT_VIBRATION_PATTERN",
    "TerminalBell",
]
