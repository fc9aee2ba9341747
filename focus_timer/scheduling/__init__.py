"""
Clock source implementations.
"""

from focus_timer.scheduling.asyncio_clock import AsyncioClock
from focus_timer.scheduling.manual import ManualClock

__all__ = [
    "AsyncioClock",
    "ManualClock",
]
