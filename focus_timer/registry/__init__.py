"""
Timer registry.
"""

from focus_timer.registry.timer_registry import ScheduleOwner, TimerRegistry

__all__ = [
    "ScheduleOwner",
    "TimerRegistry",
]
