"""
Interfaces package for focus-timer.

Abstract contracts for the environment the core runs in: clock sources,
persistence stores and alert backends.
"""

from focus_timer.interfaces.alert import SoundInterface, VibrationInterface
from focus_timer.interfaces.clock import ClockInterface, ScheduleHandle
from focus_timer.interfaces.store import StoreInterface

__all__ = [
    "ClockInterface",
    "ScheduleHandle",
    "StoreInterface",
    "SoundInterface",
    "VibrationInterface",
]
