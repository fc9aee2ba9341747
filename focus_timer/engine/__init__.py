"""
Timer lifecycle and alarm coordination.
"""

from focus_timer.engine.alarm import AlarmCoordinator
from focus_timer.engine.lifecycle import LifecycleEngine

__all__ = [
    "AlarmCoordinator",
    "LifecycleEngine",
]
