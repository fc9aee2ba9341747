"""
Data models package for focus-timer.

Modules:
    timer: Timer entity, persisted TimerRecord, TimerView snapshot
    result: OperationResult returned to the presentation layer
    config: Configuration models
"""

from focus_timer.models.config import AlarmConfig, FocusTimerConfig, StorageConfig, TimerConfig
from focus_timer.models.result import OperationResult
from focus_timer.models.timer import Timer, TimerRecord, TimerView

__all__ = [
    # Timer models
    "Timer",
    "TimerRecord",
    "TimerView",
    # Results
    "OperationResult",
    # Config models
    "FocusTimerConfig",
    "StorageConfig",
    "TimerConfig",
    "AlarmConfig",
]
