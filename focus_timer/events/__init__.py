"""
Event System.

Provides the pub/sub bus through which the core notifies the presentation
layer of state changes and alarm visuals.
"""

from focus_timer.events.bus import EventBus
from focus_timer.events.handlers import EventHandler
from focus_timer.events.types import AlarmEvent, Event, EventType, MuteEvent, TimerEvent

__all__ = [
    "EventBus",
    "EventHandler",
    "Event",
    "EventType",
    "TimerEvent",
    "AlarmEvent",
    "MuteEvent",
]
