"""
Event type definitions.

Defines the events the core publishes for the presentation layer.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class EventType(str, Enum):
    """Event type enumeration."""

    # Timer events
    TIMER_CREATED = "timer.created"
    TIMER_STARTED = "timer.started"
    TIMER_PAUSED = "timer.paused"
    TIMER_TICKED = "timer.ticked"
    TIMER_RESET = "timer.reset"
    TIMER_FINISHED = "timer.finished"
    TIMER_DELETED = "timer.deleted"
    TIMERS_LOADED = "timers.loaded"

    # Alarm events
    ALARM_STARTED = "alarm.started"
    ALARM_FLASH_ENDED = "alarm.flash_ended"
    ALARM_STOPPED = "alarm.stopped"

    # Alert events
    MUTE_CHANGED = "alert.mute_changed"


class Event(BaseModel):
    """
    Base event class.

    Attributes:
        event_id: Unique event identifier
        event_type: Type of event
        timestamp: Event timestamp
        data: Event payload
    """

    model_config = ConfigDict(use_enum_values=True)

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    event_type: EventType
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    data: Dict[str, Any] = Field(default_factory=dict)


class TimerEvent(Event):
    """
    Timer state change; the presentation layer should re-render.

    Attributes:
        timer_id: Timer identifier
        name: Timer name
        time_left: Remaining seconds after the change
        is_running: Running flag after the change
    """

    timer_id: int
    name: Optional[str] = None
    time_left: Optional[int] = None
    is_running: bool = False


class AlarmEvent(Event):
    """
    Alarm visuals changed.

    Attributes:
        timer_ids: Timers whose alarms started or stopped
        active_ids: Timers still alarming after the change
        title: Page title to show
        flash: Whether to flash the screen
        show_dismiss: Whether the dismiss control should be visible
    """

    timer_ids: List[int] = Field(default_factory=list)
    active_ids: List[int] = Field(default_factory=list)
    title: str
    flash: bool = False
    show_dismiss: bool = False


class MuteEvent(Event):
    """
    Mute flag changed.

    Attributes:
        muted: New mute state
    """

    muted: bool
