"""Pytest configuration and shared fixtures."""

import logging
from typing import List, Optional

import pytest
import structlog

from focus_timer.alerts.channel import AlertChannel
from focus_timer.app import FocusTimerApp
from focus_timer.events.bus import EventBus
from focus_timer.events.types import Event, EventType
from focus_timer.interfaces.alert import SoundInterface, VibrationInterface
from focus_timer.interfaces.store import StoreInterface
from focus_timer.models.config import FocusTimerConfig
from focus_timer.scheduling.manual import ManualClock
from focus_timer.storage.stores import InMemoryStore
from focus_timer.utils.exceptions import AlertChannelError, PersistenceError
from focus_timer.utils.logging import PACKAGE_LOGGER


# Mock alert backends
class RecordingSound(SoundInterface):
    """Sound backend that counts plays."""

    def __init__(self):
        self.plays = 0

    def play(self) -> None:
        self.plays += 1


class FailingSound(SoundInterface):
    """Sound backend that is always blocked."""

    def __init__(self):
        self.attempts = 0

    def play(self) -> None:
        self.attempts += 1
        raise AlertChannelError("playback blocked until user interaction")


class RecordingVibration(VibrationInterface):
    """Vibration backend that records patterns."""

    def __init__(self):
        self.patterns: List[List[int]] = []

    def vibrate(self, pattern: List[int]) -> None:
        self.patterns.append(list(pattern))


# Mock stores
class FailingStore(StoreInterface):
    """Store whose backing storage is unavailable."""

    def __init__(self):
        self.writes = 0

    def get(self, key: str) -> Optional[str]:
        raise PersistenceError("storage unavailable", details={"key": key})

    def set(self, key: str, value: str) -> None:
        self.writes += 1
        raise PersistenceError("quota exceeded", details={"key": key})

    def delete(self, key: str) -> None:
        raise PersistenceError("storage unavailable", details={"key": key})


class EventRecorder:
    """Wildcard bus subscriber keeping every event."""

    def __init__(self):
        self.events: List[Event] = []

    def __call__(self, event: Event) -> None:
        self.events.append(event)

    def of_type(self, event_type: EventType) -> List[Event]:
        return [e for e in self.events if e.event_type == event_type]

    def clear(self) -> None:
        self.events.clear()


@pytest.fixture
def clock():
    """Manually advanced clock starting at zero."""
    return ManualClock()


@pytest.fixture
def store():
    """Empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def recorder():
    """Event recorder."""
    return EventRecorder()


@pytest.fixture
def bus(recorder):
    """Event bus with a recorder subscribed to everything."""
    bus = EventBus(enable_history=True)
    bus.subscribe_all(recorder)
    return bus


@pytest.fixture
def sound():
    return RecordingSound()


@pytest.fixture
def vibration():
    return RecordingVibration()


@pytest.fixture
def channel(sound, vibration):
    """Alert channel with recording backends."""
    return AlertChannel(sound=sound, vibration=vibration)


@pytest.fixture
def config():
    """Default configuration with in-memory storage."""
    return FocusTimerConfig(storage={"backend": "memory"})


@pytest.fixture
def app(clock, store, config, channel, bus):
    """Initialized application holding the seeded default timer."""
    app = FocusTimerApp(clock=clock, store=store, config=config, channel=channel, bus=bus)
    app.initialize()
    return app


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest.fixture
def failing_sound():
    return FailingSound()


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any logging configuration a test applied."""
    yield
    structlog.reset_defaults()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
