"""Tests for the timer lifecycle engine."""

import json

import pytest

from focus_timer.alerts.channel import AlertChannel
from focus_timer.engine.alarm import AlarmCoordinator
from focus_timer.engine.lifecycle import LifecycleEngine
from focus_timer.events.types import EventType
from focus_timer.models.config import TimerConfig
from focus_timer.registry.timer_registry import TimerRegistry
from focus_timer.storage.persistence import TimerPersistence


def saved_time_left(store, timer_id):
    records = json.loads(store.get("focus-timers"))
    return next(r["timeLeft"] for r in records if r["id"] == timer_id)


@pytest.fixture
def registry():
    return TimerRegistry()


@pytest.fixture
def engine(registry, clock, store, bus, sound, vibration):
    alarms = AlarmCoordinator(clock, AlertChannel(sound=sound, vibration=vibration), bus)
    engine = LifecycleEngine(registry, clock, TimerPersistence(store), alarms, bus)
    registry.add_schedule_owner(engine)
    registry.add_schedule_owner(alarms)
    return engine


class TestStartPause:
    """Tests for starting and pausing."""

    def test_start_ticks_immediately(self, engine, registry, clock):
        timer = registry.create("Focus Timer", 5)

        assert engine.toggle_start_pause(timer.id) is True

        assert timer.is_running is True
        assert timer.time_left == 299
        assert engine.is_ticking(timer.id)

        clock.advance(3)
        assert timer.time_left == 296

    def test_pause_freezes_and_checkpoints(self, engine, registry, clock, store):
        timer = registry.create("Focus Timer", 5)
        engine.toggle_start_pause(timer.id)
        clock.advance(2)

        engine.toggle_start_pause(timer.id)
        clock.advance(10)

        assert timer.is_running is False
        assert timer.time_left == 297
        assert not engine.is_ticking(timer.id)
        assert clock.pending == 0
        assert saved_time_left(store, timer.id) == 297

    def test_pause_when_stopped_is_noop(self, engine, registry, recorder):
        timer = registry.create("a", 1)

        assert engine.pause(timer.id) is True

        assert recorder.of_type(EventType.TIMER_PAUSED) == []

    def test_start_when_running_keeps_single_schedule(self, engine, registry, clock):
        timer = registry.create("a", 1)
        engine.start(timer.id)

        engine.start(timer.id)
        clock.advance(1)

        assert timer.time_left == 58
        assert clock.pending == 1

    def test_resume_continues_from_paused_value(self, engine, registry, clock):
        timer = registry.create("a", 1)
        engine.start(timer.id)
        engine.pause(timer.id)

        engine.start(timer.id)

        assert timer.time_left == 58

    def test_events_published(self, engine, registry, recorder):
        timer = registry.create("a", 1)

        engine.toggle_start_pause(timer.id)
        engine.toggle_start_pause(timer.id)

        types = [e.event_type for e in recorder.events]
        assert types == [
            EventType.TIMER_STARTED,
            EventType.TIMER_TICKED,
            EventType.TIMER_PAUSED,
        ]
        assert recorder.of_type(EventType.TIMER_TICKED)[0].time_left == 59

    def test_unknown_id(self, engine):
        assert engine.toggle_start_pause(42) is False
        assert engine.start(42) is False
        assert engine.pause(42) is False
        assert engine.reset(42) is False


class TestCheckpoints:
    """Tests for periodic checkpoints."""

    def test_checkpoint_every_ten_seconds(self, engine, registry, clock, store):
        timer = registry.create("a", 1)
        engine.start(timer.id)

        clock.advance(8)
        assert store.get("focus-timers") is None

        clock.advance(1)
        assert timer.time_left == 50
        assert saved_time_left(store, timer.id) == 50

    def test_custom_checkpoint_interval(self, registry, clock, store, bus, channel):
        alarms = AlarmCoordinator(clock, channel, bus)
        engine = LifecycleEngine(
            registry, clock, TimerPersistence(store), alarms, bus, TimerConfig(checkpoint_every=3)
        )
        timer = registry.create("a", 1)

        engine.start(timer.id)
        clock.advance(2)

        assert saved_time_left(store, timer.id) == 57


class TestFinish:
    """Tests for reaching zero."""

    def test_finish_stops_and_alarms(self, engine, registry, clock, store, sound, recorder):
        timer = registry.create("a", 1)
        engine.start(timer.id)

        clock.advance(59)

        assert timer.time_left == 0
        assert timer.is_running is False
        assert timer.is_finished
        assert not engine.is_ticking(timer.id)
        assert engine.alarms.is_alarming(timer.id)
        assert sound.plays == 1
        assert saved_time_left(store, timer.id) == 0
        assert len(recorder.of_type(EventType.TIMER_FINISHED)) == 1

        clock.advance(30)
        assert timer.time_left == 0

    def test_last_second_finishes_on_first_tick(self, engine, registry, clock):
        timer = registry.create("a", 1)
        timer.time_left = 1

        engine.start(timer.id)

        assert timer.is_finished
        assert not engine.is_ticking(timer.id)
        clock.advance(1)
        assert timer.time_left == 0

    def test_restart_finished_timer_uses_full_duration(self, engine, registry, clock):
        timer = registry.create("a", 1)
        engine.start(timer.id)
        clock.advance(59)

        engine.start(timer.id)

        assert timer.is_running is True
        assert timer.time_left == 59


class TestReset:
    """Tests for reset."""

    def test_reset_restores_duration(self, engine, registry, clock, store):
        timer = registry.create("a", 2)
        engine.start(timer.id)
        clock.advance(5)

        assert engine.reset(timer.id) is True

        assert timer.time_left == 120
        assert timer.is_running is False
        assert clock.pending == 0
        assert saved_time_left(store, timer.id) == 120

    def test_reset_dismisses_every_alarm(self, engine, registry, clock, sound):
        first = registry.create("a", 1)
        second = registry.create("b", 1)
        engine.start(first.id)
        engine.start(second.id)
        clock.advance(59)
        assert engine.alarms.active_ids() == [first.id, second.id]

        engine.reset(first.id)
        plays = sound.plays
        clock.advance(10)

        assert engine.alarms.active_ids() == []
        assert sound.plays == plays
        assert second.time_left == 0


class TestRelease:
    """Tests for schedule release on delete."""

    def test_delete_cancels_tick(self, engine, registry, clock):
        timer = registry.create("a", 1)
        engine.start(timer.id)

        registry.delete(timer.id)
        clock.advance(5)

        assert clock.pending == 0
        assert not engine.is_ticking(timer.id)

    def test_stale_tick_is_ignored(self, engine, registry):
        engine.tick(99)

        assert not engine.is_ticking(99)

    def test_shutdown(self, engine, registry, clock):
        a = registry.create("a", 1)
        b = registry.create("b", 1)
        engine.start(a.id)
        engine.start(b.id)

        engine.shutdown()

        assert clock.pending == 0
        assert not a.is_running and not b.is_running
