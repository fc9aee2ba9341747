"""Tests for the alarm coordinator and alert channel."""

import io

import pytest

from focus_timer.alerts.backends import TerminalBell
from focus_timer.alerts.channel import AlertChannel
from focus_timer.engine.alarm import AlarmCoordinator
from focus_timer.events.types import EventType
from focus_timer.utils.exceptions import AlertChannelError


@pytest.fixture
def alarms(clock, channel, bus):
    return AlarmCoordinator(clock, channel, bus)


class TestAlarmLoop:
    """Tests for repeating alerts."""

    def test_alerts_immediately_then_every_two_seconds(self, alarms, clock, sound, vibration):
        alarms.start(1)
        assert sound.plays == 1

        clock.advance(4)

        assert sound.plays == 3
        assert vibration.patterns == [[500, 200, 500]] * 3
        assert alarms.is_alarming(1)
        assert alarms.title == "⏰ TIME'S UP!"

    def test_restart_replaces_existing_loop(self, alarms, clock, sound):
        alarms.start(1)
        clock.advance(1)

        alarms.start(1)
        clock.advance(2)

        # Replaced loop fires at t=3 only; a stacked one would also fire at t=2
        assert sound.plays == 3
        assert alarms.active_ids() == [1]

    def test_started_event(self, alarms, recorder):
        alarms.start(7)

        event = recorder.of_type(EventType.ALARM_STARTED)[0]
        assert event.timer_ids == [7]
        assert event.flash is True
        assert event.show_dismiss is True

    def test_flash_ends(self, alarms, clock, recorder):
        alarms.start(1)

        clock.advance(0.2)
        assert recorder.of_type(EventType.ALARM_FLASH_ENDED) == []

        clock.advance(0.1)
        event = recorder.of_type(EventType.ALARM_FLASH_ENDED)[0]
        assert event.flash is False
        assert event.show_dismiss is True


class TestDismiss:
    """Tests for stopping alarms."""

    def test_stop_all_silences_every_timer(self, alarms, clock, sound, recorder):
        alarms.start(1)
        alarms.start(2)

        assert alarms.stop_all() == [1, 2]
        clock.advance(10)

        assert sound.plays == 2
        assert alarms.active_ids() == []
        assert alarms.title == "Focus Timer"
        event = recorder.of_type(EventType.ALARM_STOPPED)[-1]
        assert event.timer_ids == [1, 2]
        assert event.show_dismiss is False

    def test_stop_all_when_idle_still_publishes(self, alarms, recorder):
        assert alarms.stop_all() == []

        assert len(recorder.of_type(EventType.ALARM_STOPPED)) == 1

    def test_release_one_of_two(self, alarms, clock, sound, recorder):
        alarms.start(1)
        alarms.start(2)

        alarms.release(1)
        assert recorder.of_type(EventType.ALARM_STOPPED) == []
        clock.advance(2)
        assert sound.plays == 3

        alarms.release(2)
        assert recorder.of_type(EventType.ALARM_STOPPED)[0].timer_ids == [2]

    def test_release_unknown_is_noop(self, alarms, recorder):
        alarms.release(5)

        assert recorder.events == []

    def test_shutdown_cancels_silently(self, alarms, clock, recorder):
        alarms.start(1)
        recorder.clear()

        alarms.shutdown()

        assert clock.pending == 0
        assert recorder.events == []


class TestAlertChannel:
    """Tests for sound and vibration output."""

    def test_mute_suppresses_sound_only(self, alarms, channel, clock, sound, vibration):
        channel.muted = True

        alarms.start(1)
        clock.advance(2)

        assert sound.plays == 0
        assert len(vibration.patterns) == 2
        assert channel.get_statistics()["muted"] == 2

    def test_sound_failure_swallowed(self, clock, bus, failing_sound, vibration):
        channel = AlertChannel(sound=failing_sound, vibration=vibration)
        alarms = AlarmCoordinator(clock, channel, bus)

        alarms.start(1)
        clock.advance(2)

        assert failing_sound.attempts == 2
        assert len(vibration.patterns) == 2
        assert channel.get_statistics()["failures"] == 2
        assert alarms.is_alarming(1)

    def test_no_backends(self):
        channel = AlertChannel()

        channel.alert()

        assert channel.play() is False
        assert channel.vibrate() is False

    def test_custom_pattern(self, vibration):
        channel = AlertChannel(vibration=vibration, vibration_pattern=[100, 50])

        channel.vibrate()

        assert vibration.patterns == [[100, 50]]


class TestTerminalBell:
    """Tests for the terminal bell backend."""

    def test_rings(self):
        stream = io.StringIO()

        TerminalBell(stream=stream, rings=2).play()

        assert stream.getvalue() == "\a\a"

    def test_closed_stream(self):
        stream = io.StringIO()
        stream.close()

        with pytest.raises(AlertChannelError):
            TerminalBell(stream=stream).play()
