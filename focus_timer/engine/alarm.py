"""
Alarm Coordinator.

Runs one repeating alert loop per finished timer until the user dismisses
it. The coordinator's index of alarm schedules is the only record of which
timers are alarming.

Dismissal is global: stop_all() silences every alarming timer at once, not
only the one whose dismiss control was pressed.
"""

from typing import Dict, List, Optional

from focus_timer.alerts.channel import AlertChannel
from focus_timer.events.bus import EventBus
from focus_timer.events.types import AlarmEvent, EventType
from focus_timer.interfaces.clock import ClockInterface, ScheduleHandle
from focus_timer.models.config import AlarmConfig
from focus_timer.registry.timer_registry import ScheduleOwner
from focus_timer.utils.logging import get_logger

logger = get_logger(__name__)


class AlarmCoordinator(ScheduleOwner):
    """
    Per-timer alarm loops.

    Example:
        >>> alarms = AlarmCoordinator(clock, channel, bus)
        >>> alarms.start(1)
        >>> alarms.is_alarming(1)
        True
        >>> alarms.stop_all()
    """

    def __init__(
        self,
        clock: ClockInterface,
        channel: AlertChannel,
        bus: EventBus,
        config: Optional[AlarmConfig] = None,
    ):
        """
        Initialize alarm coordinator.

        Args:
            clock: Clock used to repeat alerts
            channel: Alert output
            bus: Bus receiving alarm visual events
            config: Alarm configuration
        """
        self.clock = clock
        self.channel = channel
        self.bus = bus
        self.config = config or AlarmConfig()
        self._alarms: Dict[int, ScheduleHandle] = {}
        self._flash: Optional[ScheduleHandle] = None

    @property
    def title(self) -> str:
        """Page title for the current alarm state."""
        return self.config.alarm_title if self._alarms else self.config.idle_title

    def is_alarming(self, timer_id: int) -> bool:
        return timer_id in self._alarms

    def active_ids(self) -> List[int]:
        return list(self._alarms)

    def start(self, timer_id: int) -> None:
        """
        Start (or restart) the alarm loop for a timer.

        An alarm already sounding for the same timer is replaced, never
        stacked.

        Args:
            timer_id: Timer that finished
        """
        previous = self._alarms.pop(timer_id, None)
        if previous is not None:
            previous.cancel()
            logger.debug("alarm_rearmed", timer_id=timer_id)

        self.channel.alert()
        self._alarms[timer_id] = self.clock.schedule_repeating(
            self.config.repeat_interval, self.channel.alert
        )
        logger.info("alarm_started", timer_id=timer_id, active=len(self._alarms))

        self.bus.publish(
            AlarmEvent(
                event_type=EventType.ALARM_STARTED,
                timer_ids=[timer_id],
                active_ids=self.active_ids(),
                title=self.config.alarm_title,
                flash=True,
                show_dismiss=True,
            )
        )
        self._schedule_flash_end()

    def stop_all(self) -> List[int]:
        """
        Dismiss every sounding alarm.

        Always publishes ALARM_STOPPED so the dismiss control is hidden and
        the title restored, even when nothing was alarming.

        Returns:
            Ids of timers whose alarms were stopped
        """
        stopped = list(self._alarms)
        for handle in self._alarms.values():
            handle.cancel()
        self._alarms.clear()

        if stopped:
            logger.info("alarms_dismissed", timer_ids=stopped)
        self._publish_stopped(stopped)
        return stopped

    def release(self, timer_id: int) -> None:
        """
        Stop one timer's alarm, used when the timer is deleted.

        Publishes ALARM_STOPPED only when that was the last active alarm.
        """
        handle = self._alarms.pop(timer_id, None)
        if handle is None:
            return

        handle.cancel()
        logger.info("alarm_released", timer_id=timer_id)
        if not self._alarms:
            self._publish_stopped([timer_id])

    def shutdown(self) -> None:
        """Cancel all schedules without publishing."""
        for handle in self._alarms.values():
            handle.cancel()
        self._alarms.clear()
        if self._flash is not None:
            self._flash.cancel()
            self._flash = None

    def _schedule_flash_end(self) -> None:
        if self._flash is not None:
            self._flash.cancel()
        self._flash = self.clock.schedule_once(self.config.flash_duration, self._end_flash)

    def _end_flash(self) -> None:
        self._flash = None
        self.bus.publish(
            AlarmEvent(
                event_type=EventType.ALARM_FLASH_ENDED,
                active_ids=self.active_ids(),
                title=self.title,
                flash=False,
                show_dismiss=bool(self._alarms),
            )
        )

    def _publish_stopped(self, stopped: List[int]) -> None:
        self.bus.publish(
            AlarmEvent(
                event_type=EventType.ALARM_STOPPED,
                timer_ids=stopped,
                active_ids=self.active_ids(),
                title=self.title,
                flash=False,
                show_dismiss=bool(self._alarms),
            )
        )
