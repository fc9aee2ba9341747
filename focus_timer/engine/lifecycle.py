"""
Timer Lifecycle Engine.

Drives each timer through Idle/Paused -> Running -> Paused or Finished.
The engine's index of tick schedules is the only authority on which timers
are ticking; a timer's is_running flag mirrors it.

At most one tick schedule exists per timer id. Installing a schedule always
cancels the previous one for the same id first.
"""

from typing import Dict, Optional

from focus_timer.engine.alarm import AlarmCoordinator
from focus_timer.events.bus import EventBus
from focus_timer.events.types import EventType, TimerEvent
from focus_timer.interfaces.clock import ClockInterface, ScheduleHandle
from focus_timer.models.config import TimerConfig
from focus_timer.models.timer import Timer
from focus_timer.registry.timer_registry import ScheduleOwner, TimerRegistry
from focus_timer.storage.persistence import TimerPersistence
from focus_timer.utils.logging import get_logger

logger = get_logger(__name__)


class LifecycleEngine(ScheduleOwner):
    """
    Start, pause, reset and tick timers.

    Every operation takes a timer id and returns False when no such timer
    exists; unknown ids never raise.

    Example:
        >>> engine = LifecycleEngine(registry, clock, persistence, alarms, bus)
        >>> engine.toggle_start_pause(1)   # starts, ticks once immediately
        True
        >>> engine.toggle_start_pause(1)   # pauses
        True
    """

    def __init__(
        self,
        registry: TimerRegistry,
        clock: ClockInterface,
        persistence: TimerPersistence,
        alarms: AlarmCoordinator,
        bus: EventBus,
        config: Optional[TimerConfig] = None,
    ):
        """
        Initialize lifecycle engine.

        Args:
            registry: Timer collection
            clock: Clock driving ticks
            persistence: Checkpoint target
            alarms: Coordinator started when a timer finishes
            bus: Bus receiving timer events
            config: Timer configuration
        """
        self.registry = registry
        self.clock = clock
        self.persistence = persistence
        self.alarms = alarms
        self.bus = bus
        self.config = config or TimerConfig()
        self._ticks: Dict[int, ScheduleHandle] = {}

    def is_ticking(self, timer_id: int) -> bool:
        return timer_id in self._ticks

    def toggle_start_pause(self, timer_id: int) -> bool:
        """Pause a running timer, otherwise start it."""
        timer = self.registry.find(timer_id)
        if timer is None:
            return False

        if timer.is_running:
            return self.pause(timer_id)
        return self.start(timer_id)

    def start(self, timer_id: int) -> bool:
        """
        Start or resume a timer.

        A finished timer restarts from its full duration. The first tick
        happens immediately so the display moves without a one-interval lag.
        Starting a running timer is a no-op.

        Returns:
            False if the timer does not exist
        """
        timer = self.registry.find(timer_id)
        if timer is None:
            return False

        if timer.is_running:
            logger.debug("timer_already_running", timer_id=timer_id)
            return True

        if timer.time_left <= 0:
            timer.time_left = timer.duration

        timer.is_running = True
        self._cancel_tick(timer_id)
        # Installed before the immediate tick so a tick that finishes the
        # timer cancels it.
        self._ticks[timer_id] = self.clock.schedule_repeating(
            self.config.tick_interval, lambda: self.tick(timer_id)
        )
        logger.info("timer_started", timer_id=timer_id, time_left=timer.time_left)
        self._publish(EventType.TIMER_STARTED, timer)

        self.tick(timer_id)
        return True

    def pause(self, timer_id: int) -> bool:
        """
        Pause a running timer and checkpoint its progress.

        Pausing a timer that is not running changes nothing.

        Returns:
            False if the timer does not exist
        """
        timer = self.registry.find(timer_id)
        if timer is None:
            return False

        if not timer.is_running:
            return True

        self._cancel_tick(timer_id)
        timer.is_running = False
        logger.info("timer_paused", timer_id=timer_id, time_left=timer.time_left)

        self.checkpoint()
        self._publish(EventType.TIMER_PAUSED, timer)
        return True

    def reset(self, timer_id: int) -> bool:
        """
        Stop a timer and restore its full duration.

        Also dismisses every sounding alarm, not only this timer's.

        Returns:
            False if the timer does not exist
        """
        timer = self.registry.find(timer_id)
        if timer is None:
            return False

        self.alarms.stop_all()

        self._cancel_tick(timer_id)
        timer.is_running = False
        timer.time_left = timer.duration
        logger.info("timer_reset", timer_id=timer_id, duration=timer.duration)

        self.checkpoint()
        self._publish(EventType.TIMER_RESET, timer)
        return True

    def tick(self, timer_id: int) -> None:
        """
        Advance a running timer by one second.

        Checkpoints every ``checkpoint_every`` seconds of remaining time and
        when the timer finishes. A finishing tick stops the schedule, clears
        is_running and starts the timer's alarm within the same call.
        """
        timer = self.registry.find(timer_id)
        if timer is None or not timer.is_running:
            # Stale schedule for a deleted or stopped timer
            self._cancel_tick(timer_id)
            return

        timer.time_left = max(0, timer.time_left - 1)
        self._publish(EventType.TIMER_TICKED, timer)

        if timer.time_left <= 0:
            self._finish(timer)
        elif timer.time_left % self.config.checkpoint_every == 0:
            self.checkpoint()

    def release(self, timer_id: int) -> None:
        """Cancel the tick schedule of a timer being deleted."""
        if self._cancel_tick(timer_id):
            timer = self.registry.find(timer_id)
            if timer is not None:
                timer.is_running = False
            logger.debug("tick_released", timer_id=timer_id)

    def checkpoint(self) -> bool:
        """Persist every timer's durable state."""
        return self.persistence.save(self.registry.list())

    def shutdown(self) -> None:
        """Stop every tick schedule."""
        for timer_id in list(self._ticks):
            self.release(timer_id)

    def _finish(self, timer: Timer) -> None:
        self._cancel_tick(timer.id)
        timer.is_running = False
        logger.info("timer_finished", timer_id=timer.id, name=timer.name)

        self.checkpoint()
        self.alarms.start(timer.id)
        self._publish(EventType.TIMER_FINISHED, timer)

    def _cancel_tick(self, timer_id: int) -> bool:
        handle = self._ticks.pop(timer_id, None)
        if handle is None:
            return False
        handle.cancel()
        return True

    def _publish(self, event_type: EventType, timer: Timer) -> None:
        self.bus.publish(
            TimerEvent(
                event_type=event_type,
                timer_id=timer.id,
                name=timer.name,
                time_left=timer.time_left,
                is_running=timer.is_running,
            )
        )
