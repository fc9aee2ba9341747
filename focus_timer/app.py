"""
Focus timer application facade.

FocusTimerApp is the single context a presentation layer talks to. It wires
registry, lifecycle engine, alarm coordinator, persistence and alert output
together, restores saved timers, and exposes every user intent as a method
returning an OperationResult. State changes are announced on the event bus.
"""

from typing import Any, Dict, List, Optional, Union

from focus_timer.alerts.channel import AlertChannel
from focus_timer.engine.alarm import AlarmCoordinator
from focus_timer.engine.lifecycle import LifecycleEngine
from focus_timer.events.bus import EventBus
from focus_timer.events.types import Event, EventType, MuteEvent, TimerEvent
from focus_timer.interfaces.alert import SoundInterface, VibrationInterface
from focus_timer.interfaces.clock import ClockInterface
from focus_timer.interfaces.store import StoreInterface
from focus_timer.models.config import FocusTimerConfig
from focus_timer.models.result import OperationResult
from focus_timer.models.timer import Timer, TimerView
from focus_timer.registry.timer_registry import TimerRegistry
from focus_timer.scheduling.asyncio_clock import AsyncioClock
from focus_timer.storage.persistence import TimerPersistence
from focus_timer.storage.stores import FileStore, InMemoryStore
from focus_timer.utils.exceptions import ValidationError
from focus_timer.utils.logging import get_logger, setup_logging
from focus_timer.utils.validation import parse_duration_minutes, validate_timer_name

logger = get_logger(__name__)

TIMER_NOT_FOUND = "timer not found"


class FocusTimerApp:
    """
    Multi-timer application core.

    Example:
        >>> app = FocusTimerApp(clock=ManualClock(), store=InMemoryStore())
        >>> app.initialize()
        >>> [t.name for t in app.timers()]
        ['Focus Timer']
        >>> app.create("Tea", "3").success
        True
        >>> app.create("Tea", "12.5").reason
        'must be a whole number'
    """

    def __init__(
        self,
        clock: ClockInterface,
        store: StoreInterface,
        config: Optional[FocusTimerConfig] = None,
        channel: Optional[AlertChannel] = None,
        bus: Optional[EventBus] = None,
    ):
        """
        Initialize the application.

        Args:
            clock: Clock source for ticks and alarm repeats
            store: Key-value store for checkpoints
            config: Configuration (defaults apply when omitted)
            channel: Alert output (silent channel when omitted)
            bus: Event bus (a fresh bus when omitted)
        """
        self.config = config or FocusTimerConfig()
        self.clock = clock
        self.bus = bus or EventBus()
        self.channel = channel or AlertChannel(
            vibration_pattern=self.config.alarm.vibration_pattern,
            muted=self.config.alarm.start_muted,
        )

        self.registry = TimerRegistry()
        self.persistence = TimerPersistence(store, key=self.config.storage.key)
        self.alarms = AlarmCoordinator(clock, self.channel, self.bus, self.config.alarm)
        self.engine = LifecycleEngine(
            self.registry,
            clock,
            self.persistence,
            self.alarms,
            self.bus,
            self.config.timer,
        )
        self.registry.add_schedule_owner(self.engine)
        self.registry.add_schedule_owner(self.alarms)

    @property
    def is_muted(self) -> bool:
        return self.channel.muted

    @property
    def title(self) -> str:
        """Page title: the alarm title while anything is alarming."""
        return self.alarms.title

    def initialize(self) -> List[TimerView]:
        """
        Restore saved timers, seeding the default timer on first run.

        Restored timers are always stopped and silent, whatever their state
        when saved.

        Returns:
            Render snapshots of the restored timers
        """
        records = self.persistence.load()
        self.registry.restore(records)

        if not records:
            self.registry.seed_default(
                self.config.timer.default_name, self.config.timer.default_minutes
            )
            self.engine.checkpoint()

        logger.info("app_initialized", timers=len(self.registry), next_id=self.registry.next_id)
        self.bus.publish(
            Event(event_type=EventType.TIMERS_LOADED, data={"count": len(self.registry)})
        )
        return self.timers()

    def shutdown(self) -> None:
        """Cancel every schedule and write a final checkpoint."""
        self.engine.shutdown()
        self.alarms.shutdown()
        self.engine.checkpoint()
        logger.info("app_shutdown")

    def timers(self) -> List[TimerView]:
        """Render snapshots of all timers, in creation order."""
        return [self._view(timer) for timer in self.registry.list()]

    def get(self, timer_id: int) -> Optional[TimerView]:
        timer = self.registry.find(timer_id)
        return self._view(timer) if timer else None

    def create(self, name: Optional[str], minutes: Union[str, int, float, None]) -> OperationResult:
        """
        Create a timer from raw form input.

        Args:
            name: Timer name
            minutes: Duration in minutes, as typed or as a number

        Returns:
            Success with the new timer, or the first validation reason
        """
        try:
            clean_name = validate_timer_name(name)
            clean_minutes = parse_duration_minutes(minutes)
            timer = self.registry.create(clean_name, clean_minutes)
        except ValidationError as e:
            logger.info("timer_rejected", reason=e.reason)
            return OperationResult.fail(e.reason)

        self.engine.checkpoint()
        self.bus.publish(
            TimerEvent(
                event_type=EventType.TIMER_CREATED,
                timer_id=timer.id,
                name=timer.name,
                time_left=timer.time_left,
            )
        )
        return OperationResult.ok(self._view(timer))

    def toggle_start_pause(self, timer_id: int) -> OperationResult:
        """Start a stopped timer or pause a running one."""
        if not self.engine.toggle_start_pause(timer_id):
            return OperationResult.fail(TIMER_NOT_FOUND)
        return OperationResult.ok(self.get(timer_id))

    def reset(self, timer_id: int) -> OperationResult:
        """Reset a timer to its full duration, dismissing all alarms."""
        if not self.engine.reset(timer_id):
            return OperationResult.fail(TIMER_NOT_FOUND)
        return OperationResult.ok(self.get(timer_id))

    def delete(self, timer_id: int) -> OperationResult:
        """
        Delete a timer.

        Deleting an unknown id changes nothing and still succeeds.
        """
        timer = self.registry.find(timer_id)
        if not self.registry.delete(timer_id):
            return OperationResult.ok()

        self.engine.checkpoint()
        self.bus.publish(
            TimerEvent(event_type=EventType.TIMER_DELETED, timer_id=timer_id, name=timer.name)
        )
        return OperationResult.ok()

    def dismiss_alarm(self) -> OperationResult:
        """Silence every sounding alarm."""
        self.alarms.stop_all()
        return OperationResult.ok()

    def set_muted(self, muted: bool) -> OperationResult:
        """
        Mute or unmute alert sound.

        Vibration is not affected by mute.
        """
        muted = bool(muted)
        if self.channel.muted != muted:
            self.channel.muted = muted
            logger.info("alert_mute_changed", muted=muted)
            self.bus.publish(MuteEvent(event_type=EventType.MUTE_CHANGED, muted=muted))
        return OperationResult.ok()

    def toggle_muted(self) -> OperationResult:
        return self.set_muted(not self.channel.muted)

    def get_statistics(self) -> Dict[str, Any]:
        return {
            "timers": len(self.registry),
            "running": sum(1 for t in self.registry.list() if t.is_running),
            "alarming": len(self.alarms.active_ids()),
            "persistence": self.persistence.get_statistics(),
            "alerts": self.channel.get_statistics(),
            "events": self.bus.get_statistics(),
        }

    def _view(self, timer: Timer) -> TimerView:
        return TimerView.from_timer(timer, is_alarming=self.alarms.is_alarming(timer.id))


def create_app(
    config: Optional[FocusTimerConfig] = None,
    clock: Optional[ClockInterface] = None,
    sound: Optional[SoundInterface] = None,
    vibration: Optional[VibrationInterface] = None,
    bus: Optional[EventBus] = None,
    configure_logging: bool = True,
) -> FocusTimerApp:
    """
    Build an application from configuration.

    Uses an event-loop clock unless one is given and the store backend
    named in the configuration. Logging is configured from the
    configuration's log level and format unless configure_logging is
    False. Call initialize() on the result.

    Example:
        >>> config = load_config("focus_timer.yaml")
        >>> app = create_app(config, sound=TerminalBell())
        >>> app.initialize()
    """
    config = config or FocusTimerConfig()
    if configure_logging:
        setup_logging(config.log_level, config.log_format)

    store: StoreInterface
    if config.storage.backend == "memory":
        store = InMemoryStore()
    else:
        store = FileStore(config.storage.path)

    channel = AlertChannel(
        sound=sound,
        vibration=vibration,
        vibration_pattern=config.alarm.vibration_pattern,
        muted=config.alarm.start_muted,
    )

    return FocusTimerApp(
        clock=clock or AsyncioClock(),
        store=store,
        config=config,
        channel=channel,
        bus=bus,
    )
