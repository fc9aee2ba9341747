"""
Manually advanced clock.

Time only moves when advance() is called, which makes tick and alarm
sequences fully deterministic. Used by the test suite and by step-driven
front ends.
"""

from typing import Callable, List, Optional

from focus_timer.interfaces.clock import ClockInterface, ScheduleHandle

_EPSILON = 1e-9


class _ManualSchedule(ScheduleHandle):
    def __init__(
        self,
        clock: "ManualClock",
        due: float,
        interval: Optional[float],
        callback: Callable[[], None],
        seq: int,
    ):
        self._clock = clock
        self.due = due
        self.interval = interval
        self.callback = callback
        self.seq = seq
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    @property
    def repeating(self) -> bool:
        return self.interval is not None

    def cancel(self) -> None:
        if self._active:
            self._active = False
            self._clock._discard(self)

    def _expire(self) -> None:
        self._active = False
        self._clock._discard(self)


class ManualClock(ClockInterface):
    """
    Clock driven by explicit calls to advance().

    Callbacks fire in due-time order; ties fire in scheduling order. A
    callback may cancel or install schedules, including its own. Exceptions
    raised by callbacks propagate to the caller of advance().

    Example:
        >>> clock = ManualClock()
        >>> calls = []
        >>> handle = clock.schedule_repeating(1.0, lambda: calls.append(clock.now()))
        >>> clock.advance(3)
        >>> calls
        [1.0, 2.0, 3.0]
    """

    def __init__(self, start: float = 0.0):
        self._now = start
        self._schedules: List[_ManualSchedule] = []
        self._seq = 0

    def now(self) -> float:
        return self._now

    def schedule_repeating(self, interval: float, callback: Callable[[], None]) -> ScheduleHandle:
        if interval <= 0:
            raise ValueError("interval must be positive")
        return self._add(self._now + interval, interval, callback)

    def schedule_once(self, delay: float, callback: Callable[[], None]) -> ScheduleHandle:
        return self._add(self._now + max(0.0, delay), None, callback)

    def advance(self, seconds: float) -> None:
        """
        Move time forward, firing every callback that falls due.

        Args:
            seconds: Non-negative amount of time to advance
        """
        if seconds < 0:
            raise ValueError("cannot move a clock backwards")

        target = self._now + seconds
        while True:
            schedule = self._next_due(target)
            if schedule is None:
                break

            self._now = max(self._now, schedule.due)
            if schedule.repeating:
                schedule.due += schedule.interval
                schedule.seq = self._next_seq()
            else:
                schedule._expire()
            schedule.callback()

        self._now = target

    @property
    def pending(self) -> int:
        """Number of active schedules."""
        return len(self._schedules)

    def _next_due(self, target: float) -> Optional[_ManualSchedule]:
        due = [s for s in self._schedules if s.due <= target + _EPSILON]
        if not due:
            return None
        return min(due, key=lambda s: (s.due, s.seq))

    def _add(
        self,
        due: float,
        interval: Optional[float],
        callback: Callable[[], None],
    ) -> _ManualSchedule:
        schedule = _ManualSchedule(self, due, interval, callback, self._next_seq())
        self._schedules.append(schedule)
        return schedule

    def _discard(self, schedule: _ManualSchedule) -> None:
        if schedule in self._schedules:
            self._schedules.remove(schedule)

    def _next_seq(self) -> int:
        self._seq += 1
        return self._seq
