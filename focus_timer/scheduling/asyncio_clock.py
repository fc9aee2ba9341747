"""
Event-loop clock.

Schedules callbacks on an asyncio event loop, so ticks, alarm repeats and
user operations all run one at a time on the loop's thread.
"""

import asyncio
from typing import Callable, Optional

from focus_timer.interfaces.clock import ClockInterface, ScheduleHandle
from focus_timer.utils.logging import get_logger

logger = get_logger(__name__)


class _LoopSchedule(ScheduleHandle):
    """Handle wrapping the loop's TimerHandle for the next pending call."""

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        delay: float,
        callback: Callable[[], None],
        interval: Optional[float] = None,
    ):
        self._loop = loop
        self._callback = callback
        self._interval = interval
        self._active = True
        self._handle: Optional[asyncio.TimerHandle] = loop.call_later(delay, self._fire)

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        if not self._active:
            return

        # Re-arm before running so the callback can cancel its own schedule
        if self._interval is not None:
            self._handle = self._loop.call_later(self._interval, self._fire)
        else:
            self._active = False
            self._handle = None

        try:
            self._callback()
        except Exception as e:
            logger.error(
                "scheduled_callback_failed",
                callback=getattr(self._callback, "__name__", repr(self._callback)),
                error=str(e),
            )


class AsyncioClock(ClockInterface):
    """
    Clock backed by an asyncio event loop.

    The loop is resolved lazily from the running loop unless one is given,
    so the clock can be built before the loop starts.

    Example:
        >>> async def main():
        ...     clock = AsyncioClock()
        ...     handle = clock.schedule_repeating(1.0, on_tick)
        ...     await asyncio.sleep(3.5)
        ...     handle.cancel()
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now(self) -> float:
        return self.loop.time()

    def schedule_repeating(self, interval: float, callback: Callable[[], None]) -> ScheduleHandle:
        if interval <= 0:
            raise ValueError("interval must be positive")
        return _LoopSchedule(self.loop, interval, callback, interval=interval)

    def schedule_once(self, delay: float, callback: Callable[[], None]) -> ScheduleHandle:
        return _LoopSchedule(self.loop, max(0.0, delay), callback)
