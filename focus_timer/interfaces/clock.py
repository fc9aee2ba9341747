"""
Clock Interface - scheduling contract.

Defines how the core asks its environment to run callbacks later, either
once or repeatedly, and how it cancels them.
"""

from abc import ABC, abstractmethod
from typing import Callable


class ScheduleHandle(ABC):
    """
    Ownership token for a scheduled callback.

    Whoever holds the handle is the only party allowed to cancel it.
    """

    @abstractmethod
    def cancel(self) -> None:
        """
        Cancel the schedule.

        Cancelling twice, or cancelling a one-shot that already fired, is a
        no-op.
        """
        pass

    @property
    @abstractmethod
    def active(self) -> bool:
        """True until the schedule is cancelled or a one-shot has fired."""
        pass


class ClockInterface(ABC):
    """
    Abstract interface for clock sources.

    Implementations run callbacks on a single logical thread, one at a time.

    Example:
        >>> handle = clock.schedule_repeating(1.0, on_tick)
        >>> handle.cancel()
    """

    @abstractmethod
    def schedule_repeating(self, interval: float, callback: Callable[[], None]) -> ScheduleHandle:
        """
        Run a callback every ``interval`` seconds until cancelled.

        The first call happens one interval from now.

        Args:
            interval: Seconds between calls
            callback: Zero-argument callable

        Returns:
            Handle used to cancel the schedule
        """
        pass

    @abstractmethod
    def schedule_once(self, delay: float, callback: Callable[[], None]) -> ScheduleHandle:
        """
        Run a callback once after ``delay`` seconds.

        Args:
            delay: Seconds to wait (0 means as soon as possible)
            callback: Zero-argument callable

        Returns:
            Handle used to cancel the call before it fires
        """
        pass

    @abstractmethod
    def now(self) -> float:
        """Current clock reading in seconds."""
        pass
