"""
Timer registry.

Owns the timer collection and the id counter. Components that hold
schedules keyed by timer id register as schedule owners so a deleted timer
never leaves a tick or alarm running behind it.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from focus_timer.models.timer import Timer, TimerRecord
from focus_timer.utils.exceptions import ValidationError
from focus_timer.utils.logging import get_logger
from focus_timer.utils.validation import validate_duration_minutes

logger = get_logger(__name__)


class ScheduleOwner(ABC):
    """Anything holding per-timer schedules that must be released on delete."""

    @abstractmethod
    def release(self, timer_id: int) -> None:
        """Cancel every schedule held for this timer."""
        pass


class TimerRegistry:
    """
    Collection of timers in insertion order.

    Ids are allocated from a monotonic counter and never reused within a
    process. After restore() the counter continues from the highest
    restored id.

    Example:
        >>> registry = TimerRegistry()
        >>> timer = registry.create("Tea", 3)
        >>> registry.find(timer.id).duration
        180
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._timers: Dict[int, Timer] = {}
        self._next_id = 1
        self._owners: List[ScheduleOwner] = []

    @property
    def next_id(self) -> int:
        """Id the next created timer will get."""
        return self._next_id

    def add_schedule_owner(self, owner: ScheduleOwner) -> None:
        """
        Register a component to be told when a timer is deleted.

        Args:
            owner: Object with a release(timer_id) method
        """
        if owner not in self._owners:
            self._owners.append(owner)

    def create(self, name: str, duration_minutes: int) -> Timer:
        """
        Create a stopped timer.

        Args:
            name: Non-empty label
            duration_minutes: Whole minutes in [1, 999]

        Returns:
            The new timer

        Raises:
            ValidationError: If name is empty or the duration is invalid
        """
        if not name or not name.strip():
            raise ValidationError("name required", details={"field": "name"})
        minutes = validate_duration_minutes(duration_minutes)

        seconds = minutes * 60
        timer = Timer(
            id=self._allocate_id(),
            name=name.strip(),
            duration=seconds,
            time_left=seconds,
        )
        self._timers[timer.id] = timer

        logger.info("timer_created", timer_id=timer.id, name=timer.name, duration=seconds)
        return timer

    def find(self, timer_id: int) -> Optional[Timer]:
        """
        Look up a timer.

        Returns:
            The timer, or None if no timer has this id
        """
        return self._timers.get(timer_id)

    def delete(self, timer_id: int) -> bool:
        """
        Delete a timer, releasing its schedules first.

        Args:
            timer_id: Timer to delete

        Returns:
            True if a timer was removed, False if the id was unknown
        """
        timer = self._timers.get(timer_id)
        if timer is None:
            return False

        for owner in self._owners:
            owner.release(timer_id)

        del self._timers[timer_id]
        logger.info("timer_deleted", timer_id=timer_id, name=timer.name)
        return True

    def list(self) -> List[Timer]:
        """Timers in insertion order."""
        return list(self._timers.values())

    def restore(self, records: Iterable[TimerRecord]) -> List[Timer]:
        """
        Replace the collection with timers rebuilt from saved records.

        Every restored timer is stopped. The id counter becomes the highest
        restored id plus one, or 1 when nothing was restored.

        Args:
            records: Saved records, in display order

        Returns:
            The restored timers
        """
        for timer_id in list(self._timers):
            for owner in self._owners:
                owner.release(timer_id)

        self._timers = {}
        for record in records:
            if record.id in self._timers:
                logger.warning("duplicate_timer_skipped", timer_id=record.id)
                continue
            self._timers[record.id] = Timer.from_record(record)

        self._next_id = max(self._timers, default=0) + 1
        logger.info("timers_restored", count=len(self._timers), next_id=self._next_id)
        return self.list()

    def seed_default(self, name: str, minutes: int) -> Optional[Timer]:
        """
        Create the first-run timer if the registry is empty.

        Returns:
            The seeded timer, or None if timers already exist
        """
        if self._timers:
            return None
        return self.create(name, minutes)

    def __len__(self) -> int:
        return len(self._timers)

    def __contains__(self, timer_id: object) -> bool:
        return timer_id in self._timers

    def _allocate_id(self) -> int:
        timer_id = self._next_id
        self._next_id += 1
        return timer_id
