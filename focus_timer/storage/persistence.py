"""
Timer persistence.

Saves and restores the durable subset of timer state (id, name, duration,
time left) as a JSON list under a single storage key. Failures never reach
the caller: a failed read is "no saved state", a failed write is a skipped
checkpoint.
"""

import json
from typing import Iterable, List, Set

from pydantic import ValidationError as PydanticValidationError

from focus_timer.interfaces.store import StoreInterface
from focus_timer.models.timer import Timer, TimerRecord
from focus_timer.utils.exceptions import PersistenceError
from focus_timer.utils.logging import get_logger, log_error

logger = get_logger(__name__)

DEFAULT_STORAGE_KEY = "focus-timers"


class TimerPersistence:
    """
    Checkpoint and restore timers through a key-value store.

    Example:
        >>> persistence = TimerPersistence(InMemoryStore())
        >>> persistence.save(registry.list())
        True
        >>> records = persistence.load()
    """

    def __init__(self, store: StoreInterface, key: str = DEFAULT_STORAGE_KEY):
        """
        Initialize timer persistence.

        Args:
            store: Backing key-value store
            key: Storage key for the timer list
        """
        self.store = store
        self.key = key
        self._stats = {
            "saves": 0,
            "save_failures": 0,
            "loads": 0,
            "skipped_records": 0,
        }

    def save(self, timers: Iterable[Timer]) -> bool:
        """
        Write a checkpoint of the given timers.

        Runtime state (running flag, schedules) is never written.

        Args:
            timers: Timers in display order

        Returns:
            True if the checkpoint was written
        """
        records = [timer.to_record().model_dump(by_alias=True) for timer in timers]

        try:
            self.store.set(self.key, json.dumps(records, ensure_ascii=False))
        except PersistenceError as e:
            self._stats["save_failures"] += 1
            logger.error("checkpoint_failed", key=self.key, **log_error(e))
            return False

        self._stats["saves"] += 1
        logger.debug("checkpoint_saved", key=self.key, timers=len(records))
        return True

    def load(self) -> List[TimerRecord]:
        """
        Read the saved timers.

        Records that fail validation, or repeat an earlier id, are skipped.

        Returns:
            Saved records in their stored order; empty when nothing usable
            was saved
        """
        self._stats["loads"] += 1

        try:
            raw = self.store.get(self.key)
        except PersistenceError as e:
            logger.error("load_failed", key=self.key, **log_error(e))
            return []

        if not raw:
            logger.info("no_saved_timers", key=self.key)
            return []

        try:
            parsed = json.loads(raw)
        except ValueError as e:
            logger.error("load_failed", key=self.key, **log_error(e))
            return []

        if not isinstance(parsed, list):
            logger.error("load_failed", key=self.key, reason="expected a list of timers")
            return []

        records: List[TimerRecord] = []
        seen: Set[int] = set()
        for index, item in enumerate(parsed):
            try:
                record = TimerRecord.model_validate(item)
            except PydanticValidationError as e:
                self._stats["skipped_records"] += 1
                logger.warning("record_skipped", index=index, error=str(e))
                continue

            if record.id in seen:
                self._stats["skipped_records"] += 1
                logger.warning("record_skipped", index=index, reason="duplicate id", id=record.id)
                continue

            seen.add(record.id)
            records.append(record)

        logger.info("timers_loaded", key=self.key, count=len(records))
        return records

    def clear(self) -> None:
        """Remove the saved timers."""
        try:
            self.store.delete(self.key)
        except PersistenceError as e:
            logger.error("clear_failed", key=self.key, **log_error(e))

    def get_statistics(self):
        """Checkpoint counters."""
        return dict(self._stats)
