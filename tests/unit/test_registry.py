"""Tests for the timer registry."""

import pytest

from focus_timer.models.timer import TimerRecord
from focus_timer.registry.timer_registry import ScheduleOwner, TimerRegistry
from focus_timer.utils.exceptions import ValidationError


class RecordingOwner(ScheduleOwner):
    """Schedule owner recording released ids."""

    def __init__(self):
        self.released = []

    def release(self, timer_id: int) -> None:
        self.released.append(timer_id)


class TestCreate:
    """Tests for TimerRegistry.create."""

    @pytest.mark.parametrize("minutes", [1, 25, 999])
    def test_create_valid(self, minutes):
        registry = TimerRegistry()

        timer = registry.create("Focus", minutes)

        assert timer.duration == minutes * 60
        assert timer.time_left == minutes * 60
        assert timer.is_running is False
        assert registry.find(timer.id) is timer

    def test_ids_are_unique_and_increasing(self):
        registry = TimerRegistry()

        ids = [registry.create(f"t{i}", 1).id for i in range(5)]

        assert ids == [1, 2, 3, 4, 5]

    def test_ids_not_reused_after_delete(self):
        registry = TimerRegistry()
        first = registry.create("a", 1)
        registry.delete(first.id)

        second = registry.create("b", 1)

        assert second.id == 2

    @pytest.mark.parametrize(
        "name, minutes, reason",
        [
            ("", 5, "name required"),
            ("   ", 5, "name required"),
            ("ok", 0, "must be at least 1 minute"),
            ("ok", 1000, "cannot exceed 999 minutes"),
            ("ok", 2.5, "must be a whole number"),
            ("ok", "5", "must be a whole number"),
            ("ok", True, "must be a whole number"),
        ],
    )
    def test_create_invalid(self, name, minutes, reason):
        registry = TimerRegistry()

        with pytest.raises(ValidationError) as exc_info:
            registry.create(name, minutes)

        assert exc_info.value.reason == reason
        assert len(registry) == 0
        assert registry.next_id == 1


class TestFindAndList:
    """Tests for lookup and listing."""

    def test_find_missing_returns_none(self):
        assert TimerRegistry().find(42) is None

    def test_list_in_insertion_order(self):
        registry = TimerRegistry()
        registry.create("first", 1)
        registry.create("second", 2)
        registry.create("third", 3)

        assert [t.name for t in registry.list()] == ["first", "second", "third"]

    def test_list_returns_copy(self):
        registry = TimerRegistry()
        registry.create("a", 1)

        registry.list().clear()

        assert len(registry) == 1


class TestDelete:
    """Tests for TimerRegistry.delete."""

    def test_delete_releases_schedules_first(self):
        registry = TimerRegistry()
        owner = RecordingOwner()
        registry.add_schedule_owner(owner)
        timer = registry.create("a", 1)

        assert registry.delete(timer.id) is True

        assert owner.released == [timer.id]
        assert timer.id not in registry

    def test_delete_missing_is_noop(self):
        registry = TimerRegistry()
        owner = RecordingOwner()
        registry.add_schedule_owner(owner)
        registry.create("a", 1)

        assert registry.delete(99) is False

        assert owner.released == []
        assert len(registry) == 1

    def test_owner_registered_once(self):
        registry = TimerRegistry()
        owner = RecordingOwner()
        registry.add_schedule_owner(owner)
        registry.add_schedule_owner(owner)
        timer = registry.create("a", 1)

        registry.delete(timer.id)

        assert owner.released == [timer.id]


class TestRestore:
    """Tests for restoring saved records."""

    def test_next_id_follows_max(self):
        registry = TimerRegistry()
        records = [
            TimerRecord(id=7, name="a", duration=60, time_left=10),
            TimerRecord(id=3, name="b", duration=120, time_left=120),
        ]

        restored = registry.restore(records)

        assert [t.id for t in restored] == [7, 3]
        assert all(t.is_running is False for t in restored)
        assert registry.create("c", 1).id == 8

    def test_restore_empty_resets_counter(self):
        registry = TimerRegistry()
        registry.create("a", 1)

        registry.restore([])

        assert len(registry) == 0
        assert registry.next_id == 1

    def test_restore_releases_existing_timers(self):
        registry = TimerRegistry()
        owner = RecordingOwner()
        registry.add_schedule_owner(owner)
        registry.create("a", 1)

        registry.restore([])

        assert owner.released == [1]

    def test_seed_default_only_when_empty(self):
        registry = TimerRegistry()

        seeded = registry.seed_default("Focus Timer", 5)
        again = registry.seed_default("Focus Timer", 5)

        assert seeded.duration == 300
        assert again is None
        assert len(registry) == 1
