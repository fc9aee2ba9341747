"""Tests for stores and timer persistence."""

import json

import pytest

from focus_timer.models.timer import Timer
from focus_timer.storage.persistence import TimerPersistence
from focus_timer.storage.stores import FileStore, InMemoryStore
from focus_timer.utils.exceptions import PersistenceError


class TestInMemoryStore:
    """Tests for InMemoryStore."""

    def test_set_get_delete(self):
        store = InMemoryStore()

        assert store.get("k") is None
        store.set("k", "v")
        assert store.get("k") == "v"
        store.delete("k")
        store.delete("k")
        assert store.get("k") is None


class TestFileStore:
    """Tests for FileStore."""

    def test_roundtrip(self, tmp_path):
        store = FileStore(str(tmp_path / "state"))

        store.set("focus-timers", '[{"id": 1}]')

        assert store.get("focus-timers") == '[{"id": 1}]'
        assert (tmp_path / "state" / "focus-timers.json").exists()
        assert not list((tmp_path / "state").glob("*.tmp"))

    def test_missing_key(self, tmp_path):
        assert FileStore(str(tmp_path)).get("nothing") is None

    def test_survives_new_instance(self, tmp_path):
        FileStore(str(tmp_path)).set("k", "value")

        assert FileStore(str(tmp_path)).get("k") == "value"

    def test_undecodable_file_raises_persistence_error(self, tmp_path):
        (tmp_path / "focus-timers.json").write_bytes(b"\xff\xfe[garbage")
        store = FileStore(str(tmp_path))

        with pytest.raises(PersistenceError):
            store.get("focus-timers")

    def test_invalid_key(self, tmp_path):
        store = FileStore(str(tmp_path))

        with pytest.raises(PersistenceError):
            store.set("../escape", "x")

    def test_write_failure_raises_persistence_error(self, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("file in the way")
        store = FileStore(str(blocker))

        with pytest.raises(PersistenceError):
            store.set("k", "v")

    def test_delete(self, tmp_path):
        store = FileStore(str(tmp_path))
        store.set("k", "v")

        store.delete("k")
        store.delete("k")

        assert store.get("k") is None


class TestTimerPersistence:
    """Tests for the checkpoint round-trip."""

    def test_save_writes_durable_fields_only(self):
        store = InMemoryStore()
        persistence = TimerPersistence(store)
        timers = [Timer(id=1, name="A", duration=300, time_left=120, is_running=True)]

        assert persistence.save(timers) is True

        assert json.loads(store.get("focus-timers")) == [
            {"id": 1, "name": "A", "duration": 300, "timeLeft": 120}
        ]

    def test_roundtrip(self):
        persistence = TimerPersistence(InMemoryStore())
        timers = [
            Timer(id=1, name="A", duration=300, time_left=120, is_running=True),
            Timer(id=4, name="B", duration=60, time_left=0),
        ]
        persistence.save(timers)

        records = persistence.load()

        assert [(r.id, r.name, r.duration, r.time_left) for r in records] == [
            (1, "A", 300, 120),
            (4, "B", 60, 0),
        ]

    def test_absent_key_loads_empty(self):
        assert TimerPersistence(InMemoryStore()).load() == []

    @pytest.mark.parametrize("payload", ["not json", "{}", '"text"', "42"])
    def test_unparseable_loads_empty(self, payload):
        store = InMemoryStore({"focus-timers": payload})

        assert TimerPersistence(store).load() == []

    def test_bad_records_skipped(self):
        payload = json.dumps(
            [
                {"id": 2, "name": "ok", "duration": 120, "timeLeft": 500},
                {"id": "x", "name": "bad"},
                {"id": 2, "name": "dup", "duration": 60, "timeLeft": 60},
                "garbage",
                {"id": 5, "name": "also ok", "duration": 60, "timeLeft": 30, "isRunning": True},
                {"id": 6, "name": "   ", "duration": 60, "timeLeft": 60},
            ]
        )
        persistence = TimerPersistence(InMemoryStore({"focus-timers": payload}))

        records = persistence.load()

        assert [r.id for r in records] == [2, 5]
        assert records[0].time_left == 120
        assert persistence.get_statistics()["skipped_records"] == 4

    def test_failures_are_absorbed(self, failing_store):
        persistence = TimerPersistence(failing_store)

        assert persistence.save([Timer(id=1, name="A", duration=60, time_left=60)]) is False
        assert persistence.load() == []
        persistence.clear()

        assert persistence.get_statistics()["save_failures"] == 1

    def test_custom_key(self):
        store = InMemoryStore()
        TimerPersistence(store, key="other").save([])

        assert store.get("other") == "[]"
        assert store.get("focus-timers") is None
