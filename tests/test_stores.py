"""Tests for the SQLite routine and log stores."""

from datetime import datetime, timedelta

import pytest

from readygo.database.db import get_session, init_db
from readygo.database.models import RoutineRecord, WorkoutLog
from readygo.database.stores import SqlLogStore, SqlRoutineStore
from readygo.timer.recorder import LogEntry
from readygo.timer.routine import Routine


BASE = datetime(2026, 1, 1, 8, 0)


def _entry(name: str, minutes_later: int = 0) -> LogEntry:
    return LogEntry(
        name=name,
        completed_at=BASE + timedelta(minutes=minutes_later),
        total_display="08:20",
        rounds=10,
    )


class TestInitDb:

    def test_default_routine_seeded(self):
        routines = SqlRoutineStore().load()
        assert len(routines) == 1
        assert routines[0].name == "Default"
        assert routines[0].total_seconds == 500

    def test_init_is_idempotent(self):
        init_db()
        init_db()
        with get_session() as db:
            assert db.query(RoutineRecord).count() == 1

    def test_log_table_starts_empty(self):
        with get_session() as db:
            assert db.query(WorkoutLog).count() == 0


class TestRoutineStore:

    def test_save_and_load_preserves_order(self):
        store = SqlRoutineStore()
        routines = [
            Routine(work_seconds=40, rest_seconds=20, rounds=8, name="B", id="r_2"),
            Routine(work_seconds=20, rest_seconds=10, rounds=8, name="A", id="r_1"),
        ]
        store.save(routines)
        assert store.load() == routines

    def test_save_replaces_previous_list(self):
        store = SqlRoutineStore()
        store.save([Routine(name="Only", id="r_only", cues_enabled=False)])
        loaded = store.load()
        assert [r.name for r in loaded] == ["Only"]
        assert loaded[0].cues_enabled is False

    def test_save_empty_list(self):
        store = SqlRoutineStore()
        store.save([])
        assert store.load() == []


class TestLogStore:

    def test_all_is_newest_first(self):
        store = SqlLogStore()
        store.append(_entry("first", 0))
        store.append(_entry("second", 10))
        store.append(_entry("third", 30))
        assert [e.name for e in store.all()] == ["third", "second", "first"]

    def test_latest_append_first_after_clock_set_back(self):
        store = SqlLogStore()
        store.append(_entry("before", 110))
        store.append(_entry("after", 70))
        assert [e.name for e in store.all()] == ["after", "before"]

    def test_remove_follows_append_order(self):
        store = SqlLogStore()
        store.append(_entry("before", 110))
        store.append(_entry("after", 70))
        store.remove(0)
        assert [e.name for e in store.all()] == ["before"]

    def test_round_trips_fields(self):
        store = SqlLogStore()
        store.append(_entry("Legs", 5))
        assert store.all() == [_entry("Legs", 5)]

    def test_remove_by_display_index(self):
        store = SqlLogStore()
        for i, name in enumerate(["a", "b", "c"]):
            store.append(_entry(name, i))
        store.remove(1)  # "b" in newest-first order
        assert [e.name for e in store.all()] == ["c", "a"]

    def test_remove_out_of_range(self):
        store = SqlLogStore()
        store.append(_entry("a"))
        with pytest.raises(IndexError):
            store.remove(5)
        with pytest.raises(IndexError):
            store.remove(-1)
        assert len(store.all()) == 1
