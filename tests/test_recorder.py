"""Tests for the session recorder."""

from datetime import datetime

from readygo.timer.engine import Session, TimerMode
from readygo.timer.recorder import LogEntry, SessionRecorder
from readygo.timer.routine import Routine

from helpers import ExplodingPort, MemoryLogStore


WHEN = datetime(2026, 3, 14, 7, 30)


def _finished(total_rounds: int = 10) -> Session:
    return Session(
        mode=TimerMode.COMPLETE,
        current_round=total_rounds,
        total_rounds=total_rounds,
    )


class TestSessionRecorder:

    def test_entry_fields(self):
        routine = Routine(work_seconds=30, rest_seconds=20, rounds=10, name="Legs")
        entry = SessionRecorder().complete(_finished(), routine, WHEN)
        assert entry == LogEntry(
            name="Legs", completed_at=WHEN, total_display="08:20", rounds=10,
        )

    def test_rounds_come_from_session(self):
        routine = Routine(rounds=10)
        entry = SessionRecorder().complete(_finished(total_rounds=4), routine, WHEN)
        assert entry.rounds == 4

    def test_wall_clock_used_when_now_missing(self):
        recorder = SessionRecorder(wall_clock=lambda: WHEN)
        entry = recorder.complete(_finished(), Routine())
        assert entry.completed_at == WHEN

    def test_long_total_keeps_counting_minutes(self):
        routine = Routine(work_seconds=600, rest_seconds=120, rounds=10)
        entry = SessionRecorder().complete(_finished(), routine, WHEN)
        assert entry.total_display == "120:00"

    def test_entry_appended_to_store(self):
        store = MemoryLogStore()
        recorder = SessionRecorder(store)
        first = recorder.complete(_finished(), Routine(name="a"), WHEN)
        second = recorder.complete(_finished(), Routine(name="b"), WHEN)
        assert store.all() == [second, first]

    def test_store_failure_is_swallowed(self, caplog):
        recorder = SessionRecorder(ExplodingPort())
        entry = recorder.complete(_finished(), Routine(), WHEN)
        assert entry.total_display == "08:20"
        assert "Could not save log entry" in caplog.text
