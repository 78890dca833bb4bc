"""SQLite-backed routine and log stores.

``SqlLogStore.all()`` returns entries most recently appended first and
``remove(index)`` indexes into that same ordering, so a list view can
delete the row the user tapped.
"""

from __future__ import annotations

from typing import Sequence

from .db import get_session
from .models import RoutineRecord, WorkoutLog
from ..timer.recorder import LogEntry
from ..timer.routine import Routine


def _to_routine(record: RoutineRecord) -> Routine:
    return Routine(
        work_seconds=record.work_seconds,
        rest_seconds=record.rest_seconds,
        rounds=record.rounds,
        cues_enabled=record.cues_enabled,
        name=record.name,
        id=record.id,
    )


def _to_entry(record: WorkoutLog) -> LogEntry:
    return LogEntry(
        name=record.name,
        completed_at=record.completed_at,
        total_display=record.total_display,
        rounds=record.rounds,
    )


class SqlRoutineStore:
    """Routine list persisted in the ``routines`` table."""

    def load(self) -> list[Routine]:
        with get_session() as db:
            records = (
                db.query(RoutineRecord)
                .order_by(RoutineRecord.position, RoutineRecord.id)
                .all()
            )
            return [_to_routine(r) for r in records]

    def save(self, routines: Sequence[Routine]) -> None:
        """Replace the stored list with *routines*, keeping their order."""
        with get_session() as db:
            db.query(RoutineRecord).delete()
            for position, routine in enumerate(routines):
                db.add(RoutineRecord(
                    id=routine.id,
                    name=routine.name,
                    work_seconds=routine.work_seconds,
                    rest_seconds=routine.rest_seconds,
                    rounds=routine.rounds,
                    cues_enabled=routine.cues_enabled,
                    position=position,
                ))


class SqlLogStore:
    """Append-only workout log; individual entries may be deleted."""

    def append(self, entry: LogEntry) -> None:
        with get_session() as db:
            db.add(WorkoutLog(
                name=entry.name,
                completed_at=entry.completed_at,
                total_display=entry.total_display,
                rounds=entry.rounds,
            ))

    def remove(self, index: int) -> None:
        if index < 0:
            raise IndexError(f"no log entry at index {index}")
        with get_session() as db:
            record = (
                self._newest_first(db)
                .offset(index)
                .limit(1)
                .one_or_none()
            )
            if record is None:
                raise IndexError(f"no log entry at index {index}")
            db.delete(record)

    def all(self) -> list[LogEntry]:
        with get_session() as db:
            return [_to_entry(r) for r in self._newest_first(db).all()]

    @staticmethod
    def _newest_first(db):
        # Insertion order, not completed_at: the wall clock can go backwards.
        return db.query(WorkoutLog).order_by(WorkoutLog.id.desc())
