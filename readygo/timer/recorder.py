"""Turns a finished session into a log entry and hands it to the log store."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Callable

from .routine import Routine, format_clock

if TYPE_CHECKING:
    from .engine import Session
    from .ports import LogStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogEntry:
    """One completed workout."""

    name: str
    completed_at: datetime
    total_display: str
    rounds: int


class SessionRecorder:
    """Builds a :class:`LogEntry` at completion and appends it to *store*.

    Store failures are logged and swallowed: a workout that finished is
    finished whether or not the log could be written.
    """

    def __init__(
        self,
        store: LogStore | None = None,
        *,
        wall_clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._store = store
        self._wall_clock = wall_clock

    def complete(
        self,
        session: Session,
        routine: Routine,
        now: datetime | None = None,
    ) -> LogEntry:
        entry = LogEntry(
            name=routine.name,
            completed_at=now or self._wall_clock(),
            total_display=format_clock(routine.total_seconds),
            rounds=session.total_rounds,
        )
        if self._store is not None:
            try:
                self._store.append(entry)
            except Exception:
                logger.exception("Could not save log entry for %r", entry.name)
        logger.info(
            "Workout %r complete: %s over %d rounds",
            entry.name, entry.total_display, entry.rounds,
        )
        return entry
