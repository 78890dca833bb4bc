"""Timer package."""

from .engine import (
    TimerEngine,
    TimerMode,
    TimerSnapshot,
    Session,
    GET_READY_SECONDS,
    TEN_SECOND_MARK,
    total_remaining_seconds,
    progress_ratio,
)
from .errors import (
    TimerError,
    DegenerateRoutine,
    InvalidTransition,
    InvalidTickOrder,
)
from .ports import CueKind, MonotonicClock
from .recorder import LogEntry, SessionRecorder
from .routine import Routine, default_routine, format_clock

__all__ = [
    "TimerEngine",
    "TimerMode",
    "TimerSnapshot",
    "Session",
    "GET_READY_SECONDS",
    "TEN_SECOND_MARK",
    "total_remaining_seconds",
    "progress_ratio",
    "TimerError",
    "DegenerateRoutine",
    "InvalidTransition",
    "InvalidTickOrder",
    "CueKind",
    "MonotonicClock",
    "LogEntry",
    "SessionRecorder",
    "Routine",
    "default_routine",
    "format_clock",
]
