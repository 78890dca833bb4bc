"""Capability interfaces the engine and app talk to.

Implementations live outside the timer package: ``audio.sounds`` for cues,
``platform.wakelock`` for keeping the display on, ``database.stores`` for
persistence.
"""

from __future__ import annotations

import time
from enum import Enum
from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from .recorder import LogEntry
    from .routine import Routine


class CueKind(Enum):
    BOUNDARY = "boundary"
    TEN_SECOND = "ten_second"
    FINAL = "final"


class CuePort(Protocol):
    def fire(self, kind: CueKind) -> None: ...


class HapticPort(Protocol):
    def pulse(self, kind: CueKind) -> None: ...


class WakeLockPort(Protocol):
    def acquire(self) -> None: ...

    def release(self) -> None: ...


class Clock(Protocol):
    def monotonic_ms(self) -> int: ...


class LogStore(Protocol):
    def append(self, entry: LogEntry) -> None: ...

    def remove(self, index: int) -> None: ...

    def all(self) -> Sequence[LogEntry]: ...


class RoutineStore(Protocol):
    def load(self) -> list[Routine]: ...

    def save(self, routines: Sequence[Routine]) -> None: ...


class MonotonicClock:
    """Millisecond clock backed by ``time.monotonic_ns``."""

    def monotonic_ms(self) -> int:
        return time.monotonic_ns() // 1_000_000
