"""Phase/round state machine for ReadyGo.

Modes
-----
IDLE        No session.  Waiting for ``start``.
GET_READY   Fixed 3 s lead-in before round 1.
WORK        Work phase of the current round.
REST        Rest phase of the current round (skipped when rest is 0).
PAUSED      Frozen; remembers which running mode it came from.
COMPLETE    All rounds done.  ``start`` begins a fresh session.

Transitions
-----------
IDLE | COMPLETE → GET_READY            (start)
GET_READY → WORK                       (deadline)
WORK → REST | WORK | COMPLETE          (deadline)
REST → WORK | COMPLETE                 (deadline)
GET_READY | WORK | REST → PAUSED       (pause)
PAUSED → {whatever was paused}         (resume)
Any → IDLE                             (reset)

Time handling
-------------
The engine never sleeps or reads a clock.  Every control takes ``now`` in
integer milliseconds from a monotonic source and the phase deadline is the
only authoritative record of time left.  ``advance(now)`` applies at most
one transition per call; the next phase deadline is chained from the
previous one, so a late tick never stretches the workout and a long gap is
worked off one phase per call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .errors import DegenerateRoutine, InvalidTickOrder, InvalidTransition
from .ports import CueKind, CuePort, HapticPort, WakeLockPort
from .recorder import LogEntry, SessionRecorder
from .routine import Routine

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerMode(Enum):
    IDLE = "idle"
    GET_READY = "getready"
    WORK = "work"
    REST = "rest"
    PAUSED = "paused"
    COMPLETE = "complete"


# ── constants ─────────────────────────────────────────────────────────────

GET_READY_SECONDS = 3
TEN_SECOND_MARK = 10

RUNNING_MODES = frozenset({TimerMode.GET_READY, TimerMode.WORK, TimerMode.REST})
_WAKE_MODES = RUNNING_MODES | {TimerMode.PAUSED}


# ── session state ─────────────────────────────────────────────────────────


@dataclass
class Session:
    """Run-time record of one routine execution.  Owned by the engine."""

    mode: TimerMode = TimerMode.IDLE
    current_round: int = 0
    total_rounds: int = 0
    phase_duration_seconds: int = 0
    phase_deadline_ms: int = 0
    remaining_ms: int = 0
    paused_remaining_ms: int = 0
    paused_mode: TimerMode | None = None
    ten_second_cue_fired: bool = False
    final_cue_fired: bool = False


@dataclass(frozen=True)
class TimerSnapshot:
    """Everything a display needs after a tick."""

    mode: TimerMode
    current_round: int
    total_rounds: int
    remaining_ms: int
    phase_duration_seconds: int
    progress: float
    total_remaining_seconds: int

    @property
    def seconds_left(self) -> int:
        return ceil_seconds(self.remaining_ms)


def ceil_seconds(ms: int) -> int:
    """Whole seconds, rounded up, for a millisecond count."""
    return -(-ms // 1000)


# ── projections ───────────────────────────────────────────────────────────


def total_remaining_seconds(
    session: Session | None, routine: Routine | None,
) -> int:
    """Seconds left across the whole workout, for the "time left" readout.

    The get-ready lead-in is not counted.  Never mutates *session*.
    """
    if routine is None:
        return 0
    if session is None or session.mode == TimerMode.IDLE:
        return routine.total_seconds

    per_round = routine.per_round_seconds
    rounds_after = (session.total_rounds - session.current_round) * per_round
    mode = session.mode
    if mode == TimerMode.GET_READY:
        return session.total_rounds * per_round
    if mode in (TimerMode.WORK, TimerMode.REST):
        return ceil_seconds(session.remaining_ms) + rounds_after
    if mode == TimerMode.PAUSED:
        return ceil_seconds(session.paused_remaining_ms) + rounds_after
    return 0


def progress_ratio(session: Session | None) -> float:
    """Fraction of the current phase still to go, 1.0 → 0.0."""
    if session is None or session.phase_duration_seconds <= 0:
        return 0.0
    ratio = session.remaining_ms / (session.phase_duration_seconds * 1000)
    return max(0.0, min(1.0, ratio))


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine:
    """Interval workout state machine driven by explicit ``now`` values.

    Collaborators are optional and injected:

    cues
        :class:`~readygo.timer.ports.CuePort` — boundary, ten-second and
        final cues.
    haptics
        :class:`~readygo.timer.ports.HapticPort` — same cue kinds.
        The desktop app has no haptic device and leaves this unset.
    wake_lock
        Held from ``start`` until the session goes idle or completes.
    recorder
        :class:`SessionRecorder` invoked once when a session completes.

    Cue and haptic output respects ``routine.cues_enabled``.  Any exception
    from a collaborator is logged and does not affect phase progression.
    """

    def __init__(
        self,
        cues: CuePort | None = None,
        *,
        haptics: HapticPort | None = None,
        wake_lock: WakeLockPort | None = None,
        recorder: SessionRecorder | None = None,
    ) -> None:
        self._cues = cues
        self._haptics = haptics
        self._wake_lock = wake_lock
        self._recorder = recorder

        self._routine: Routine | None = None
        self._session: Session | None = None
        self._last_now_ms: int | None = None
        self._wake_held: bool = False
        self._last_entry: LogEntry | None = None

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def mode(self) -> TimerMode:
        if self._session is None:
            return TimerMode.IDLE
        return self._session.mode

    @property
    def session(self) -> Session | None:
        """The live session.  Read it, never write to it."""
        return self._session

    @property
    def routine(self) -> Routine | None:
        """Routine of the current (or most recent) session."""
        return self._routine

    @property
    def is_running(self) -> bool:
        return self.mode in RUNNING_MODES

    @property
    def last_entry(self) -> LogEntry | None:
        """Log entry produced by the most recent completion, if any."""
        return self._last_entry

    def snapshot(self) -> TimerSnapshot:
        s = self._session
        return TimerSnapshot(
            mode=self.mode,
            current_round=s.current_round if s else 0,
            total_rounds=s.total_rounds if s else 0,
            remaining_ms=s.remaining_ms if s else 0,
            phase_duration_seconds=s.phase_duration_seconds if s else 0,
            progress=progress_ratio(s),
            total_remaining_seconds=total_remaining_seconds(s, self._routine),
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self, routine: Routine, now_ms: int) -> TimerSnapshot:
        """Begin a brand-new session.  Valid from IDLE or COMPLETE."""
        if self.mode not in (TimerMode.IDLE, TimerMode.COMPLETE):
            raise InvalidTransition(f"cannot start while {self.mode.value}")
        if not routine.is_startable:
            raise DegenerateRoutine(
                f"routine {routine.name!r} has no work and no rest time"
            )
        self._observe(now_ms)

        self._routine = routine
        self._last_entry = None
        self._session = Session(
            current_round=1,
            total_rounds=routine.rounds,
        )
        self._begin_phase(TimerMode.GET_READY, GET_READY_SECONDS, now_ms)
        self._sync_wake_lock()
        logger.debug("Started %r: %d rounds", routine.name, routine.rounds)
        return self.snapshot()

    def advance(self, now_ms: int) -> TimerSnapshot:
        """Recompute time left and apply at most one phase transition."""
        self._observe(now_ms)
        s = self._session
        if s is None or s.mode not in RUNNING_MODES:
            return self.snapshot()

        s.remaining_ms = max(0, s.phase_deadline_ms - now_ms)
        if s.remaining_ms == 0:
            self._end_phase(s)
        if s.mode in RUNNING_MODES:
            self._check_ten_second_cue(s)
        return self.snapshot()

    def pause(self, now_ms: int) -> TimerSnapshot:
        s = self._session
        if s is None or s.mode not in RUNNING_MODES:
            raise InvalidTransition(f"cannot pause while {self.mode.value}")
        self._observe(now_ms)

        s.remaining_ms = max(0, s.phase_deadline_ms - now_ms)
        s.paused_remaining_ms = s.remaining_ms
        s.paused_mode = s.mode
        s.mode = TimerMode.PAUSED
        logger.debug(
            "Paused %s with %d ms left", s.paused_mode.value, s.paused_remaining_ms,
        )
        return self.snapshot()

    def resume(self, now_ms: int) -> TimerSnapshot:
        """Resume whatever was paused.

        The progress denominator is re-based to the whole seconds that were
        left, so the ring restarts full-width relative to that remainder.
        """
        s = self._session
        if s is None or s.mode != TimerMode.PAUSED or s.paused_mode is None:
            raise InvalidTransition(f"cannot resume while {self.mode.value}")
        self._observe(now_ms)

        s.mode = s.paused_mode
        s.paused_mode = None
        s.phase_deadline_ms = now_ms + s.paused_remaining_ms
        s.remaining_ms = s.paused_remaining_ms
        s.phase_duration_seconds = ceil_seconds(s.paused_remaining_ms)
        logger.debug("Resumed %s", s.mode.value)
        return self.snapshot()

    def reset(self) -> TimerSnapshot:
        """Discard the session and return to IDLE.  Nothing is logged."""
        if self._session is not None:
            logger.debug("Reset from %s", self._session.mode.value)
        self._session = None
        self._sync_wake_lock()
        return self.snapshot()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — transitions
    # ══════════════════════════════════════════════════════════════════

    def _observe(self, now_ms: int) -> None:
        if self._last_now_ms is not None and now_ms < self._last_now_ms:
            raise InvalidTickOrder(
                f"now={now_ms} is earlier than last tick {self._last_now_ms}"
            )
        self._last_now_ms = now_ms

    def _begin_phase(
        self, mode: TimerMode, duration_seconds: int, start_ms: int,
    ) -> None:
        s = self._session
        s.mode = mode
        s.phase_duration_seconds = duration_seconds
        s.phase_deadline_ms = start_ms + duration_seconds * 1000
        s.remaining_ms = max(0, s.phase_deadline_ms - self._last_now_ms)
        s.ten_second_cue_fired = False
        logger.debug(
            "Round %d/%d: %s for %d s",
            s.current_round, s.total_rounds, mode.value, duration_seconds,
        )

    def _end_phase(self, s: Session) -> None:
        routine = self._routine
        boundary = s.phase_deadline_ms
        self._fire(CueKind.BOUNDARY)

        if s.mode == TimerMode.GET_READY:
            self._begin_phase(TimerMode.WORK, routine.work_seconds, boundary)
        elif s.mode == TimerMode.WORK and routine.rest_seconds > 0:
            self._begin_phase(TimerMode.REST, routine.rest_seconds, boundary)
        elif s.current_round < s.total_rounds:
            # WORK without rest, or REST: next round's work
            s.current_round += 1
            self._begin_phase(TimerMode.WORK, routine.work_seconds, boundary)
        else:
            self._complete(s)

    def _complete(self, s: Session) -> None:
        s.mode = TimerMode.COMPLETE
        s.remaining_ms = 0
        if not s.final_cue_fired:
            s.final_cue_fired = True
            self._fire(CueKind.FINAL)
        if self._recorder is not None:
            self._last_entry = self._recorder.complete(s, self._routine)
        self._sync_wake_lock()

    def _check_ten_second_cue(self, s: Session) -> None:
        seconds_left = ceil_seconds(s.remaining_ms)
        if seconds_left > TEN_SECOND_MARK:
            s.ten_second_cue_fired = False
        elif seconds_left == TEN_SECOND_MARK and not s.ten_second_cue_fired:
            s.ten_second_cue_fired = True
            self._fire(CueKind.TEN_SECOND)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — collaborators
    # ══════════════════════════════════════════════════════════════════

    def _fire(self, kind: CueKind) -> None:
        if self._routine is None or not self._routine.cues_enabled:
            return
        if self._cues is not None:
            self._call_port(lambda: self._cues.fire(kind), f"cue {kind.value}")
        if self._haptics is not None:
            self._call_port(
                lambda: self._haptics.pulse(kind), f"haptic {kind.value}",
            )

    def _sync_wake_lock(self) -> None:
        if self._wake_lock is None:
            return
        wanted = self.mode in _WAKE_MODES
        if wanted and not self._wake_held:
            self._wake_held = True
            self._call_port(self._wake_lock.acquire, "wake-lock acquire")
        elif not wanted and self._wake_held:
            self._wake_held = False
            self._call_port(self._wake_lock.release, "wake-lock release")

    @staticmethod
    def _call_port(action: Callable[[], None], what: str) -> None:
        try:
            action()
        except Exception:
            logger.exception("%s failed", what)
