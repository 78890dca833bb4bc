"""Qt tick driver: feeds the monotonic clock into the engine every 100 ms.

The engine is pure and synchronous; this object owns the only timer.

Signals
-------
ticked(snapshot: TimerSnapshot)
    Emitted after every ``advance`` and after each control.
mode_changed(mode: TimerMode)
    Emitted whenever the engine's mode differs from the previous tick.
workout_completed(entry: LogEntry | None)
    Emitted once when a session reaches COMPLETE.
"""

from __future__ import annotations

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .engine import TimerEngine, TimerMode, TimerSnapshot
from .ports import Clock, MonotonicClock
from .routine import Routine

DEFAULT_TICK_INTERVAL_MS = 100


class TickDriver(QObject):

    ticked = pyqtSignal(object)
    mode_changed = pyqtSignal(object)
    workout_completed = pyqtSignal(object)

    def __init__(
        self,
        engine: TimerEngine,
        parent: QObject | None = None,
        *,
        clock: Clock | None = None,
        interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._clock: Clock = clock or MonotonicClock()
        self._last_mode: TimerMode = engine.mode

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(max(10, interval_ms))
        self._qt_timer.timeout.connect(self._on_timeout)

    # ── properties ────────────────────────────────────────────────────

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def is_ticking(self) -> bool:
        return self._qt_timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    def set_interval(self, interval_ms: int) -> None:
        self._qt_timer.setInterval(max(10, interval_ms))

    # ── controls ──────────────────────────────────────────────────────

    def start(self, routine: Routine) -> TimerSnapshot:
        snap = self._engine.start(routine, self._clock.monotonic_ms())
        self._qt_timer.start()
        return self._publish(snap)

    def pause(self) -> TimerSnapshot:
        snap = self._engine.pause(self._clock.monotonic_ms())
        self._qt_timer.stop()
        return self._publish(snap)

    def resume(self) -> TimerSnapshot:
        snap = self._engine.resume(self._clock.monotonic_ms())
        self._qt_timer.start()
        return self._publish(snap)

    def reset(self) -> TimerSnapshot:
        self._qt_timer.stop()
        return self._publish(self._engine.reset())

    # ── internal ──────────────────────────────────────────────────────

    def _on_timeout(self) -> None:
        snap = self._engine.advance(self._clock.monotonic_ms())
        self._publish(snap)

    def _publish(self, snap: TimerSnapshot) -> TimerSnapshot:
        self.ticked.emit(snap)
        if snap.mode != self._last_mode:
            self._last_mode = snap.mode
            self.mode_changed.emit(snap.mode)
            if snap.mode == TimerMode.COMPLETE:
                self._qt_timer.stop()
                self.workout_completed.emit(self._engine.last_entry)
        return snap
