"""Shared test helpers for ReadyGo."""

from readygo.timer.engine import TimerEngine, TimerMode, RUNNING_MODES
from readygo.timer.ports import CueKind


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start_ms: int = 1_000_000):
        self.now = start_ms

    def monotonic_ms(self) -> int:
        return self.now

    def tick(self, ms: int) -> int:
        self.now += ms
        return self.now


class RecordingCues:
    def __init__(self):
        self.fired: list[CueKind] = []

    def fire(self, kind: CueKind) -> None:
        self.fired.append(kind)

    def count(self, kind: CueKind) -> int:
        return self.fired.count(kind)


class RecordingHaptics:
    def __init__(self):
        self.pulses: list[CueKind] = []

    def pulse(self, kind: CueKind) -> None:
        self.pulses.append(kind)


class RecordingWakeLock:
    def __init__(self):
        self.calls: list[str] = []
        self.held = False

    def acquire(self) -> None:
        self.calls.append("acquire")
        self.held = True

    def release(self) -> None:
        self.calls.append("release")
        self.held = False


class ExplodingPort:
    """Every call raises — for checking collaborator failures are contained."""

    def fire(self, kind):
        raise RuntimeError("speaker on fire")

    def pulse(self, kind):
        raise RuntimeError("motor jammed")

    def acquire(self):
        raise RuntimeError("no wake lock")

    def release(self):
        raise RuntimeError("no wake lock")

    def append(self, entry):
        raise RuntimeError("disk full")


class MemoryLogStore:
    def __init__(self):
        self.entries: list = []

    def append(self, entry) -> None:
        self.entries.insert(0, entry)

    def remove(self, index: int) -> None:
        del self.entries[index]

    def all(self):
        return list(self.entries)


def run_phase(engine: TimerEngine, now: int) -> int:
    """Jump to the current phase deadline and advance once.

    Returns the new ``now``.
    """
    now = max(now, engine.session.phase_deadline_ms)
    engine.advance(now)
    return now


def run_to_completion(engine: TimerEngine, now: int) -> tuple[list[TimerMode], int]:
    """Drive *engine* phase by phase until it leaves the running modes.

    Returns the sequence of modes entered after GET_READY and the final
    ``now``.
    """
    modes: list[TimerMode] = []
    guard = 0
    while engine.mode in RUNNING_MODES:
        now = run_phase(engine, now)
        modes.append(engine.mode)
        guard += 1
        assert guard < 10_000, "engine never completed"
    return modes, now
