"""Routine definition: work/rest durations repeated for N rounds."""

from __future__ import annotations

import time
from dataclasses import dataclass, field


def _new_routine_id() -> str:
    return f"r_{int(time.time() * 1000)}"


def format_clock(total_seconds: int) -> str:
    """Format seconds as ``MM:SS``.  Minutes are not wrapped at 60."""
    minutes, seconds = divmod(max(0, int(total_seconds)), 60)
    return f"{minutes:02d}:{seconds:02d}"


@dataclass(frozen=True)
class Routine:
    """Immutable description of one interval workout."""

    work_seconds: int = 30
    rest_seconds: int = 20
    rounds: int = 10
    cues_enabled: bool = True
    name: str = "Default"
    id: str = field(default_factory=_new_routine_id)

    def __post_init__(self) -> None:
        if self.rounds < 1:
            raise ValueError(f"rounds must be >= 1, got {self.rounds}")
        if self.work_seconds < 0 or self.rest_seconds < 0:
            raise ValueError("work and rest durations cannot be negative")

    @property
    def per_round_seconds(self) -> int:
        return self.work_seconds + self.rest_seconds

    @property
    def total_seconds(self) -> int:
        return self.per_round_seconds * self.rounds

    @property
    def is_startable(self) -> bool:
        """A routine with zero work and zero rest never advances."""
        return self.per_round_seconds > 0

    @property
    def summary(self) -> str:
        return (
            f"Work {format_clock(self.work_seconds)} / "
            f"Rest {format_clock(self.rest_seconds)} / "
            f"{self.rounds} rounds / Total {format_clock(self.total_seconds)}"
        )


def default_routine() -> Routine:
    """The routine seeded on first launch."""
    return Routine(
        work_seconds=30,
        rest_seconds=20,
        rounds=10,
        cues_enabled=True,
        name="Default",
    )
