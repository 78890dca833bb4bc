"""Active workout screen.

Layout (top → bottom):
    - Routine name (left) and total time left (right)
    - ProgressRing with the phase countdown
    - "round / total" indicator
    - Pause, or Resume + Reset while paused
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QSizePolicy,
)

from ..timer.engine import TimerMode, TimerSnapshot
from ..timer.routine import format_clock
from ..timer.ticker import TickDriver
from .progress_ring import ProgressRing


class TimerWidget(QWidget):
    """Countdown display plus pause/resume/reset controls."""

    reset_requested = pyqtSignal()

    def __init__(self, driver: TickDriver, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._driver = driver
        self._build_ui()
        self._connect_signals()
        self.show_snapshot(driver.engine.snapshot())

    # ── build ─────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 24)
        layout.setSpacing(12)

        top = QHBoxLayout()
        self._name_label = QLabel("", self)
        self._total_label = QLabel("", self)
        self._total_label.setAlignment(Qt.AlignmentFlag.AlignRight)
        top.addWidget(self._name_label)
        top.addStretch()
        top.addWidget(self._total_label)
        layout.addLayout(top)

        layout.addStretch()

        ring_row = QHBoxLayout()
        ring_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._ring = ProgressRing(self)
        self._ring.setSizePolicy(
            QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed,
        )
        self._ring.setFixedSize(300, 300)
        ring_row.addWidget(self._ring)
        layout.addLayout(ring_row)

        self._round_label = QLabel("0 / 0", self)
        self._round_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._round_label.setStyleSheet("font-size: 20px;")
        layout.addWidget(self._round_label)

        layout.addStretch()

        self._pause_btn = QPushButton("Pause", self)
        self._resume_btn = QPushButton("Resume", self)
        self._reset_btn = QPushButton("Reset", self)
        for btn in (self._pause_btn, self._resume_btn, self._reset_btn):
            layout.addWidget(btn)

    def _connect_signals(self) -> None:
        self._pause_btn.clicked.connect(self._driver.pause)
        self._resume_btn.clicked.connect(self._driver.resume)
        self._reset_btn.clicked.connect(self.reset_requested)
        self._driver.ticked.connect(self.show_snapshot)

    # ── public ────────────────────────────────────────────────────────

    def set_routine_name(self, name: str) -> None:
        self._name_label.setText(name)

    def show_snapshot(self, snap: TimerSnapshot) -> None:
        self._ring.set_time_text(format_clock(snap.seconds_left))
        self._ring.set_progress(snap.progress)
        self._ring.apply_mode(snap.mode)
        self._round_label.setText(f"{snap.current_round} / {snap.total_rounds}")
        self._total_label.setText(f"Total {format_clock(snap.total_remaining_seconds)}")

        paused = snap.mode == TimerMode.PAUSED
        self._pause_btn.setVisible(not paused)
        self._resume_btn.setVisible(paused)
        self._reset_btn.setVisible(paused)
