"""Main application window for ReadyGo."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QStackedWidget, QMessageBox, QStatusBar,
)

from .audio.sounds import SoundManager
from .database.stores import SqlLogStore, SqlRoutineStore
from .platform.wakelock import CaffeinateWakeLock
from .settings import Settings, load_settings, save_settings
from .timer.engine import TimerEngine, TimerMode
from .timer.errors import TimerError
from .timer.recorder import LogEntry, SessionRecorder
from .timer.routine import Routine, default_routine
from .timer.ticker import TickDriver
from .ui.panels import EditRoutineDialog, LegalDialog, LogsDialog, RoutinesDialog
from .ui.styles import build_stylesheet
from .ui.timer_widget import TimerWidget

logger = logging.getLogger(__name__)

_IDLE_PAGE, _ACTIVE_PAGE, _COMPLETE_PAGE = range(3)


class ReadyGoApp(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        routine_store: SqlRoutineStore | None = None,
        log_store: SqlLogStore | None = None,
        sound_manager: SoundManager | None = None,
        wake_lock: CaffeinateWakeLock | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("ReadyGo")
        self.setMinimumSize(380, 640)

        # ── settings + stores ─────────────────────────────────────────
        self._settings: Settings = settings or load_settings()
        self._routine_store = routine_store or SqlRoutineStore()
        self._log_store = log_store or SqlLogStore()
        self._routines: list[Routine] = self._routine_store.load() or [default_routine()]

        # ── collaborators ─────────────────────────────────────────────
        self._sound_manager = sound_manager or SoundManager(parent=self)
        self._sound_manager.set_volume(self._settings.sound_volume)
        self._sound_manager.set_enabled(self._settings.sound_enabled)
        self._wake_lock = wake_lock or CaffeinateWakeLock(
            enabled=self._settings.keep_screen_awake,
        )

        # ── engine + tick driver ──────────────────────────────────────
        self._engine = TimerEngine(
            self._sound_manager,
            wake_lock=self._wake_lock,
            recorder=SessionRecorder(self._log_store),
        )
        self._driver = TickDriver(
            self._engine, self, interval_ms=self._settings.tick_interval_ms,
        )

        # ── pages ─────────────────────────────────────────────────────
        self._stack = QStackedWidget(self)
        self._stack.setObjectName("screen")
        self.setCentralWidget(self._stack)
        self._stack.addWidget(self._build_idle_page())
        self._timer_widget = TimerWidget(self._driver, self._stack)
        self._timer_widget.reset_requested.connect(self._on_reset_requested)
        self._stack.addWidget(self._timer_widget)
        self._stack.addWidget(self._build_complete_page())

        self._status_bar = QStatusBar(self)
        self.setStatusBar(self._status_bar)

        # ── wire signals ──────────────────────────────────────────────
        self._driver.mode_changed.connect(self._on_mode_changed)
        self._driver.workout_completed.connect(self._on_workout_completed)

        self._refresh_selected()
        self._on_mode_changed(TimerMode.IDLE)
        self._restore_geometry()

    # ══════════════════════════════════════════════════════════════════
    #  PAGES
    # ══════════════════════════════════════════════════════════════════

    def _build_idle_page(self) -> QWidget:
        page = QWidget(self)
        layout = QVBoxLayout(page)
        layout.setContentsMargins(16, 12, 16, 16)

        self._idle_name = QLabel("", page)
        layout.addWidget(self._idle_name)
        layout.addStretch()

        start_btn = QPushButton("Start", page)
        start_btn.setObjectName("bigButton")
        start_btn.clicked.connect(self.start_selected)
        row = QHBoxLayout()
        row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        row.addWidget(start_btn)
        layout.addLayout(row)

        self._idle_summary = QLabel("", page)
        self._idle_summary.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._idle_summary)
        layout.addStretch()
        layout.addLayout(self._build_nav_row(page))
        return page

    def _build_complete_page(self) -> QWidget:
        page = QWidget(self)
        layout = QVBoxLayout(page)
        layout.addStretch()

        done = QLabel("Workout complete", page)
        done.setAlignment(Qt.AlignmentFlag.AlignCenter)
        done.setStyleSheet("font-size: 24px;")
        layout.addWidget(done)

        restart_btn = QPushButton("Restart", page)
        restart_btn.clicked.connect(self.start_selected)
        row = QHBoxLayout()
        row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        row.addWidget(restart_btn)
        layout.addLayout(row)

        layout.addStretch()
        layout.addLayout(self._build_nav_row(page))
        return page

    def _build_nav_row(self, parent: QWidget) -> QHBoxLayout:
        row = QHBoxLayout()
        row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        row.setSpacing(40)
        for text, slot in (
            ("Routines", self._open_routines),
            ("Edit", self._open_edit),
            ("Logs", self._open_logs),
        ):
            btn = QPushButton(text, parent)
            btn.setObjectName("linkButton")
            btn.clicked.connect(slot)
            row.addWidget(btn)
        return row

    # ══════════════════════════════════════════════════════════════════
    #  ROUTINE SELECTION
    # ══════════════════════════════════════════════════════════════════

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def driver(self) -> TickDriver:
        return self._driver

    @property
    def routines(self) -> list[Routine]:
        return list(self._routines)

    @property
    def selected_routine(self) -> Routine:
        wanted = self._settings.selected_routine_id
        for routine in self._routines:
            if routine.id == wanted:
                return routine
        return self._routines[0]

    def select_routine(self, routine: Routine) -> None:
        self._settings.selected_routine_id = routine.id
        save_settings(self._settings)
        self._refresh_selected()

    def save_routine(self, routine: Routine) -> None:
        """Insert or replace *routine* (matched by id) and select it."""
        for idx, existing in enumerate(self._routines):
            if existing.id == routine.id:
                self._routines[idx] = routine
                break
        else:
            self._routines.append(routine)
        self._routine_store.save(self._routines)
        self.select_routine(routine)

    def _refresh_selected(self) -> None:
        routine = self.selected_routine
        self._idle_name.setText(routine.name)
        self._idle_summary.setText(routine.summary)
        self._timer_widget.set_routine_name(routine.name)

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start_selected(self) -> None:
        routine = self.selected_routine
        try:
            self._driver.start(routine)
        except TimerError as exc:
            self._status_bar.showMessage(str(exc))
            logger.warning("Could not start %r: %s", routine.name, exc)

    def toggle(self) -> None:
        """Start, pause or resume depending on the current mode."""
        mode = self._engine.mode
        if mode in (TimerMode.IDLE, TimerMode.COMPLETE):
            self.start_selected()
        elif mode == TimerMode.PAUSED:
            self._driver.resume()
        else:
            self._driver.pause()

    def _on_reset_requested(self) -> None:
        if self._engine.mode != TimerMode.PAUSED:
            return
        if self._settings.confirm_reset:
            answer = QMessageBox.question(self, "ReadyGo", "Reset workout?")
            if answer != QMessageBox.StandardButton.Yes:
                return
        self._driver.reset()

    # ══════════════════════════════════════════════════════════════════
    #  DRIVER SIGNALS
    # ══════════════════════════════════════════════════════════════════

    def _on_mode_changed(self, mode: TimerMode) -> None:
        if mode == TimerMode.IDLE:
            self._stack.setCurrentIndex(_IDLE_PAGE)
        elif mode == TimerMode.COMPLETE:
            self._stack.setCurrentIndex(_COMPLETE_PAGE)
        else:
            self._stack.setCurrentIndex(_ACTIVE_PAGE)
        self.setStyleSheet(build_stylesheet(mode))

    def _on_workout_completed(self, entry: LogEntry | None) -> None:
        if entry is not None:
            self._status_bar.showMessage(
                f"Logged {entry.name}: {entry.total_display}", 5000,
            )

    # ══════════════════════════════════════════════════════════════════
    #  DIALOGS
    # ══════════════════════════════════════════════════════════════════

    def _open_routines(self) -> None:
        dlg = RoutinesDialog(self._routines, self)
        dlg.routine_selected.connect(self.select_routine)
        dlg.new_requested.connect(lambda: QTimer.singleShot(0, self._open_new))
        dlg.exec()

    def _open_new(self) -> None:
        self._show_editor(default_routine())

    def _open_edit(self) -> None:
        self._show_editor(self.selected_routine)

    def _show_editor(self, routine: Routine) -> None:
        dlg = EditRoutineDialog(routine, self)
        dlg.saved.connect(self.save_routine)
        dlg.start_requested.connect(self._save_and_start)
        dlg.legal_requested.connect(self._open_legal)
        dlg.exec()

    def _save_and_start(self, routine: Routine) -> None:
        self.save_routine(routine)
        if self._engine.mode in (TimerMode.IDLE, TimerMode.COMPLETE):
            self.start_selected()

    def _open_logs(self) -> None:
        LogsDialog(self._log_store, self).exec()

    def _open_legal(self) -> None:
        s = self._settings
        LegalDialog(s.terms_url, s.privacy_url, self).exec()

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def _restore_geometry(self) -> None:
        s = self._settings
        self.resize(s.window_width, s.window_height)
        if s.window_x is not None and s.window_y is not None:
            self.move(s.window_x, s.window_y)

    def _save_geometry(self) -> None:
        s = self._settings
        s.window_x = self.x()
        s.window_y = self.y()
        s.window_width = self.width()
        s.window_height = self.height()
        save_settings(s)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._driver.reset()
        self._save_geometry()
        event.accept()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Space starts/pauses/resumes; Escape resets while paused."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self.toggle()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._on_reset_requested()
            event.accept()
            return
        super().keyPressEvent(event)
