"""Routine list, routine editor, workout log and legal dialogs."""

from __future__ import annotations

from dataclasses import replace

from PyQt6.QtCore import QUrl, pyqtSignal
from PyQt6.QtGui import QDesktopServices
from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout, QLabel, QLineEdit,
    QSpinBox, QCheckBox, QPushButton, QListWidget, QListWidgetItem,
    QWidget,
)

from ..timer.ports import LogStore
from ..timer.routine import Routine, default_routine


def _section_label(text: str) -> QLabel:
    lbl = QLabel(text)
    lbl.setStyleSheet("font-size: 17px; font-weight: 600;")
    return lbl


# ═══════════════════════════════════════════════════════════════════════
#  ROUTINES
# ═══════════════════════════════════════════════════════════════════════


class RoutinesDialog(QDialog):
    """Pick the active routine, or ask for a new one."""

    routine_selected = pyqtSignal(object)
    new_requested = pyqtSignal()

    def __init__(
        self, routines: list[Routine], parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Routines")
        self.setMinimumWidth(360)
        self._routines = list(routines)

        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 20)
        root.addWidget(_section_label("Routines"))

        self._list = QListWidget(self)
        for routine in self._routines:
            item = QListWidgetItem(routine.name)
            item.setToolTip(routine.summary)
            self._list.addItem(item)
        self._list.itemClicked.connect(self._on_item_clicked)
        root.addWidget(self._list)

        new_btn = QPushButton("New Routine", self)
        new_btn.setObjectName("linkButton")
        new_btn.clicked.connect(self._on_new)
        root.addWidget(new_btn)

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        self.routine_selected.emit(self._routines[self._list.row(item)])
        self.accept()

    def _on_new(self) -> None:
        self.new_requested.emit()
        self.accept()


class EditRoutineDialog(QDialog):
    """Edit name, work/rest durations, rounds and sound for one routine.

    ``saved`` carries the edited routine; ``start_requested`` carries it
    too and asks the app to save and start straight away.
    ``legal_requested`` asks for the legal links.
    """

    saved = pyqtSignal(object)
    start_requested = pyqtSignal(object)
    legal_requested = pyqtSignal()

    def __init__(
        self, routine: Routine | None = None, parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Edit Routine")
        self.setMinimumWidth(380)
        self._original = routine or default_routine()
        self._build_ui()
        self._populate(self._original)

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 20)
        root.setSpacing(14)
        root.addWidget(_section_label("Edit Routine"))

        form = QFormLayout()
        self._name_edit = QLineEdit(self)
        form.addRow("Routine name:", self._name_edit)

        self._work_min, self._work_sec = self._min_sec_row(form, "Work:")
        self._rest_min, self._rest_sec = self._min_sec_row(form, "Rest:")

        self._rounds_spin = QSpinBox(self)
        self._rounds_spin.setRange(1, 99)
        self._rounds_spin.valueChanged.connect(self._refresh_summary)
        form.addRow("Rounds:", self._rounds_spin)

        self._sound_cb = QCheckBox("Sound", self)
        form.addRow("", self._sound_cb)
        root.addLayout(form)

        self._summary = QLabel("", self)
        root.addWidget(self._summary)

        self._error = QLabel("", self)
        self._error.setStyleSheet("color: #C0392B;")
        root.addWidget(self._error)

        btn_row = QHBoxLayout()
        save_btn = QPushButton("Save", self)
        save_btn.clicked.connect(self._on_save)
        start_btn = QPushButton("Start", self)
        start_btn.clicked.connect(self._on_start)
        btn_row.addWidget(save_btn)
        btn_row.addWidget(start_btn)
        root.addLayout(btn_row)

        legal_btn = QPushButton("Legal", self)
        legal_btn.setObjectName("linkButton")
        legal_btn.clicked.connect(self.legal_requested)
        root.addWidget(legal_btn)

    def _min_sec_row(self, form: QFormLayout, label: str) -> tuple[QSpinBox, QSpinBox]:
        row = QHBoxLayout()
        minutes = QSpinBox(self)
        minutes.setRange(0, 99)
        minutes.setSuffix(" min")
        seconds = QSpinBox(self)
        seconds.setRange(0, 59)
        seconds.setSuffix(" sec")
        for spin in (minutes, seconds):
            spin.valueChanged.connect(self._refresh_summary)
            row.addWidget(spin)
        wrapper = QWidget(self)
        wrapper.setLayout(row)
        form.addRow(label, wrapper)
        return minutes, seconds

    def _populate(self, routine: Routine) -> None:
        self._name_edit.setText(routine.name)
        self._work_min.setValue(routine.work_seconds // 60)
        self._work_sec.setValue(routine.work_seconds % 60)
        self._rest_min.setValue(routine.rest_seconds // 60)
        self._rest_sec.setValue(routine.rest_seconds % 60)
        self._rounds_spin.setValue(routine.rounds)
        self._sound_cb.setChecked(routine.cues_enabled)
        self._refresh_summary()

    # ── public ────────────────────────────────────────────────────────

    def routine(self) -> Routine:
        """The routine as currently entered.  Keeps the original ``id``."""
        return replace(
            self._original,
            name=self._name_edit.text().strip() or "Untitled",
            work_seconds=self._work_min.value() * 60 + self._work_sec.value(),
            rest_seconds=self._rest_min.value() * 60 + self._rest_sec.value(),
            rounds=self._rounds_spin.value(),
            cues_enabled=self._sound_cb.isChecked(),
        )

    # ── slots ─────────────────────────────────────────────────────────

    def _refresh_summary(self) -> None:
        self._summary.setText(self.routine().summary)

    def _on_save(self) -> None:
        routine = self.routine()
        if not routine.is_startable:
            self._error.setText("Work or rest must be longer than zero.")
            return
        self.saved.emit(routine)
        self.accept()

    def _on_start(self) -> None:
        routine = self.routine()
        if not routine.is_startable:
            self._error.setText("Work or rest must be longer than zero.")
            return
        self.start_requested.emit(routine)
        self.accept()


# ═══════════════════════════════════════════════════════════════════════
#  LOGS
# ═══════════════════════════════════════════════════════════════════════


class LogsDialog(QDialog):
    """Completed workouts, newest first, each with a delete button."""

    def __init__(self, store: LogStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Logs")
        self.setMinimumWidth(420)
        self._store = store

        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 20)
        root.addWidget(_section_label("Logs"))

        self._rows = QVBoxLayout()
        root.addLayout(self._rows)
        root.addStretch()
        self.refresh()

    @property
    def row_count(self) -> int:
        return len(self._store.all())

    def refresh(self) -> None:
        while self._rows.count():
            item = self._rows.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()

        entries = self._store.all()
        if not entries:
            self._rows.addWidget(QLabel("No logs yet", self))
            return

        for idx, entry in enumerate(entries):
            row = QWidget(self)
            h = QHBoxLayout(row)
            h.setContentsMargins(0, 6, 0, 6)
            when = entry.completed_at.strftime("%Y-%m-%d %H:%M")
            h.addWidget(QLabel(f"{entry.name}\n{when}", row))
            h.addStretch()
            h.addWidget(QLabel(f"{entry.total_display} • {entry.rounds} rounds", row))
            delete_btn = QPushButton("Delete", row)
            delete_btn.setObjectName("linkButton")
            delete_btn.clicked.connect(lambda _=False, i=idx: self.delete_entry(i))
            h.addWidget(delete_btn)
            self._rows.addWidget(row)

    def delete_entry(self, index: int) -> None:
        self._store.remove(index)
        self.refresh()


# ═══════════════════════════════════════════════════════════════════════
#  LEGAL
# ═══════════════════════════════════════════════════════════════════════


class LegalDialog(QDialog):
    """Links to the terms of use and privacy policy, opened in the browser."""

    def __init__(
        self, terms_url: str, privacy_url: str, parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Legal")
        self.setMinimumWidth(320)
        self._terms_url = terms_url
        self._privacy_url = privacy_url

        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 20)
        root.addWidget(_section_label("Legal"))

        terms_btn = QPushButton("Terms of Use", self)
        terms_btn.setObjectName("linkButton")
        terms_btn.clicked.connect(self.open_terms)
        root.addWidget(terms_btn)

        privacy_btn = QPushButton("Privacy Policy", self)
        privacy_btn.setObjectName("linkButton")
        privacy_btn.clicked.connect(self.open_privacy)
        root.addWidget(privacy_btn)

    def open_terms(self) -> bool:
        return QDesktopServices.openUrl(QUrl(self._terms_url))

    def open_privacy(self) -> bool:
        return QDesktopServices.openUrl(QUrl(self._privacy_url))
