"""Shared pytest fixtures for ReadyGo tests."""

import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from readygo.database.db import configure_engine, init_db
from readygo.timer.engine import TimerEngine
from readygo.timer.recorder import SessionRecorder

from helpers import (
    MemoryLogStore, RecordingCues, RecordingHaptics, RecordingWakeLock,
)


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture(autouse=True)
def settings_dir(tmp_path, monkeypatch):
    """Keep settings writes out of the real Application Support folder."""
    monkeypatch.setattr("readygo.settings.APP_SUPPORT_DIR", tmp_path)
    monkeypatch.setattr(
        "readygo.settings.SETTINGS_PATH", tmp_path / "settings.json",
    )
    return tmp_path


@pytest.fixture
def cues():
    return RecordingCues()


@pytest.fixture
def log_store():
    return MemoryLogStore()


@pytest.fixture
def wake_lock():
    return RecordingWakeLock()


@pytest.fixture
def engine(cues, log_store, wake_lock):
    """TimerEngine with recording fakes for every port."""
    return TimerEngine(
        cues,
        haptics=RecordingHaptics(),
        wake_lock=wake_lock,
        recorder=SessionRecorder(log_store),
    )


@pytest.fixture
def bare_engine():
    """TimerEngine with no collaborators (pure state-machine tests)."""
    return TimerEngine()
