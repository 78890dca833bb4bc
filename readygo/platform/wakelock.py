"""Keep the display awake during a workout.

On macOS this runs ``caffeinate -d`` for as long as the lock is held.
Elsewhere it does nothing.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys

logger = logging.getLogger(__name__)


class CaffeinateWakeLock:
    """``WakeLockPort`` backed by a ``caffeinate`` child process."""

    def __init__(self, enabled: bool = True) -> None:
        self._enabled = enabled
        self._proc: subprocess.Popen | None = None

    @property
    def held(self) -> bool:
        return self._proc is not None

    @property
    def supported(self) -> bool:
        return sys.platform == "darwin" and shutil.which("caffeinate") is not None

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled
        if not enabled:
            self.release()

    def acquire(self) -> None:
        if self._proc is not None or not self._enabled or not self.supported:
            return
        try:
            self._proc = subprocess.Popen(
                ["caffeinate", "-d"],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError:
            logger.warning("caffeinate could not be started")

    def release(self) -> None:
        if self._proc is None:
            return
        proc, self._proc = self._proc, None
        proc.terminate()
        try:
            proc.wait(timeout=1)
        except subprocess.TimeoutExpired:
            proc.kill()
