"""Cue beeps synthesised with numpy and played through QSoundEffect.

Each cue is a short sine beep with a soft attack/release envelope.  The
WAV files are generated once and cached on disk.

Sound names
-----------
- ``boundary``    — 1000 Hz, 100 ms, at every phase change
- ``ten_second``  — 800 Hz, 100 ms, ten seconds before a phase ends
- ``final``       — 1200 Hz, 200 ms, when the workout completes
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect

from ..timer.ports import CueKind

logger = logging.getLogger(__name__)


# ── paths ────────────────────────────────────────────────────────────────

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "ReadyGo"
SOUNDS_DIR = APP_SUPPORT_DIR / "sounds"

SAMPLE_RATE = 44100
BEEP_GAIN = 0.5

# name -> (frequency Hz, duration s)
_BEEPS: dict[str, tuple[float, float]] = {
    CueKind.BOUNDARY.value: (1000.0, 0.10),
    CueKind.TEN_SECOND.value: (800.0, 0.10),
    CueKind.FINAL.value: (1200.0, 0.20),
}

SOUND_NAMES = tuple(_BEEPS)


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _make_envelope(length: int, attack: int = 220, release: int = 660) -> np.ndarray:
    """Linear attack/release envelope (durations in samples)."""
    env = np.ones(length, dtype=np.float64)
    a = min(attack, length)
    if a > 0:
        env[:a] = np.linspace(0.0, 1.0, a)
    r = min(release, length - a)
    if r > 0:
        env[length - r:] = np.linspace(1.0, 0.0, r)
    return env


def _sine(freq: float, duration_s: float) -> np.ndarray:
    """Pure sine wave at *freq* Hz for *duration_s* seconds."""
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 numpy array (-1..1) to 16-bit PCM WAV bytes."""
    samples = np.clip(samples, -1.0, 1.0)
    int_samples = (samples * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


def generate_beep(freq: float, duration_s: float) -> bytes:
    tone = _sine(freq, duration_s) * BEEP_GAIN
    return _to_wav_bytes(tone * _make_envelope(len(tone)))


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND MANAGER
# ═══════════════════════════════════════════════════════════════════════════


class SoundManager(QObject):
    """Cue player.  Implements the engine's ``CuePort``.

    Usage::

        mgr = SoundManager(parent=self)
        mgr.set_volume(70)
        mgr.fire(CueKind.BOUNDARY)
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self._enabled = True
        self._volume = 0.7  # 0.0–1.0
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._effects: dict[str, QSoundEffect] = {}

        self._ensure_wav_files()
        self._load_effects()

    # ── public API ────────────────────────────────────────────────────

    def set_volume(self, level: int) -> None:
        """Set volume (0-100).  Updates all loaded effects."""
        self._volume = max(0, min(level, 100)) / 100.0
        for effect in self._effects.values():
            effect.setVolume(self._volume)

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def fire(self, kind: CueKind) -> None:
        self.play(kind.value)

    def play(self, name: str) -> None:
        """Play a sound by name.  No-op if disabled or name unknown."""
        if not self._enabled:
            return
        effect = self._effects.get(name)
        if effect is not None:
            effect.play()

    @property
    def volume(self) -> int:
        """Current volume as 0-100 integer."""
        return round(self._volume * 100)

    @property
    def enabled(self) -> bool:
        return self._enabled

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_files(self) -> None:
        """Generate any missing WAV files to the cache directory."""
        try:
            self._sounds_dir.mkdir(parents=True, exist_ok=True)
            for name, (freq, duration) in _BEEPS.items():
                path = self._sounds_dir / f"{name}.wav"
                if not path.exists():
                    path.write_bytes(generate_beep(freq, duration))
        except OSError:
            logger.exception("Could not write cue sounds to %s", self._sounds_dir)

    def _load_effects(self) -> None:
        """Create QSoundEffect instances from cached WAV files."""
        for name in SOUND_NAMES:
            path = self._sounds_dir / f"{name}.wav"
            if path.exists():
                effect = QSoundEffect(self)
                effect.setSource(QUrl.fromLocalFile(str(path)))
                effect.setVolume(self._volume)
                self._effects[name] = effect
