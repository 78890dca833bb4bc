"""Circular countdown ring rendered with QPainter.

The arc starts full at the beginning of each phase and empties clockwise
as the phase runs down.  MM:SS is drawn in the centre with the phase label
underneath.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QPainter, QPen, QColor, QFont
from PyQt6.QtWidgets import QWidget

from ..timer.engine import TimerMode
from .styles import MODE_LABELS, colors_for


class ProgressRing(QWidget):
    """Custom-painted circular timer ring."""

    RING_DIAMETER = 280
    RING_THICKNESS = 12

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(self.RING_DIAMETER + 20, self.RING_DIAMETER + 20)

        self._progress: float = 0.0
        self._time_text: str = "00:00"
        self._mode: TimerMode = TimerMode.IDLE
        self._color = QColor(colors_for(TimerMode.IDLE)[1])

    # ── public API ────────────────────────────────────────────────────

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def time_text(self) -> str:
        return self._time_text

    def set_progress(self, progress: float) -> None:
        """Arc fill, 0..1.  Values outside the range are clamped."""
        self._progress = max(0.0, min(1.0, progress))
        self.update()

    def set_time_text(self, text: str) -> None:
        self._time_text = text
        self.update()

    def apply_mode(self, mode: TimerMode) -> None:
        self._mode = mode
        self._color = QColor(colors_for(mode)[1])
        self.update()

    # ── painting ──────────────────────────────────────────────────────

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        w = self.width()
        h = self.height()
        cx, cy = w / 2, h / 2
        diameter = max(100, min(w, h) - 20)
        radius = diameter / 2
        thickness = self.RING_THICKNESS
        ring_rect = QRectF(cx - radius, cy - radius, diameter, diameter)

        # ── background track ─────────────────────────────────────────
        track_color = QColor(self._color)
        track_color.setAlpha(40)
        track_pen = QPen(track_color, thickness, Qt.PenStyle.SolidLine)
        painter.setPen(track_pen)
        painter.drawEllipse(ring_rect)

        # ── remaining arc ────────────────────────────────────────────
        if self._progress > 0.001:
            arc_pen = QPen(self._color, thickness, Qt.PenStyle.SolidLine)
            arc_pen.setCapStyle(Qt.PenCapStyle.FlatCap)
            painter.setPen(arc_pen)
            # Qt arcs: start at 12 o'clock (90*16), go clockwise (negative)
            painter.drawArc(
                ring_rect, 90 * 16, -int(self._progress * 360 * 16),
            )

        # ── centre text: time ────────────────────────────────────────
        time_font = QFont()
        time_font.setPixelSize(int(diameter * 0.3))
        time_font.setWeight(QFont.Weight.DemiBold)
        painter.setFont(time_font)
        painter.setPen(self._color)
        painter.drawText(ring_rect, Qt.AlignmentFlag.AlignCenter, self._time_text)

        # ── centre text: phase label ─────────────────────────────────
        label_font = QFont()
        label_font.setPixelSize(13)
        label_font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, 3)
        painter.setFont(label_font)
        label_rect = QRectF(ring_rect)
        label_rect.moveTop(label_rect.top() + diameter * 0.25)
        painter.drawText(
            label_rect, Qt.AlignmentFlag.AlignCenter, MODE_LABELS[self._mode],
        )

        painter.end()
