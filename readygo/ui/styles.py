"""QSS stylesheets and per-mode colours for ReadyGo.

Work is white-on-black; every other screen is black-on-white, with a grey
background while paused so a frozen timer is obvious across the room.
"""

from __future__ import annotations

from ..timer.engine import TimerMode

# (background, foreground)
MODE_COLORS: dict[TimerMode, tuple[str, str]] = {
    TimerMode.IDLE:      ("#FFFFFF", "#000000"),
    TimerMode.GET_READY: ("#FFFFFF", "#000000"),
    TimerMode.WORK:      ("#000000", "#FFFFFF"),
    TimerMode.REST:      ("#FFFFFF", "#000000"),
    TimerMode.PAUSED:    ("#D4D4D4", "#000000"),
    TimerMode.COMPLETE:  ("#FFFFFF", "#000000"),
}

MODE_LABELS: dict[TimerMode, str] = {
    TimerMode.IDLE:      "READY",
    TimerMode.GET_READY: "GET READY",
    TimerMode.WORK:      "WORK",
    TimerMode.REST:      "REST",
    TimerMode.PAUSED:    "PAUSED",
    TimerMode.COMPLETE:  "DONE",
}


def colors_for(mode: TimerMode) -> tuple[str, str]:
    return MODE_COLORS.get(mode, MODE_COLORS[TimerMode.IDLE])


def build_stylesheet(mode: TimerMode) -> str:
    """Window stylesheet for *mode*."""
    bg, fg = colors_for(mode)
    return f"""
        QMainWindow, QWidget#screen {{
            background-color: {bg};
            color: {fg};
        }}
        QLabel {{
            color: {fg};
            background: transparent;
        }}
        QPushButton {{
            color: {fg};
            background: transparent;
            border: 1px solid {fg};
            padding: 12px 24px;
            font-size: 18px;
        }}
        QPushButton#bigButton {{
            font-size: 40px;
            font-weight: 600;
            padding: 16px 32px;
        }}
        QPushButton#linkButton {{
            border: none;
            text-decoration: underline;
            font-size: 13px;
            font-weight: 300;
            padding: 4px 8px;
        }}
    """
