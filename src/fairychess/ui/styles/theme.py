"""Visual theme constants and QSS styles for Fairy Chess."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board and its overlays."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # destinations of the selected piece
    help_current: QColor  # help overlay, side to move
    help_opponent: QColor  # help overlay, other side
    piece: QColor  # glyph colour

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(255, 255, 255),  # white
            dark_square=QColor(160, 160, 164),  # gray
            highlight_from=QColor(0, 255, 0, 150),  # green
            highlight_to=QColor(0, 200, 200, 130),  # cyan
            help_current=QColor(255, 255, 0, 120),  # yellow
            help_opponent=QColor(255, 0, 0, 110),  # red
            piece=QColor(0, 0, 0),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(155, 199, 0, 140),
            highlight_to=QColor(0, 0, 0, 50),
            help_current=QColor(255, 255, 0, 100),
            help_opponent=QColor(255, 0, 0, 100),
            piece=QColor(20, 20, 20),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            light_square=QColor(224, 226, 231),
            dark_square=QColor(101, 110, 122),
            highlight_from=QColor(155, 199, 0, 140),
            highlight_to=QColor(0, 0, 0, 50),
            help_current=QColor(255, 255, 0, 100),
            help_opponent=QColor(255, 0, 0, 100),
            piece=QColor(15, 15, 15),
        )


THEMES: dict[str, BoardTheme] = {
    "Default": BoardTheme.default(),
    "Classic": BoardTheme.classic(),
    "Slate": BoardTheme.slate(),
}


def theme_by_name(name: str) -> BoardTheme:
    """Preset named *name*, or the default theme for unknown names."""
    return THEMES.get(name, BoardTheme.default())


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-size: 14px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}

QStatusBar {
    color: #e0e0e0;
}
"""
