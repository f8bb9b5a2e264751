"""Visual theme constants and QSS styles for Four Seasons."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from seasons.core.enums import Player

# Seat colours; a piece is painted in its *controller's* colour.
PLAYER_COLORS: dict[Player, QColor] = {
    Player.SPRING: QColor(28, 101, 74),  # green
    Player.SUMMER: QColor(138, 51, 56),  # red
    Player.FALL: QColor(33, 43, 52),  # blue-black
    Player.WINTER: QColor(201, 207, 197),  # white
}


def player_color(player: Player) -> QColor:
    return PLAYER_COLORS[player]


def piece_text_color(player: Player) -> QColor:
    """Readable letter colour on top of *player*'s disc."""
    return QColor(40, 40, 40) if player == Player.WINTER else QColor(255, 255, 255)


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board."""

    light_square: QColor
    dark_square: QColor
    frame: QColor  # border around the board
    cross_main: QColor  # centre diagonal, top-left → bottom-right
    cross_anti: QColor  # centre diagonal, top-right → bottom-left
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal move targets
    highlight_check: QColor  # king in check
    piece_shadow: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(213, 212, 120),  # olive
            dark_square=QColor(106, 50, 45),  # maroon
            frame=QColor(200, 205, 166),
            cross_main=QColor(213, 212, 120),
            cross_anti=QColor(106, 50, 45),
            highlight_from=QColor(255, 255, 0, 110),  # yellow transparent
            highlight_to=QColor(255, 255, 0, 60),
            highlight_check=QColor(255, 0, 0, 120),  # red transparent
            piece_shadow=QColor(0, 0, 0, 60),
        )


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #1f365d;
}

QLabel {
    color: #e0e0e0;
    font-family: "Arial", "Helvetica Neue", sans-serif;
}

QLabel#currentPlayer {
    background: #dce0c0;
    border: 10px solid #c8cda6;
    padding: 12px 30px;
    font-size: 18px;
    font-weight: bold;
}

QLabel#gameStatus {
    color: #ff6b6b;
    font-size: 16px;
    font-weight: bold;
}

QMenuBar {
    background: #294f42;
    color: #c8cda6;
    font-weight: bold;
}
QMenuBar::item:selected {
    background: #1c654a;
}
QMenu {
    background: #294f42;
    color: #e0e0e0;
    border: 1px solid #1c654a;
}
QMenu::item:selected {
    background: #1c654a;
}
"""
