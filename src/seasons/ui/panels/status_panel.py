"""StatusPanel — whose turn it is plus the latest game message."""

from __future__ import annotations

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from seasons.core.enums import Player
from seasons.ui.styles.theme import player_color

_BLANK = " "


class StatusPanel(QWidget):
    """Current-player banner and a transient message line.

    Messages clear themselves after *message_timeout_ms* unless they
    announce the end of the game.
    """

    def __init__(
        self, parent: QWidget | None = None, message_timeout_ms: int = 5000
    ) -> None:
        super().__init__(parent)
        self._timeout_ms = message_timeout_ms

        self._clear_timer = QTimer(self)
        self._clear_timer.setSingleShot(True)
        self._clear_timer.timeout.connect(self.clear_message)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(10)

        self._player_label = QLabel()
        self._player_label.setObjectName("currentPlayer")
        self._player_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._player_label)

        self._message_label = QLabel(_BLANK)
        self._message_label.setObjectName("gameStatus")
        self._message_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._message_label)

        self.set_current_player(Player.SPRING)

    # ── Public API ───────────────────────────────────────────────────────

    def set_current_player(self, player: Player) -> None:
        self._player_label.setText(f"Current Player: {player}")
        self._player_label.setStyleSheet(f"color: {player_color(player).name()};")

    def show_message(self, message: str, *, sticky: bool = False) -> None:
        """Display *message*; non-sticky messages fade after the timeout."""
        self._message_label.setText(message)
        self._clear_timer.stop()
        if not sticky and self._timeout_ms > 0:
            self._clear_timer.start(self._timeout_ms)

    def clear_message(self) -> None:
        self._clear_timer.stop()
        self._message_label.setText(_BLANK)

    def set_message_timeout(self, timeout_ms: int) -> None:
        self._timeout_ms = timeout_ms

    @property
    def current_player_text(self) -> str:
        return self._player_label.text()

    @property
    def message_text(self) -> str:
        return self._message_label.text()
