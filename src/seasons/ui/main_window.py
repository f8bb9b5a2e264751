"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QMainWindow, QMessageBox, QVBoxLayout, QWidget

from seasons.core.types import Square
from seasons.game.controller import GameController
from seasons.game.interfaces import IGameController
from seasons.game.outcome import MoveOutcome
from seasons.ui.board.board_view import BoardView
from seasons.ui.panels.status_panel import StatusPanel
from seasons.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)

RULES_TEXT = (
    "Four Seasons is played on an 8x8 board with four players.\n\n"
    "Players: Spring (Green), Summer (Red), Fall (Blue), Winter (White)\n\n"
    "Pieces:\n"
    "• King: One square in any direction\n"
    "• Rook: Horizontal and vertical lines\n"
    "• Knight: L-shaped moves\n"
    "• Elephant: Jumps exactly two squares diagonally\n"
    "• Pawn: Forward one square, captures diagonally forward\n"
    "• General: One square diagonally (promoted pawn)\n\n"
    "Turn order: Spring → Summer → Fall → Winter\n\n"
    "• Players must move out of check\n"
    "• Checkmate or stalemate eliminates the player and hands their pieces "
    "to whoever delivered it\n"
    "• Inherited pieces keep moving in their original direction\n"
    "• Last player with a king wins"
)

CONTROLS_TEXT = (
    "Click on a piece to select it.\n"
    "Click on a highlighted square to move.\n"
    "Click the selected piece again, or anywhere else, to deselect.\n\n"
    "Hot-seat play:\n"
    "• Players take turns on the same device\n"
    "• Only the current player's pieces can be selected\n"
    "• Eliminated players are skipped"
)

ABOUT_TEXT = (
    "Four Seasons Chess Variant\n\n"
    "A four-player chess variant for hot-seat play, with check, "
    "checkmate and piece inheritance."
)


class MainWindow(QMainWindow):
    """Main application window for Four Seasons."""

    def __init__(
        self,
        controller: IGameController | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Four Seasons Chess")

        self._controller = controller if controller is not None else GameController()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._apply_settings()

        self._board_view.move_requested.connect(self._on_move_requested)
        self._refresh()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(13, 13, 13, 13)
        root.setSpacing(6)

        self._board_view = BoardView(tile=self._settings.tile_size)
        root.addWidget(self._board_view, stretch=1)

        self._status_panel = StatusPanel()
        root.addWidget(self._status_panel)

        board_px = self._settings.tile_size * 8
        self.resize(board_px + 40, board_px + 200)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        # Game menu
        self._menu_game = menu_bar.addMenu("Game")
        assert self._menu_game is not None

        self._act_new_game = QAction("New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._menu_game.addSeparator()

        self._act_exit = QAction("Exit", self)
        self._act_exit.setShortcut("Ctrl+Q")
        self._act_exit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_exit)

        # Help menu
        self._menu_help = menu_bar.addMenu("Help")
        assert self._menu_help is not None

        self._act_rules = QAction("Rules", self)
        self._act_rules.triggered.connect(
            lambda: self._show_info("Game Rules", RULES_TEXT)
        )
        self._menu_help.addAction(self._act_rules)

        self._act_controls = QAction("Controls", self)
        self._act_controls.triggered.connect(
            lambda: self._show_info("Controls", CONTROLS_TEXT)
        )
        self._menu_help.addAction(self._act_controls)

        self._menu_help.addSeparator()

        self._act_about = QAction("About", self)
        self._act_about.triggered.connect(
            lambda: self._show_info("About Four Seasons", ABOUT_TEXT)
        )
        self._menu_help.addAction(self._act_about)

    def _apply_settings(self) -> None:
        s = self._settings
        self._board_view.board_scene.set_show_legal_moves(s.show_legal_moves)
        self._status_panel.set_message_timeout(s.message_timeout_ms)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def controller(self) -> IGameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_panel(self) -> StatusPanel:
        return self._status_panel

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_move_requested(self, from_sq: Square, to_sq: Square) -> None:
        outcome = self._controller.attempt_move(from_sq, to_sq)
        if not outcome.applied:
            _LOGGER.debug("UI move %r -> %r was rejected", from_sq, to_sq)
            self._board_view.board_scene.sync()
            return
        self._refresh()
        self._show_outcome(outcome)

    def _on_new_game(self) -> None:
        self._controller.new_game()
        self._status_panel.clear_message()
        self._refresh()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _refresh(self) -> None:
        scene = self._board_view.board_scene
        scene.set_controller(self._controller)
        scene.set_interactive(not self._controller.is_game_over)
        self._status_panel.set_current_player(self._controller.current_player)

    def _show_outcome(self, outcome: MoveOutcome) -> None:
        if not outcome.messages:
            return
        self._status_panel.show_message(
            "\n".join(outcome.messages), sticky=outcome.game_over
        )

    def _show_info(self, title: str, text: str) -> None:
        QMessageBox.information(self, title, text)
