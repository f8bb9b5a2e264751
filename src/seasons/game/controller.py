"""GameController — the central orchestrator of a Four Seasons game.

Coordinates: GameState and Rules.
Reports what happened through the :class:`MoveOutcome` returned from
:meth:`GameController.attempt_move` instead of pushing events.
"""

from __future__ import annotations

import logging

from seasons.core.board import Board, Cell
from seasons.core.enums import Player
from seasons.core.piece import Piece
from seasons.core.rules import Rules
from seasons.core.types import Square, is_square, square_name
from seasons.game.interfaces import GamePhase, IGameController
from seasons.game.outcome import MoveOutcome, PieceInfo
from seasons.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class GameController(IGameController):
    """Runs a hot-seat game: validates moves, applies them, evaluates every
    other player for check / checkmate / stalemate, eliminates and rotates
    turns.

    Thread-safety: not reentrant. Every call runs to completion on the
    caller's (UI) thread.
    """

    __slots__ = ("_state", "_first_player")

    def __init__(self, first_player: Player = Player.SPRING) -> None:
        self._first_player = first_player
        self._state = GameState()
        self._state.setup(first_player)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def active_player_count(self) -> int:
        return self._state.active_player_count

    @property
    def is_game_over(self) -> bool:
        return self._state.is_game_over

    @property
    def winner(self) -> Player | None:
        return self._state.winner

    def is_player_eliminated(self, player: Player) -> bool:
        return self._state.is_eliminated(player)

    # ── Board snapshot accessors ─────────────────────────────────────────

    def piece_at(self, square: Square) -> PieceInfo | None:
        piece = self._piece(square)
        return PieceInfo.from_piece(piece) if piece is not None else None

    def controlling_player(self, square: Square) -> Player | None:
        piece = self._piece(square)
        return piece.effective_controller if piece is not None else None

    def original_owner(self, square: Square) -> Player | None:
        piece = self._piece(square)
        return piece.owner if piece is not None else None

    def can_control(self, square: Square) -> bool:
        """Whether the current player may pick up the piece on *square*."""
        if self._state.is_game_over:
            return False
        piece = self._piece(square)
        return piece is not None and piece.effective_controller == self.current_player

    def is_in_check(self, player: Player) -> bool:
        return Rules.is_in_check(self.board, player)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self) -> None:
        self.reset_game()

    def reset_game(self) -> None:
        self._state.setup(self._first_player)
        _LOGGER.info("New game, %s to move", self.current_player)

    def legal_moves(self, square: Square) -> set[Square]:
        if not self.can_control(square):
            return set()
        from_cell = self._cell(square)
        assert from_cell is not None
        return {cell.square for cell in Rules.legal_moves(self.board, from_cell)}

    def attempt_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        from_cell = self._cell(from_sq)
        to_cell = self._cell(to_sq)
        if (
            from_cell is None
            or to_cell is None
            or not self.can_control(from_sq)
            or not Rules.is_legal_move(self.board, from_cell, to_cell)
        ):
            _LOGGER.debug("Rejected move %r -> %r", from_sq, to_sq)
            return MoveOutcome.rejected(from_sq, to_sq)

        mover = self.current_player
        captured, promoted = Rules.apply_move(self.board, from_cell, to_cell)
        _LOGGER.debug(
            "%s plays %s%s", mover, square_name(from_sq), square_name(to_sq)
        )

        checks, eliminations, messages = self._evaluate_opponents(mover)

        game_over = self._state.finish_if_decided()
        if game_over:
            winner = self._state.winner
            if winner is not None:
                messages.append(f"Game Over! {winner} wins!")
            _LOGGER.info("Game over, winner: %s", winner)
        else:
            self._state.advance_turn()

        return MoveOutcome(
            applied=True,
            mover=mover,
            from_sq=from_sq,
            to_sq=to_sq,
            captured=PieceInfo.from_piece(captured) if captured is not None else None,
            promoted=promoted,
            checks_delivered=frozenset(checks),
            eliminations=frozenset(eliminations),
            game_over=game_over,
            winner=self._state.winner,
            messages=tuple(messages),
        )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _evaluate_opponents(
        self, mover: Player
    ) -> tuple[list[Player], list[Player], list[str]]:
        """Post-move pass over every other player, in turn order."""
        board = self.board
        checks: list[Player] = []
        eliminations: list[Player] = []
        messages: list[str] = []

        for player in list(self._state.active_players):
            if player == mover or self._state.is_eliminated(player):
                continue

            if Rules.is_checkmate(board, player) or Rules.is_stalemate(board, player):
                transferred = self._state.eliminate(player, mover)
                eliminations.append(player)
                messages.append(
                    f"{mover} checkmates {player}! "
                    f"{mover} now controls {player}'s pieces."
                )
                _LOGGER.info(
                    "%s eliminated by %s, %d pieces transferred",
                    player,
                    mover,
                    transferred,
                )
            elif Rules.is_in_check(board, player):
                checks.append(player)
                messages.append(f"{player} is in check!")
                _LOGGER.debug("%s is in check", player)

        return checks, eliminations, messages

    def _cell(self, square: Square) -> Cell | None:
        if not is_square(square):
            return None
        return self.board.cell_at(square)

    def _piece(self, square: Square) -> Piece | None:
        cell = self._cell(square)
        return cell.piece if cell is not None else None
