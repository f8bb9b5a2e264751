"""Game state machine — board, turn rotation, eliminations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from seasons.core.board import Board
from seasons.core.enums import Player
from seasons.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """Manages game lifecycle: board, current player, who is still playing.

    This is a pure data/logic class — no UI. Rule evaluation lives in
    :class:`~seasons.core.rules.Rules`; the controller decides when to
    call :meth:`eliminate`.
    """

    board: Board = field(default_factory=Board, init=False)
    current_player: Player = field(default=Player.SPRING, init=False)
    active_players: list[Player] = field(default_factory=list, init=False)
    eliminated_players: set[Player] = field(default_factory=set, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    winner: Player | None = field(default=None, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, first_player: Player = Player.SPRING) -> None:
        """Initialise (or reset) the game on the existing board."""
        self.board.clear()
        self.board.setup_initial_pieces()
        self.current_player = first_player
        self.active_players = list(Player)
        self.eliminated_players.clear()
        self.phase = GamePhase.AWAITING_MOVE
        self.winner = None

    # ── Turn rotation ────────────────────────────────────────────────────

    def advance_turn(self) -> Player:
        """Pass the turn to the next player still in the game.

        With one player (or none) left the turn stays where it is.
        """
        if self.active_player_count <= 1:
            return self.current_player
        player = self.current_player.next
        while player in self.eliminated_players:
            player = player.next
        self.current_player = player
        return player

    # ── Elimination ──────────────────────────────────────────────────────

    def eliminate(self, loser: Player, victor: Player) -> int:
        """Knock *loser* out: drop their king, hand their pieces to *victor*.

        Pieces *loser* had inherited earlier move on too, so no piece stays
        under an eliminated controller.  Returns the number of pieces that
        changed hands.
        """
        self.eliminated_players.add(loser)

        king_cell = self.board.find_king(loser)
        if king_cell is None:
            _LOGGER.error("Eliminating %s but no king of theirs is on the board", loser)
        else:
            king_cell.piece = None

        inherited = self.board.owned_pieces(loser)
        inherited += [
            cell.piece
            for cell in self.board.controlled_cells(loser)
            if cell.piece is not None and cell.piece.owner != loser
        ]
        for piece in inherited:
            # Pawns keep their owner-derived direction and promotion edges.
            piece.transfer_control_to(victor)
        return len(inherited)

    def finish_if_decided(self) -> bool:
        """Enter GAME_OVER once at most one player remains."""
        remaining = self.remaining_players
        if len(remaining) > 1:
            return False
        self.phase = GamePhase.GAME_OVER
        self.winner = remaining[0] if remaining else None
        return True

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def remaining_players(self) -> list[Player]:
        """Active, non-eliminated players in turn order."""
        return [p for p in self.active_players if p not in self.eliminated_players]

    @property
    def active_player_count(self) -> int:
        return len(self.remaining_players)

    def is_eliminated(self, player: Player) -> bool:
        return player in self.eliminated_players

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER
