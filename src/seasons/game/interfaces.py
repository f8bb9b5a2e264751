"""Abstract interfaces for the game layer.

The UI depends on :class:`IGameController`, not on the concrete
:class:`~seasons.game.controller.GameController`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from seasons.core.enums import Player

if TYPE_CHECKING:
    from seasons.core.types import Square
    from seasons.game.outcome import MoveOutcome, PieceInfo


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self) -> None:
        """Set up a new game."""

    @abstractmethod
    def reset_game(self) -> None:
        """Clear the board and start over from the initial position."""

    @abstractmethod
    def legal_moves(self, square: Square) -> set[Square]:
        """Check-safe destinations for the piece on *square*."""

    @abstractmethod
    def attempt_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        """Try a move. Rejections come back as ``applied=False``."""

    @property
    @abstractmethod
    def current_player(self) -> Player: ...

    @abstractmethod
    def can_control(self, square: Square) -> bool:
        """Whether the current player may move the piece on *square*."""

    @abstractmethod
    def is_in_check(self, player: Player) -> bool:
        """Whether *player*'s king is currently attacked."""

    @abstractmethod
    def is_player_eliminated(self, player: Player) -> bool: ...

    @property
    @abstractmethod
    def is_game_over(self) -> bool: ...

    @abstractmethod
    def piece_at(self, square: Square) -> PieceInfo | None: ...
