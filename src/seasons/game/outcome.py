"""Value objects handed back to the UI after every move attempt."""

from __future__ import annotations

from dataclasses import dataclass, field

from seasons.core.enums import Player, PieceType
from seasons.core.piece import Piece
from seasons.core.types import Square


@dataclass(frozen=True, slots=True)
class PieceInfo:
    """Read-only snapshot of a piece; callers never touch live pieces."""

    piece_type: PieceType
    owner: Player
    controller: Player

    @property
    def is_inherited(self) -> bool:
        return self.controller != self.owner

    @classmethod
    def from_piece(cls, piece: Piece) -> PieceInfo:
        return cls(piece.piece_type, piece.owner, piece.effective_controller)

    def __str__(self) -> str:
        prefix = f"({self.controller})" if self.is_inherited else ""
        return f"{prefix}{self.owner} {self.piece_type}"


@dataclass(frozen=True)
class MoveOutcome:
    """Result of :meth:`GameController.attempt_move`.

    ``messages`` holds the status lines a UI shows, in the order the
    events happened.
    """

    applied: bool
    mover: Player | None = None
    from_sq: Square | None = None
    to_sq: Square | None = None
    captured: PieceInfo | None = None
    promoted: bool = False
    checks_delivered: frozenset[Player] = field(default_factory=frozenset)
    eliminations: frozenset[Player] = field(default_factory=frozenset)
    game_over: bool = False
    winner: Player | None = None
    messages: tuple[str, ...] = ()

    @classmethod
    def rejected(
        cls, from_sq: Square | None = None, to_sq: Square | None = None
    ) -> MoveOutcome:
        return cls(applied=False, from_sq=from_sq, to_sq=to_sq)
