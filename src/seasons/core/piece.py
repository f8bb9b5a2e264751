"""Piece entity: original owner plus an optional inherited controller."""

from __future__ import annotations

from seasons.core.enums import Player, PieceType


class Piece:
    """A single piece on the board.

    Pieces are entities, not values: two Summer pawns are different pieces
    even though they compare attribute-for-attribute equal, so equality is
    identity.

    *owner* is fixed at creation and decides pawn direction and promotion
    edges.  *controller* is set once the owner is eliminated and decides
    whose turn the piece moves on and who it is friendly to.
    """

    __slots__ = ("piece_type", "_owner", "_controller")

    def __init__(self, piece_type: PieceType, owner: Player) -> None:
        self.piece_type = piece_type
        self._owner = owner
        self._controller: Player | None = None

    # ── Ownership ────────────────────────────────────────────────────────

    @property
    def owner(self) -> Player:
        return self._owner

    @property
    def original_owner(self) -> Player:
        return self._owner

    @property
    def controller(self) -> Player | None:
        """Inherited controller, ``None`` while the owner still plays it."""
        return self._controller

    @property
    def effective_controller(self) -> Player:
        """The player who may currently move this piece."""
        return self._controller if self._controller is not None else self._owner

    @property
    def is_inherited(self) -> bool:
        return self._controller is not None

    def transfer_control_to(self, player: Player) -> None:
        """Hand the piece to *player*; handing it back to the owner clears it."""
        self._controller = None if player == self._owner else player

    def is_friend_of(self, player: Player) -> bool:
        return self.effective_controller == player

    # ── Promotion ────────────────────────────────────────────────────────

    def promote(self) -> bool:
        """Turn a pawn into a general. Returns whether anything changed."""
        if self.piece_type != PieceType.PAWN:
            return False
        self.piece_type = PieceType.GENERAL
        return True

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def symbol(self) -> str:
        return self.piece_type.symbol

    def __str__(self) -> str:
        prefix = f"({self._controller})" if self._controller is not None else ""
        return f"{prefix}{self._owner} {self.piece_type}"

    def __repr__(self) -> str:
        return (
            f"Piece({self.piece_type.name}, {self._owner.name}, "
            f"controller={self._controller.name if self._controller else None})"
        )
