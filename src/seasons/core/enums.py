"""Core enumerations for the Four Seasons domain."""

from __future__ import annotations

from enum import IntEnum


class Player(IntEnum):
    """The four seats, declared in turn order."""

    SPRING = 0
    SUMMER = 1
    FALL = 2
    WINTER = 3

    @property
    def next(self) -> Player:
        """Successor in the fixed cyclic turn order."""
        return Player((self.value + 1) % len(Player))

    def __str__(self) -> str:
        return self.name.title()


class PieceType(IntEnum):
    """Piece kinds. GENERAL only ever appears through pawn promotion."""

    KING = 1
    ROOK = 2
    ELEPHANT = 3
    KNIGHT = 4
    PAWN = 5
    GENERAL = 6

    @property
    def symbol(self) -> str:
        """Single-letter label, e.g. 'N' for a knight."""
        return _SYMBOLS[self]

    def __str__(self) -> str:
        return self.name.lower()


_SYMBOLS: dict[PieceType, str] = {
    PieceType.KING: "K",
    PieceType.ROOK: "R",
    PieceType.ELEPHANT: "E",
    PieceType.KNIGHT: "N",
    PieceType.PAWN: "P",
    PieceType.GENERAL: "G",
}
