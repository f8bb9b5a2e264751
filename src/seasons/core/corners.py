"""Home corners: starting layout, pawn direction and promotion edges.

Every rule that depends on *which* player a piece was created for lives
here.  All lookups take the piece's original owner, so inherited pieces
keep moving and promoting the way their first owner's pieces do.
"""

from __future__ import annotations

from collections.abc import Callable

from seasons.core.enums import Player, PieceType
from seasons.core.types import BOARD_SIZE, Square

_LAST = BOARD_SIZE - 1

HOME_CORNERS: dict[Player, Square] = {
    Player.SUMMER: (0, 0),
    Player.SPRING: (0, _LAST),
    Player.FALL: (_LAST, 0),
    Player.WINTER: (_LAST, _LAST),
}

# Setup order matches the physical board: Summer, Winter, Fall, Spring.
INITIAL_LAYOUT: dict[Player, tuple[tuple[Square, PieceType], ...]] = {
    Player.SUMMER: (
        ((1, 0), PieceType.ROOK),
        ((0, 0), PieceType.KING),
        ((1, 1), PieceType.ELEPHANT),
        ((0, 1), PieceType.KNIGHT),
        ((0, 2), PieceType.PAWN),
        ((1, 2), PieceType.PAWN),
        ((2, 1), PieceType.PAWN),
        ((2, 0), PieceType.PAWN),
    ),
    Player.WINTER: (
        ((6, 7), PieceType.ROOK),
        ((7, 7), PieceType.KING),
        ((6, 6), PieceType.ELEPHANT),
        ((7, 6), PieceType.KNIGHT),
        ((7, 5), PieceType.PAWN),
        ((6, 5), PieceType.PAWN),
        ((5, 6), PieceType.PAWN),
        ((5, 7), PieceType.PAWN),
    ),
    Player.FALL: (
        ((6, 0), PieceType.ROOK),
        ((7, 0), PieceType.KING),
        ((6, 1), PieceType.ELEPHANT),
        ((7, 1), PieceType.KNIGHT),
        ((5, 0), PieceType.PAWN),
        ((5, 1), PieceType.PAWN),
        ((6, 2), PieceType.PAWN),
        ((7, 2), PieceType.PAWN),
    ),
    Player.SPRING: (
        ((1, 7), PieceType.ROOK),
        ((0, 7), PieceType.KING),
        ((1, 6), PieceType.ELEPHANT),
        ((0, 6), PieceType.KNIGHT),
        ((0, 5), PieceType.PAWN),
        ((1, 5), PieceType.PAWN),
        ((2, 6), PieceType.PAWN),
        ((2, 7), PieceType.PAWN),
    ),
}

UP: tuple[int, int] = (-1, 0)
DOWN: tuple[int, int] = (1, 0)
LEFT: tuple[int, int] = (0, -1)
RIGHT: tuple[int, int] = (0, 1)

# owner -> (side-of-diagonal test, forward when the test holds, forward otherwise)
# Each corner's diagonal splits its pawns into two wings that advance along
# perpendicular axes, away from the corner.
_PAWN_WINGS: dict[
    Player, tuple[Callable[[int, int], bool], tuple[int, int], tuple[int, int]]
] = {
    Player.SPRING: (lambda r, c: r + c <= _LAST, LEFT, DOWN),
    Player.SUMMER: (lambda r, c: c > r, RIGHT, DOWN),
    Player.FALL: (lambda r, c: r + c >= _LAST, RIGHT, UP),
    Player.WINTER: (lambda r, c: c < r, LEFT, UP),
}


def pawn_forward(owner: Player, row: int, col: int) -> tuple[int, int]:
    """Forward ``(dr, dc)`` for a pawn created for *owner* standing on (row, col)."""
    on_row_wing, row_wing_dir, col_wing_dir = _PAWN_WINGS[owner]
    return row_wing_dir if on_row_wing(row, col) else col_wing_dir


def promotion_edges(owner: Player) -> tuple[int, int]:
    """``(row, col)`` of the two board edges facing away from *owner*'s corner."""
    corner_row, corner_col = HOME_CORNERS[owner]
    return _LAST - corner_row, _LAST - corner_col


def is_promotion_square(owner: Player, row: int, col: int) -> bool:
    """Whether a pawn of *owner* promotes on arriving at (row, col)."""
    edge_row, edge_col = promotion_edges(owner)
    return row == edge_row or col == edge_col
