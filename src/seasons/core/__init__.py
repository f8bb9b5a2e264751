"""Core domain layer — pure Four Seasons rules with zero external dependencies.

Quick start::

    from seasons.core import Board, Rules, Player

    board = Board.initial()
    knight = board.get_cell(0, 6)
    for cell in Rules.legal_moves(board, knight):
        print(cell.square)
"""

from seasons.core.board import Board, Cell
from seasons.core.corners import (
    HOME_CORNERS,
    INITIAL_LAYOUT,
    is_promotion_square,
    pawn_forward,
    promotion_edges,
)
from seasons.core.enums import Player, PieceType
from seasons.core.move import Move
from seasons.core.move_generator import MoveGenerator
from seasons.core.piece import Piece
from seasons.core.rules import Rules
from seasons.core.types import (
    BOARD_SIZE,
    Square,
    is_square,
    is_valid_position,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Player",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "is_square",
    "is_valid_position",
    "parse_square",
    "square_name",
    # Corners
    "HOME_CORNERS",
    "INITIAL_LAYOUT",
    "is_promotion_square",
    "pawn_forward",
    "promotion_edges",
    # Domain objects
    "Board",
    "Cell",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
]
