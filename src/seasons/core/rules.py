"""High-level rules: check, checkmate, stalemate, legality, move application."""

from __future__ import annotations

from seasons.core.board import Board, Cell
from seasons.core.corners import is_promotion_square
from seasons.core.enums import Player, PieceType
from seasons.core.move_generator import MoveGenerator
from seasons.core.piece import Piece


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy:
    # - Stalemate eliminates exactly like checkmate; there are no draws.

    @staticmethod
    def is_in_check(board: Board, player: Player) -> bool:
        return MoveGenerator(board).is_in_check(player)

    @staticmethod
    def is_legal_move(board: Board, from_cell: Cell, to_cell: Cell) -> bool:
        """Pattern-legal and does not leave the mover's own king attacked."""
        piece = from_cell.piece
        if piece is None:
            return False
        gen = MoveGenerator(board)
        if to_cell not in gen.destinations(from_cell):
            return False
        return Rules._is_check_safe(gen, board, from_cell, to_cell, piece)

    @staticmethod
    def legal_moves(board: Board, from_cell: Cell) -> list[Cell]:
        """Check-filtered destinations for the piece on *from_cell*."""
        piece = from_cell.piece
        if piece is None:
            return []
        gen = MoveGenerator(board)
        return [
            to_cell
            for to_cell in gen.destinations(from_cell)
            if Rules._is_check_safe(gen, board, from_cell, to_cell, piece)
        ]

    @staticmethod
    def has_legal_move(board: Board, player: Player) -> bool:
        """Whether any piece *player* controls has a check-safe move."""
        gen = MoveGenerator(board)
        for from_cell in board.controlled_cells(player):
            piece = from_cell.piece
            assert piece is not None
            for to_cell in gen.destinations(from_cell):
                if Rules._is_check_safe(gen, board, from_cell, to_cell, piece):
                    return True
        return False

    @staticmethod
    def is_checkmate(board: Board, player: Player) -> bool:
        if not Rules.is_in_check(board, player):
            return False
        return not Rules.has_legal_move(board, player)

    @staticmethod
    def is_stalemate(board: Board, player: Player) -> bool:
        if Rules.is_in_check(board, player):
            return False
        return not Rules.has_legal_move(board, player)

    @staticmethod
    def apply_move(
        board: Board, from_cell: Cell, to_cell: Cell
    ) -> tuple[Piece | None, bool]:
        """Play a validated move. Returns ``(captured, promoted)``.

        Caller is responsible for legality check.
        """
        piece = from_cell.piece
        captured = board.move_piece(from_cell, to_cell)
        assert piece is not None
        promoted = False
        if piece.piece_type == PieceType.PAWN and is_promotion_square(
            piece.owner, to_cell.row, to_cell.col
        ):
            promoted = piece.promote()
        return captured, promoted

    # -- Internal -----------------------------------------------------------

    @staticmethod
    def _is_check_safe(
        gen: MoveGenerator,
        board: Board,
        from_cell: Cell,
        to_cell: Cell,
        piece: Piece,
    ) -> bool:
        with board.simulate_move(from_cell, to_cell):
            return not gen.is_in_check(piece.effective_controller)
