"""Pseudo-legal move generation + attack detection."""

from __future__ import annotations

from collections.abc import Callable

from seasons.core.board import Board, Cell
from seasons.core.corners import pawn_forward
from seasons.core.enums import Player, PieceType
from seasons.core.move import Move
from seasons.core.piece import Piece

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

ELEPHANT_OFFSETS: tuple[tuple[int, int], ...] = ((-2, -2), (2, 2), (-2, 2), (2, -2))
GENERAL_OFFSETS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Fixed-offset (non-sliding, non-pawn) pieces.
_STEP_OFFSETS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.KING: KING_OFFSETS,
    PieceType.ELEPHANT: ELEPHANT_OFFSETS,
    PieceType.KNIGHT: KNIGHT_OFFSETS,
    PieceType.GENERAL: GENERAL_OFFSETS,
}


class MoveGenerator:
    """Generates pseudo-legal destinations on a :class:`Board`.

    Pseudo-legal means pattern- and occupancy-correct; whether the move
    leaves the mover's king attacked is :class:`~seasons.core.rules.Rules`'
    business.  The generator never mutates the board.
    """

    __slots__ = ("_board", "_dispatch")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._dispatch: dict[PieceType, Callable[[Cell, Piece, list[Cell]], None]] = {
            PieceType.ROOK: self._gen_rook,
            PieceType.PAWN: self._gen_pawn,
        }

    # -- Public API ---------------------------------------------------------

    def destinations(self, from_cell: Cell) -> list[Cell]:
        """Pseudo-legal destination cells for the piece on *from_cell*."""
        piece = from_cell.piece
        if piece is None:
            return []

        targets: list[Cell] = []
        generate = self._dispatch.get(piece.piece_type)
        if generate is not None:
            generate(from_cell, piece, targets)
        else:
            self._gen_steps(from_cell, _STEP_OFFSETS[piece.piece_type], targets)

        mover = piece.effective_controller
        return [cell for cell in targets if not cell.has_friendly_piece(mover)]

    def generate_pseudo_legal_moves(self, player: Player) -> list[Move]:
        """Every pseudo-legal move for pieces *player* currently controls."""
        moves: list[Move] = []
        for from_cell in self._board.controlled_cells(player):
            for to_cell in self.destinations(from_cell):
                moves.append(Move(from_cell.square, to_cell.square))
        return moves

    # -- Attack detection (public) -----------------------------------------

    def attacks(self, from_cell: Cell, target: Cell) -> bool:
        """Does the piece on *from_cell* reach *target*?"""
        return target in self.destinations(from_cell)

    def is_attacked_by_others(self, target: Cell, player: Player) -> bool:
        """Is *target* reachable by any piece not controlled by *player*?"""
        for cell in self._board.occupied_cells():
            piece = cell.piece
            if piece is None or piece.effective_controller == player:
                continue
            if self.attacks(cell, target):
                return True
        return False

    def is_in_check(self, player: Player) -> bool:
        """Is *player*'s king attacked? A player without a king never is."""
        king_cell = self._board.find_king(player)
        if king_cell is None:
            return False
        return self.is_attacked_by_others(king_cell, player)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_steps(
        self,
        from_cell: Cell,
        offsets: tuple[tuple[int, int], ...],
        targets: list[Cell],
    ) -> None:
        board = self._board
        for dr, dc in offsets:
            cell = board.get_cell(from_cell.row + dr, from_cell.col + dc)
            if cell is not None:
                targets.append(cell)

    def _gen_rook(self, from_cell: Cell, piece: Piece, targets: list[Cell]) -> None:
        board = self._board
        for dr, dc in ROOK_DIRS:
            row, col = from_cell.row + dr, from_cell.col + dc
            while (cell := board.get_cell(row, col)) is not None:
                targets.append(cell)
                if not cell.is_empty():
                    break
                row += dr
                col += dc

    def _gen_pawn(self, from_cell: Cell, piece: Piece, targets: list[Cell]) -> None:
        board = self._board
        row, col = from_cell.row, from_cell.col
        dr, dc = pawn_forward(piece.owner, row, col)

        ahead = board.get_cell(row + dr, col + dc)
        if ahead is not None and ahead.is_empty():
            targets.append(ahead)

        # Captures sit one step forward, one step to either side of the axis.
        if dr == 0:
            sides = ((row + 1, col + dc), (row - 1, col + dc))
        else:
            sides = ((row + dr, col + 1), (row + dr, col - 1))

        mover = piece.effective_controller
        for cap_row, cap_col in sides:
            cell = board.get_cell(cap_row, cap_col)
            if cell is not None and cell.has_enemy_piece(mover):
                targets.append(cell)
