"""Board - fixed 8x8 grid of cells, each holding at most one piece."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from seasons.core.corners import INITIAL_LAYOUT
from seasons.core.enums import Player, PieceType
from seasons.core.piece import Piece
from seasons.core.types import BOARD_SIZE, Square, is_valid_position, square_name


class Cell:
    """One board square. Identity is positional; the piece is just content."""

    __slots__ = ("row", "col", "piece")

    def __init__(self, row: int, col: int) -> None:
        self.row = row
        self.col = col
        self.piece: Piece | None = None

    @property
    def square(self) -> Square:
        return self.row, self.col

    def is_empty(self) -> bool:
        return self.piece is None

    def has_friendly_piece(self, player: Player) -> bool:
        return self.piece is not None and self.piece.effective_controller == player

    def has_enemy_piece(self, player: Player) -> bool:
        return self.piece is not None and self.piece.effective_controller != player

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.row == other.row and self.col == other.col

    def __hash__(self) -> int:
        return self.row * 31 + self.col

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col}, {self.piece!r})"


class Board:
    """Mutable board. The 64 cells are created once and never replaced."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: tuple[tuple[Cell, ...], ...] = tuple(
            tuple(Cell(r, c) for c in range(BOARD_SIZE)) for r in range(BOARD_SIZE)
        )

    # -- Element access -----------------------------------------------------

    @staticmethod
    def is_valid_position(row: int, col: int) -> bool:
        return is_valid_position(row, col)

    def get_cell(self, row: int, col: int) -> Cell | None:
        if not is_valid_position(row, col):
            return None
        return self._cells[row][col]

    def get_piece(self, row: int, col: int) -> Piece | None:
        if not is_valid_position(row, col):
            return None
        return self._cells[row][col].piece

    def set_piece(self, row: int, col: int, piece: Piece | None) -> None:
        if is_valid_position(row, col):
            self._cells[row][col].piece = piece

    def remove_piece(self, row: int, col: int) -> None:
        self.set_piece(row, col, None)

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.get_piece(*sq)

    def cell_at(self, sq: Square) -> Cell | None:
        return self.get_cell(*sq)

    # -- Iteration / query helpers -----------------------------------------

    def cells(self) -> Iterator[Cell]:
        """All 64 cells, row by row."""
        for row in self._cells:
            yield from row

    def occupied_cells(self) -> Iterator[Cell]:
        return (cell for cell in self.cells() if cell.piece is not None)

    def controlled_cells(self, player: Player) -> list[Cell]:
        """Cells holding a piece whose effective controller is *player*."""
        return [
            cell
            for cell in self.occupied_cells()
            if cell.piece is not None and cell.piece.effective_controller == player
        ]

    def owned_pieces(self, owner: Player) -> list[Piece]:
        """Pieces originally created for *owner*, whoever controls them now."""
        return [
            cell.piece
            for cell in self.occupied_cells()
            if cell.piece is not None and cell.piece.owner == owner
        ]

    def find_king(self, player: Player) -> Cell | None:
        """Cell of the king controlled by *player*, or ``None`` if it is gone."""
        for cell in self.occupied_cells():
            piece = cell.piece
            if (
                piece is not None
                and piece.piece_type == PieceType.KING
                and piece.effective_controller == player
            ):
                return cell
        return None

    # -- Mutation -----------------------------------------------------------

    def move_piece(self, from_cell: Cell, to_cell: Cell) -> Piece | None:
        """Move the piece on *from_cell* to *to_cell*; return what was captured."""
        piece = from_cell.piece
        if piece is None:
            raise ValueError(f"No piece on {square_name(from_cell.square)}")
        captured = to_cell.piece
        to_cell.piece = piece
        from_cell.piece = None
        return captured

    @contextmanager
    def simulate_move(self, from_cell: Cell, to_cell: Cell) -> Iterator[Piece | None]:
        """Temporarily play *from_cell* → *to_cell*, yielding the captured piece.

        Both cells get their original contents back when the block exits,
        whether it returns normally or raises.
        """
        moving = from_cell.piece
        captured = to_cell.piece
        if moving is None:
            raise ValueError(f"No piece on {square_name(from_cell.square)}")
        to_cell.piece = moving
        from_cell.piece = None
        try:
            yield captured
        finally:
            from_cell.piece = moving
            to_cell.piece = captured

    def clear(self) -> None:
        for cell in self.cells():
            cell.piece = None

    # -- Factory ------------------------------------------------------------

    def setup_initial_pieces(self) -> None:
        """Place the 8 starting pieces of every player."""
        for player, layout in INITIAL_LAYOUT.items():
            for (row, col), piece_type in layout:
                self.set_piece(row, col, Piece(piece_type, player))

    @classmethod
    def initial(cls) -> Board:
        """Standard four-corner starting position."""
        board = cls()
        board.setup_initial_pieces()
        return board

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for r, row in enumerate(self._cells):
            text = []
            for cell in row:
                piece = cell.piece
                if piece is None:
                    text.append("..")
                else:
                    # Type letter plus controller seat index, e.g. "K0".
                    text.append(f"{piece.symbol}{int(piece.effective_controller)}")
            rows.append(f"{BOARD_SIZE - r} {' '.join(text)}")
        rows.append("  a  b  c  d  e  f  g  h")
        return "\n".join(rows)
