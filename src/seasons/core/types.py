"""Square type alias and coordinate helpers.

Board layout (row-major, row 0 at the top):
    (0, 0) is the top-left corner (Summer's home),
    (0, 7) the top-right (Spring), (7, 0) the bottom-left (Fall),
    (7, 7) the bottom-right (Winter).
"""

from __future__ import annotations

from typing import TypeAlias

BOARD_SIZE = 8

Square: TypeAlias = tuple[int, int]  # (row, col)


def is_valid_position(row: int, col: int) -> bool:
    """Whether (*row*, *col*) lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_square(value: object) -> bool:
    """Whether *value* is a well-formed on-board ``(row, col)`` pair."""
    if not isinstance(value, tuple) or len(value) != 2:
        return False
    row, col = value
    if not isinstance(row, int) or not isinstance(col, int):
        return False
    return is_valid_position(row, col)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (0, 0) → 'a8', (7, 7) → 'h1'."""
    row, col = sq
    return chr(ord("a") + col) + str(BOARD_SIZE - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'a8' → (0, 0)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a")
