"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from seasons.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable ``from → to`` pair. No flags: every move is a plain relocation."""

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
