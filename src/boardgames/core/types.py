"""Square type alias and coordinate helpers.

Squares are ``(row, col)`` tuples. Row 0 is the top of the board as drawn,
so the first player of a two-sided game starts on the highest rows and
moves "up" (towards row 0).
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]

DIAGONALS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ORTHOGONALS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
    (-2, 1),
    (-2, -1),
)
KING_OFFSETS: tuple[tuple[int, int], ...] = DIAGONALS + ORTHOGONALS


def offset(square: Square, d_row: int, d_col: int) -> Square:
    """Square reached by moving *d_row* rows and *d_col* columns."""
    return (square[0] + d_row, square[1] + d_col)


def square_name(square: Square) -> str:
    """Human-readable ``"r, c"`` form used in move descriptions."""
    return f"{square[0]}, {square[1]}"
