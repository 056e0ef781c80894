"""Board - rectangular grid of cells holding zero or more pieces."""

from __future__ import annotations

from collections.abc import Iterator

from boardgames.core.enums import SquareShade, SquareState
from boardgames.core.errors import ConfigurationError
from boardgames.core.piece import Piece
from boardgames.core.types import Square


class Board:
    """Mutable ``height x width`` grid.

    Each cell is an ordered list of occupants. Most games keep at most one
    piece per cell but the board does not rely on it. A piece's recorded
    ``(row, col)`` always names the single cell that lists it.
    """

    __slots__ = ("_height", "_width", "_cells", "_shades")

    def __init__(self, height: int, width: int) -> None:
        if height <= 0 or width <= 0:
            raise ConfigurationError(
                f"Board dimensions must be positive: {height!r} x {width!r}"
            )
        self._height = height
        self._width = width
        self._cells: list[list[list[Piece]]] = [
            [[] for _ in range(width)] for _ in range(height)
        ]
        self._shades: list[list[SquareShade]] = [
            [_checkerboard_shade(row, col) for col in range(width)]
            for row in range(height)
        ]

    # ── Geometry ─────────────────────────────────────────────────────────

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def dimensions(self) -> tuple[int, int]:
        return (self._height, self._width)

    def in_bounds(self, square: Square) -> bool:
        row, col = square
        return 0 <= row < self._height and 0 <= col < self._width

    def shade(self, square: Square) -> SquareShade:
        row, col = self._checked(square)
        return self._shades[row][col]

    # ── Element access ───────────────────────────────────────────────────

    def pieces_at(self, square: Square) -> list[Piece]:
        """Occupants of *square* in arrival order (a copy)."""
        row, col = self._checked(square)
        return list(self._cells[row][col])

    def piece_at(self, square: Square) -> Piece | None:
        """First occupant of *square*, or ``None`` when empty."""
        row, col = self._checked(square)
        cell = self._cells[row][col]
        return cell[0] if cell else None

    def is_empty(self, square: Square) -> bool:
        row, col = self._checked(square)
        return not self._cells[row][col]

    def square_state(self, piece: Piece, square: Square) -> SquareState:
        """Classify *square* from the point of view of *piece*'s owner."""
        if not self.in_bounds(square):
            return SquareState.OUT_OF_BOUNDS
        occupant = self.piece_at(square)
        if occupant is None:
            return SquareState.EMPTY
        if occupant.owner is piece.owner:
            return SquareState.OWN
        return SquareState.OPPONENT

    def pieces(self) -> Iterator[Piece]:
        """Every piece on the board, row by row."""
        for row in self._cells:
            for cell in row:
                yield from cell

    # ── Mutation ─────────────────────────────────────────────────────────

    def place(self, piece: Piece, square: Square, index: int | None = None) -> int | None:
        """Move *piece* to *square*, lifting it from its recorded cell if there.

        The piece joins the end of the cell, or position *index* when given.
        Returns the position it held in the cell it left, ``None`` if it was
        not on the board.
        """
        row, col = self._checked(square)
        vacated = self._discard(piece)
        cell = self._cells[row][col]
        if index is None:
            cell.append(piece)
        else:
            cell.insert(index, piece)
        piece.row = row
        piece.col = col
        return vacated

    def remove(self, piece: Piece) -> int | None:
        """Lift *piece* off the board and return the position it held in its cell.

        Its recorded position is kept.
        """
        return self._discard(piece)

    def clear(self) -> None:
        for row in self._cells:
            for cell in row:
                cell.clear()

    # ── Internal ─────────────────────────────────────────────────────────

    def _discard(self, piece: Piece) -> int | None:
        if not self.in_bounds(piece.square):
            return None
        cell = self._cells[piece.row][piece.col]
        if piece not in cell:
            return None
        index = cell.index(piece)
        del cell[index]
        return index

    def _checked(self, square: Square) -> Square:
        if not self.in_bounds(square):
            raise IndexError(f"Square off the board: {square!r}")
        return square

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in self._cells:
            rows.append(" ".join(cell[0].symbol if cell else "." for cell in row))
        return "\n".join(rows)


def _checkerboard_shade(row: int, col: int) -> SquareShade:
    return SquareShade.LIGHT if (row + col) % 2 == 0 else SquareShade.DARK
