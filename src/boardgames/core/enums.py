"""Core enumerations shared by every game."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Team of a two-sided checkerboard game."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Every piece type known to the engine, across all games."""

    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()
    MAN = auto()
    CROWNED = auto()
    RACER = auto()

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    def __str__(self) -> str:
        return self.name.lower()


_SYMBOLS: dict[PieceKind, str] = {
    PieceKind.PAWN: "♟",
    PieceKind.KNIGHT: "♞",
    PieceKind.BISHOP: "♝",
    PieceKind.ROOK: "♜",
    PieceKind.QUEEN: "♛",
    PieceKind.KING: "♚",
    PieceKind.MAN: "⛂",
    PieceKind.CROWNED: "⛃",
    PieceKind.RACER: "¥",
}


class SquareState(IntEnum):
    """Occupancy of a square as seen by a particular piece."""

    OUT_OF_BOUNDS = 0
    EMPTY = 1
    OWN = 2
    OPPONENT = 3


class SquareShade(IntEnum):
    """Checkerboard shading of a square."""

    LIGHT = 0
    DARK = 1


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WIN = 1
    STALEMATE = 2
