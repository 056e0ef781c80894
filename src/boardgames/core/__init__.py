"""Core domain layer - board, pieces and moves shared by every game.

Quick start::

    from boardgames.core import Board, Move, MoveChain, PieceKind, make_piece

    board = Board(8, 8)
    rook = make_piece(PieceKind.ROOK, player)
    board.place(rook, (7, 0))
    chain = MoveChain.of(Move.from_piece(rook, (4, 0)))
"""

from boardgames.core.board import Board
from boardgames.core.enums import Color, GameResult, PieceKind, SquareShade, SquareState
from boardgames.core.errors import (
    BoardGameError,
    ConfigurationError,
    IllegalMoveError,
    InvariantError,
)
from boardgames.core.move import Move, MoveChain
from boardgames.core.piece import Piece, make_piece
from boardgames.core.types import Square, offset, square_name

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceKind",
    "SquareShade",
    "SquareState",
    # Errors
    "BoardGameError",
    "ConfigurationError",
    "IllegalMoveError",
    "InvariantError",
    # Types / helpers
    "Square",
    "offset",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveChain",
    "Piece",
    "make_piece",
]
