"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys

import pytest

from boardgames.core.enums import PieceKind
from boardgames.core.piece import Piece, make_piece
from boardgames.core.types import Square
from boardgames.game.base import Game
from boardgames.game.checkers import CheckersGame
from boardgames.game.chess import ChessGame
from boardgames.game.player import Player

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture
def white() -> Player:
    return Player("Alice", "white")


@pytest.fixture
def black() -> Player:
    return Player("Bob", "black")


@pytest.fixture
def chess(white: Player, black: Player) -> ChessGame:
    game = ChessGame()
    game.add_players([white, black])
    game.start()
    return game


@pytest.fixture
def checkers(white: Player, black: Player) -> CheckersGame:
    game = CheckersGame()
    game.add_players([white, black])
    game.start()
    return game


def clear_pieces(game: Game) -> None:
    """Lift every piece off a started game's board."""
    for player in game.players:
        for piece in player.pieces:
            game.board.remove(piece)
            player.remove_piece(piece)


def put(game: Game, player: Player, kind: PieceKind, square: Square, move_count: int = 0) -> Piece:
    """Place a fresh piece for *player* on a started game's board."""
    piece = make_piece(kind, player)
    piece.move_count = move_count
    player.add_piece(piece)
    game.board.place(piece, square)
    return piece


def refresh(game: Game) -> None:
    for player in game.players:
        game.update_legal_moves(player)
    game.update_legal_moves(game.current_player)
