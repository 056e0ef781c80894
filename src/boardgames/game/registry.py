"""Catalogue of playable games."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from boardgames.game.base import Game
from boardgames.game.checkers import CheckersGame
from boardgames.game.chess import ChessGame
from boardgames.game.chutes import ChutesAndLaddersGame


class GameType(IntEnum):
    CHECKERS = 0
    CHESS = 1
    CHUTES_AND_LADDERS = 2

    @property
    def game_class(self) -> type[Game]:
        return _GAME_CLASSES[self]

    @property
    def min_players(self) -> int:
        return self.game_class.min_players

    @property
    def max_players(self) -> int:
        return self.game_class.max_players

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").title()

    def new_game(self, **kwargs: Any) -> Game:
        """Create a fresh, unstarted game of this type."""
        return self.game_class(**kwargs)

    def __str__(self) -> str:
        return self.display_name


_GAME_CLASSES: dict[GameType, type[Game]] = {
    GameType.CHECKERS: CheckersGame,
    GameType.CHESS: ChessGame,
    GameType.CHUTES_AND_LADDERS: ChutesAndLaddersGame,
}
