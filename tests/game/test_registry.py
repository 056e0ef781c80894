"""Tests for the GameType catalogue."""

import pytest

from boardgames.game.checkers import POOL, CheckersGame
from boardgames.game.chess import ChessGame
from boardgames.game.chutes import ChutesAndLaddersGame
from boardgames.game.registry import GameType


class TestGameType:
    @pytest.mark.parametrize(
        "game_type,cls,max_players",
        [
            (GameType.CHECKERS, CheckersGame, 2),
            (GameType.CHESS, ChessGame, 2),
            (GameType.CHUTES_AND_LADDERS, ChutesAndLaddersGame, 6),
        ],
    )
    def test_factory_and_limits(self, game_type: GameType, cls: type, max_players: int) -> None:
        game = game_type.new_game()
        assert isinstance(game, cls)
        assert not game.is_started
        assert game_type.min_players == 2
        assert game_type.max_players == max_players

    def test_factory_forwards_arguments(self) -> None:
        game = GameType.CHECKERS.new_game(rules=POOL)
        assert isinstance(game, CheckersGame)
        assert game.rules is POOL

    def test_display_name(self) -> None:
        assert str(GameType.CHUTES_AND_LADDERS) == "Chutes And Ladders"
