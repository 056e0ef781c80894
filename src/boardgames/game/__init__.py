"""Game layer - players, the move state machine and per-game rules.

Quick start::

    from boardgames.game import GameType, MoveLogObserver, Player

    game = GameType.CHESS.new_game()
    game.add_players([Player("Alice", "white"), Player("Bob", "black")])
    game.add_observer(MoveLogObserver())
    game.start()
    game.apply(game.find_move((6, 4), (4, 4)))
"""

from boardgames.game.base import Game, HistoryEntry
from boardgames.game.checkerboard import CheckerboardGame
from boardgames.game.checkers import RULES, CaptureRule, CheckersGame, CheckersRules, rules_for
from boardgames.game.chess import ChessGame
from boardgames.game.chutes import ChutesAndLaddersGame, generate_layout
from boardgames.game.dice import Dice
from boardgames.game.events import GameEvents
from boardgames.game.interfaces import DiceRoll, GameObserver, IDice
from boardgames.game.observers import MoveLogObserver
from boardgames.game.player import Player
from boardgames.game.registry import GameType

__all__ = [
    # Interfaces
    "DiceRoll",
    "GameObserver",
    "IDice",
    # State machine
    "Game",
    "GameEvents",
    "HistoryEntry",
    "Player",
    # Games
    "CheckerboardGame",
    "ChessGame",
    "CheckersGame",
    "ChutesAndLaddersGame",
    "GameType",
    # Configuration
    "CaptureRule",
    "CheckersRules",
    "RULES",
    "rules_for",
    "Dice",
    "generate_layout",
    # Observers
    "MoveLogObserver",
]
