"""Ready-made observers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from boardgames.game.interfaces import DiceRoll, GameObserver

if TYPE_CHECKING:
    from boardgames.core.move import Move
    from boardgames.game.player import Player


class MoveLogObserver(GameObserver):
    """Narrates a game to a :class:`logging.Logger`, one line per event.

    Usage::

        game.add_observer(MoveLogObserver())
    """

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self._logger = logger if logger is not None else logging.getLogger("boardgames.moves")
        self._level = level

    def _log(self, msg: str, *args: object) -> None:
        self._logger.log(self._level, msg, *args)

    def on_start(self) -> None:
        self._log("Game started")

    def on_move(self, move: Move) -> None:
        self._log("%s", move)

    def on_undo(self, move: Move) -> None:
        self._log("Previous move undone")

    def on_turn_changed(self, player: Player) -> None:
        self._log("%s's turn", player)

    def on_win(self, player: Player) -> None:
        self._log("%s won the game", player)

    def on_stalemate(self) -> None:
        self._log("Stalemate")

    def on_roll(self, player: Player, roll: DiceRoll) -> None:
        self._log("%s rolled %s", player, roll.total)
