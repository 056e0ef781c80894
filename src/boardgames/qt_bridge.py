"""Qt bridge exposing a game's events as signals and its actions as slots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from boardgames.core.errors import IllegalMoveError, InvariantError
from boardgames.core.move import MoveChain
from boardgames.game.base import Game
from boardgames.game.chutes import ChutesAndLaddersGame


class GameSignals(QObject):
    """Re-emits the synchronous callbacks of one :class:`Game` as Qt signals.

    Requests coming from a presentation layer go through the slots; a
    rejected request emits ``move_rejected`` instead of raising.
    """

    started = pyqtSignal()
    move_applied = pyqtSignal(object)
    move_undone = pyqtSignal(object)
    turn_changed = pyqtSignal(object)
    promotion = pyqtSignal(object)
    won = pyqtSignal(object)
    stalemate = pyqtSignal()
    rolled = pyqtSignal(object, object)
    move_rejected = pyqtSignal(str)

    def __init__(self, game: Game, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._game = game
        events = game.events
        events.on_start.append(self.started.emit)
        events.on_move.append(self.move_applied.emit)
        events.on_undo.append(self.move_undone.emit)
        events.on_turn_changed.append(self.turn_changed.emit)
        events.on_promotion.append(self.promotion.emit)
        events.on_win.append(self.won.emit)
        events.on_stalemate.append(self.stalemate.emit)
        events.on_roll.append(self.rolled.emit)

    @property
    def game(self) -> Game:
        return self._game

    @pyqtSlot(object)
    def request_move(self, chain_obj: object) -> None:
        """Apply *chain_obj* for the current player."""
        if not isinstance(chain_obj, MoveChain):
            self.move_rejected.emit("Game received an invalid move")
            return
        try:
            self._game.apply(chain_obj)
        except IllegalMoveError as exc:
            self.move_rejected.emit(str(exc))

    @pyqtSlot(int, int, int, int)
    def request_move_between(
        self, start_row: int, start_col: int, dest_row: int, dest_col: int
    ) -> None:
        """Apply the current player's move from one square to another."""
        try:
            chain = self._game.find_move((start_row, start_col), (dest_row, dest_col))
            self._game.apply(chain)
        except IllegalMoveError as exc:
            self.move_rejected.emit(str(exc))

    @pyqtSlot()
    def request_roll(self) -> None:
        if not isinstance(self._game, ChutesAndLaddersGame):
            self.move_rejected.emit("This game has no dice")
            return
        try:
            self._game.roll()
        except IllegalMoveError as exc:
            self.move_rejected.emit(str(exc))

    @pyqtSlot()
    def request_undo(self) -> None:
        try:
            self._game.undo()
        except InvariantError as exc:
            self.move_rejected.emit(str(exc))
