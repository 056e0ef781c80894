"""Synchronous event callbacks for games."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from boardgames.core.move import Move, MoveChain
    from boardgames.game.interfaces import DiceRoll, GameObserver
    from boardgames.game.player import Player

StartCallback = Callable[[], None]
MoveCallback = Callable[["Move"], None]
ChainCallback = Callable[["MoveChain"], None]
PlayerCallback = Callable[["Player"], None]
RollCallback = Callable[["Player", "DiceRoll"], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event, called in order."""

    on_start: list[StartCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_undo: list[MoveCallback] = field(default_factory=list)
    on_turn_changed: list[PlayerCallback] = field(default_factory=list)
    on_promotion: list[ChainCallback] = field(default_factory=list)
    on_win: list[PlayerCallback] = field(default_factory=list)
    on_stalemate: list[StartCallback] = field(default_factory=list)
    on_roll: list[RollCallback] = field(default_factory=list)

    def subscribe(self, observer: GameObserver) -> None:
        """Register every hook of *observer*."""
        self.on_start.append(observer.on_start)
        self.on_move.append(observer.on_move)
        self.on_undo.append(observer.on_undo)
        self.on_turn_changed.append(observer.on_turn_changed)
        self.on_promotion.append(observer.on_promotion)
        self.on_win.append(observer.on_win)
        self.on_stalemate.append(observer.on_stalemate)
        self.on_roll.append(observer.on_roll)
