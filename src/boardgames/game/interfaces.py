"""Interfaces for collaborators of the game layer.

The state machine talks to observers and to the random source only through
these types, never to a concrete UI or RNG.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from boardgames.core.move import Move, MoveChain
    from boardgames.game.player import Player


# ── Random source ────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class DiceRoll:
    """Outcome of one roll: every die face plus their sum."""

    faces: tuple[int, ...]
    total: int


class IDice(Protocol):
    """Protocol for the dice collaborator used by dice games."""

    @property
    def max_total(self) -> int: ...

    def roll(self) -> DiceRoll: ...


# ── Observer ─────────────────────────────────────────────────────────────────


class GameObserver:
    """Receives synchronous lifecycle notifications from a game.

    Every hook is a no-op; override the ones you need and register the
    observer with ``Game.add_observer``. Observers must not apply or undo
    moves from inside a notification.
    """

    def on_start(self) -> None:
        """The game has started."""

    def on_move(self, move: Move) -> None:
        """A step of a real (non-simulated) move chain was applied."""

    def on_undo(self, move: Move) -> None:
        """A step of a real move chain was undone."""

    def on_turn_changed(self, player: Player) -> None:
        """*player* is now the current player."""

    def on_promotion(self, chain: MoveChain) -> None:
        """*chain* promoted its moving piece; its last step is the promotion.

        Fires after the chain's own ``on_move`` notifications.
        """

    def on_win(self, player: Player) -> None:
        """*player* has won."""

    def on_stalemate(self) -> None:
        """The game ended without a winner."""

    def on_roll(self, player: Player, roll: DiceRoll) -> None:
        """*player* rolled the dice (dice games only)."""
