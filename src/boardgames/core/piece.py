"""Piece record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from boardgames.core.enums import PieceKind
from boardgames.core.types import Square

if TYPE_CHECKING:
    from boardgames.game.player import Player


@dataclass(eq=False, slots=True)
class Piece:
    """A piece on (or captured from) the board.

    Pieces compare and hash by identity: two pawns of the same owner on the
    same square are still different pieces. A captured piece keeps its last
    position so that undo can put it back.
    """

    kind: PieceKind
    owner: Player = field(repr=False)
    row: int = 0
    col: int = 0
    move_count: int = 0

    @property
    def square(self) -> Square:
        return (self.row, self.col)

    @property
    def symbol(self) -> str:
        return self.kind.symbol

    # ── Hooks invoked by the game state machine ─────────────────────────

    def on_move(self) -> None:
        self.move_count += 1

    def on_undo(self) -> None:
        self.move_count -= 1

    def __str__(self) -> str:
        return f"{self.owner.name} {self.kind.name} {self.row}, {self.col}"


def make_piece(kind: PieceKind, owner: Player, square: Square | None = None) -> Piece:
    """Create a piece of *kind* for *owner*, optionally positioned at *square*.

    The piece is not placed on any board and not yet registered with its owner.
    """
    if square is None:
        return Piece(kind, owner)
    return Piece(kind, owner, square[0], square[1])
