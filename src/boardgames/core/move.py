"""Move steps and move chains."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from boardgames.core.piece import Piece
from boardgames.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """A single relocation of one piece, optionally capturing another.

    ``start`` is read from the moving piece when the move is built with
    :meth:`from_piece`. When ``destroy_on_undo`` is set, undoing the move
    discards the moving piece instead of returning it to ``start``; only the
    synthetic step of a promotion uses it.
    """

    piece: Piece
    start: Square
    dest: Square
    captured: Piece | None = None
    destroy_on_undo: bool = False
    description: str = field(default="", compare=False)

    @classmethod
    def from_piece(
        cls,
        piece: Piece,
        dest: Square,
        captured: Piece | None = None,
        *,
        description: str | None = None,
        destroy_on_undo: bool = False,
    ) -> Move:
        start = piece.square
        if description is None:
            description = _describe(piece, start, dest, captured)
        return cls(piece, start, dest, captured, destroy_on_undo, description)

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def __str__(self) -> str:
        return self.description


def _describe(piece: Piece, start: Square, dest: Square, captured: Piece | None) -> str:
    text = (
        f"{piece.owner.name} {piece.kind.name} moved from "
        f"{square_name(start)} to {square_name(dest)}"
    )
    if captured is not None:
        text += f", capturing {captured.owner.name}'s {captured.kind.name}"
    return text


@dataclass(frozen=True, slots=True)
class MoveChain:
    """Ordered, non-empty sequence of steps applied and undone as one action.

    A plain move is a chain of length one. Castling, promotion and
    chute/ladder teleports append further steps with :meth:`then`.
    """

    steps: tuple[Move, ...]

    def __post_init__(self) -> None:
        if not self.steps:
            raise ValueError("A move chain needs at least one step")

    @classmethod
    def of(cls, *steps: Move) -> MoveChain:
        return cls(tuple(steps))

    def then(self, step: Move) -> MoveChain:
        """A new chain with *step* appended."""
        return MoveChain(self.steps + (step,))

    @property
    def first(self) -> Move:
        return self.steps[0]

    @property
    def last(self) -> Move:
        return self.steps[-1]

    @property
    def piece(self) -> Piece:
        """The piece that initiates the chain."""
        return self.steps[0].piece

    @property
    def start(self) -> Square:
        return self.steps[0].start

    @property
    def dest(self) -> Square:
        return self.steps[0].dest

    def __iter__(self) -> Iterator[Move]:
        return iter(self.steps)

    def __reversed__(self) -> Iterator[Move]:
        return reversed(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, index: int) -> Move:
        return self.steps[index]

    def __str__(self) -> str:
        return "; ".join(step.description for step in self.steps)
