"""Player - owns pieces and caches their legal moves."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from boardgames.core.move import MoveChain
    from boardgames.core.piece import Piece
    from boardgames.game.base import Game


class Player:
    """A participant in a game.

    Pieces keep a stable order; a piece put back by undo returns to the
    position it was removed from. The legal move
    aggregate is a cache: it only changes when :meth:`update_legal_moves` runs.
    """

    __slots__ = ("_name", "_color", "_pieces", "_legal_moves")

    def __init__(self, name: str = "", color: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color or 'unnamed'})"
        self._pieces: list[Piece] = []
        self._legal_moves: list[MoveChain] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def color(self) -> str:
        """Display identity; the engine never reads it."""
        return self._color

    @color.setter
    def color(self, value: str) -> None:
        self._color = value

    # ── Pieces ───────────────────────────────────────────────────────────

    @property
    def pieces(self) -> tuple[Piece, ...]:
        return tuple(self._pieces)

    def add_piece(self, piece: Piece, index: int | None = None) -> None:
        """Register *piece* at the end, or at position *index* when given."""
        if piece in self._pieces:
            return
        if index is None:
            self._pieces.append(piece)
        else:
            self._pieces.insert(index, piece)

    def remove_piece(self, piece: Piece) -> int | None:
        """Unregister *piece*; returns the position it held, ``None`` if not owned."""
        if piece not in self._pieces:
            return None
        index = self._pieces.index(piece)
        del self._pieces[index]
        return index

    def owns(self, piece: Piece) -> bool:
        return piece in self._pieces

    # ── Legal moves ──────────────────────────────────────────────────────

    @property
    def legal_moves(self) -> list[MoveChain]:
        return list(self._legal_moves)

    def update_legal_moves(self, game: Game) -> list[MoveChain]:
        """Recompute the union of every owned piece's legal moves."""
        moves: list[MoveChain] = []
        for piece in self.pieces:
            moves.extend(game.legal_moves_for_piece(piece))
        self._legal_moves = moves
        return list(moves)

    def clear_legal_moves(self) -> None:
        self._legal_moves = []

    def __repr__(self) -> str:
        return f"Player({self._name!r})"

    def __str__(self) -> str:
        return self._name
