"""Two-sided square-board games with promotion (chess, checkers)."""

from __future__ import annotations

from typing import ClassVar

from boardgames.core.enums import Color, PieceKind
from boardgames.core.errors import IllegalMoveError, InvariantError
from boardgames.core.move import Move, MoveChain
from boardgames.core.piece import make_piece
from boardgames.core.types import square_name
from boardgames.game.base import Game, HistoryEntry
from boardgames.game.events import GameEvents
from boardgames.game.player import Player


class CheckerboardGame(Game):
    """A square board shared by two sides.

    The first player added plays WHITE from the bottom rows and moves first;
    the second plays BLACK from the top. When a chain's last step lands a
    promotable piece on the far rank, a synthetic step is appended that
    swaps it for a piece of the promoted kind.
    """

    promotion_options: ClassVar[tuple[PieceKind, ...]] = ()
    default_promotion: ClassVar[PieceKind | None] = None

    def __init__(self, size: int, events: GameEvents | None = None) -> None:
        super().__init__(size, size, events)
        self._sides: dict[Player, Color] = {}

    def _before_start(self) -> None:
        self._sides = {player: Color(i) for i, player in enumerate(self._players)}

    # ── Orientation ──────────────────────────────────────────────────────

    def side_of(self, player: Player) -> Color:
        try:
            return self._sides[player]
        except KeyError:
            raise InvariantError(f"{player} does not play in this game") from None

    def forward(self, player: Player) -> int:
        """Row delta pointing toward *player*'s far rank."""
        return -1 if self.side_of(player) == Color.WHITE else 1

    def far_rank(self, player: Player) -> int:
        return 0 if self.side_of(player) == Color.WHITE else self._board.height - 1

    def home_rank(self, player: Player) -> int:
        return self._board.height - 1 if self.side_of(player) == Color.WHITE else 0

    # ── Promotion ────────────────────────────────────────────────────────

    def check_promotion(self, move: Move) -> bool:
        """Whether *move* should promote its piece."""
        return False

    def promotion_move(self, move: Move, kind: PieceKind) -> Move:
        """Synthetic step replacing the piece moved by *move* with a new *kind*."""
        owner = move.piece.owner
        promoted = make_piece(kind, owner, move.dest)
        return Move.from_piece(
            promoted,
            move.dest,
            captured=move.piece,
            description=(
                f"{owner.name} {move.piece.kind.name} on {square_name(move.dest)} "
                f"promoted to {kind.name}"
            ),
            destroy_on_undo=True,
        )

    def _prepare(self, chain: MoveChain, promotion: PieceKind | None) -> MoveChain:
        if not self.check_promotion(chain.last):
            return chain
        kind = promotion if promotion is not None else self.default_promotion
        if kind not in self.promotion_options:
            raise IllegalMoveError(f"Invalid promotion piece: {kind!r}")
        return chain.then(self.promotion_move(chain.last, kind))

    def _after_apply(self, entry: HistoryEntry) -> None:
        if not entry.simulated and entry.chain.last.destroy_on_undo:
            self._emit(self.events.on_promotion, entry.chain)
