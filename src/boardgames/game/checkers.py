"""Checkers (draughts) family: rule variants, capture chains and crowning."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import IntEnum

from boardgames.core.enums import GameResult, PieceKind, SquareShade, SquareState
from boardgames.core.errors import ConfigurationError
from boardgames.core.move import Move, MoveChain
from boardgames.core.piece import Piece
from boardgames.core.types import DIAGONALS, offset
from boardgames.game.checkerboard import CheckerboardGame
from boardgames.game.events import GameEvents
from boardgames.game.player import Player

_LOGGER = logging.getLogger(__name__)


class CaptureRule(IntEnum):
    MUST_CAPTURE = 0
    MUST_MAXIMISE_CAPTURE = 1
    NO_CONSTRAINTS = 2


@dataclass(frozen=True, slots=True)
class CheckersRules:
    """One named rule variant.

    ``capture_rule`` describes the variant but move generation does not
    enforce it: a player may always decline a capture.
    """

    name: str
    board_size: int
    men_capture_backwards: bool
    flying_kings: bool
    capture_rule: CaptureRule


AMERICAN = CheckersRules("American Checkers", 8, False, False, CaptureRule.MUST_CAPTURE)
BRAZILIAN = CheckersRules("Brazilian Draughts", 8, True, True, CaptureRule.MUST_MAXIMISE_CAPTURE)
CANADIAN = CheckersRules("Canadian Draughts", 12, True, True, CaptureRule.MUST_MAXIMISE_CAPTURE)
INTERNATIONAL = CheckersRules(
    "International Draughts", 10, True, True, CaptureRule.MUST_MAXIMISE_CAPTURE
)
POOL = CheckersRules("Pool Checkers", 8, False, False, CaptureRule.MUST_CAPTURE)

RULES: dict[str, CheckersRules] = {
    rules.name: rules for rules in (AMERICAN, BRAZILIAN, CANADIAN, INTERNATIONAL, POOL)
}


def rules_for(name: str) -> CheckersRules:
    try:
        return RULES[name]
    except KeyError:
        raise ConfigurationError(f"Unknown checkers rules: {name!r}") from None


class CheckersGame(CheckerboardGame):
    """Checkers with a selectable rule variant (American by default).

    A capture that leaves the capturing piece able to capture again keeps
    the turn with that piece, which may then only capture. Promotion to a
    crowned piece ends the turn.
    """

    RULES_OPTION = "Checkers Rules"
    promotion_options = (PieceKind.CROWNED,)
    default_promotion = PieceKind.CROWNED

    def __init__(self, rules: CheckersRules = AMERICAN, events: GameEvents | None = None) -> None:
        super().__init__(rules.board_size, events)
        self._rules = rules

    @property
    def rules(self) -> CheckersRules:
        return self._rules

    def game_specific_options(self) -> dict[str, list[str] | None]:
        return {self.RULES_OPTION: list(RULES)}

    def _apply_options(self, options: Mapping[str, str]) -> None:
        name = options.get(self.RULES_OPTION)
        if name is None:
            return
        self._rules = rules_for(name)
        size = self._rules.board_size
        self.set_board_dimensions(size, size)
        _LOGGER.debug("Selected %s", self._rules.name)

    def _add_initial_pieces(self, player: Player) -> None:
        height, width = self._board.dimensions
        filled = height // 3 + 1
        home = self.home_rank(player)
        inward = self.forward(player)
        for i in range(filled):
            row = home + i * inward
            for col in range(width):
                if self._board.shade((row, col)) == SquareShade.DARK:
                    self._add_piece(player, PieceKind.MAN, (row, col))

    # ── Rule hooks ───────────────────────────────────────────────────────

    def legal_moves_for_piece(self, piece: Piece) -> list[MoveChain]:
        last = self.last_move
        if last is None or last.piece.owner is not piece.owner:
            return self._all_moves(piece)
        if last.piece is piece:
            return self.capturing_moves(piece)
        return []

    def is_turn_over(self, chain: MoveChain, index: int) -> bool:
        if index < len(chain) - 1:
            return False
        step = chain[index]
        if step.captured is None:
            return True
        # Promotion steps "capture" a piece of the mover.
        if step.captured.owner is step.piece.owner:
            return True
        return not self.capturing_moves(step.piece)

    def evaluate_outcome(self, chain: MoveChain, index: int, turn_over: bool) -> GameResult:
        if turn_over and not self.update_legal_moves(self.next_player):
            return GameResult.WIN
        return GameResult.IN_PROGRESS

    def check_promotion(self, move: Move) -> bool:
        return move.piece.kind == PieceKind.MAN and move.dest[0] == self.far_rank(move.piece.owner)

    # ── Move generation ──────────────────────────────────────────────────

    def capturing_moves(self, piece: Piece) -> list[MoveChain]:
        """Single jumps *piece* can make right now."""
        if piece.kind == PieceKind.CROWNED:
            if self._rules.flying_kings:
                return self._flying_moves(piece, captures_only=True)
            return self._jumps(piece, DIAGONALS)
        fwd = self.forward(piece.owner)
        directions = [(fwd, -1), (fwd, 1)]
        if self._rules.men_capture_backwards:
            directions += [(-fwd, -1), (-fwd, 1)]
        return self._jumps(piece, directions)

    def _all_moves(self, piece: Piece) -> list[MoveChain]:
        if piece.kind == PieceKind.CROWNED:
            if self._rules.flying_kings:
                return self._flying_moves(piece, captures_only=False)
            return self._steps(piece, DIAGONALS) + self.capturing_moves(piece)
        fwd = self.forward(piece.owner)
        return self.capturing_moves(piece) + self._steps(piece, [(fwd, -1), (fwd, 1)])

    def _steps(self, piece: Piece, directions: Sequence[tuple[int, int]]) -> list[MoveChain]:
        chains: list[MoveChain] = []
        for d_row, d_col in directions:
            dest = offset(piece.square, d_row, d_col)
            if self._board.square_state(piece, dest) == SquareState.EMPTY:
                chains.append(MoveChain.of(Move.from_piece(piece, dest)))
        return chains

    def _jumps(self, piece: Piece, directions: Sequence[tuple[int, int]]) -> list[MoveChain]:
        chains: list[MoveChain] = []
        for d_row, d_col in directions:
            over = offset(piece.square, d_row, d_col)
            land = offset(piece.square, 2 * d_row, 2 * d_col)
            if (
                self._board.square_state(piece, over) == SquareState.OPPONENT
                and self._board.square_state(piece, land) == SquareState.EMPTY
            ):
                victim = self._board.piece_at(over)
                chains.append(MoveChain.of(Move.from_piece(piece, land, victim)))
        return chains

    def _flying_moves(self, piece: Piece, captures_only: bool) -> list[MoveChain]:
        chains: list[MoveChain] = []
        for d_row, d_col in DIAGONALS:
            dest = offset(piece.square, d_row, d_col)
            while self._board.square_state(piece, dest) == SquareState.EMPTY:
                if not captures_only:
                    chains.append(MoveChain.of(Move.from_piece(piece, dest)))
                dest = offset(dest, d_row, d_col)
            if self._board.square_state(piece, dest) != SquareState.OPPONENT:
                continue
            land = offset(dest, d_row, d_col)
            if self._board.square_state(piece, land) == SquareState.EMPTY:
                victim = self._board.piece_at(dest)
                chains.append(MoveChain.of(Move.from_piece(piece, land, victim)))
        return chains
