"""Chutes and ladders: a dice race along a boustrophedon path.

Every racer starts in the bottom-left corner and walks the board row by
row, alternating direction, towards the finish square on row 0. Landing on
the root of a chute or ladder teleports the racer to its other end within
the same move. Rolling the maximum total grants another roll; rolling it
three times in a row sends the racer back to the start.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from boardgames.core.enums import GameResult, PieceKind
from boardgames.core.errors import ConfigurationError, IllegalMoveError
from boardgames.core.move import Move, MoveChain
from boardgames.core.piece import Piece
from boardgames.core.types import Square, square_name
from boardgames.game.base import Game, HistoryEntry
from boardgames.game.dice import Dice
from boardgames.game.events import GameEvents
from boardgames.game.interfaces import DiceRoll, IDice
from boardgames.game.player import Player

_LOGGER = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = 8
STREAK_LIMIT = 3


@dataclass(frozen=True, slots=True)
class _DiceSnapshot:
    result: GameResult
    winner: Player | None
    has_rolled: bool
    last_roll: DiceRoll | None
    streak: int


def start_square(height: int, width: int) -> Square:
    return (height - 1, 0)


def finish_square(height: int, width: int) -> Square:
    """Last square of the path: row 0, left or right depending on parity."""
    return (0, 0 if height % 2 == 0 else width - 1)


def generate_layout(height: int, width: int, rng: random.Random) -> dict[Square, Square]:
    """Random chutes and ladders for a ``height x width`` board.

    Neither the start nor the finish square is ever a root, and no square is
    used by more than one chute or ladder.
    """
    used = {start_square(height, width), finish_square(height, width)}
    count = min((height + width) // 2, (height * width - len(used)) // 2)
    layout: dict[Square, Square] = {}

    def unused() -> Square:
        while True:
            square = (rng.randrange(height), rng.randrange(width))
            if square not in used:
                used.add(square)
                return square

    for _ in range(count):
        root = unused()
        layout[root] = unused()
    return layout


class ChutesAndLaddersGame(Game):
    """Race game for two to six players sharing one dice collaborator."""

    HEIGHT_OPTION = "board height"
    WIDTH_OPTION = "board width"

    min_players = 2
    max_players = 6

    def __init__(
        self,
        height: int = DEFAULT_BOARD_SIZE,
        width: int = DEFAULT_BOARD_SIZE,
        dice: IDice | None = None,
        layout: Mapping[Square, Square] | None = None,
        rng: random.Random | None = None,
        events: GameEvents | None = None,
    ) -> None:
        super().__init__(height, width, events)
        self._rng = rng if rng is not None else random.Random()
        self._dice: IDice = dice if dice is not None else Dice(rng=self._rng)
        self._fixed_layout = dict(layout) if layout is not None else None
        self._layout: dict[Square, Square] = {}
        self._has_rolled = False
        self._last_roll: DiceRoll | None = None
        self._streak = 0

    # ── Configuration ────────────────────────────────────────────────────

    def game_specific_options(self) -> dict[str, list[str] | None]:
        return {self.HEIGHT_OPTION: None, self.WIDTH_OPTION: None}

    def _apply_options(self, options: Mapping[str, str]) -> None:
        height = _numeric_option(options, self.HEIGHT_OPTION)
        width = _numeric_option(options, self.WIDTH_OPTION)
        self.set_board_dimensions(height, width)

    def _prepare_board(self) -> None:
        height, width = self._board.dimensions
        if self._fixed_layout is None:
            self._layout = generate_layout(height, width, self._rng)
            return
        for root, end in self._fixed_layout.items():
            if not (self._board.in_bounds(root) and self._board.in_bounds(end)):
                raise ConfigurationError(f"Invalid chute or ladder: {root!r} -> {end!r}")
        self._layout = dict(self._fixed_layout)

    def _add_initial_pieces(self, player: Player) -> None:
        self._add_piece(player, PieceKind.RACER, self.start_square)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def layout(self) -> dict[Square, Square]:
        """Chute and ladder roots mapped to their destinations."""
        return dict(self._layout)

    @property
    def start_square(self) -> Square:
        return start_square(*self._board.dimensions)

    @property
    def finish_square(self) -> Square:
        return finish_square(*self._board.dimensions)

    @property
    def dice(self) -> IDice:
        return self._dice

    @property
    def has_rolled(self) -> bool:
        return self._has_rolled

    @property
    def last_roll(self) -> DiceRoll | None:
        return self._last_roll

    @property
    def max_roll_streak(self) -> int:
        """Consecutive maximum rolls in the current turn."""
        return self._streak

    def path_index(self, square: Square) -> int:
        """Distance of *square* from the start along the path."""
        height, width = self._board.dimensions
        row, col = square
        lane = height - 1 - row
        along = col if lane % 2 == 0 else width - 1 - col
        return lane * width + along

    def square_at(self, index: int) -> Square:
        height, width = self._board.dimensions
        lane, along = divmod(index, width)
        col = along if lane % 2 == 0 else width - 1 - along
        return (height - 1 - lane, col)

    # ── Dice ─────────────────────────────────────────────────────────────

    def roll(self) -> DiceRoll:
        """Roll for the current player, who must then move."""
        if not self._started:
            raise IllegalMoveError("The game has not started")
        if self.is_game_over:
            raise IllegalMoveError("The game is over")
        if self._has_rolled:
            raise IllegalMoveError(f"{self.current_player} has already rolled")
        self._ensure_can_mutate()

        roll = self._dice.roll()
        self._last_roll = roll
        self._has_rolled = True
        if roll.total == self._dice.max_total:
            self._streak += 1
        player = self.current_player
        _LOGGER.debug("%s rolled %s", player, roll.total)
        self.update_legal_moves(player)
        self._emit(self.events.on_roll, player, roll)
        return roll

    # ── Rule hooks ───────────────────────────────────────────────────────

    def legal_moves_for_piece(self, piece: Piece) -> list[MoveChain]:
        if not self._has_rolled or self._last_roll is None:
            return []
        if piece.owner is not self.current_player:
            return []
        owner = piece.owner.name

        if self._streak >= STREAK_LIMIT:
            reset = Move.from_piece(
                piece,
                self.start_square,
                description=f"{owner} rolled the maximum {STREAK_LIMIT} times - return to start!",
            )
            return [MoveChain.of(reset)]

        target = self.path_index(piece.square) + self._last_roll.total
        height, width = self._board.dimensions
        # Overshooting the finish leaves the racer where it is.
        dest = self.square_at(target) if target < height * width else piece.square
        chain = MoveChain.of(Move.from_piece(piece, dest))

        end = self._layout.get(dest)
        if end is not None:
            kind = "ladder" if self.path_index(end) > self.path_index(dest) else "chute"
            chain = chain.then(
                Move(
                    piece,
                    dest,
                    end,
                    description=(
                        f"{owner} took a {kind} from {square_name(dest)} to {square_name(end)}"
                    ),
                )
            )
        return [chain]

    def is_turn_over(self, chain: MoveChain, index: int) -> bool:
        if index < len(chain) - 1:
            return False
        if self._streak >= STREAK_LIMIT:
            return True
        return self._last_roll is None or self._last_roll.total != self._dice.max_total

    def evaluate_outcome(self, chain: MoveChain, index: int, turn_over: bool) -> GameResult:
        if chain[index].piece.square == self.finish_square:
            return GameResult.WIN
        return GameResult.IN_PROGRESS

    def _validate(self, chain: MoveChain) -> None:
        if self._started and not self._has_rolled:
            raise IllegalMoveError(f"{self.current_player} must roll before moving")
        super()._validate(chain)

    def _after_apply(self, entry: HistoryEntry) -> None:
        self._has_rolled = False
        if any(entry.turn_ends):
            self._streak = 0

    def _save_state(self) -> Any:
        return _DiceSnapshot(
            self._result, self._winner, self._has_rolled, self._last_roll, self._streak
        )

    def _load_state(self, state: Any) -> None:
        super()._load_state(state)
        self._has_rolled = state.has_rolled
        self._last_roll = state.last_roll
        self._streak = state.streak


def _numeric_option(options: Mapping[str, str], key: str) -> int:
    raw = options.get(key)
    if raw is None or not str(raw).strip():
        return DEFAULT_BOARD_SIZE
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid {key}: {raw!r}") from None
