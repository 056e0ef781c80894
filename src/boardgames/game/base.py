"""Game state machine - owns board, players and move history.

Every game shares one apply/undo algorithm. A move is a :class:`MoveChain`
of primitive steps; each step removes the captured piece (if any), relocates
the moving piece and bumps its counters. Rule engines plug in through a small
set of hooks:

* :meth:`Game.legal_moves_for_piece` - candidate generation and legality.
* :meth:`Game.is_turn_over` - whether the acting player keeps acting.
* :meth:`Game.evaluate_outcome` - win / stalemate detection.

Simulated moves mutate the board exactly like real ones but emit nothing and
never run outcome checks. They must be undone before anything else happens;
:meth:`Game.simulate` guarantees that.
"""

from __future__ import annotations

import contextlib
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from boardgames.core.board import Board
from boardgames.core.enums import GameResult, PieceKind
from boardgames.core.errors import ConfigurationError, IllegalMoveError, InvariantError
from boardgames.core.move import MoveChain
from boardgames.core.piece import Piece, make_piece
from boardgames.core.types import Square
from boardgames.game.events import GameEvents
from boardgames.game.interfaces import GameObserver
from boardgames.game.player import Player

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _GameSnapshot:
    """State saved before each move so undo can restore it exactly."""

    result: GameResult
    winner: Player | None


@dataclass(frozen=True, slots=True)
class _Vacated:
    """Cell and owner positions a step freed, so undo can refill them in order."""

    piece_cell: int | None
    captured_cell: int | None = None
    captured_owner: int | None = None


@dataclass(slots=True)
class HistoryEntry:
    chain: MoveChain
    simulated: bool
    state: Any
    turn_ends: list[bool] = field(default_factory=list)
    vacated: list[_Vacated] = field(default_factory=list)


class Game(ABC):
    """Skeleton of a turn-based game on a rectangular grid."""

    min_players: int = 2
    max_players: int = 2

    def __init__(self, height: int, width: int, events: GameEvents | None = None) -> None:
        self._board = Board(height, width)
        self.events = events if events is not None else GameEvents()
        self._players: list[Player] = []
        self._current_index = 0
        self._history: list[HistoryEntry] = []
        self._result = GameResult.IN_PROGRESS
        self._winner: Player | None = None
        self._started = False
        self._simulation_depth = 0
        self._notifying = False

    # ── Configuration ────────────────────────────────────────────────────

    def set_board_dimensions(self, height: int, width: int) -> None:
        self._ensure_not_started()
        self._board = Board(height, width)

    def add_players(self, players: Iterable[Player]) -> None:
        self._ensure_not_started()
        self._players.extend(players)

    def add_observer(self, observer: GameObserver) -> None:
        self.events.subscribe(observer)

    def game_specific_options(self) -> dict[str, list[str] | None]:
        """Options understood by :meth:`apply_selected_options`.

        Keys name the option; values list the allowed choices, or ``None``
        for free-form input.
        """
        return {}

    def apply_selected_options(self, options: Mapping[str, str]) -> None:
        self._ensure_not_started()
        unknown = set(options) - set(self.game_specific_options())
        if unknown:
            raise ConfigurationError(f"Unknown option(s): {sorted(unknown)!r}")
        self._apply_options(options)

    def _apply_options(self, options: Mapping[str, str]) -> None:
        """Parse validated option choices. Default: nothing to configure."""

    # ── Lifecycle ────────────────────────────────────────────────────────

    def start(self) -> None:
        """Place the initial pieces, compute legal moves and notify observers."""
        self._ensure_not_started()
        count = len(self._players)
        if not self.min_players <= count <= self.max_players:
            raise ConfigurationError(
                f"{type(self).__name__} needs {self.min_players}-{self.max_players} "
                f"players, got {count}"
            )
        self._before_start()
        self._board = Board(self._board.height, self._board.width)
        self._prepare_board()
        for player in self._players:
            self._add_initial_pieces(player)

        self._started = True
        self._current_index = 0
        for player in self._players:
            self.update_legal_moves(player)

        _LOGGER.info(
            "%s started with %s", type(self).__name__, ", ".join(map(str, self._players))
        )
        self._emit(self.events.on_start)
        self._emit(self.events.on_turn_changed, self.current_player)

    def _before_start(self) -> None:
        """Hook run once the player count is known to be valid."""

    def _prepare_board(self) -> None:
        """Hook run on the fresh board before pieces are placed."""

    @abstractmethod
    def _add_initial_pieces(self, player: Player) -> None:
        """Place *player*'s starting pieces."""

    def _add_piece(self, player: Player, kind: PieceKind, square: Square) -> Piece:
        piece = make_piece(kind, player)
        player.add_piece(piece)
        self._board.place(piece, square)
        return piece

    # ── Move application ─────────────────────────────────────────────────

    def apply(
        self,
        chain: MoveChain,
        simulated: bool = False,
        promotion: PieceKind | None = None,
    ) -> MoveChain:
        """Apply *chain* and return the chain actually applied.

        A real move is validated first; a rejected move raises
        :class:`IllegalMoveError` with no state changed. Promotion games
        may extend the chain (see ``promotion``).
        """
        if not simulated:
            self._ensure_can_mutate()
            self._validate(chain)
            chain = self._prepare(chain, promotion)
        self._execute(chain, simulated)
        return chain

    def undo(self, simulated: bool = False) -> MoveChain:
        """Undo the most recent chain, step by step in reverse order."""
        if not self._history:
            raise InvariantError("Nothing to undo")
        entry = self._history[-1]
        if entry.simulated != simulated:
            raise InvariantError(
                f"Undo mismatch: last move was simulated={entry.simulated}, "
                f"undo requested simulated={simulated}"
            )
        if not simulated:
            self._ensure_can_mutate()

        for index in reversed(range(len(entry.chain))):
            step = entry.chain[index]
            vacated = entry.vacated[index]
            if entry.turn_ends[index]:
                self._rewind_turn()

            if step.destroy_on_undo and not simulated:
                self._remove_piece(step.piece)
            else:
                self._place_piece(step.piece, step.start, vacated.piece_cell)

            if step.captured is not None:
                self._place_piece(
                    step.captured,
                    step.captured.square,
                    vacated.captured_cell,
                    vacated.captured_owner,
                )

            step.piece.on_undo()
            if not simulated:
                self._emit(self.events.on_undo, step)

        self._history.pop()
        self._load_state(entry.state)

        if simulated:
            self._simulation_depth -= 1
        else:
            _LOGGER.debug("Undid %s", entry.chain)
            self.update_legal_moves(self.current_player)
            self._emit(self.events.on_turn_changed, self.current_player)
        return entry.chain

    @contextlib.contextmanager
    def simulate(self, chain: MoveChain) -> Iterator[Game]:
        """Apply *chain* as a simulated move and roll it back on exit."""
        self.apply(chain, simulated=True)
        try:
            yield self
        finally:
            self.undo(simulated=True)

    def _execute(self, chain: MoveChain, simulated: bool) -> None:
        entry = HistoryEntry(chain, simulated, self._save_state())
        self._history.append(entry)
        if simulated:
            self._simulation_depth += 1

        turn_over = False
        for index, step in enumerate(chain):
            captured_cell, captured_owner = self._remove_piece(step.captured)
            piece_cell = self._place_piece(step.piece, step.dest)
            entry.vacated.append(_Vacated(piece_cell, captured_cell, captured_owner))
            step.piece.on_move()

            turn_over = self.is_turn_over(chain, index)
            if not simulated:
                self._emit(self.events.on_move, step)
                if not self.is_game_over:
                    self._record_outcome(self.evaluate_outcome(chain, index, turn_over))

            entry.turn_ends.append(turn_over)
            if turn_over:
                self._advance_turn()

        self._after_apply(entry)
        if simulated:
            return

        _LOGGER.debug("Applied %s", chain)
        self.update_legal_moves(self.current_player)
        if turn_over:
            self._emit(self.events.on_turn_changed, self.current_player)

    def _validate(self, chain: MoveChain) -> None:
        if not self._started:
            raise IllegalMoveError("The game has not started")
        if self.is_game_over:
            raise IllegalMoveError("The game is over")
        player = self.current_player
        if chain.piece.owner is not player:
            raise IllegalMoveError(f"It is not {chain.piece.owner}'s turn")
        if chain not in self.update_legal_moves(player):
            raise IllegalMoveError(f"Illegal move: {chain}")

    def _prepare(self, chain: MoveChain, promotion: PieceKind | None) -> MoveChain:
        """Hook to extend a validated chain before it is applied."""
        return chain

    def _after_apply(self, entry: HistoryEntry) -> None:
        """Hook run after every step of *entry* has been applied."""

    # ── Rule hooks ───────────────────────────────────────────────────────

    @abstractmethod
    def legal_moves_for_piece(self, piece: Piece) -> list[MoveChain]:
        """Every chain *piece* may legally start right now."""

    @abstractmethod
    def is_turn_over(self, chain: MoveChain, index: int) -> bool:
        """Whether step *index* of *chain* ends the acting player's turn."""

    @abstractmethod
    def evaluate_outcome(self, chain: MoveChain, index: int, turn_over: bool) -> GameResult:
        """Outcome after a real step; ``WIN`` means the current player won."""

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    def board_dimensions(self) -> tuple[int, int]:
        return self._board.dimensions

    @property
    def players(self) -> tuple[Player, ...]:
        return tuple(self._players)

    @property
    def current_player(self) -> Player:
        if not self._players:
            raise InvariantError("The game has no players")
        return self._players[self._current_index]

    @property
    def next_player(self) -> Player:
        return self._players[(self._current_index + 1) % len(self._players)]

    def opponents_of(self, player: Player) -> list[Player]:
        return [p for p in self._players if p is not player]

    @property
    def last_move(self) -> MoveChain | None:
        if not self._history:
            return None
        return self._history[-1].chain

    @property
    def history(self) -> tuple[MoveChain, ...]:
        return tuple(entry.chain for entry in self._history)

    @property
    def is_started(self) -> bool:
        return self._started

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def winner(self) -> Player | None:
        return self._winner

    @property
    def is_game_over(self) -> bool:
        return self._result != GameResult.IN_PROGRESS

    def piece_at(self, row: int, col: int) -> Piece | None:
        """First occupant of the square; see :meth:`pieces_at` for shared squares."""
        return self._board.piece_at((row, col))

    def pieces_at(self, row: int, col: int) -> list[Piece]:
        return self._board.pieces_at((row, col))

    def legal_moves_for(self, player: Player) -> list[MoveChain]:
        """Cached legal moves of *player* (see :meth:`update_legal_moves`)."""
        return player.legal_moves

    def update_legal_moves(self, player: Player) -> list[MoveChain]:
        return player.update_legal_moves(self)

    def find_move(self, start: Square, dest: Square) -> MoveChain:
        """The current player's legal chain whose first step goes *start* -> *dest*."""
        for chain in self.update_legal_moves(self.current_player):
            if chain.start == start and chain.dest == dest:
                return chain
        raise IllegalMoveError(f"No legal move from {start!r} to {dest!r}")

    # ── Internal helpers ─────────────────────────────────────────────────

    def _place_piece(
        self,
        piece: Piece,
        square: Square,
        cell_index: int | None = None,
        owner_index: int | None = None,
    ) -> int | None:
        if not piece.owner.owns(piece):
            piece.owner.add_piece(piece, owner_index)
        return self._board.place(piece, square, cell_index)

    def _remove_piece(self, piece: Piece | None) -> tuple[int | None, int | None]:
        """Take *piece* off the board and from its owner.

        Returns its former ``(cell, owner)`` positions.
        """
        if piece is None:
            return None, None
        owner_index = piece.owner.remove_piece(piece)
        return self._board.remove(piece), owner_index

    def _advance_turn(self) -> None:
        self._current_index = (self._current_index + 1) % len(self._players)

    def _rewind_turn(self) -> None:
        self._current_index = (self._current_index - 1) % len(self._players)

    def _save_state(self) -> Any:
        return _GameSnapshot(self._result, self._winner)

    def _load_state(self, state: Any) -> None:
        self._result = state.result
        self._winner = state.winner

    def _record_outcome(self, outcome: GameResult) -> None:
        if outcome == GameResult.WIN:
            self._result = GameResult.WIN
            self._winner = self.current_player
            _LOGGER.info("%s won", self._winner)
            self._emit(self.events.on_win, self._winner)
        elif outcome == GameResult.STALEMATE:
            self._result = GameResult.STALEMATE
            _LOGGER.info("Stalemate")
            self._emit(self.events.on_stalemate)

    def _emit(self, callbacks: list[Any], *args: Any) -> None:
        previous = self._notifying
        self._notifying = True
        try:
            for cb in list(callbacks):
                cb(*args)
        finally:
            self._notifying = previous

    def _ensure_can_mutate(self) -> None:
        if self._notifying:
            raise InvariantError("Observers must not apply or undo moves")
        if self._simulation_depth:
            raise InvariantError("A simulated move has not been rolled back")

    def _ensure_not_started(self) -> None:
        if self._started:
            raise ConfigurationError("The game has already started")

    def __repr__(self) -> str:
        height, width = self._board.dimensions
        return f"{type(self).__name__}({height}x{width}, moves={len(self._history)})"
