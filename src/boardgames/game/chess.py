"""Chess rules: piece movement, castling, en passant, check and promotion."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import ClassVar

from boardgames.core.enums import GameResult, PieceKind, SquareState
from boardgames.core.move import Move, MoveChain
from boardgames.core.piece import Piece
from boardgames.core.types import (
    DIAGONALS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    ORTHOGONALS,
    Square,
    offset,
)
from boardgames.game.checkerboard import CheckerboardGame
from boardgames.game.events import GameEvents
from boardgames.game.player import Player

_LOGGER = logging.getLogger(__name__)

_BACK_RANK = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class ChessGame(CheckerboardGame):
    """Standard chess on an 8x8 board.

    Candidate moves come from :meth:`line_of_sight`; a candidate is legal
    when, after simulating it, no opposing piece could capture the mover's
    king.
    """

    BOARD_SIZE: ClassVar[int] = 8
    promotion_options = (PieceKind.QUEEN, PieceKind.ROOK, PieceKind.BISHOP, PieceKind.KNIGHT)
    default_promotion = PieceKind.QUEEN

    def __init__(self, events: GameEvents | None = None) -> None:
        super().__init__(self.BOARD_SIZE, events)
        self._sight: dict[PieceKind, Callable[[Piece], list[MoveChain]]] = {
            PieceKind.PAWN: self._pawn_sight,
            PieceKind.KNIGHT: lambda p: self._step_sight(p, KNIGHT_OFFSETS),
            PieceKind.BISHOP: lambda p: self._slide_sight(p, DIAGONALS),
            PieceKind.ROOK: lambda p: self._slide_sight(p, ORTHOGONALS),
            PieceKind.QUEEN: lambda p: self._slide_sight(p, KING_OFFSETS),
            PieceKind.KING: lambda p: self._step_sight(p, KING_OFFSETS),
        }

    def _add_initial_pieces(self, player: Player) -> None:
        home = self.home_rank(player)
        pawns = home + self.forward(player)
        for col, kind in enumerate(_BACK_RANK):
            self._add_piece(player, kind, (home, col))
        for col in range(self._board.width):
            self._add_piece(player, PieceKind.PAWN, (pawns, col))

    # ── Rule hooks ───────────────────────────────────────────────────────

    def legal_moves_for_piece(self, piece: Piece) -> list[MoveChain]:
        legal: list[MoveChain] = []
        for chain in self.line_of_sight(piece):
            with self.simulate(chain):
                exposed = self.is_in_check(piece.owner)
            if not exposed:
                legal.append(chain)
        return legal

    def is_turn_over(self, chain: MoveChain, index: int) -> bool:
        return index == len(chain) - 1

    def evaluate_outcome(self, chain: MoveChain, index: int, turn_over: bool) -> GameResult:
        if not turn_over:
            return GameResult.IN_PROGRESS
        opponent = self.next_player
        if self.update_legal_moves(opponent):
            return GameResult.IN_PROGRESS
        if self.is_in_check(opponent):
            _LOGGER.debug("%s is checkmated", opponent)
            return GameResult.WIN
        _LOGGER.debug("%s has no legal moves and is not in check", opponent)
        return GameResult.STALEMATE

    def check_promotion(self, move: Move) -> bool:
        return (
            move.piece.kind == PieceKind.PAWN
            and move.dest[0] == self.far_rank(move.piece.owner)
        )

    # ── Attack detection ─────────────────────────────────────────────────

    def is_in_check(self, player: Player) -> bool:
        """Whether any opposing piece could capture *player*'s king right now."""
        for opponent in self.opponents_of(player):
            for attacker in opponent.pieces:
                for chain in self.line_of_sight(attacker, castling=False):
                    captured = chain.first.captured
                    if captured is not None and captured.kind == PieceKind.KING:
                        return True
        return False

    def attacked_squares(self, players: Iterable[Player]) -> set[Square]:
        """Squares any piece of *players* attacks, ignoring castling.

        Pawns attack both forward diagonals whether or not anything stands
        there.
        """
        squares: set[Square] = set()
        for player in players:
            for piece in player.pieces:
                if piece.kind == PieceKind.PAWN:
                    fwd = self.forward(player)
                    for d_col in (-1, 1):
                        target = offset(piece.square, fwd, d_col)
                        if self._board.in_bounds(target):
                            squares.add(target)
                    continue
                for chain in self.line_of_sight(piece, castling=False):
                    squares.add(chain.dest)
        return squares

    # ── Line of sight ────────────────────────────────────────────────────

    def line_of_sight(self, piece: Piece, castling: bool = True) -> list[MoveChain]:
        """Candidate chains for *piece*, before the self-check filter."""
        chains = self._sight[piece.kind](piece)
        if castling and piece.kind == PieceKind.KING:
            chains.extend(self._castling_chains(piece))
        return chains

    def _chain(self, piece: Piece, dest: Square) -> MoveChain:
        return MoveChain.of(Move.from_piece(piece, dest, self._board.piece_at(dest)))

    def _step_sight(self, piece: Piece, offsets: Iterable[Square]) -> list[MoveChain]:
        chains: list[MoveChain] = []
        for d_row, d_col in offsets:
            dest = offset(piece.square, d_row, d_col)
            state = self._board.square_state(piece, dest)
            if state in (SquareState.EMPTY, SquareState.OPPONENT):
                chains.append(self._chain(piece, dest))
        return chains

    def _slide_sight(self, piece: Piece, directions: Iterable[Square]) -> list[MoveChain]:
        chains: list[MoveChain] = []
        for d_row, d_col in directions:
            dest = offset(piece.square, d_row, d_col)
            while True:
                state = self._board.square_state(piece, dest)
                if state == SquareState.EMPTY:
                    chains.append(self._chain(piece, dest))
                elif state == SquareState.OPPONENT:
                    chains.append(self._chain(piece, dest))
                    break
                else:
                    break
                dest = offset(dest, d_row, d_col)
        return chains

    def _pawn_sight(self, pawn: Piece) -> list[MoveChain]:
        board = self._board
        fwd = self.forward(pawn.owner)
        chains: list[MoveChain] = []

        one = offset(pawn.square, fwd, 0)
        if board.square_state(pawn, one) == SquareState.EMPTY:
            chains.append(self._chain(pawn, one))
            two = offset(pawn.square, 2 * fwd, 0)
            if pawn.move_count == 0 and board.square_state(pawn, two) == SquareState.EMPTY:
                chains.append(self._chain(pawn, two))

        for d_col in (-1, 1):
            diagonal = offset(pawn.square, fwd, d_col)
            if board.square_state(pawn, diagonal) == SquareState.OPPONENT:
                chains.append(self._chain(pawn, diagonal))

        if pawn.row == self._en_passant_row(pawn.owner):
            for d_col in (-1, 1):
                beside = offset(pawn.square, 0, d_col)
                target = offset(pawn.square, fwd, d_col)
                if board.square_state(pawn, target) != SquareState.EMPTY:
                    continue
                victim = board.piece_at(beside)
                if victim is not None and self._just_double_stepped(pawn, victim):
                    chains.append(MoveChain.of(Move.from_piece(pawn, target, victim)))
        return chains

    def _en_passant_row(self, player: Player) -> int:
        """Row a pawn must stand on to capture en passant."""
        return self.home_rank(player) + 4 * self.forward(player)

    def _just_double_stepped(self, pawn: Piece, victim: Piece) -> bool:
        if victim.kind != PieceKind.PAWN or victim.owner is pawn.owner:
            return False
        if victim.move_count != 1:
            return False
        last = self.last_move
        return (
            last is not None
            and last.piece is victim
            and abs(last.first.dest[0] - last.first.start[0]) == 2
        )

    def _castling_chains(self, king: Piece) -> list[MoveChain]:
        if king.move_count:
            return []
        board = self._board
        row, col = king.square
        chains: list[MoveChain] = []
        attacked: set[Square] | None = None

        for rook_col, step in ((0, -1), (board.width - 1, 1)):
            rook = board.piece_at((row, rook_col))
            if (
                rook is None
                or rook.kind != PieceKind.ROOK
                or rook.owner is not king.owner
                or rook.move_count
            ):
                continue
            between = range(min(col, rook_col) + 1, max(col, rook_col))
            if any(not board.is_empty((row, c)) for c in between):
                continue

            transit = (row, col + step)
            dest = (row, col + 2 * step)
            if attacked is None:
                attacked = self.attacked_squares(self.opponents_of(king.owner))
            if {king.square, transit, dest} & attacked:
                continue

            side = "queenside" if step < 0 else "kingside"
            chains.append(
                MoveChain.of(
                    Move.from_piece(king, dest, description=f"{king.owner.name} castled {side}"),
                    Move.from_piece(rook, transit),
                )
            )
        return chains
