"""Tests for checkers variants, capture chains and crowning."""

from __future__ import annotations

import pytest

from conftest import clear_pieces, put, refresh

from boardgames.core.enums import GameResult, PieceKind, SquareShade
from boardgames.core.errors import ConfigurationError
from boardgames.game.checkers import (
    AMERICAN,
    BRAZILIAN,
    INTERNATIONAL,
    RULES,
    CaptureRule,
    CheckersGame,
    rules_for,
)
from boardgames.game.player import Player


def _started(white: Player, black: Player, **kwargs: object) -> CheckersGame:
    game = CheckersGame(**kwargs)  # type: ignore[arg-type]
    game.add_players([white, black])
    game.start()
    return game


class TestRules:
    def test_variant_table(self) -> None:
        assert set(RULES) == {
            "American Checkers",
            "Brazilian Draughts",
            "Canadian Draughts",
            "International Draughts",
            "Pool Checkers",
        }
        assert AMERICAN.board_size == 8
        assert not AMERICAN.flying_kings
        assert INTERNATIONAL.capture_rule == CaptureRule.MUST_MAXIMISE_CAPTURE

    def test_unknown_variant(self) -> None:
        with pytest.raises(ConfigurationError):
            rules_for("Martian Checkers")


class TestSetup:
    def test_men_on_dark_squares(
        self, checkers: CheckersGame, white: Player, black: Player
    ) -> None:
        assert len(white.pieces) == len(black.pieces) == 12
        for piece in white.pieces + black.pieces:
            assert piece.kind == PieceKind.MAN
            assert checkers.board.shade(piece.square) == SquareShade.DARK
        assert {p.row for p in white.pieces} == {5, 6, 7}
        assert {p.row for p in black.pieces} == {0, 1, 2}

    def test_opening_moves(self, checkers: CheckersGame, white: Player) -> None:
        assert len(checkers.legal_moves_for(white)) == 7

    def test_select_variant(self, white: Player, black: Player) -> None:
        game = CheckersGame()
        options = game.game_specific_options()
        assert options[CheckersGame.RULES_OPTION] == list(RULES)
        game.apply_selected_options({CheckersGame.RULES_OPTION: "International Draughts"})
        assert game.rules is INTERNATIONAL
        assert game.board_dimensions() == (10, 10)
        game.add_players([white, black])
        game.start()
        assert len(white.pieces) == 20

    def test_canadian_board(self, white: Player, black: Player) -> None:
        game = CheckersGame()
        game.apply_selected_options({CheckersGame.RULES_OPTION: "Canadian Draughts"})
        game.add_players([white, black])
        game.start()
        assert len(black.pieces) == 30

    def test_select_unknown_variant(self) -> None:
        with pytest.raises(ConfigurationError):
            CheckersGame().apply_selected_options({CheckersGame.RULES_OPTION: "Chess"})


class TestMovement:
    def test_men_only_move_forward(
        self, checkers: CheckersGame, white: Player, black: Player
    ) -> None:
        clear_pieces(checkers)
        man = put(checkers, white, PieceKind.MAN, (4, 3))
        put(checkers, black, PieceKind.MAN, (0, 7))
        refresh(checkers)
        assert {c.dest for c in checkers.legal_moves_for_piece(man)} == {(3, 2), (3, 4)}

    def test_american_men_do_not_capture_backwards(
        self, checkers: CheckersGame, white: Player, black: Player
    ) -> None:
        clear_pieces(checkers)
        man = put(checkers, white, PieceKind.MAN, (3, 2))
        put(checkers, black, PieceKind.MAN, (4, 3))
        refresh(checkers)
        assert all(not c.first.is_capture for c in checkers.legal_moves_for_piece(man))

    def test_brazilian_men_capture_backwards(self, white: Player, black: Player) -> None:
        game = _started(white, black, rules=BRAZILIAN)
        clear_pieces(game)
        man = put(game, white, PieceKind.MAN, (3, 2))
        put(game, black, PieceKind.MAN, (4, 3))
        refresh(game)
        captures = [c for c in game.legal_moves_for_piece(man) if c.first.is_capture]
        assert [c.dest for c in captures] == [(5, 4)]

    def test_crowned_moves_both_ways(
        self, checkers: CheckersGame, white: Player, black: Player
    ) -> None:
        clear_pieces(checkers)
        king = put(checkers, white, PieceKind.CROWNED, (4, 3))
        put(checkers, black, PieceKind.MAN, (0, 7))
        refresh(checkers)
        assert {c.dest for c in checkers.legal_moves_for_piece(king)} == {
            (3, 2),
            (3, 4),
            (5, 2),
            (5, 4),
        }

    def test_flying_king(self, white: Player, black: Player) -> None:
        game = _started(white, black, rules=BRAZILIAN)
        clear_pieces(game)
        king = put(game, white, PieceKind.CROWNED, (7, 0))
        victim = put(game, black, PieceKind.MAN, (3, 4))
        put(game, black, PieceKind.MAN, (0, 1))
        refresh(game)
        chains = game.legal_moves_for_piece(king)
        assert {c.dest for c in chains} == {(6, 1), (5, 2), (4, 3), (2, 5)}
        capture = next(c for c in chains if c.first.is_capture)
        assert capture.first.captured is victim


class TestCaptureChains:
    def test_capture_and_undo(self, checkers: CheckersGame, white: Player, black: Player) -> None:
        clear_pieces(checkers)
        put(checkers, white, PieceKind.MAN, (5, 2))
        victim = put(checkers, black, PieceKind.MAN, (4, 3))
        put(checkers, black, PieceKind.MAN, (0, 7))
        refresh(checkers)
        checkers.apply(checkers.find_move((5, 2), (3, 4)))
        assert checkers.piece_at(4, 3) is None
        assert not black.owns(victim)
        assert checkers.current_player is black
        checkers.undo()
        assert checkers.piece_at(4, 3) is victim
        assert black.owns(victim)
        assert checkers.current_player is white

    def test_forced_continuation(
        self, checkers: CheckersGame, white: Player, black: Player
    ) -> None:
        clear_pieces(checkers)
        put(checkers, white, PieceKind.MAN, (5, 0))
        put(checkers, white, PieceKind.MAN, (7, 6))
        put(checkers, black, PieceKind.MAN, (4, 1))
        put(checkers, black, PieceKind.MAN, (2, 3))
        put(checkers, black, PieceKind.MAN, (0, 7))
        refresh(checkers)

        checkers.apply(checkers.find_move((5, 0), (3, 2)))
        assert checkers.current_player is white
        follow_ups = checkers.legal_moves_for(white)
        assert [(c.start, c.dest) for c in follow_ups] == [((3, 2), (1, 4))]

        checkers.apply(follow_ups[0])
        assert checkers.current_player is black
        assert len(black.pieces) == 1

        checkers.undo()
        assert checkers.current_player is white
        checkers.undo()
        assert checkers.current_player is white
        assert len(black.pieces) == 3

    def test_crowning_ends_turn(self, checkers: CheckersGame, white: Player, black: Player) -> None:
        clear_pieces(checkers)
        put(checkers, white, PieceKind.MAN, (1, 2))
        put(checkers, black, PieceKind.MAN, (4, 7))
        refresh(checkers)
        chain = checkers.apply(checkers.find_move((1, 2), (0, 1)))
        assert len(chain) == 2
        crowned = checkers.piece_at(0, 1)
        assert crowned is not None and crowned.kind == PieceKind.CROWNED
        assert checkers.current_player is black

    def test_capturing_last_piece_wins(
        self, checkers: CheckersGame, white: Player, black: Player
    ) -> None:
        clear_pieces(checkers)
        put(checkers, white, PieceKind.MAN, (5, 2))
        put(checkers, black, PieceKind.MAN, (4, 3))
        refresh(checkers)
        checkers.apply(checkers.find_move((5, 2), (3, 4)))
        assert checkers.result == GameResult.WIN
        assert checkers.winner is white
