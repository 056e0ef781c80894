"""Tests for Move and MoveChain."""

import pytest

from boardgames.core.enums import PieceKind
from boardgames.core.move import Move, MoveChain
from boardgames.core.piece import make_piece
from boardgames.game.player import Player


def _pawn(square: tuple[int, int] = (6, 4), name: str = "Alice"):
    return make_piece(PieceKind.PAWN, Player(name), square)


class TestMove:
    def test_start_read_from_piece(self) -> None:
        pawn = _pawn()
        move = Move.from_piece(pawn, (4, 4))
        assert move.start == (6, 4)
        assert move.dest == (4, 4)
        assert not move.is_capture

    def test_default_description(self) -> None:
        move = Move.from_piece(_pawn(), (5, 4))
        assert move.description == "Alice PAWN moved from 6, 4 to 5, 4"

    def test_capture_description(self) -> None:
        victim = _pawn((5, 5), "Bob")
        move = Move.from_piece(_pawn(), (5, 5), victim)
        assert move.is_capture
        assert move.description.endswith(", capturing Bob's PAWN")

    def test_custom_description(self) -> None:
        move = Move.from_piece(_pawn(), (5, 4), description="push")
        assert str(move) == "push"

    def test_equality_ignores_description(self) -> None:
        pawn = _pawn()
        assert Move.from_piece(pawn, (5, 4)) == Move.from_piece(pawn, (5, 4), description="x")

    def test_equality_uses_piece_identity(self) -> None:
        assert Move.from_piece(_pawn(), (5, 4)) != Move.from_piece(_pawn(), (5, 4))


class TestMoveChain:
    def test_empty_chain_rejected(self) -> None:
        with pytest.raises(ValueError):
            MoveChain(())

    def test_then_appends_without_mutating(self) -> None:
        pawn = _pawn()
        first = Move.from_piece(pawn, (5, 4))
        second = Move(pawn, (5, 4), (4, 4))
        chain = MoveChain.of(first)
        longer = chain.then(second)
        assert len(chain) == 1
        assert list(longer) == [first, second]
        assert list(reversed(longer)) == [second, first]

    def test_chain_accessors(self) -> None:
        pawn = _pawn()
        chain = MoveChain.of(Move.from_piece(pawn, (5, 4)), Move(pawn, (5, 4), (1, 1)))
        assert chain.piece is pawn
        assert chain.start == (6, 4)
        assert chain.dest == (5, 4)
        assert chain.last.dest == (1, 1)
        assert chain[1] is chain.last

    def test_str_joins_descriptions(self) -> None:
        pawn = _pawn()
        chain = MoveChain.of(
            Move.from_piece(pawn, (5, 4), description="a"),
            Move(pawn, (5, 4), (4, 4), description="b"),
        )
        assert str(chain) == "a; b"
