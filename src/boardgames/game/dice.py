"""Dice - the default random source for dice games."""

from __future__ import annotations

import random

from boardgames.core.errors import ConfigurationError
from boardgames.game.interfaces import DiceRoll


class Dice:
    """``count`` fair dice with ``faces`` sides each.

    Pass a seeded :class:`random.Random` for reproducible games.
    """

    __slots__ = ("_count", "_faces", "_rng", "_last")

    DEFAULT_FACES = 6

    def __init__(
        self,
        count: int = 1,
        faces: int = DEFAULT_FACES,
        rng: random.Random | None = None,
    ) -> None:
        if count < 1 or faces < 1:
            raise ConfigurationError(f"Invalid dice: {count!r}d{faces!r}")
        self._count = count
        self._faces = faces
        self._rng = rng if rng is not None else random.Random()
        self._last: DiceRoll | None = None

    @property
    def count(self) -> int:
        return self._count

    @property
    def faces(self) -> int:
        return self._faces

    @property
    def max_total(self) -> int:
        return self._count * self._faces

    @property
    def last_roll(self) -> DiceRoll | None:
        return self._last

    def roll(self) -> DiceRoll:
        faces = tuple(self._rng.randint(1, self._faces) for _ in range(self._count))
        self._last = DiceRoll(faces, sum(faces))
        return self._last

    def __repr__(self) -> str:
        return f"Dice({self._count}d{self._faces})"
