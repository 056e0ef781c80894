"""Exception taxonomy for the rules engine."""

from __future__ import annotations


class BoardGameError(Exception):
    """Base class for every error raised by the engine."""


class ConfigurationError(BoardGameError, ValueError):
    """Invalid game configuration; fatal to starting the game."""


class IllegalMoveError(BoardGameError, ValueError):
    """A rejected operation. Game state is left untouched."""


class InvariantError(BoardGameError, RuntimeError):
    """The caller broke one of the state machine's contracts.

    Not recoverable: seeing this means the game was driven out of order.
    """
