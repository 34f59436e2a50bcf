"""Exception taxonomy for the rule engine."""

from __future__ import annotations


class EngineError(Exception):
    """Base class for every error raised by the engine."""


class OutOfBoundsError(EngineError, IndexError):
    """A square lies outside the board grid."""

    def __init__(self, square: object, width: int, height: int) -> None:
        super().__init__(f"Square {square} is outside the {width}x{height} board")
        self.square = square


class IllegalMoveError(EngineError, ValueError):
    """A mutation violates the occupied/empty precondition or the turn state."""


class UnknownPieceKindError(EngineError, KeyError):
    """Board or rule data references a piece kind with no table entry."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return f"Unknown piece kind: {self.args[0]!s}"


class BoardLoadError(EngineError, ValueError):
    """Externally supplied game data is malformed."""
