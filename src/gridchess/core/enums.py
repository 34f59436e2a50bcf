"""Core enumerations for the board-game domain."""

from __future__ import annotations

from enum import IntEnum, auto

from gridchess.core.errors import UnknownPieceKindError


class Team(IntEnum):
    """Owner of a cell. ``NONE`` marks an unoccupied cell."""

    NONE = 0
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> Team:
        if self is Team.NONE:
            raise ValueError("Team.NONE has no opponent")
        return Team(self.value % 2 + 1)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Piece kinds. ``EMPTY`` denotes an unoccupied cell."""

    EMPTY = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @classmethod
    def from_name(cls, name: str) -> PieceKind:
        """Parse a kind name as found in layout data, e.g. ``"Rook"``.

        ``"-"`` and the empty string denote an unoccupied cell.
        """
        key = name.strip()
        if key in ("", "-"):
            return cls.EMPTY
        try:
            return cls[key.upper()]
        except KeyError:
            raise UnknownPieceKindError(name) from None

    @property
    def letter(self) -> str:
        return _LETTERS[self]


_LETTERS: dict[PieceKind, str] = {
    PieceKind.EMPTY: ".",
    PieceKind.PAWN: "P",
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}


class ClickType(IntEnum):
    """Classification of a user click against the engine state."""

    INVALID = 0
    SELECT_OWN_PIECE = auto()
    APPLY_MOVE = auto()
    APPLY_CAPTURE = auto()
