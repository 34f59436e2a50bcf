"""Cell value object: what occupies a single square."""

from __future__ import annotations

from dataclasses import dataclass

from gridchess.core.enums import PieceKind, Team

_KIND_BY_LETTER: dict[str, PieceKind] = {
    kind.letter: kind for kind in PieceKind if kind is not PieceKind.EMPTY
}


@dataclass(frozen=True, slots=True)
class Cell:
    """Immutable (kind, team) pair stored at a square.

    An empty cell is ``Cell(PieceKind.EMPTY, Team.NONE)``; any other
    combination involving EMPTY or NONE is rejected.
    """

    kind: PieceKind = PieceKind.EMPTY
    team: Team = Team.NONE

    def __post_init__(self) -> None:
        if (self.team is Team.NONE) != (self.kind is PieceKind.EMPTY):
            raise ValueError(
                f"Inconsistent cell: kind={self.kind.name}, team={self.team.name}"
            )

    @property
    def is_empty(self) -> bool:
        return self.kind is PieceKind.EMPTY

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Letter for the kind; uppercase = team 1, lowercase = team 2."""
        letter = self.kind.letter
        return letter.lower() if self.team is Team.TWO else letter

    @classmethod
    def from_char(cls, char: str) -> Cell:
        """Inverse of :meth:`__str__`, e.g. ``'n'`` -> team 2 knight."""
        if char == ".":
            return EMPTY_CELL
        try:
            kind = _KIND_BY_LETTER[char.upper()]
        except KeyError:
            raise ValueError(f"Invalid cell character: {char!r}") from None
        return cls(kind, Team.ONE if char.isupper() else Team.TWO)


EMPTY_CELL = Cell()
