"""Captured-material score per team."""

from __future__ import annotations

from collections.abc import Mapping

from gridchess.core.enums import PieceKind, Team
from gridchess.core.errors import UnknownPieceKindError

_PLAYING_TEAMS: tuple[Team, Team] = (Team.ONE, Team.TWO)


class ScoreTracker:
    """Accumulates the point value of captured pieces for both teams."""

    __slots__ = ("_values", "_scores")

    def __init__(self, values: Mapping[PieceKind, int]) -> None:
        self._values = values
        self._scores: dict[Team, int] = {team: 0 for team in _PLAYING_TEAMS}

    def add_capture(self, team: Team, captured: PieceKind) -> int:
        """Credit *team* with the value of *captured*; return the new score."""
        if team not in self._scores:
            raise ValueError(f"Team {team!r} cannot score")
        try:
            value = self._values[captured]
        except KeyError:
            raise UnknownPieceKindError(captured.name) from None
        self._scores[team] += value
        return self._scores[team]

    def score_of(self, team: Team) -> int:
        if team not in self._scores:
            raise ValueError(f"Team {team!r} has no score")
        return self._scores[team]

    def as_dict(self) -> dict[Team, int]:
        return dict(self._scores)
