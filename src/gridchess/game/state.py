"""Turn state machine data."""

from __future__ import annotations

from dataclasses import dataclass, field

from gridchess.core.enums import Team
from gridchess.core.types import Square
from gridchess.game.interfaces import EnginePhase


@dataclass
class TurnState:
    """Whose turn it is and what they have selected.

    ``cached_moves`` belongs to ``selection`` and is discarded together
    with it.
    """

    current_player: Team = Team.ONE
    selection: Square | None = None
    cached_moves: tuple[Square, ...] = field(default=())
    turn_count: int = 0

    @property
    def phase(self) -> EnginePhase:
        return EnginePhase.IDLE if self.selection is None else EnginePhase.SELECTED

    def select(self, sq: Square, moves: tuple[Square, ...]) -> None:
        self.selection = sq
        self.cached_moves = moves

    def clear_selection(self) -> None:
        self.selection = None
        self.cached_moves = ()

    def advance(self) -> None:
        """Close the turn: drop the selection and hand over to the opponent."""
        self.clear_selection()
        self.current_player = self.current_player.opponent
        self.turn_count += 1
