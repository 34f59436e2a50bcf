"""Abstract interfaces for the game layer.

The presentation bridge depends on :class:`ITurnEngine`, not on the
concrete engine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridchess.core.enums import ClickType, PieceKind, Team
    from gridchess.core.types import Square


# ── Selection FSM states ─────────────────────────────────────────────────────


class EnginePhase(IntEnum):
    """Finite-state-machine states of a turn."""

    IDLE = auto()  # nothing selected
    SELECTED = auto()  # a piece is chosen, its moves cached


# ── Engine contract ──────────────────────────────────────────────────────────


class ITurnEngine(ABC):
    """Surface consumed by a presentation layer."""

    @property
    @abstractmethod
    def current_player(self) -> Team: ...

    @abstractmethod
    def get_valid_moves(self, sq: Square) -> tuple[Square, ...]: ...

    @abstractmethod
    def click_type(self, sq: Square) -> ClickType: ...

    @abstractmethod
    def handle_click(self, sq: Square) -> ClickType:
        """Classify *sq* and apply the resulting selection, move or capture."""

    @abstractmethod
    def select_piece(self, sq: Square) -> tuple[Square, ...]: ...

    @abstractmethod
    def move_piece(self, sq: Square) -> None: ...

    @abstractmethod
    def capture_piece(self, sq: Square) -> None: ...

    @abstractmethod
    def user_score(self, team: Team) -> int: ...

    @abstractmethod
    def detect_check(self) -> bool:
        """Is the side to move in check?"""

    @abstractmethod
    def piece_kind_at(self, sq: Square) -> PieceKind: ...

    @abstractmethod
    def team_at(self, sq: Square) -> Team: ...
