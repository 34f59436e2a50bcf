"""Attack maps and check detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridchess.core.enums import Team
from gridchess.core.types import Square

if TYPE_CHECKING:
    from gridchess.core.board import Board
    from gridchess.core.move_generator import MoveGenerator


class CheckDetector:
    """Computes attack maps on demand from the current board.

    Nothing is cached: the board changes every turn.
    """

    __slots__ = ("_board", "_generator")

    def __init__(self, board: Board, generator: MoveGenerator) -> None:
        self._board = board
        self._generator = generator

    def attack_map(self, team: Team) -> frozenset[Square]:
        """Every square some piece of *team* could move onto."""
        attacked: set[Square] = set()
        for sq in self._board.squares_of(team):
            attacked.update(self._generator.attack_squares(sq))
        return frozenset(attacked)

    def attack_grid(self, team: Team) -> list[list[bool]]:
        """:meth:`attack_map` as a boolean grid indexed ``[y][x]``."""
        attacked = self.attack_map(team)
        return [
            [Square(x, y) in attacked for x in range(self._board.width)]
            for y in range(self._board.height)
        ]

    def is_square_attacked(self, sq: Square, by_team: Team) -> bool:
        return sq in self.attack_map(by_team)

    def is_in_check(self, team: Team) -> bool:
        """Is *team*'s king on a square the opponent attacks?

        Assumes at most one king per team; a team without a king is never
        in check.
        """
        king_sq = self._board.king_square(team)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, team.opponent)
