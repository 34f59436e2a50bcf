"""Candidate move generation from the data-driven rule table."""

from __future__ import annotations

from collections.abc import Callable

from gridchess.core.board import Board
from gridchess.core.check import CheckDetector
from gridchess.core.enums import PieceKind, Team
from gridchess.core.piece import Cell
from gridchess.core.rules import PAWN_FORWARD, MoveRuleTable
from gridchess.core.types import Square


class MoveGenerator:
    """Generates candidate destinations for a single piece.

    Two entry points exist and must stay distinct:

    * :meth:`valid_moves` - moves offered to the side to move. A king
      belonging to the mover is filtered against the opponent's attack map.
    * :meth:`attack_squares` - raw reachable squares of any piece, used to
      build attack maps. Never filters, so attack-map computation cannot
      recurse back into king filtering.
    """

    __slots__ = ("_board", "_rules", "_checks")

    def __init__(self, board: Board, rules: MoveRuleTable) -> None:
        self._board = board
        self._rules = rules
        self._checks = CheckDetector(board, self)

    @property
    def check_detector(self) -> CheckDetector:
        return self._checks

    # -- Public API ---------------------------------------------------------

    def valid_moves(self, sq: Square, mover: Team) -> list[Square]:
        """Candidate destinations of the piece on *sq* when *mover* is to move."""
        cell = self._board.cell_at(sq)
        if cell.is_empty:
            return []
        moves = self._generate(sq, cell)
        if cell.kind is PieceKind.KING and cell.team == mover:
            attacked = self._checks.attack_map(mover.opponent)
            moves = [to_sq for to_sq in moves if to_sq not in attacked]
        return moves

    def attack_squares(self, sq: Square) -> list[Square]:
        """Unfiltered destinations of the piece on *sq*."""
        cell = self._board.cell_at(sq)
        if cell.is_empty:
            return []
        return self._generate(sq, cell)

    # -- Piece-specific generators (private) -------------------------------

    def _generate(self, sq: Square, cell: Cell) -> list[Square]:
        moves = _STRATEGIES[cell.kind](self, sq, cell)
        board = self._board
        return [to_sq for to_sq in moves if board.in_bounds(to_sq)]

    def _step_moves(self, sq: Square, cell: Cell) -> list[Square]:
        """Generic generation; each rule either steps once or slides."""
        board = self._board
        reach = max(board.width, board.height)
        moves: list[Square] = []
        for rule in self._rules.rules_for(cell.kind, cell.team):
            limit = reach if rule.sliding else 1
            for i in range(1, limit + 1):
                to_sq = sq.shifted(rule.dx * i, rule.dy * i)
                if not board.in_bounds(to_sq):
                    break
                occupant = board.team_at(to_sq)
                if occupant == cell.team:
                    break
                moves.append(to_sq)
                if occupant is not Team.NONE:
                    break
        return moves

    def _pawn_moves(self, sq: Square, cell: Cell) -> list[Square]:
        board = self._board
        moves = self._step_moves(sq, cell)

        forward = PAWN_FORWARD[cell.team]
        home_rank = board.height - 2 if cell.team is Team.ONE else 1
        if sq.y == home_rank:
            one_step = sq.shifted(0, forward)
            two_step = sq.shifted(0, 2 * forward)
            if board.in_bounds(two_step) and board.is_empty(one_step):
                moves.append(two_step)

        # Straight ahead only onto empty squares, diagonals only to capture.
        result: list[Square] = []
        for to_sq in moves:
            dx = to_sq.x - sq.x
            dy = to_sq.y - sq.y
            occupied = not board.is_empty(to_sq)
            if dx == 0 and occupied:
                continue
            if dx != 0 and abs(dx) == abs(dy) and not occupied:
                continue
            result.append(to_sq)
        return result


_Strategy = Callable[[MoveGenerator, Square, Cell], list[Square]]

# The king uses plain stepping here; mover filtering lives in valid_moves().
_STRATEGIES: dict[PieceKind, _Strategy] = {
    PieceKind.PAWN: MoveGenerator._pawn_moves,
    PieceKind.KNIGHT: MoveGenerator._step_moves,
    PieceKind.BISHOP: MoveGenerator._step_moves,
    PieceKind.ROOK: MoveGenerator._step_moves,
    PieceKind.QUEEN: MoveGenerator._step_moves,
    PieceKind.KING: MoveGenerator._step_moves,
}
