"""Game definition: the externally supplied layout and rule data.

The engine never reads files. A loader hands over two parallel grids, one
of piece-kind names and one of team numbers, plus a :class:`MoveRuleTable`::

    kinds = [["Rook", "-", ...], ...]
    teams = [[2, 0, ...], ...]
    definition = GameDefinition(kinds, teams, MoveRuleTable.standard())
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from gridchess.core.board import Board
from gridchess.core.enums import PieceKind, Team
from gridchess.core.errors import BoardLoadError
from gridchess.core.piece import Cell
from gridchess.core.rules import MoveRuleTable
from gridchess.core.types import Square

_BACK_RANK: tuple[str, ...] = (
    "Rook",
    "Knight",
    "Bishop",
    "Queen",
    "King",
    "Bishop",
    "Knight",
    "Rook",
)


def load_layout(
    kinds: Sequence[Sequence[str]],
    teams: Sequence[Sequence[int | str]],
) -> Board:
    """Build a board from parallel kind-name and team-number grids.

    Raises:
        BoardLoadError: the grids are empty, ragged, differently shaped, or
            hold an invalid team number or an inconsistent cell.
        UnknownPieceKindError: a kind name is not recognised.
    """
    if not kinds or not kinds[0]:
        raise BoardLoadError("Layout has no cells")
    height = len(kinds)
    width = len(kinds[0])
    if len(teams) != height:
        raise BoardLoadError(
            f"Team grid has {len(teams)} rows, layout has {height}"
        )

    board = Board(width, height)
    for y, (kind_row, team_row) in enumerate(zip(kinds, teams)):
        if len(kind_row) != width or len(team_row) != width:
            raise BoardLoadError(f"Row {y} is not {width} cells wide")
        for x, (name, raw_team) in enumerate(zip(kind_row, team_row)):
            if not isinstance(name, str):
                raise BoardLoadError(f"Kind at ({x},{y}) is not a name: {name!r}")
            kind = PieceKind.from_name(name)
            team = _parse_team(raw_team, x, y)
            try:
                cell = Cell(kind, team)
            except ValueError as exc:
                raise BoardLoadError(f"Cell ({x},{y}): {exc}") from None
            board.place(Square(x, y), cell)
    return board


def _parse_team(raw: object, x: int, y: int) -> Team:
    # Only whole numbers; floats such as 1.9 must not truncate to a team.
    if isinstance(raw, str) and raw.strip().isdecimal():
        raw = int(raw)
    if isinstance(raw, int) and not isinstance(raw, bool):
        try:
            return Team(raw)
        except ValueError:
            pass
    raise BoardLoadError(f"Invalid team at ({x},{y}): {raw!r}")


def _standard_grids() -> tuple[list[list[str]], list[list[int]]]:
    empty_kinds = ["-"] * 8
    kinds = [
        list(_BACK_RANK),
        ["Pawn"] * 8,
        *(list(empty_kinds) for _ in range(4)),
        ["Pawn"] * 8,
        list(_BACK_RANK),
    ]
    teams = [[2] * 8, [2] * 8, *([0] * 8 for _ in range(4)), [1] * 8, [1] * 8]
    return kinds, teams


@dataclass(frozen=True)
class GameDefinition:
    """Everything the engine needs to start a game."""

    kinds: Sequence[Sequence[str]]
    teams: Sequence[Sequence[int | str]]
    rules: MoveRuleTable = field(default_factory=MoveRuleTable.standard)

    @classmethod
    def standard(cls) -> GameDefinition:
        """Classic 8x8 chess; team 2 on rows 0-1, team 1 on rows 6-7."""
        kinds, teams = _standard_grids()
        return cls(kinds, teams)

    def build_board(self) -> Board:
        """Load the layout and check every piece is covered by the rules.

        Raises:
            BoardLoadError: malformed layout.
            UnknownPieceKindError: a piece on the board has no movement
                rules for its team or no point value.
        """
        board = load_layout(self.kinds, self.teams)
        for sq in board.squares():
            cell = board.cell_at(sq)
            if cell.is_empty:
                continue
            self.rules.rules_for(cell.kind, cell.team)
            self.rules.point_value(cell.kind)
        return board
