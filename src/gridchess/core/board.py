"""Board - authoritative piece placement on a fixed-size grid."""

from __future__ import annotations

from collections.abc import Iterator

from gridchess.core.enums import PieceKind, Team
from gridchess.core.errors import BoardLoadError, IllegalMoveError, OutOfBoundsError
from gridchess.core.piece import EMPTY_CELL, Cell
from gridchess.core.types import Square


class Board:
    """Mutable ``width x height`` grid of :class:`Cell` objects.

    Runtime mutation goes through :meth:`move_piece` and
    :meth:`capture_piece` only. Both validate before writing, so a failed
    call leaves the grid untouched.
    """

    __slots__ = ("_width", "_height", "_cells")

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise BoardLoadError(f"Board dimensions must be positive: {width}x{height}")
        self._width = width
        self._height = height
        # Row-major: self._cells[y][x]
        self._cells: list[list[Cell]] = [[EMPTY_CELL] * width for _ in range(height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    # -- Element access -----------------------------------------------------

    def in_bounds(self, sq: Square) -> bool:
        return 0 <= sq.x < self._width and 0 <= sq.y < self._height

    def _check(self, sq: Square) -> None:
        if not self.in_bounds(sq):
            raise OutOfBoundsError(sq, self._width, self._height)

    def cell_at(self, sq: Square) -> Cell:
        self._check(sq)
        return self._cells[sq.y][sq.x]

    def piece_kind_at(self, sq: Square) -> PieceKind:
        return self.cell_at(sq).kind

    def team_at(self, sq: Square) -> Team:
        return self.cell_at(sq).team

    def is_empty(self, sq: Square) -> bool:
        return self.cell_at(sq).is_empty

    def place(self, sq: Square, cell: Cell) -> None:
        """Set a cell while building the initial layout."""
        self._check(sq)
        self._cells[sq.y][sq.x] = cell

    # -- Mutation -----------------------------------------------------------

    def move_piece(self, src: Square, dst: Square) -> None:
        """Move the piece on *src* into the empty square *dst*."""
        piece = self.cell_at(src)
        target = self.cell_at(dst)
        if piece.is_empty:
            raise IllegalMoveError(f"No piece on {src}")
        if not target.is_empty:
            raise IllegalMoveError(f"Destination {dst} is occupied; capture instead")
        self._cells[dst.y][dst.x] = piece
        self._cells[src.y][src.x] = EMPTY_CELL

    def capture_piece(self, src: Square, dst: Square) -> Cell:
        """Move the piece on *src* onto *dst* and return what was captured."""
        piece = self.cell_at(src)
        captured = self.cell_at(dst)
        if piece.is_empty:
            raise IllegalMoveError(f"No piece on {src}")
        if captured.is_empty:
            raise IllegalMoveError(f"Nothing to capture on {dst}; move instead")
        self._cells[dst.y][dst.x] = piece
        self._cells[src.y][src.x] = EMPTY_CELL
        return captured

    # -- Query helpers ------------------------------------------------------

    def squares(self) -> Iterator[Square]:
        """Every square, row by row."""
        for y in range(self._height):
            for x in range(self._width):
                yield Square(x, y)

    def squares_of(self, team: Team) -> list[Square]:
        """All squares occupied by *team*."""
        return [sq for sq in self.squares() if self._cells[sq.y][sq.x].team == team]

    def king_square(self, team: Team) -> Square | None:
        """First square holding *team*'s king, or None if it has none."""
        for sq in self.squares():
            cell = self._cells[sq.y][sq.x]
            if cell.kind is PieceKind.KING and cell.team == team:
                return sq
        return None

    def team_grid(self) -> list[list[int]]:
        """Team number of every cell, indexed ``[y][x]``."""
        return [[int(cell.team) for cell in row] for row in self._cells]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return "\n".join("".join(str(cell) for cell in row) for row in self._cells)
