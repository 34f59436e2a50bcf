"""Square value type and coordinate helpers.

Coordinates are ``(x, y)`` with ``(0, 0)`` in the top-left corner::

    y=0  team 2 back rank
    y=1  team 2 pawns
    ...
    y=h-2  team 1 pawns
    y=h-1  team 1 back rank
"""

from __future__ import annotations

from typing import NamedTuple


class Square(NamedTuple):
    """A board coordinate: column ``x`` and row ``y``."""

    x: int
    y: int

    def shifted(self, dx: int, dy: int) -> Square:
        return Square(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
