"""Data-driven movement rules and piece valuations."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from gridchess.core.enums import PieceKind, Team
from gridchess.core.errors import BoardLoadError, UnknownPieceKindError


@dataclass(frozen=True, slots=True)
class MoveRule:
    """One movement offset. Sliding rules repeat the offset until blocked."""

    dx: int
    dy: int
    sliding: bool = False


RuleKey = tuple[PieceKind, Team]
RawRule = tuple[int, int, bool]

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Team 1 advances towards y == 0, team 2 towards y == height - 1.
PAWN_FORWARD: Mapping[Team, int] = MappingProxyType({Team.ONE: -1, Team.TWO: 1})

STANDARD_VALUES: Mapping[PieceKind, int] = MappingProxyType(
    {
        PieceKind.PAWN: 1,
        PieceKind.KNIGHT: 3,
        PieceKind.BISHOP: 3,
        PieceKind.ROOK: 5,
        PieceKind.QUEEN: 9,
        PieceKind.KING: 0,
    }
)


class MoveRuleTable:
    """Immutable lookup of movement rules per (kind, team) and point values.

    Built once from already-parsed external data; see :meth:`from_offsets`.
    """

    __slots__ = ("_rules", "_values")

    def __init__(
        self,
        rules: Mapping[RuleKey, Iterable[MoveRule]],
        values: Mapping[PieceKind, int],
    ) -> None:
        self._rules: Mapping[RuleKey, tuple[MoveRule, ...]] = MappingProxyType(
            {key: tuple(entries) for key, entries in rules.items()}
        )
        self._values: Mapping[PieceKind, int] = MappingProxyType(dict(values))

    # -- Lookup -------------------------------------------------------------

    def rules_for(self, kind: PieceKind, team: Team) -> tuple[MoveRule, ...]:
        try:
            return self._rules[(kind, team)]
        except KeyError:
            raise UnknownPieceKindError(f"{kind.name} for team {int(team)}") from None

    def point_value(self, kind: PieceKind) -> int:
        try:
            return self._values[kind]
        except KeyError:
            raise UnknownPieceKindError(kind.name) from None

    @property
    def values(self) -> Mapping[PieceKind, int]:
        return self._values

    # -- Factories ----------------------------------------------------------

    @classmethod
    def from_offsets(
        cls,
        offsets: Mapping[RuleKey, Iterable[RawRule]],
        values: Mapping[PieceKind, int],
    ) -> MoveRuleTable:
        """Validate raw ``{(kind, team): [(dx, dy, sliding), ...]}`` data."""
        rules: dict[RuleKey, list[MoveRule]] = {}
        for (kind, team), entries in offsets.items():
            if kind is PieceKind.EMPTY or team is Team.NONE:
                raise BoardLoadError(f"Rules given for empty cell: {kind!r}, {team!r}")
            parsed: list[MoveRule] = []
            for entry in entries:
                try:
                    dx, dy, sliding = entry
                except (TypeError, ValueError):
                    raise BoardLoadError(
                        f"Malformed rule for {kind.name}: {entry!r}"
                    ) from None
                if not isinstance(dx, int) or not isinstance(dy, int):
                    raise BoardLoadError(f"Non-integer offset for {kind.name}: {entry!r}")
                if dx == 0 and dy == 0:
                    raise BoardLoadError(f"Zero offset for {kind.name}")
                parsed.append(MoveRule(dx, dy, bool(sliding)))
            rules[(kind, team)] = parsed

        for kind, value in values.items():
            if not isinstance(value, int):
                raise BoardLoadError(f"Non-integer point value for {kind.name}: {value!r}")
        return cls(rules, values)

    @classmethod
    def standard(cls) -> MoveRuleTable:
        """Classic chess movement for both teams."""
        offsets: dict[RuleKey, list[RawRule]] = {}
        for team in (Team.ONE, Team.TWO):
            fwd = PAWN_FORWARD[team]
            offsets[(PieceKind.PAWN, team)] = [
                (0, fwd, False),
                (-1, fwd, False),
                (1, fwd, False),
            ]
            offsets[(PieceKind.KNIGHT, team)] = [(dx, dy, False) for dx, dy in KNIGHT_OFFSETS]
            offsets[(PieceKind.BISHOP, team)] = [(dx, dy, True) for dx, dy in BISHOP_DIRS]
            offsets[(PieceKind.ROOK, team)] = [(dx, dy, True) for dx, dy in ROOK_DIRS]
            offsets[(PieceKind.QUEEN, team)] = [(dx, dy, True) for dx, dy in QUEEN_DIRS]
            offsets[(PieceKind.KING, team)] = [(dx, dy, False) for dx, dy in KING_OFFSETS]
        return cls.from_offsets(offsets, STANDARD_VALUES)
