"""Tests for MoveRuleTable."""

import pytest

from gridchess.core.enums import PieceKind, Team
from gridchess.core.errors import BoardLoadError, UnknownPieceKindError
from gridchess.core.rules import STANDARD_VALUES, MoveRule, MoveRuleTable


class TestStandardTable:
    def test_pawns_advance_towards_opponent(self) -> None:
        table = MoveRuleTable.standard()
        assert MoveRule(0, -1) in table.rules_for(PieceKind.PAWN, Team.ONE)
        assert MoveRule(0, 1) in table.rules_for(PieceKind.PAWN, Team.TWO)

    def test_sliding_pieces(self) -> None:
        table = MoveRuleTable.standard()
        for kind, count in (
            (PieceKind.BISHOP, 4),
            (PieceKind.ROOK, 4),
            (PieceKind.QUEEN, 8),
        ):
            rules = table.rules_for(kind, Team.ONE)
            assert len(rules) == count
            assert all(rule.sliding for rule in rules)

    def test_stepping_pieces(self) -> None:
        table = MoveRuleTable.standard()
        for kind in (PieceKind.KNIGHT, PieceKind.KING, PieceKind.PAWN):
            assert not any(rule.sliding for rule in table.rules_for(kind, Team.TWO))
        assert len(table.rules_for(PieceKind.KNIGHT, Team.ONE)) == 8
        assert len(table.rules_for(PieceKind.KING, Team.ONE)) == 8

    def test_point_values(self) -> None:
        table = MoveRuleTable.standard()
        assert table.point_value(PieceKind.PAWN) == 1
        assert table.point_value(PieceKind.QUEEN) == 9
        assert dict(table.values) == dict(STANDARD_VALUES)


class TestLookupFailures:
    def test_missing_rules(self) -> None:
        table = MoveRuleTable.from_offsets(
            {(PieceKind.ROOK, Team.ONE): [(1, 0, True)]}, {PieceKind.ROOK: 5}
        )
        with pytest.raises(UnknownPieceKindError, match="ROOK for team 2"):
            table.rules_for(PieceKind.ROOK, Team.TWO)
        with pytest.raises(UnknownPieceKindError):
            table.rules_for(PieceKind.KING, Team.ONE)

    def test_missing_value(self) -> None:
        table = MoveRuleTable.from_offsets({}, {PieceKind.ROOK: 5})
        with pytest.raises(UnknownPieceKindError, match="KING"):
            table.point_value(PieceKind.KING)

    def test_table_is_read_only(self) -> None:
        table = MoveRuleTable.standard()
        with pytest.raises(TypeError):
            table.values[PieceKind.PAWN] = 100  # type: ignore[index]


class TestFromOffsets:
    def test_builds_rules(self) -> None:
        table = MoveRuleTable.from_offsets(
            {(PieceKind.KNIGHT, Team.ONE): [(1, 2, False), (2, 1, 0)]},
            {PieceKind.KNIGHT: 3},
        )
        assert table.rules_for(PieceKind.KNIGHT, Team.ONE) == (
            MoveRule(1, 2, False),
            MoveRule(2, 1, False),
        )

    @pytest.mark.parametrize(
        "entry",
        [(1, 2), (1, "2", False), (0, 0, False), "1,0"],
    )
    def test_malformed_rule(self, entry: object) -> None:
        with pytest.raises(BoardLoadError):
            MoveRuleTable.from_offsets(
                {(PieceKind.KNIGHT, Team.ONE): [entry]},  # type: ignore[list-item]
                {PieceKind.KNIGHT: 3},
            )

    def test_rules_for_empty_cell_rejected(self) -> None:
        with pytest.raises(BoardLoadError):
            MoveRuleTable.from_offsets({(PieceKind.EMPTY, Team.NONE): [(1, 0, False)]}, {})

    def test_non_integer_value_rejected(self) -> None:
        with pytest.raises(BoardLoadError, match="point value"):
            MoveRuleTable.from_offsets({}, {PieceKind.PAWN: "1"})  # type: ignore[dict-item]
