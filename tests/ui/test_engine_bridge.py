"""Tests for the Qt engine bridge."""

from __future__ import annotations

import pytest
from PyQt6.QtTest import QSignalSpy

from gridchess.core.definition import GameDefinition
from gridchess.core.enums import Team
from gridchess.core.piece import Cell
from gridchess.core.types import Square
from gridchess.game.engine import TurnEngine
from gridchess.ui.engine_bridge import EngineBridge

pytestmark = pytest.mark.usefixtures("qapp")


def _engine(*rows: str) -> TurnEngine:
    cells = [[Cell.from_char(ch) for ch in row] for row in rows]
    kinds = [["-" if c.is_empty else c.kind.name for c in row] for row in cells]
    teams = [[int(c.team) for c in row] for row in cells]
    return TurnEngine(GameDefinition(kinds, teams))


class TestEngineBridge:
    def test_default_engine(self) -> None:
        bridge = EngineBridge()
        assert bridge.engine.current_player == Team.ONE

    def test_selection_highlights_moves(self) -> None:
        bridge = EngineBridge()
        highlighted: list[tuple[object, object]] = []
        bridge.moves_highlighted.connect(lambda sq, moves: highlighted.append((sq, moves)))

        bridge.on_tile_clicked(4, 6)

        assert len(highlighted) == 1
        origin, moves = highlighted[0]
        assert origin == Square(4, 6)
        assert set(moves) == {Square(4, 5), Square(4, 4)}

    def test_move_emits_and_turn_changes(self) -> None:
        bridge = EngineBridge()
        moved: list[tuple[object, object]] = []
        bridge.piece_moved.connect(lambda src, dst: moved.append((src, dst)))
        turns = QSignalSpy(bridge.turn_changed)

        bridge.on_tile_clicked(4, 6)
        bridge.on_tile_clicked(4, 4)

        assert moved == [(Square(4, 6), Square(4, 4))]
        assert len(turns) == 1
        assert turns[0][0] == int(Team.TWO)

    def test_capture_emits_score(self) -> None:
        bridge = EngineBridge(_engine("..r", ".P.", "..."))
        captured = QSignalSpy(bridge.piece_captured)

        bridge.on_tile_clicked(1, 1)
        bridge.on_tile_clicked(2, 0)

        assert len(captured) == 1
        assert captured[0][2] == 5
        assert bridge.engine.user_score(Team.ONE) == 5

    def test_invalid_click_rejected(self) -> None:
        bridge = EngineBridge()
        rejected = QSignalSpy(bridge.click_rejected)

        bridge.on_tile_clicked(4, 4)

        assert len(rejected) == 1
        assert (rejected[0][0], rejected[0][1]) == (4, 4)

    def test_check_detected_for_side_to_move(self) -> None:
        bridge = EngineBridge(_engine("....k", ".....", "R...K"))
        checks = QSignalSpy(bridge.check_detected)

        bridge.on_tile_clicked(0, 2)
        bridge.on_tile_clicked(0, 0)

        assert len(checks) == 1
        assert checks[0][0] == int(Team.TWO)

    def test_engine_error_is_reported(self) -> None:
        bridge = EngineBridge()
        errors = QSignalSpy(bridge.engine_error)
        rejected = QSignalSpy(bridge.click_rejected)

        bridge.on_tile_clicked(9, 9)

        assert len(errors) == 1
        assert "outside" in errors[0][0]
        assert len(rejected) == 0
