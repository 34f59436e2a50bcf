"""Qt bridge exposing a turn engine to a presentation layer."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from gridchess.core.enums import ClickType, Team
from gridchess.core.errors import EngineError
from gridchess.core.piece import Cell
from gridchess.core.types import Square
from gridchess.game.engine import TurnEngine

_LOGGER = logging.getLogger(__name__)


class EngineBridge(QObject):
    """Translates tile clicks into engine calls and engine events into signals.

    Lives on the GUI thread; the engine itself is not thread-safe.
    """

    moves_highlighted = pyqtSignal(object, object)  # origin, tuple of squares
    piece_moved = pyqtSignal(object, object)  # src, dst
    piece_captured = pyqtSignal(object, object, int)  # src, dst, mover's score
    turn_changed = pyqtSignal(int)
    check_detected = pyqtSignal(int)
    click_rejected = pyqtSignal(int, int)
    engine_error = pyqtSignal(str)

    def __init__(self, engine: TurnEngine | None = None) -> None:
        super().__init__()
        self._engine = engine if engine is not None else TurnEngine()
        events = self._engine.events
        events.on_selection_changed.append(self._on_selection_changed)
        events.on_move.append(self._on_move)
        events.on_capture.append(self._on_capture)
        events.on_turn_changed.append(self._on_turn_changed)

    @property
    def engine(self) -> TurnEngine:
        return self._engine

    @pyqtSlot(int, int)
    def on_tile_clicked(self, x: int, y: int) -> None:
        """Feed a click on tile ``(x, y)`` to the engine."""
        sq = Square(x, y)
        try:
            click = self._engine.handle_click(sq)
        except EngineError as exc:
            _LOGGER.warning("Engine rejected click on %s: %s", sq, exc)
            self.engine_error.emit(str(exc))
            return
        if click is ClickType.INVALID:
            self.click_rejected.emit(x, y)

    # -- Engine callbacks -------------------------------------------------

    def _on_selection_changed(self, sq: Square | None, moves: tuple[Square, ...]) -> None:
        if sq is not None:
            self.moves_highlighted.emit(sq, moves)

    def _on_move(self, src: Square, dst: Square) -> None:
        self.piece_moved.emit(src, dst)

    def _on_capture(self, src: Square, dst: Square, _captured: Cell, score: int) -> None:
        self.piece_captured.emit(src, dst, score)

    def _on_turn_changed(self, team: Team) -> None:
        self.turn_changed.emit(int(team))
        if self._engine.is_in_check(team):
            self.check_detected.emit(int(team))
