"""TurnEngine — the central orchestrator of a game.

Coordinates: Board, MoveGenerator, CheckDetector, ScoreTracker, TurnState.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from gridchess.core.board import Board
from gridchess.core.definition import GameDefinition
from gridchess.core.enums import ClickType, PieceKind, Team
from gridchess.core.errors import IllegalMoveError
from gridchess.core.move_generator import MoveGenerator
from gridchess.core.piece import Cell
from gridchess.core.score import ScoreTracker
from gridchess.core.types import Square
from gridchess.game.interfaces import EnginePhase, ITurnEngine
from gridchess.game.state import TurnState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Square, Square], None]  # src, dst
CaptureCallback = Callable[[Square, Square, Cell, int], None]  # src, dst, captured, score
TurnCallback = Callable[[Team], None]  # new side to move
SelectionCallback = Callable[[Square | None, tuple[Square, ...]], None]


@dataclass
class EngineEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_capture: list[CaptureCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)


# ── Engine ───────────────────────────────────────────────────────────────────


class TurnEngine(ITurnEngine):
    """Owns the board, the turn state and the score of a single game.

    Thread-safety: none. Calls must be serialised by the caller; every
    method runs to completion and a failing call changes nothing.
    """

    __slots__ = (
        "_board",
        "_rules",
        "_generator",
        "_scores",
        "_state",
        "events",
    )

    def __init__(self, definition: GameDefinition | None = None) -> None:
        definition = definition if definition is not None else GameDefinition.standard()
        # Raises before any attribute is set: no half-built engine.
        board = definition.build_board()

        self._board = board
        self._rules = definition.rules
        self._generator = MoveGenerator(board, definition.rules)
        self._scores = ScoreTracker(definition.rules.values)
        self._state = TurnState()
        self.events = EngineEvents()
        _LOGGER.info("Engine ready on a %dx%d board", board.width, board.height)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def height(self) -> int:
        return self._board.height

    @property
    def current_player(self) -> Team:
        return self._state.current_player

    @property
    def turn_count(self) -> int:
        return self._state.turn_count

    @property
    def selection(self) -> Square | None:
        return self._state.selection

    @property
    def cached_moves(self) -> tuple[Square, ...]:
        return self._state.cached_moves

    @property
    def phase(self) -> EnginePhase:
        return self._state.phase

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_kind_at(self, sq: Square) -> PieceKind:
        return self._board.piece_kind_at(sq)

    def team_at(self, sq: Square) -> Team:
        return self._board.team_at(sq)

    def get_valid_moves(self, sq: Square) -> tuple[Square, ...]:
        """Moves of the current player's piece on *sq*; empty otherwise.

        Pure: does not select the piece.
        """
        if self._board.team_at(sq) != self._state.current_player:
            return ()
        return tuple(self._generator.valid_moves(sq, self._state.current_player))

    def click_type(self, sq: Square) -> ClickType:
        board = self._board
        occupant = board.team_at(sq)
        if occupant == self._state.current_player:
            return ClickType.SELECT_OWN_PIECE
        if self._state.phase is EnginePhase.IDLE:
            return ClickType.INVALID
        if sq in self._state.cached_moves:
            if occupant is Team.NONE:
                return ClickType.APPLY_MOVE
            return ClickType.APPLY_CAPTURE
        return ClickType.INVALID

    def user_score(self, team: Team) -> int:
        return self._scores.score_of(team)

    def scores(self) -> dict[Team, int]:
        return self._scores.as_dict()

    def detect_check(self) -> bool:
        return self.is_in_check(self._state.current_player)

    def is_in_check(self, team: Team) -> bool:
        return self._generator.check_detector.is_in_check(team)

    def attack_map(self, team: Team) -> frozenset[Square]:
        return self._generator.check_detector.attack_map(team)

    def attack_grid(self, team: Team) -> list[list[bool]]:
        return self._generator.check_detector.attack_grid(team)

    # ── Commands ─────────────────────────────────────────────────────────

    def select_piece(self, sq: Square) -> tuple[Square, ...]:
        """Select the current player's piece on *sq* and cache its moves."""
        player = self._state.current_player
        if self._board.team_at(sq) != player:
            raise IllegalMoveError(f"{sq} does not hold a piece of team {int(player)}")
        moves = tuple(self._generator.valid_moves(sq, player))
        self._state.select(sq, moves)
        _LOGGER.debug("Team %d selected %s: %d candidate moves", player, sq, len(moves))
        self._emit_selection(sq, moves)
        return moves

    def move_piece(self, sq: Square) -> None:
        """Move the selected piece onto the empty candidate square *sq*."""
        src = self._require_target(sq, ClickType.APPLY_MOVE)
        player = self._state.current_player
        self._board.move_piece(src, sq)
        self._state.advance()
        _LOGGER.debug("Team %d moved %s -> %s", player, src, sq)
        self._emit_move(src, sq)
        self._emit_turn()

    def capture_piece(self, sq: Square) -> None:
        """Capture the opposing piece on candidate square *sq*."""
        src = self._require_target(sq, ClickType.APPLY_CAPTURE)
        player = self._state.current_player
        # Look the value up first so an unknown kind aborts before mutation.
        captured_kind = self._board.piece_kind_at(sq)
        self._rules.point_value(captured_kind)

        captured = self._board.capture_piece(src, sq)
        score = self._scores.add_capture(player, captured.kind)
        self._state.advance()
        _LOGGER.debug(
            "Team %d captured %s on %s (score %d)",
            player,
            captured.kind.name,
            sq,
            score,
        )
        self._emit_capture(src, sq, captured, score)
        self._emit_turn()

    def handle_click(self, sq: Square) -> ClickType:
        click = self.click_type(sq)
        if click is ClickType.SELECT_OWN_PIECE:
            self.select_piece(sq)
        elif click is ClickType.APPLY_MOVE:
            self.move_piece(sq)
        elif click is ClickType.APPLY_CAPTURE:
            self.capture_piece(sq)
        else:
            _LOGGER.debug("Ignored click on %s", sq)
        return click

    # ── Internal helpers ─────────────────────────────────────────────────

    def _require_target(self, sq: Square, expected: ClickType) -> Square:
        """Return the selected origin if clicking *sq* means *expected*."""
        src = self._state.selection
        if src is None:
            raise IllegalMoveError("No piece selected")
        click = self.click_type(sq)
        if click is not expected:
            raise IllegalMoveError(
                f"{sq} is not a {expected.name.lower()} target for {src} ({click.name})"
            )
        return src

    def _emit_turn(self) -> None:
        self._emit_selection(None, ())
        _LOGGER.debug(
            "Turn %d: team %d to move", self._state.turn_count, self._state.current_player
        )
        for cb in self.events.on_turn_changed:
            cb(self._state.current_player)

    def _emit_selection(self, sq: Square | None, moves: tuple[Square, ...]) -> None:
        for cb in self.events.on_selection_changed:
            cb(sq, moves)

    def _emit_move(self, src: Square, dst: Square) -> None:
        for cb in self.events.on_move:
            cb(src, dst)

    def _emit_capture(self, src: Square, dst: Square, captured: Cell, score: int) -> None:
        for cb in self.events.on_capture:
            cb(src, dst, captured, score)
