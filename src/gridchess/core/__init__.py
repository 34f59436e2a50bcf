"""Core domain layer — pure rule-engine logic with zero external dependencies.

Quick start::

    from gridchess.core import GameDefinition, MoveGenerator, Square, Team

    definition = GameDefinition.standard()
    board = definition.build_board()
    gen = MoveGenerator(board, definition.rules)
    print(gen.valid_moves(Square(1, 7), Team.ONE))
"""

from gridchess.core.board import Board
from gridchess.core.check import CheckDetector
from gridchess.core.definition import GameDefinition, load_layout
from gridchess.core.enums import ClickType, PieceKind, Team
from gridchess.core.errors import (
    BoardLoadError,
    EngineError,
    IllegalMoveError,
    OutOfBoundsError,
    UnknownPieceKindError,
)
from gridchess.core.move_generator import MoveGenerator
from gridchess.core.piece import EMPTY_CELL, Cell
from gridchess.core.rules import MoveRule, MoveRuleTable
from gridchess.core.score import ScoreTracker
from gridchess.core.types import Square

__all__ = [
    # Enums
    "ClickType",
    "PieceKind",
    "Team",
    # Types
    "Square",
    # Errors
    "BoardLoadError",
    "EngineError",
    "IllegalMoveError",
    "OutOfBoundsError",
    "UnknownPieceKindError",
    # Domain objects
    "Board",
    "Cell",
    "CheckDetector",
    "EMPTY_CELL",
    "GameDefinition",
    "MoveGenerator",
    "MoveRule",
    "MoveRuleTable",
    "ScoreTracker",
    "load_layout",
]
