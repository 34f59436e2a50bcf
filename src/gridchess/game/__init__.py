"""Game management layer — turn engine, turn state, events.

Quick start::

    from gridchess.core import Square
    from gridchess.game import TurnEngine

    engine = TurnEngine()
    engine.handle_click(Square(4, 6))  # select team 1's pawn
    engine.handle_click(Square(4, 4))  # double step
"""

from gridchess.game.engine import EngineEvents, TurnEngine
from gridchess.game.interfaces import EnginePhase, ITurnEngine
from gridchess.game.state import TurnState

__all__ = [
    # Interfaces
    "EnginePhase",
    "ITurnEngine",
    # Concrete
    "EngineEvents",
    "TurnEngine",
    "TurnState",
]
