"""Qt-facing adapters. No widgets or drawing live here."""

from gridchess.ui.engine_bridge import EngineBridge

__all__ = ["EngineBridge"]
