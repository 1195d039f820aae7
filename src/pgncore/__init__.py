"""PGN ingestion and board-replay engine.

The Qt bridge lives in :mod:`pgncore.qt_bridge` and is imported on demand,
so ``pgncore.core`` and ``pgncore.game`` work without a Qt platform.
"""

from pgncore.core import Board, Color, Game, GameMetadata, MoveRecord, Piece, PieceType
from pgncore.game import GameState, PositionSnapshot, ReplayEngine
from pgncore.settings import ReplaySettings

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Color",
    "Game",
    "GameMetadata",
    "GameState",
    "MoveRecord",
    "Piece",
    "PieceType",
    "PositionSnapshot",
    "ReplayEngine",
    "ReplaySettings",
]
