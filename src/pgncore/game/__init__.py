"""Replay layer - game state, replay engine, players.

Quick start::

    from pgncore.game import ReplayEngine

    engine = ReplayEngine()
    games = engine.load_text(pgn_text)
    engine.load_game(games[0])
    engine.next()
    print(engine.current_position().placement)
"""

from pgncore.game.interfaces import IReplayEngine, PositionSnapshot
from pgncore.game.player import Player, players_from_metadata
from pgncore.game.replay import ReplayEngine, ReplayEvents
from pgncore.game.state import GameState

__all__ = [
    # Interfaces
    "IReplayEngine",
    "PositionSnapshot",
    # Concrete
    "GameState",
    "Player",
    "ReplayEngine",
    "ReplayEvents",
    "players_from_metadata",
]
