"""Core domain layer - board model and PGN notation, no Qt dependencies.

Quick start::

    from pgncore.core import Board, parse_games, resolve_move, Color

    games = parse_games(pgn_text)
    board = Board.initial()
    resolve_move(board, games[0].moves[0].white, Color.WHITE)
"""

from pgncore.core.board import STARTING_PLACEMENT, Board
from pgncore.core.enums import Color, PieceType
from pgncore.core.errors import (
    GameNotLoadedError,
    MalformedTagError,
    MoveInputNotSupportedError,
    PgnError,
    UnreadableSourceError,
    UnresolvedMoveError,
)
from pgncore.core.notation import (
    Game,
    GameMetadata,
    MoveRecord,
    ResolvedMove,
    build_pgn,
    parse_games,
    parse_pgn_game,
    resolve_move,
    split_games,
)
from pgncore.core.piece import Piece
from pgncore.core.types import (
    ALL_SQUARES,
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    # Domain objects
    "Board",
    "Piece",
    "STARTING_PLACEMENT",
    # Errors
    "GameNotLoadedError",
    "MalformedTagError",
    "MoveInputNotSupportedError",
    "PgnError",
    "UnreadableSourceError",
    "UnresolvedMoveError",
    # Notation
    "Game",
    "GameMetadata",
    "MoveRecord",
    "ResolvedMove",
    "build_pgn",
    "parse_games",
    "parse_pgn_game",
    "resolve_move",
    "split_games",
]
