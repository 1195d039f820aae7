"""Notation package: PGN splitting, parsing, serialization and SAN resolution."""

from pgncore.core.notation.models import RESULT_TOKENS, Game, GameMetadata, MoveRecord
from pgncore.core.notation.pgn import (
    build_pgn,
    movetext_from_records,
    parse_games,
    parse_movetext,
    parse_pgn_game,
    parse_tag_line,
    truncate_records,
)
from pgncore.core.notation.san import ResolvedMove, can_reach, find_candidates, resolve_move
from pgncore.core.notation.splitter import normalize_newlines, split_games

__all__ = [
    "RESULT_TOKENS",
    "Game",
    "GameMetadata",
    "MoveRecord",
    "ResolvedMove",
    "normalize_newlines",
    "split_games",
    "parse_movetext",
    "parse_pgn_game",
    "parse_tag_line",
    "parse_games",
    "truncate_records",
    "movetext_from_records",
    "build_pgn",
    "can_reach",
    "find_candidates",
    "resolve_move",
]
