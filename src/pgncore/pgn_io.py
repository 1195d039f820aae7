"""PGN file import/export helpers for the file-dialog collaborator."""

from __future__ import annotations

import logging
from pathlib import Path

from pgncore.core.errors import UnreadableSourceError
from pgncore.core.notation.models import Game
from pgncore.core.notation.pgn import parse_games
from pgncore.game.replay import ReplayEngine
from pgncore.game.state import GameState

_LOGGER = logging.getLogger(__name__)


def read_pgn_text(file_path: Path, encoding: str = "utf-8") -> str:
    """Read a PGN file, wrapping I/O and decoding failures."""
    try:
        return file_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        _LOGGER.warning("Cannot read PGN file %s: %s", file_path, exc)
        raise UnreadableSourceError(f"Cannot read {file_path}: {exc}") from exc


def read_pgn_file(file_path: Path, encoding: str = "utf-8") -> list[Game]:
    """Read and parse every game in a PGN file."""
    return parse_games(read_pgn_text(file_path, encoding))


def load_pgn_file(engine: ReplayEngine, file_path: Path) -> list[Game]:
    """Load a PGN file into *engine* and activate its first game, if any."""
    games = engine.load_text(read_pgn_text(file_path, engine.settings.encoding))
    if games:
        engine.load_game(games[0])
    return games


def save_pgn_file(
    engine: ReplayEngine,
    file_path: Path,
    state: GameState | None = None,
) -> Path:
    """Save *state* (default: the active game) to a PGN file path."""
    save_path = file_path
    if save_path.suffix.lower() != ".pgn":
        save_path = save_path.with_suffix(".pgn")

    pgn_text = engine.serialize(state)
    save_path.write_text(pgn_text, encoding=engine.settings.encoding)
    _LOGGER.debug("Saved PGN to %s", save_path)
    return save_path
