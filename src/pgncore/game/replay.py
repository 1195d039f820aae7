"""ReplayEngine - owns the loaded games and replays one of them.

Every backward step and every jump re-derives the board from the starting
position; there is no undo log.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from types import MappingProxyType

from pgncore.core.errors import (
    GameNotLoadedError,
    MoveInputNotSupportedError,
    UnresolvedMoveError,
)
from pgncore.core.notation.models import Game, MoveRecord
from pgncore.core.notation.pgn import build_pgn, parse_games, truncate_records
from pgncore.core.notation.san import resolve_move
from pgncore.core.types import Square
from pgncore.game.interfaces import IReplayEngine, PositionSnapshot
from pgncore.game.player import Player
from pgncore.game.state import GameState
from pgncore.settings import ReplaySettings

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

PositionCallback = Callable[[PositionSnapshot], None]
GameLoadedCallback = Callable[[Game], None]


@dataclass
class ReplayEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_position_changed: list[PositionCallback] = field(default_factory=list)
    on_game_loaded: list[GameLoadedCallback] = field(default_factory=list)


# ── Engine ───────────────────────────────────────────────────────────────────


class ReplayEngine(IReplayEngine):
    """Parses PGN sources and replays the selected game ply by ply.

    Single-writer: all mutation goes through the navigation methods, which
    are expected to be called from one thread (the UI thread when wrapped
    by :class:`pgncore.qt_bridge.ReplayBridge`).  Navigation never raises;
    moves that cannot be resolved are logged and collected in
    ``state.unresolved``.
    """

    __slots__ = (
        "_settings",
        "_games",
        "_current_game_index",
        "_state",
        "events",
    )

    def __init__(self, settings: ReplaySettings | None = None) -> None:
        self._settings = settings or ReplaySettings()
        self._games: list[Game] = []
        self._current_game_index = -1
        self._state = GameState()
        self.events = ReplayEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def settings(self) -> ReplaySettings:
        return self._settings

    @property
    def games(self) -> list[Game]:
        return list(self._games)

    @property
    def current_game_index(self) -> int:
        """Index of the active game in :attr:`games`, or -1."""
        return self._current_game_index

    @property
    def state(self) -> GameState:
        return self._state

    # ── Loading ──────────────────────────────────────────────────────────

    def load_text(self, raw: str) -> list[Game]:
        games = self.set_games(parse_games(raw))
        _LOGGER.debug("Loaded %d game(s) from PGN text", len(games))
        return games

    def set_games(self, games: list[Game]) -> list[Game]:
        """Replace the game list (e.g. with games parsed off-thread)."""
        self._games = list(games)
        self._current_game_index = -1
        return list(self._games)

    def load_game(self, game: Game) -> None:
        self._state = GameState.from_game(game)
        self._current_game_index = next(
            (i for i, g in enumerate(self._games) if g == game), -1
        )
        for cb in self.events.on_game_loaded:
            cb(game)
        self._emit_position()

    def select_game(self, index: int) -> Game:
        """Load ``games[index]``; raises :class:`IndexError` if out of range."""
        if not 0 <= index < len(self._games):
            raise IndexError(f"No game at index {index} ({len(self._games)} loaded)")
        game = self._games[index]
        self.load_game(game)
        return game

    # ── Navigation ───────────────────────────────────────────────────────

    def first(self) -> None:
        self._state.reset_board()
        self._emit_position()

    def next(self) -> None:
        state = self._state
        if not state.has_next_move:
            return
        state.ply += 1
        self._apply_half_move(state.ply)
        self._emit_position()

    def previous(self) -> None:
        if self._state.ply <= 0:
            return
        self._replay_to(self._state.ply - 1)

    def last(self) -> None:
        self._replay_to(self._state.total_plies)

    def jump_to(self, cursor: float) -> None:
        plies = self._plies_for(cursor)
        if plies is None:
            return
        self._replay_to(plies)

    # ── Read accessors ───────────────────────────────────────────────────

    def current_position(self) -> PositionSnapshot:
        state = self._state
        return PositionSnapshot(
            squares=MappingProxyType(state.board.as_dict()),
            placement=state.board.placement(),
            cursor=state.cursor,
            has_previous=state.has_previous_move,
            has_next=state.has_next_move,
            side_to_move=state.side_to_move,
            highlight=state.highlight,
        )

    def moves_up_to(self, cursor: float | None = None) -> str:
        state = self._state
        plies = None if cursor is None else self._plies_for(cursor)
        if plies is None:
            plies = state.ply
        records = truncate_records(state.moves, plies)
        return build_pgn(state.metadata, records)

    def serialize(self, state: GameState | None = None) -> str:
        state = state or self._state
        result = self._settings.default_result
        if state.metadata is not None and state.metadata.result:
            result = state.metadata.result
        return build_pgn(state.metadata, state.moves, result)

    def previous_moves(self, num: int | None = None) -> list[MoveRecord]:
        state = self._state
        if num is None:
            num = self._settings.context_moves
        if not state.is_loaded or state.ply <= 0:
            return []
        end = (state.ply - 1) // 2 + 1
        start = 0 if num is None else max(0, end - num)
        return list(state.moves[start:end])

    def make_move(self, player: Player, from_sq: Square, to_sq: Square) -> None:
        if not self._state.is_loaded:
            raise GameNotLoadedError("No game is loaded")
        raise MoveInputNotSupportedError(
            f"Cannot play {from_sq}{to_sq} for {player.name}: replay is read-only"
        )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _plies_for(self, cursor: float) -> int | None:
        """Ply count for *cursor*, snapped down and clamped; ``None`` for NaN."""
        if math.isnan(cursor):
            return None
        total = self._state.total_plies
        # 2 * cursor may overflow to infinity for huge finite values.
        doubled = cursor * 2
        if doubled >= total:
            return total
        if doubled <= 0:
            return 0
        return math.floor(doubled)

    def _replay_to(self, plies: int) -> None:
        state = self._state
        state.reset_board()
        for ply in range(1, plies + 1):
            state.ply = ply
            self._apply_half_move(ply)
        self._emit_position()

    def _apply_half_move(self, ply: int) -> None:
        state = self._state
        token, color = state.half_move(ply)
        if token is None:
            return
        try:
            resolved = resolve_move(
                state.board,
                token,
                color,
                use_disambiguation=self._settings.use_san_disambiguation,
            )
        except UnresolvedMoveError as exc:
            _LOGGER.warning("Ply %d: %s", ply, exc)
            state.unresolved.append(exc)
            return
        state.highlight = resolved.highlight

    def _emit_position(self) -> None:
        if not self.events.on_position_changed:
            return
        snapshot = self.current_position()
        for cb in self.events.on_position_changed:
            cb(snapshot)
