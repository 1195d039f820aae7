"""Qt bridge: replay navigation signals and a background PGN loader."""

from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from pgncore.core.errors import UnreadableSourceError
from pgncore.game.interfaces import PositionSnapshot
from pgncore.game.replay import ReplayEngine
from pgncore.pgn_io import read_pgn_file


class ReplayBridge(QObject):
    """Main-thread adapter exposing a :class:`ReplayEngine` to Qt views.

    The engine stays the single owner of board state; views receive
    immutable :class:`PositionSnapshot` values through ``position_changed``.
    """

    position_changed = pyqtSignal(object)  # PositionSnapshot
    games_loaded = pyqtSignal(object)  # list[Game]
    game_loaded = pyqtSignal(object)  # Game

    __slots__ = ("_engine",)

    def __init__(self, engine: ReplayEngine | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._engine = engine or ReplayEngine()
        self._engine.events.on_position_changed.append(self.position_changed.emit)
        self._engine.events.on_game_loaded.append(self.game_loaded.emit)

    @property
    def engine(self) -> ReplayEngine:
        return self._engine

    def snapshot(self) -> PositionSnapshot:
        return self._engine.current_position()

    @pyqtSlot(str)
    def load_text(self, raw: str) -> None:
        """Parse *raw* and announce the games; the first one becomes active."""
        games = self._engine.load_text(raw)
        self.games_loaded.emit(games)
        if games:
            self._engine.load_game(games[0])

    @pyqtSlot(object)
    def set_games(self, games_obj: object) -> None:
        """Receive games parsed off-thread by :class:`PgnLoadWorker`."""
        if not isinstance(games_obj, list):
            return
        games = self._engine.set_games(games_obj)
        self.games_loaded.emit(games)
        if games:
            self._engine.load_game(games[0])

    @pyqtSlot(int)
    def select_game(self, index: int) -> None:
        if 0 <= index < len(self._engine.games):
            self._engine.select_game(index)

    @pyqtSlot()
    def first(self) -> None:
        self._engine.first()

    @pyqtSlot()
    def previous(self) -> None:
        self._engine.previous()

    @pyqtSlot()
    def next(self) -> None:
        self._engine.next()

    @pyqtSlot()
    def last(self) -> None:
        self._engine.last()

    @pyqtSlot(float)
    def jump_to(self, cursor: float) -> None:
        self._engine.jump_to(cursor)


class PgnLoadWorker(QObject):
    """Thread-affine worker that reads and parses PGN files on demand."""

    loaded = pyqtSignal(int, object)  # request_id, list[Game]
    failed = pyqtSignal(int, str)  # request_id, message

    __slots__ = ("_encoding",)

    def __init__(self, *, encoding: str = "utf-8") -> None:
        super().__init__()
        self._encoding = encoding

    @pyqtSlot(str, int)
    def load_file(self, file_path: str, request_id: int) -> None:
        """Read *file_path*, parse its games and emit the result."""
        try:
            games = read_pgn_file(Path(file_path), self._encoding)
        except UnreadableSourceError as exc:
            self.failed.emit(request_id, str(exc))
            return
        self.loaded.emit(request_id, games)
