"""GameState - the mutable replay position of one game."""

from __future__ import annotations

from pgncore.core.board import Board
from pgncore.core.enums import Color
from pgncore.core.errors import UnresolvedMoveError
from pgncore.core.notation.models import Game, GameMetadata, MoveRecord
from pgncore.core.types import Square
from pgncore.game.player import Player, players_from_metadata


class GameState:
    """Replay position of the active game.

    The position is tracked as a ply count; ``cursor`` exposes it in the
    move-number units used by the UI: ``1.0`` is just after Black's first
    move, ``1.5`` just after White's second.  ``board`` always equals the
    starting position with every half-move before the cursor replayed.
    """

    __slots__ = (
        "game_id",
        "metadata",
        "moves",
        "ply",
        "board",
        "highlight",
        "unresolved",
    )

    def __init__(self) -> None:
        self.game_id: str | None = None
        self.metadata: GameMetadata | None = None
        self.moves: tuple[MoveRecord, ...] = ()
        self.ply: int = 0
        self.board: Board = Board.initial()
        self.highlight: tuple[Square, Square] | None = None
        self.unresolved: list[UnresolvedMoveError] = []

    @classmethod
    def from_game(cls, game: Game) -> GameState:
        state = cls()
        state.game_id = game.id
        state.metadata = game.metadata
        state.moves = tuple(game.moves)
        return state

    # ── Cursor ───────────────────────────────────────────────────────────

    @property
    def is_loaded(self) -> bool:
        return self.game_id is not None

    @property
    def cursor(self) -> float:
        return self.ply / 2

    @property
    def total_plies(self) -> int:
        """Ply count of the final recorded position."""
        if not self.moves:
            return 0
        tail = 2 if self.moves[-1].black is not None else 1
        return 2 * (len(self.moves) - 1) + tail

    @property
    def has_previous_move(self) -> bool:
        return self.ply > 0

    @property
    def has_next_move(self) -> bool:
        index = self.ply // 2
        if self.ply % 2 == 0:
            return index < len(self.moves)
        return index < len(self.moves) and self.moves[index].black is not None

    @property
    def side_to_move(self) -> Color:
        return Color.WHITE if self.ply % 2 == 0 else Color.BLACK

    def half_move(self, ply: int) -> tuple[str | None, Color]:
        """Token and side of the 1-based half-move *ply*."""
        record = self.moves[(ply - 1) // 2]
        if ply % 2:
            return record.white, Color.WHITE
        return record.black, Color.BLACK

    # ── Metadata helpers ─────────────────────────────────────────────────

    @property
    def players(self) -> dict[Color, Player]:
        return players_from_metadata(self.metadata)

    # ── Mutation ─────────────────────────────────────────────────────────

    def reset_board(self) -> None:
        """Back to the starting position with no highlight or errors."""
        self.board.reset()
        self.ply = 0
        self.highlight = None
        self.unresolved = []
