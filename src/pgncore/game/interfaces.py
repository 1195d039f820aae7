"""Abstract interfaces for the replay layer.

Collaborators (board renderer, chat context builder, file dialogs) depend
on these types only, never on the concrete engine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pgncore.core.enums import Color

if TYPE_CHECKING:
    from pgncore.core.notation.models import Game, MoveRecord
    from pgncore.core.piece import Piece
    from pgncore.core.types import Square
    from pgncore.game.player import Player
    from pgncore.game.state import GameState


@dataclass(frozen=True, slots=True)
class PositionSnapshot:
    """Read-only view of the replay position handed to the renderer."""

    squares: Mapping[Square, Piece]
    placement: str
    cursor: float
    has_previous: bool
    has_next: bool
    side_to_move: Color
    highlight: tuple[Square, Square] | None = None

    def piece_at(self, sq: Square) -> Piece | None:
        return self.squares.get(sq)


class IReplayEngine(ABC):
    """Interface for the PGN replay engine."""

    @abstractmethod
    def load_text(self, raw: str) -> list[Game]:
        """Parse *raw* PGN text and return every game found."""

    @abstractmethod
    def load_game(self, game: Game) -> None:
        """Make *game* the active replay target at the starting position."""

    @abstractmethod
    def first(self) -> None:
        """Go to the starting position."""

    @abstractmethod
    def previous(self) -> None:
        """Step back one half-move."""

    @abstractmethod
    def next(self) -> None:
        """Step forward one half-move."""

    @abstractmethod
    def last(self) -> None:
        """Go to the final recorded position."""

    @abstractmethod
    def jump_to(self, cursor: float) -> None:
        """Go to *cursor* (clamped to the recorded range)."""

    @abstractmethod
    def current_position(self) -> PositionSnapshot:
        """Snapshot of the board and cursor."""

    @abstractmethod
    def moves_up_to(self, cursor: float | None = None) -> str:
        """PGN text (tags + moves) truncated at *cursor*."""

    @abstractmethod
    def serialize(self, state: GameState | None = None) -> str:
        """Full PGN text of *state* (default: the active game)."""

    @abstractmethod
    def previous_moves(self, num: int | None = None) -> list[MoveRecord]:
        """Up to *num* move records ending at the cursor."""

    @abstractmethod
    def make_move(self, player: Player, from_sq: Square, to_sq: Square) -> None:
        """Interactive move entry; not supported by replay engines."""
