"""Shared notation-layer data models."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, fields

RESULT_TOKENS: tuple[str, ...] = ("1-0", "0-1", "1/2-1/2", "*")


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """One full move-number unit: White's half and (optionally) Black's."""

    number: int
    white: str | None
    black: str | None = None
    comment: str | None = None

    @property
    def text(self) -> str:
        """Rendered display string, e.g. ``"1. e4 e5"``."""
        parts = [f"{self.number}."]
        if self.white is not None:
            parts.append(self.white)
        if self.black is not None:
            parts.append(self.black)
        return " ".join(parts)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class GameMetadata:
    """The seven-tag roster values recognised in a game's tag section."""

    event: str | None = None
    site: str | None = None
    date: str | None = None
    round: str | None = None
    white: str | None = None
    black: str | None = None
    result: str | None = None

    def tag_pairs(self) -> list[tuple[str, str]]:
        """Present tags as ``(Name, value)`` in roster order."""
        pairs: list[tuple[str, str]] = []
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                pairs.append((f.name.capitalize(), value))
        return pairs


# PGN tag name -> GameMetadata field name
TAG_FIELDS: dict[str, str] = {f.name.capitalize(): f.name for f in fields(GameMetadata)}


def _new_game_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True, eq=False)
class Game:
    """One parsed game from a PGN source.

    Identity is the generated ``id``; two games with identical metadata
    are still distinct games.  Compare ``metadata`` explicitly for
    content equality.
    """

    metadata: GameMetadata
    moves: tuple[MoveRecord, ...]
    raw: str
    id: str = field(default_factory=_new_game_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def title(self) -> str:
        white = self.metadata.white or "Unknown"
        black = self.metadata.black or "Unknown"
        event = self.metadata.event or "Chess Game"
        date = self.metadata.date or ""
        return f"{white} vs {black} - {event} {date}"

    @property
    def summary(self) -> str:
        """Short list label, e.g. ``"Carlsen vs Nepo (1-0)"``."""
        result = self.metadata.result or "*"
        white = (self.metadata.white or "White").split(",")[0]
        black = (self.metadata.black or "Black").split(",")[0]
        return f"{white} vs {black} ({result})"

    @property
    def ply_count(self) -> int:
        return sum((m.white is not None) + (m.black is not None) for m in self.moves)
