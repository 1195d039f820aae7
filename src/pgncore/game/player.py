"""Player value objects derived from game metadata."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from pgncore.core.enums import Color
from pgncore.core.notation.models import GameMetadata


@dataclass(frozen=True, slots=True)
class Player:
    """A named participant of a replayed game."""

    name: str
    color: Color
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


def players_from_metadata(metadata: GameMetadata | None) -> dict[Color, Player]:
    """Players for the sides named in *metadata*; unnamed sides are omitted."""
    players: dict[Color, Player] = {}
    if metadata is None:
        return players
    if metadata.white is not None:
        players[Color.WHITE] = Player(metadata.white, Color.WHITE)
    if metadata.black is not None:
        players[Color.BLACK] = Player(metadata.black, Color.BLACK)
    return players
