"""Exception types raised by the PGN and replay layers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pgncore.core.enums import Color


class PgnError(Exception):
    """Base class for all pgncore errors."""


class UnreadableSourceError(PgnError):
    """A PGN file could not be read or decoded."""


class MalformedTagError(PgnError, ValueError):
    """A ``[Tag "value"]`` line does not follow the tag-pair grammar.

    Raised by ``parse_tag_line``; whole-game parsing skips the line.
    """


class UnresolvedMoveError(PgnError, ValueError):
    """No piece on the board can plausibly play a notation token."""

    def __init__(self, token: str, color: Color, reason: str = "no candidate piece") -> None:
        super().__init__(f"Cannot resolve {color} move {token!r}: {reason}")
        self.token = token
        self.color = color
        self.reason = reason


class GameNotLoadedError(PgnError):
    """An operation needs an active game but none is loaded."""


class MoveInputNotSupportedError(PgnError, NotImplementedError):
    """Interactive move entry is not supported by the replay engine."""
