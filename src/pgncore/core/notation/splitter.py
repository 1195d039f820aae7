"""Split concatenated multi-game PGN text into per-game spans."""

from __future__ import annotations

import logging
import re

_LOGGER = logging.getLogger(__name__)

# A result token preceded by whitespace, closing the game when followed by a
# blank line plus the next tag bracket, or by trailing whitespace at the end.
_GAME_END_RE = re.compile(r"(\s+)(1-0|0-1|1/2-1/2|\*)\s*?(\n\s*\n\s*\[|\s*\Z)")


def normalize_newlines(text: str) -> str:
    """Convert CRLF / CR line endings to ``\\n``."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_games(text: str) -> list[str]:
    """Split *text* into contiguous game spans.

    Spans are returned in source order and, concatenated, reproduce the
    newline-normalised input exactly: the opening bracket of the next game
    belongs to the next span, and trailing whitespace stays with the span it
    follows.  Whitespace-only input produces no spans.
    """
    content = normalize_newlines(text)
    if not content.strip():
        return []

    spans: list[str] = []
    start = 0
    for match in _GAME_END_RE.finditer(content):
        end = match.end()
        if match.group(3).endswith("["):
            end -= 1
        spans.append(content[start:end])
        start = end

    if not spans:
        return [content]

    remainder = content[start:]
    if remainder:
        if remainder.strip():
            spans.append(remainder)
        else:
            spans[-1] += remainder

    _LOGGER.debug("Split PGN source into %d game span(s)", len(spans))
    return spans
