"""PGN parsing and serialization helpers."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from pgncore.core.errors import MalformedTagError
from pgncore.core.notation.models import (
    RESULT_TOKENS,
    TAG_FIELDS,
    Game,
    GameMetadata,
    MoveRecord,
)
from pgncore.core.notation.splitter import split_games

_LOGGER = logging.getLogger(__name__)

_PGN_HEADER_RE = re.compile(r'^\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]\s*$')
_MOVE_NUMBER_RE = re.compile(r"^(\d+)\.$")
_GLUED_NUMBER_RE = re.compile(r"^(\d+)\.([^.\s]\S*)$")
_CONTINUATION_RE = re.compile(r"^\d+\.\.\.(\S*)$")
_BRACE_COMMENT_RE = re.compile(r"\{[^}]*\}?")
_LINE_COMMENT_RE = re.compile(r";[^\n]*")
_VARIATION_RE = re.compile(r"\([^()]*\)")
_NAG_RE = re.compile(r"\$\d+")


# ── Parsing ──────────────────────────────────────────────────────────────────


def parse_tag_line(line: str) -> tuple[str, str]:
    """Parse one ``[Name "value"]`` line into ``(Name, value)``.

    Raises :class:`MalformedTagError` if *line* is not a valid tag pair.
    """
    match = _PGN_HEADER_RE.match(line)
    if match is None:
        raise MalformedTagError(f"Malformed PGN tag line: {line!r}")
    key, raw_value = match.groups()
    value = raw_value.replace('\\"', '"').replace("\\\\", "\\")
    return key, value


def _clean_movetext(movetext: str) -> str:
    """Drop comments, NAGs and variations the replay layer does not use."""
    text = _BRACE_COMMENT_RE.sub(" ", movetext)
    text = _LINE_COMMENT_RE.sub(" ", text)
    # Innermost variations first so nested ones collapse outward.
    while True:
        text, count = _VARIATION_RE.subn(" ", text)
        if not count:
            break
    text = text.replace("(", " ").replace(")", " ")
    return _NAG_RE.sub(" ", text)


def _tokenize(movetext: str) -> list[str]:
    tokens: list[str] = []
    for token in _clean_movetext(movetext).split():
        if token in RESULT_TOKENS:
            continue
        glued = _GLUED_NUMBER_RE.match(token)
        if glued is not None:
            tokens.append(f"{glued.group(1)}.")
            tokens.append(glued.group(2))
            continue
        continuation = _CONTINUATION_RE.match(token)
        if continuation is not None:
            if continuation.group(1):
                tokens.append(continuation.group(1))
            continue
        if token.strip(".") == "":
            continue
        tokens.append(token)
    return tokens


def parse_movetext(movetext: str) -> list[MoveRecord]:
    """Group movetext tokens into numbered :class:`MoveRecord` units.

    A ``N.`` marker flushes a pending White half as its own record and
    adopts ``N`` as the current move number.  Otherwise tokens alternate
    White, Black; an unfinished final move keeps only its White half.
    """
    records: list[MoveRecord] = []
    number = 1
    white: str | None = None

    for token in _tokenize(movetext):
        marker = _MOVE_NUMBER_RE.match(token)
        if marker is not None:
            if white is not None:
                records.append(MoveRecord(number, white))
                white = None
            number = int(marker.group(1))
            continue

        if white is None:
            white = token
            continue

        records.append(MoveRecord(number, white, token))
        number += 1
        white = None

    if white is not None:
        records.append(MoveRecord(number, white))
    return records


def parse_pgn_game(pgn_text: str) -> tuple[GameMetadata, list[MoveRecord]]:
    """Parse one game's text into its metadata and move records.

    Never raises on malformed input: unknown tags are ignored, tag-like
    lines that do not parse are skipped, and movetext is read best effort.
    """
    tags: dict[str, str] = {}
    move_lines: list[str] = []

    for raw_line in pgn_text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("%"):
            continue

        if line.startswith("["):
            try:
                key, value = parse_tag_line(line)
            except MalformedTagError as exc:
                _LOGGER.debug("Skipping tag: %s", exc)
                continue
            field_name = TAG_FIELDS.get(key)
            if field_name is not None:
                tags[field_name] = value
            continue

        move_lines.append(line)

    metadata = GameMetadata(**tags)
    return metadata, parse_movetext("\n".join(move_lines))


def parse_games(text: str) -> list[Game]:
    """Parse every game in a (possibly multi-game) PGN source."""
    games: list[Game] = []
    for span in split_games(text):
        metadata, moves = parse_pgn_game(span)
        games.append(Game(metadata=metadata, moves=tuple(moves), raw=span))
    return games


# ── Serialization ────────────────────────────────────────────────────────────


def truncate_records(records: Sequence[MoveRecord], plies: int) -> list[MoveRecord]:
    """Records covering the first *plies* half-moves.

    An odd *plies* count keeps only the White half of the boundary record.
    """
    plies = max(0, plies)
    full = plies // 2
    out = list(records[:full])
    if plies % 2 and full < len(records):
        boundary = records[full]
        out.append(MoveRecord(boundary.number, boundary.white, None, boundary.comment))
    return out


def movetext_from_records(records: Sequence[MoveRecord], result_token: str | None = None) -> str:
    """Build PGN movetext from move records and an optional result token."""
    parts = [record.text for record in records]
    if result_token:
        parts.append(result_token)
    return " ".join(parts)


def build_pgn(
    metadata: GameMetadata | None,
    records: Sequence[MoveRecord],
    result_token: str | None = None,
) -> str:
    """Build a single-game PGN document: tag section, blank line, movetext."""
    lines: list[str] = []
    if metadata is not None:
        for key, value in metadata.tag_pairs():
            escaped = value.replace("\\", "\\\\").replace('"', '\\"')
            lines.append(f'[{key} "{escaped}"]')
        if lines:
            lines.append("")
    lines.append(movetext_from_records(records, result_token))
    lines.append("")
    return "\n".join(lines)
