"""Square type alias and coordinate helpers.

Squares are two-character names, file ``a``-``h`` followed by rank
``1``-``8``.  Integer indexes are used only internally for distance math:
file and rank are both 0-based.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = str  # "a1" .. "h8"

FILES = "abcdefgh"
RANKS = "12345678"


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return ord(sq[0]) - ord("a")


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return int(sq[1]) - 1


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    return FILES[file] + RANKS[rank]


def is_valid_square(name: str) -> bool:
    """Check whether *name* is a well-formed square name."""
    return len(name) == 2 and name[0] in FILES and name[1] in RANKS


def parse_square(name: str) -> Square:
    """Validate a square name, e.g. 'e4' → 'e4'."""
    if not is_valid_square(name):
        raise ValueError(f"Invalid square name: {name!r}")
    return name


def square_distance(a: Square, b: Square) -> tuple[int, int]:
    """Absolute (file, rank) deltas between two squares."""
    return abs(file_of(a) - file_of(b)), abs(rank_of(a) - rank_of(b))


# File-major, ascending-rank scan order: a1, a2, ..., a8, b1, ..., h8.
ALL_SQUARES: tuple[Square, ...] = tuple(f + r for f in FILES for r in RANKS)
