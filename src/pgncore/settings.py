"""Replay engine settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ReplaySettings:
    """All user-configurable replay options."""

    # Notation
    use_san_disambiguation: bool = True

    # File I/O
    encoding: str = "utf-8"

    # Move context handed to collaborators (None = whole history)
    context_moves: int | None = None

    # Serialization
    default_result: str = "*"
