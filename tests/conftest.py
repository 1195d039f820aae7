"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys

import pytest

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


TWO_GAMES_PGN = """\
[Event "Casual Game"]
[Site "Berlin"]
[Date "2024.05.16"]
[Round "1"]
[White "Carlsen, Magnus"]
[Black "Nepomniachtchi, Ian"]
[Result "1-0"]

1. e4 c5 2. Nf3 a6 3. d3 g6 4. g3 Bg7 5. Bg2 b5
6. O-O Bb7 1-0

[Event "Club Match"]
[Site "Paris"]
[Date "2024.06.01"]
[Round "2"]
[White "Alice"]
[Black "Bob"]
[Result "1/2-1/2"]

1. d4 d5 2. c4 e6 3. Nc3 Nf6 1/2-1/2
"""

SHORT_PGN = '[White "A"]\n[Black "B"]\n[Result "*"]\n\n1. e4 e5 2. Nf3 Nc6 *'


@pytest.fixture
def two_games_pgn() -> str:
    return TWO_GAMES_PGN


@pytest.fixture
def short_pgn() -> str:
    return SHORT_PGN
