"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from pgncore.core.enums import Color, PieceType

# SAN piece letters; pawns have none in movetext but use "P" in FEN.
SAN_LETTERS: dict[str, PieceType] = {
    "K": PieceType.KING,
    "Q": PieceType.QUEEN,
    "R": PieceType.ROOK,
    "B": PieceType.BISHOP,
    "N": PieceType.KNIGHT,
}
_LETTER_OF: dict[PieceType, str] = {v: k for k, v in SAN_LETTERS.items()}
_LETTER_OF[PieceType.PAWN] = "P"

# White glyphs in PieceType order; black glyphs are offset by six code points.
_WHITE_GLYPHS: dict[PieceType, str] = {
    PieceType.PAWN: "♙",
    PieceType.KNIGHT: "♘",
    PieceType.BISHOP: "♗",
    PieceType.ROOK: "♖",
    PieceType.QUEEN: "♕",
    PieceType.KING: "♔",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable (side, kind) pair occupying a board square."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = _LETTER_OF[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'n' → black knight."""
        upper = char.upper()
        if len(char) != 1 or upper not in _LETTER_OF.values():
            raise ValueError(f"Invalid piece character: {char!r}")
        piece_type = SAN_LETTERS.get(upper, PieceType.PAWN)
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, piece_type)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        glyph = _WHITE_GLYPHS[self.piece_type]
        if self.color == Color.BLACK:
            return chr(ord(glyph) + 6)
        return glyph
