"""SAN token resolution against a live board.

This is not a legal-move generator.  A token is mapped to a
source square by geometry alone: every piece of the right side and kind
that could reach the destination on an empty board is a candidate, SAN
disambiguation characters narrow the list, and remaining ties go to the
candidate nearest the destination.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pgncore.core.board import Board
from pgncore.core.enums import Color, PieceType
from pgncore.core.errors import UnresolvedMoveError
from pgncore.core.piece import SAN_LETTERS, Piece
from pgncore.core.types import (
    FILES,
    RANKS,
    Square,
    file_of,
    is_valid_square,
    rank_of,
    square_distance,
)

_LOGGER = logging.getLogger(__name__)

_KINGSIDE = ("O-O", "0-0")
_QUEENSIDE = ("O-O-O", "0-0-0")

# (king from, king to, rook from, rook to) per side and wing
_CASTLING_SQUARES: dict[tuple[Color, bool], tuple[Square, Square, Square, Square]] = {
    (Color.WHITE, True): ("e1", "g1", "h1", "f1"),
    (Color.WHITE, False): ("e1", "c1", "a1", "d1"),
    (Color.BLACK, True): ("e8", "g8", "h8", "f8"),
    (Color.BLACK, False): ("e8", "c8", "a8", "d8"),
}


@dataclass(frozen=True, slots=True)
class ResolvedMove:
    """What :func:`resolve_move` did to the board."""

    token: str
    color: Color
    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    promotion: PieceType | None = None
    castle_rook: tuple[Square, Square] | None = None

    @property
    def highlight(self) -> tuple[Square, Square]:
        return self.from_sq, self.to_sq


def strip_annotations(token: str) -> str:
    """Remove trailing check, mate and evaluation glyphs (``+ # ! ?``)."""
    return token.rstrip("+#!?")


def can_reach(piece_type: PieceType, from_sq: Square, to_sq: Square) -> bool:
    """Whether *piece_type* could move *from_sq* → *to_sq* on an empty board.

    Pawns are always plausible: direction, double steps and en passant are
    not modelled.
    """
    df, dr = square_distance(from_sq, to_sq)
    if piece_type == PieceType.KING:
        return df <= 1 and dr <= 1
    if piece_type == PieceType.QUEEN:
        return df == 0 or dr == 0 or df == dr
    if piece_type == PieceType.ROOK:
        return df == 0 or dr == 0
    if piece_type == PieceType.BISHOP:
        return df == dr
    if piece_type == PieceType.KNIGHT:
        return (df, dr) in ((1, 2), (2, 1))
    return True


def _split_promotion(clean: str) -> tuple[str, PieceType | None]:
    if "=" in clean:
        idx = clean.index("=")
        return clean[:idx], SAN_LETTERS.get(clean[idx + 1 : idx + 2])
    # Bare suffix form, e.g. "e8Q".
    if len(clean) >= 3 and clean[-1] in SAN_LETTERS and clean[-2] in "18":
        return clean[:-1], SAN_LETTERS[clean[-1]]
    return clean, None


def _parse_hints(body: str) -> tuple[int | None, int | None]:
    from_file: int | None = None
    from_rank: int | None = None
    for ch in body:
        if ch in FILES:
            from_file = FILES.index(ch)
        elif ch in RANKS:
            from_rank = RANKS.index(ch)
    return from_file, from_rank


def find_candidates(
    board: Board,
    color: Color,
    piece_type: PieceType,
    to_sq: Square,
) -> list[Square]:
    """Squares, in scan order, whose occupant could plausibly move to *to_sq*."""
    mover = Piece(color, piece_type)
    return [
        sq
        for sq, piece in board.occupied()
        if sq != to_sq and piece == mover and can_reach(piece_type, sq, to_sq)
    ]


def closest_square(candidates: list[Square], to_sq: Square) -> Square:
    """Candidate with the smallest file + rank distance; first wins ties."""
    return min(candidates, key=lambda sq: sum(square_distance(sq, to_sq)))


def _castle(board: Board, token: str, color: Color, kingside: bool) -> ResolvedMove:
    king_from, king_to, rook_from, rook_to = _CASTLING_SQUARES[(color, kingside)]
    king = board[king_from]
    if king is None or king != Piece(color, PieceType.KING):
        raise UnresolvedMoveError(token, color, f"no king on {king_from}")

    board[king_from] = None
    board[king_to] = king
    rook = board[rook_from]
    if rook is not None:
        board[rook_from] = None
        board[rook_to] = rook
    return ResolvedMove(
        token=token,
        color=color,
        from_sq=king_from,
        to_sq=king_to,
        piece=king,
        castle_rook=(rook_from, rook_to),
    )


def resolve_move(
    board: Board,
    token: str,
    color: Color,
    *,
    use_disambiguation: bool = True,
) -> ResolvedMove:
    """Apply SAN *token* for *color* to *board* and describe the result.

    Raises :class:`UnresolvedMoveError` (leaving *board* untouched) when the
    token has no destination square or no piece can plausibly make it.
    Legality is never checked.
    """
    clean = strip_annotations(token.strip())

    if clean in _QUEENSIDE:
        return _castle(board, token, color, kingside=False)
    if clean in _KINGSIDE:
        return _castle(board, token, color, kingside=True)

    is_capture = "x" in clean
    clean = clean.replace("x", "").replace(":", "")
    clean, promotion = _split_promotion(clean)

    to_sq = clean[-2:]
    if not is_valid_square(to_sq):
        raise UnresolvedMoveError(token, color, "no destination square")
    body = clean[:-2]

    if body and body[0] in SAN_LETTERS:
        piece_type = SAN_LETTERS[body[0]]
        body = body[1:]
    else:
        piece_type = PieceType.PAWN

    candidates = find_candidates(board, color, piece_type, to_sq)
    if not candidates:
        raise UnresolvedMoveError(token, color)

    if use_disambiguation and len(candidates) > 1:
        from_file, from_rank = _parse_hints(body)
        if piece_type == PieceType.PAWN and not is_capture and from_file is None:
            from_file = file_of(to_sq)
        narrowed = [
            sq
            for sq in candidates
            if (from_file is None or file_of(sq) == from_file)
            and (from_rank is None or rank_of(sq) == from_rank)
        ]
        if narrowed:
            candidates = narrowed
        else:
            _LOGGER.debug("Disambiguation in %r matched nothing; using proximity", token)

    from_sq = candidates[0] if len(candidates) == 1 else closest_square(candidates, to_sq)

    piece = board[from_sq]
    assert piece is not None
    captured = board[to_sq]
    arriving = piece if promotion is None else Piece(color, promotion)

    board[from_sq] = None
    board[to_sq] = arriving

    return ResolvedMove(
        token=token,
        color=color,
        from_sq=from_sq,
        to_sq=to_sq,
        piece=piece,
        captured=captured,
        promotion=promotion,
    )
