"""Board - sparse square → piece placement."""

from __future__ import annotations

from collections.abc import Iterator

from pgncore.core.enums import Color, PieceType
from pgncore.core.piece import Piece
from pgncore.core.types import ALL_SQUARES, FILES, Square, make_square, parse_square

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable board keyed by square name; absent key = empty square."""

    __slots__ = ("_squares",)

    def __init__(self, squares: dict[Square, Piece] | None = None) -> None:
        self._squares: dict[Square, Piece] = dict(squares or {})

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares.get(sq)

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        parse_square(sq)
        if piece is None:
            self._squares.pop(sq, None)
        else:
            self._squares[sq] = piece

    def __contains__(self, sq: object) -> bool:
        return sq in self._squares

    def __len__(self) -> int:
        return len(self._squares)

    def is_empty(self, sq: Square) -> bool:
        return sq not in self._squares

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in file-major, ascending-rank scan order."""
        for sq in ALL_SQUARES:
            piece = self._squares.get(sq)
            if piece is not None:
                yield sq, piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*, in scan order."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in self.occupied() if piece == target]

    def as_dict(self) -> dict[Square, Piece]:
        """Shallow copy of the occupied squares."""
        return dict(self._squares)

    def placement(self) -> str:
        """FEN piece-placement field, rank 8 first."""
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = ""
            empty = 0
            for file in range(8):
                piece = self._squares.get(make_square(file, rank))
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
            if empty:
                row += str(empty)
            rows.append(row)
        return "/".join(rows)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        return Board(self._squares)

    def clear(self) -> None:
        self._squares.clear()

    def reset(self) -> None:
        """Restore the standard starting position in place."""
        self._squares = Board.initial()._squares

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.WHITE, pt)
            b[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            b[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self._squares.get(make_square(file, rank))
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append(f"  {' '.join(FILES)}")
        return "\n".join(rows)


STARTING_PLACEMENT = Board.initial().placement()
