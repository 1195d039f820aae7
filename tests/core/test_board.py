"""Tests for Board, Piece and square helpers."""

import pytest

from pgncore.core.board import STARTING_PLACEMENT, Board
from pgncore.core.enums import Color, PieceType
from pgncore.core.piece import Piece
from pgncore.core.types import ALL_SQUARES, file_of, make_square, parse_square, rank_of


class TestSquares:
    def test_scan_order_is_file_major(self) -> None:
        assert ALL_SQUARES[:3] == ("a1", "a2", "a3")
        assert ALL_SQUARES[8] == "b1"
        assert ALL_SQUARES[-1] == "h8"
        assert len(ALL_SQUARES) == 64

    def test_coordinates(self) -> None:
        assert file_of("e4") == 4
        assert rank_of("e4") == 3
        assert make_square(4, 3) == "e4"

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "e44", "E4"])
    def test_parse_square_rejects_malformed(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square"):
            parse_square(name)


class TestPiece:
    def test_fen_characters(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.PAWN)) == "p"

    def test_from_char(self) -> None:
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)
        assert Piece.from_char("P") == Piece(Color.WHITE, PieceType.PAWN)

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_symbols(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"
        assert Piece(Color.BLACK, PieceType.PAWN).symbol == "♟"


class TestBoardInitial:
    def test_kings(self) -> None:
        board = Board.initial()
        assert board["e1"] == Piece(Color.WHITE, PieceType.KING)
        assert board["e8"] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            ("a1", PieceType.ROOK), ("b1", PieceType.KNIGHT), ("c1", PieceType.BISHOP),
            ("d1", PieceType.QUEEN), ("e1", PieceType.KING), ("f1", PieceType.BISHOP),
            ("g1", PieceType.KNIGHT), ("h1", PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_pawns(self) -> None:
        board = Board.initial()
        white = board.pieces(Color.WHITE, PieceType.PAWN)
        black = board.pieces(Color.BLACK, PieceType.PAWN)
        assert white == [f + "2" for f in "abcdefgh"]
        assert black == [f + "7" for f in "abcdefgh"]

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for rank in "3456":
            for file in "abcdefgh":
                assert board[file + rank] is None
        assert len(board) == 32

    def test_placement(self) -> None:
        assert Board.initial().placement() == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
        assert STARTING_PLACEMENT == Board.initial().placement()


class TestBoardMutation:
    def test_set_and_clear(self) -> None:
        board = Board()
        board["d4"] = Piece(Color.WHITE, PieceType.QUEEN)
        assert not board.is_empty("d4")
        board["d4"] = None
        assert board.is_empty("d4")
        assert len(board) == 0

    def test_set_invalid_square_raises(self) -> None:
        board = Board()
        with pytest.raises(ValueError):
            board["z9"] = Piece(Color.WHITE, PieceType.QUEEN)

    def test_copy_is_independent(self) -> None:
        board = Board.initial()
        clone = board.copy()
        clone["e2"] = None
        assert board["e2"] is not None
        assert board != clone

    def test_reset_restores_start(self) -> None:
        board = Board()
        board["a1"] = Piece(Color.BLACK, PieceType.KING)
        board.reset()
        assert board == Board.initial()

    def test_occupied_scan_order(self) -> None:
        board = Board()
        board["h1"] = Piece(Color.WHITE, PieceType.ROOK)
        board["a8"] = Piece(Color.WHITE, PieceType.ROOK)
        board["a1"] = Piece(Color.WHITE, PieceType.ROOK)
        assert [sq for sq, _ in board.occupied()] == ["a1", "a8", "h1"]

    def test_repr_diagram(self) -> None:
        lines = repr(Board.initial()).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[-1] == "  a b c d e f g h"
