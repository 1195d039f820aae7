"""Tests for SAN token resolution against a board."""

import pytest

from pgncore.core.board import Board
from pgncore.core.enums import Color, PieceType
from pgncore.core.errors import UnresolvedMoveError
from pgncore.core.notation.san import can_reach, find_candidates, resolve_move
from pgncore.core.piece import Piece

WK = Piece(Color.WHITE, PieceType.KING)
WR = Piece(Color.WHITE, PieceType.ROOK)
WN = Piece(Color.WHITE, PieceType.KNIGHT)
WP = Piece(Color.WHITE, PieceType.PAWN)
BP = Piece(Color.BLACK, PieceType.PAWN)
BN = Piece(Color.BLACK, PieceType.KNIGHT)


def _board(**placement: Piece) -> Board:
    board = Board()
    for sq, piece in placement.items():
        board[sq] = piece
    return board


class TestGeometry:
    @pytest.mark.parametrize(
        ("piece_type", "from_sq", "to_sq", "expected"),
        [
            (PieceType.KING, "e1", "f2", True),
            (PieceType.KING, "e1", "e3", False),
            (PieceType.QUEEN, "d1", "h5", True),
            (PieceType.QUEEN, "d1", "e3", False),
            (PieceType.ROOK, "a1", "a8", True),
            (PieceType.ROOK, "a1", "b2", False),
            (PieceType.BISHOP, "c1", "h6", True),
            (PieceType.BISHOP, "c1", "c4", False),
            (PieceType.KNIGHT, "g1", "f3", True),
            (PieceType.KNIGHT, "g1", "e2", True),
            (PieceType.KNIGHT, "g1", "g3", False),
            (PieceType.PAWN, "a2", "h7", True),
        ],
    )
    def test_can_reach(
        self, piece_type: PieceType, from_sq: str, to_sq: str, expected: bool
    ) -> None:
        assert can_reach(piece_type, from_sq, to_sq) is expected

    def test_candidates_in_scan_order(self) -> None:
        board = _board(h1=WR, a1=WR, a8=WR)
        assert find_candidates(board, Color.WHITE, PieceType.ROOK, "a4") == ["a1", "a8"]


class TestResolveBasics:
    def test_pawn_push(self) -> None:
        board = Board.initial()
        resolved = resolve_move(board, "e4", Color.WHITE)
        assert board["e2"] is None
        assert board["e4"] == WP
        assert resolved.highlight == ("e2", "e4")

    def test_black_pawn_push(self) -> None:
        board = Board.initial()
        resolve_move(board, "e5", Color.BLACK)
        assert board["e7"] is None
        assert board["e5"] == BP

    def test_knight(self) -> None:
        board = Board.initial()
        resolve_move(board, "Nf3", Color.WHITE)
        assert board["g1"] is None
        assert board["f3"] == WN

    def test_check_and_annotation_suffixes(self) -> None:
        board = Board.initial()
        resolve_move(board, "Nc3+!?", Color.WHITE)
        assert board["c3"] == WN
        assert board["b1"] is None

    def test_capture_removes_occupant(self) -> None:
        board = _board(e4=WP, d5=BP, e1=WK)
        resolved = resolve_move(board, "exd5", Color.WHITE)
        assert board["d5"] == WP
        assert board["e4"] is None
        assert resolved.captured == BP
        assert len(board) == 2

    def test_piece_capture_with_mate_suffix(self) -> None:
        board = _board(g1=WN, f3=BN)
        resolve_move(board, "Nxf3#", Color.WHITE)
        assert board["f3"] == WN

    def test_promotion(self) -> None:
        board = _board(g7=WP)
        resolved = resolve_move(board, "g8=Q+", Color.WHITE)
        assert board["g8"] == Piece(Color.WHITE, PieceType.QUEEN)
        assert board["g7"] is None
        assert resolved.promotion == PieceType.QUEEN


class TestCastling:
    def test_white_kingside(self) -> None:
        board = Board.initial()
        board["f1"] = None
        board["g1"] = None
        resolved = resolve_move(board, "O-O", Color.WHITE)
        assert board["g1"] == WK
        assert board["f1"] == WR
        assert board["e1"] is None
        assert board["h1"] is None
        assert resolved.castle_rook == ("h1", "f1")

    def test_white_queenside_zero_notation(self) -> None:
        board = _board(e1=WK, a1=WR)
        resolve_move(board, "0-0-0", Color.WHITE)
        assert board["c1"] == WK
        assert board["d1"] == WR

    def test_black_kingside_with_check(self) -> None:
        board = Board.initial()
        resolve_move(board, "O-O+", Color.BLACK)
        assert board["g8"] == Piece(Color.BLACK, PieceType.KING)
        assert board["f8"] == Piece(Color.BLACK, PieceType.ROOK)

    def test_black_queenside(self) -> None:
        board = Board.initial()
        resolve_move(board, "O-O-O", Color.BLACK)
        assert board["c8"] == Piece(Color.BLACK, PieceType.KING)
        assert board["d8"] == Piece(Color.BLACK, PieceType.ROOK)

    def test_castling_without_king_is_unresolved(self) -> None:
        board = _board(h1=WR)
        with pytest.raises(UnresolvedMoveError):
            resolve_move(board, "O-O", Color.WHITE)
        assert board == _board(h1=WR)


class TestDisambiguation:
    def test_file_hint(self) -> None:
        board = _board(c1=WN, g1=WN, a1=WK)
        resolve_move(board, "Nce2", Color.WHITE)
        assert board["e2"] == WN
        assert board["c1"] is None
        assert board["g1"] == WN

    def test_file_hint_overrides_proximity(self) -> None:
        board = _board(c1=WN, g1=WN)
        resolve_move(board, "Nge2", Color.WHITE)
        assert board["c1"] == WN
        assert board["g1"] is None

    def test_rank_hint(self) -> None:
        board = _board(e1=WR, e7=WR)
        resolve_move(board, "R7e4", Color.WHITE)
        assert board["e7"] is None
        assert board["e1"] == WR

    def test_full_square_hint(self) -> None:
        board = _board(a1=WR, a3=WR, c1=WR)
        resolve_move(board, "Ra3a2", Color.WHITE)
        assert board["a2"] == WR
        assert board["a3"] is None
        assert board["a1"] == WR

    def test_pawn_push_uses_destination_file(self) -> None:
        board = _board(d2=WP, e4=WP)
        resolve_move(board, "d4", Color.WHITE)
        assert board["d2"] is None
        assert board["e4"] == WP
        assert board["d4"] == WP

    def test_pawn_capture_uses_source_file(self) -> None:
        board = _board(c4=WP, e4=WP, d5=BP)
        resolve_move(board, "cxd5", Color.WHITE)
        assert board["c4"] is None
        assert board["e4"] == WP


class TestProximityHeuristic:
    """The geometric fallback used when SAN hints are ignored.

    These tests pin down where the heuristic disagrees with real SAN so the
    approximation is visible rather than assumed correct.
    """

    def test_closest_candidate_wins(self) -> None:
        board = _board(a1=WR, h1=WR)
        resolve_move(board, "Rd1", Color.WHITE, use_disambiguation=False)
        assert board["a1"] is None
        assert board["h1"] == WR

    def test_tie_goes_to_first_in_scan_order(self) -> None:
        board = _board(a1=WR, h8=WR)
        resolve_move(board, "Ra8", Color.WHITE, use_disambiguation=False)
        assert board["a1"] is None
        assert board["h8"] == WR

    def test_ignoring_hints_can_pick_the_wrong_piece(self) -> None:
        board = _board(c1=WN, g1=WN)
        resolve_move(board, "Nge2", Color.WHITE, use_disambiguation=False)
        # Both knights are three steps from e2; c1 comes first in scan order.
        assert board["c1"] is None
        assert board["g1"] == WN

    def test_pawn_push_can_move_the_wrong_pawn(self) -> None:
        board = _board(d2=WP, e4=WP)
        resolve_move(board, "d4", Color.WHITE, use_disambiguation=False)
        assert board["e4"] is None
        assert board["d2"] == WP


class TestUnresolved:
    def test_no_candidate_raises_and_leaves_board(self) -> None:
        board = Board.initial()
        with pytest.raises(UnresolvedMoveError, match="Ke5") as info:
            resolve_move(board, "Ke5", Color.WHITE)
        assert info.value.token == "Ke5"
        assert info.value.color == Color.WHITE
        assert board == Board.initial()

    def test_capture_without_candidate_keeps_target(self) -> None:
        board = _board(d5=BP)
        with pytest.raises(UnresolvedMoveError):
            resolve_move(board, "Nxd5", Color.WHITE)
        assert board["d5"] == BP

    @pytest.mark.parametrize("token", ["", "x", "Q", "Nz9"])
    def test_garbage_tokens(self, token: str) -> None:
        board = Board.initial()
        with pytest.raises(UnresolvedMoveError):
            resolve_move(board, token, Color.WHITE)
        assert board == Board.initial()

    def test_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            resolve_move(Board(), "e4", Color.WHITE)
