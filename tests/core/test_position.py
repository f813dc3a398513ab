"""Tests for Position: gated move execution and turn handling."""

import pytest

from chessgate.core.board import Board
from chessgate.core.enums import Color, GameResult, PieceType, Rejection
from chessgate.core.piece import Piece
from chessgate.core.position import Position
from chessgate.core.types import (
    A1,
    A2,
    A5,
    B8,
    C6,
    D5,
    D7,
    E1,
    E2,
    E4,
    E5,
    E7,
    E8,
    F3,
    F6,
    G1,
    G8,
    Square,
    parse_square,
)


def _play(pos: Position, *moves: str) -> None:
    for text in moves:
        from_sq, to_sq = parse_square(text[:2]), parse_square(text[2:])
        outcome = pos.attempt_move(from_sq, to_sq)
        assert outcome.applied, f"{text} refused: {outcome.rejection}"


class TestScenarios:
    def test_pawn_double_step_opening(self) -> None:
        pos = Position()
        outcome = pos.attempt_move(E2, E4)
        assert outcome.applied
        assert outcome.piece == Piece(Color.WHITE, PieceType.PAWN)
        assert outcome.captured is None
        assert pos.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert pos.board[E2] is None
        assert not pos.white_to_move

    def test_pawn_three_squares_rejected(self) -> None:
        pos = Position()
        outcome = pos.attempt_move(E2, E5)
        assert outcome.rejection == Rejection.ILLEGAL_GEOMETRY
        assert pos.white_to_move

    def test_pawn_diagonal_capture(self) -> None:
        pos = Position()
        _play(pos, "e2e4", "d7d5")
        before = pos.board.occupied_count()
        outcome = pos.attempt_move(E4, D5)
        assert outcome.applied
        assert outcome.captured == Piece(Color.BLACK, PieceType.PAWN)
        assert pos.board[D5] == Piece(Color.WHITE, PieceType.PAWN)
        assert pos.board[E4] is None
        assert pos.board.occupied_count() == before - 1

    def test_rook_blocked_by_own_pawn(self) -> None:
        pos = Position()
        outcome = pos.attempt_move(A1, A5)
        assert outcome.rejection == Rejection.ILLEGAL_GEOMETRY
        assert pos.board[A2] == Piece(Color.WHITE, PieceType.PAWN)

    def test_king_capture_ends_game(self, kings_and_rook: Position) -> None:
        pos = kings_and_rook
        assert not pos.is_game_over()
        outcome = pos.attempt_move(E1, E8)
        assert outcome.captured == Piece(Color.BLACK, PieceType.KING)
        assert outcome.is_capture
        assert pos.is_game_over()

    def test_black_capturing_white_king_ends_game(self) -> None:
        board = Board.from_rows(
            [
                "k...r...",
                "........",
                "........",
                "........",
                "........",
                "........",
                "........",
                "....K...",
            ]
        )
        pos = Position(board, Color.BLACK)
        assert pos.result() == GameResult.IN_PROGRESS

        outcome = pos.attempt_move(E8, E1)

        assert outcome.applied
        assert outcome.captured == Piece(Color.WHITE, PieceType.KING)
        assert pos.is_game_over()
        assert pos.result() == GameResult.BLACK_WINS

    def test_quiet_move_is_not_a_capture(self) -> None:
        pos = Position()
        assert not pos.attempt_move(E2, E4).is_capture


class TestGateOrder:
    def test_out_of_range(self) -> None:
        pos = Position()
        assert pos.attempt_move(Square(4, 8), E4).rejection == Rejection.OUT_OF_RANGE
        assert pos.attempt_move(E2, Square(-1, 0)).rejection == Rejection.OUT_OF_RANGE

    def test_out_of_range_checked_before_source(self) -> None:
        pos = Position()
        outcome = pos.attempt_move(Square(8, 8), Square(9, 9))
        assert outcome.rejection == Rejection.OUT_OF_RANGE
        assert outcome.piece is None

    def test_no_piece_at_source(self) -> None:
        pos = Position()
        outcome = pos.attempt_move(E4, E5)
        assert outcome.rejection == Rejection.NO_PIECE_AT_SOURCE

    def test_wrong_turn_before_geometry(self) -> None:
        pos = Position()
        # Black pawn three squares: both wrong turn and bad geometry
        outcome = pos.attempt_move(E7, parse_square("e4"))
        assert outcome.rejection == Rejection.WRONG_TURN
        assert outcome.piece == Piece(Color.BLACK, PieceType.PAWN)

    def test_friendly_fire(self) -> None:
        pos = Position()
        assert pos.attempt_move(A1, A2).rejection == Rejection.FRIENDLY_FIRE_CAPTURE

    def test_friendly_fire_before_geometry(self) -> None:
        pos = Position()
        # Rook onto own knight: not a rook line and a friendly capture
        outcome = pos.attempt_move(A1, parse_square("b1"))
        assert outcome.rejection == Rejection.FRIENDLY_FIRE_CAPTURE

    def test_validate_move_does_not_mutate(self) -> None:
        pos = Position()
        assert pos.validate_move(E2, E4) is None
        assert pos == Position()


class TestStateInvariants:
    @pytest.mark.parametrize(
        "from_sq,to_sq",
        [
            (Square(9, 0), E4),
            (E4, E5),
            (E7, E5),
            (A1, A2),
            (E2, E5),
            (A1, A5),
            (G1, parse_square("g3")),
        ],
    )
    def test_rejection_leaves_state_unchanged(
        self, from_sq: Square, to_sq: Square
    ) -> None:
        pos = Position()
        snapshot = pos.copy()
        outcome = pos.attempt_move(from_sq, to_sq)
        assert not outcome.applied
        assert pos == snapshot

    @pytest.mark.parametrize("n", range(9))
    def test_turn_alternation(self, n: int) -> None:
        shuffle = ["g1f3", "g8f6", "f3g1", "f6g8"]
        pos = Position()
        _play(pos, *[shuffle[i % 4] for i in range(n)])
        assert pos.white_to_move == (n % 2 == 0)

    def test_quiet_move_keeps_piece_count(self) -> None:
        pos = Position()
        _play(pos, "g1f3")
        assert pos.board.occupied_count() == 32
        assert pos.board[F3] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert pos.board[G1] is None

    def test_capture_removes_exactly_one_piece(self) -> None:
        pos = Position()
        _play(pos, "b1c3", "d7d5", "c3d5")
        assert pos.board.occupied_count() == 31
        assert pos.board[D5] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert pos.board[D7] is None

    def test_no_check_detection(self) -> None:
        # Moving into an attacked square is allowed; only king capture ends play
        board = Board.from_rows(
            [
                "....k...",
                "........",
                "........",
                "........",
                "........",
                "........",
                "...r....",
                "....K...",
            ]
        )
        pos = Position(board, Color.WHITE)
        assert pos.attempt_move(E1, parse_square("d1")).applied

    def test_black_moves_after_white(self) -> None:
        pos = Position()
        _play(pos, "e2e4")
        assert pos.attempt_move(B8, C6).applied
        assert pos.white_to_move

    def test_knight_shuffle_positions(self) -> None:
        pos = Position()
        _play(pos, "g1f3", "g8f6")
        assert pos.board[F6] == Piece(Color.BLACK, PieceType.KNIGHT)
        assert pos.board[G8] is None


class TestQueries:
    def test_result_tracks_king_presence(self, kings_and_rook: Position) -> None:
        assert kings_and_rook.result() == GameResult.IN_PROGRESS
        kings_and_rook.attempt_move(E1, E8)
        assert kings_and_rook.result() == GameResult.WHITE_WINS

    def test_copy_is_independent(self) -> None:
        pos = Position()
        clone = pos.copy()
        _play(clone, "e2e4")
        assert pos != clone
        assert pos.board[E2] is not None

    def test_repr_mentions_side(self) -> None:
        assert "white" in repr(Position())
