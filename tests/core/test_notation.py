"""Tests for move text parsing, board diagrams and rejection messages."""

import pytest

from chessgate.core.enums import Color, PieceType, Rejection
from chessgate.core.move import Move, MoveOutcome
from chessgate.core.notation import (
    MoveParseError,
    NotationError,
    parse_move_text,
    rejection_message,
    render_board,
)
from chessgate.core.piece import Piece
from chessgate.core.position import Position
from chessgate.core.types import E2, E3, E4, Square


class TestParseMoveText:
    def test_simple(self) -> None:
        assert parse_move_text("e2 e4") == (E2, E4)

    def test_case_and_whitespace_insensitive(self) -> None:
        assert parse_move_text("  E2\tE4 \n") == (E2, E4)

    def test_extra_tokens_ignored(self) -> None:
        assert parse_move_text("e2 e4 please") == (E2, E4)

    @pytest.mark.parametrize("text", ["", "e2", "   "])
    def test_too_few_tokens(self, text: str) -> None:
        with pytest.raises(MoveParseError) as info:
            parse_move_text(text)
        assert not isinstance(info.value, NotationError)

    @pytest.mark.parametrize("text", ["e2 e9", "z1 e4", "e2e4 e5"])
    def test_unknown_labels(self, text: str) -> None:
        with pytest.raises(NotationError, match="Invalid square name"):
            parse_move_text(text)

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            parse_move_text("nonsense")


class TestRenderBoard:
    def test_initial_diagram(self) -> None:
        lines = render_board(Position()).splitlines()
        assert lines[1] == "   a b c d e f g h"
        assert lines[2] == "  +-----------------+"
        assert lines[3] == "8 |r n b q k b n r | 8"
        assert lines[4] == "7 |p p p p p p p p | 7"
        assert lines[5] == "6 |.   .   .   .   | 6"
        assert lines[6] == "5 |  .   .   .   . | 5"
        assert lines[10] == "1 |R N B Q K B N R | 1"
        assert lines[-1] == "White to move"

    def test_side_to_move_line(self) -> None:
        pos = Position()
        pos.attempt_move(E2, E4)
        assert render_board(pos).splitlines()[-1] == "Black to move"


class TestRejectionMessage:
    def _outcome(self, reason: Rejection, piece: Piece | None = None) -> MoveOutcome:
        return MoveOutcome.rejected(Move(E3, E4), reason, piece)

    def test_messages(self) -> None:
        pawn = Piece(Color.WHITE, PieceType.PAWN)
        cases = {
            Rejection.OUT_OF_RANGE: "Invalid coordinates.",
            Rejection.NO_PIECE_AT_SOURCE: "No piece at position e3.",
            Rejection.WRONG_TURN: "It's White's turn.",
            Rejection.FRIENDLY_FIRE_CAPTURE: "Cannot capture your own piece.",
            Rejection.ILLEGAL_GEOMETRY: "Invalid move for P.",
            Rejection.GAME_OVER: "The game is over.",
        }
        for reason, text in cases.items():
            assert rejection_message(self._outcome(reason, pawn), Color.WHITE) == text

    def test_out_of_range_with_off_board_source(self) -> None:
        outcome = MoveOutcome.rejected(
            Move(Square(8, 0), E4), Rejection.OUT_OF_RANGE
        )
        assert rejection_message(outcome, Color.BLACK) == "Invalid coordinates."

    def test_applied_move_has_no_message(self) -> None:
        assert rejection_message(MoveOutcome(Move(E2, E4)), Color.WHITE) == ""
