"""Position — board plus side to move, with gated move execution."""

from __future__ import annotations

import logging

from chessgate.core.board import Board
from chessgate.core.enums import Color, GameResult, Rejection
from chessgate.core.move import Move, MoveOutcome
from chessgate.core.rules import game_result, is_game_over, is_valid_move
from chessgate.core.types import Square, is_valid_square

_LOGGER = logging.getLogger(__name__)


class Position:
    """The mutable game state: an 8x8 :class:`Board` and whose turn it is.

    :meth:`attempt_move` is the only mutator.  It runs the validation gates
    in a fixed order and either applies the whole move (capture, relocate,
    flip turn) or leaves everything untouched and reports why.

    Not thread-safe; callers sharing one position across threads must
    serialise access (see :class:`chessgate.game.GameController`).
    """

    __slots__ = ("board", "side_to_move")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move

    @property
    def white_to_move(self) -> bool:
        return self.side_to_move == Color.WHITE

    # ── Validation gates ─────────────────────────────────────────────────

    def validate_move(self, from_sq: Square, to_sq: Square) -> Rejection | None:
        """First failing gate for *from_sq* → *to_sq*, or ``None`` if legal.

        Gate order: range, source occupied, turn, friendly fire, piece rule.
        """
        if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
            return Rejection.OUT_OF_RANGE

        piece = self.board[from_sq]
        if piece is None:
            return Rejection.NO_PIECE_AT_SOURCE

        if piece.color != self.side_to_move:
            return Rejection.WRONG_TURN

        target = self.board[to_sq]
        if target is not None and target.color == piece.color:
            return Rejection.FRIENDLY_FIRE_CAPTURE

        if not is_valid_move(piece, from_sq, to_sq, self.board):
            return Rejection.ILLEGAL_GEOMETRY

        return None

    # ── Core move operation ──────────────────────────────────────────────

    def attempt_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        """Validate and, if every gate passes, apply the move."""
        move = Move(Square(*from_sq), Square(*to_sq))
        reason = self.validate_move(move.from_sq, move.to_sq)
        if reason is not None:
            piece = None
            if is_valid_square(move.from_sq):
                piece = self.board[move.from_sq]
            _LOGGER.debug("Rejected %s: %s", move, reason.name)
            return MoveOutcome.rejected(move, reason, piece)

        piece = self.board[move.from_sq]
        captured = self.board[move.to_sq]

        # The captured piece, if any, is simply overwritten.
        self.board[move.to_sq] = piece
        self.board[move.from_sq] = None
        self.side_to_move = self.side_to_move.opposite

        outcome = MoveOutcome(move=move, piece=piece, captured=captured)
        if outcome.is_capture:
            _LOGGER.debug("Applied %s capturing %s", move, captured)
        else:
            _LOGGER.debug("Applied %s", move)
        return outcome

    # ── Queries ──────────────────────────────────────────────────────────

    def is_game_over(self) -> bool:
        return is_game_over(self.board)

    def result(self) -> GameResult:
        return game_result(self.board)

    def copy(self) -> Position:
        return Position(self.board.copy(), self.side_to_move)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.board == other.board and self.side_to_move == other.side_to_move

    def __repr__(self) -> str:
        return f"Position(side_to_move={self.side_to_move}, board=\n{self.board!r})"
