"""Core enumerations for the move-legality engine."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """The six piece variants, each with its own movement rule."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class Rejection(IntEnum):
    """Why a move attempt was refused.

    The first five values mirror the validation gates of
    :meth:`~chessgate.core.position.Position.attempt_move`, in the order the
    gates run.  ``GAME_OVER`` is only produced by the game layer once a king
    has been captured.
    """

    OUT_OF_RANGE = 1
    NO_PIECE_AT_SOURCE = 2
    WRONG_TURN = 3
    FRIENDLY_FIRE_CAPTURE = 4
    ILLEGAL_GEOMETRY = 5
    GAME_OVER = 6


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3  # both kings missing; only reachable from a hand-built board
