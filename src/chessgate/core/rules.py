"""Piece movement rules, path clearance and the king-presence end check.

Every function here is a pure predicate over a read-only :class:`Board`.
Occupancy of the *destination* by a friendly piece is the caller's concern
(see :meth:`Position.validate_move`); only the pawn inspects its target
square, because its legal geometry depends on whether it captures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgate.core.enums import Color, GameResult, PieceType
from chessgate.core.types import Square

if TYPE_CHECKING:
    from chessgate.core.board import Board
    from chessgate.core.piece import Piece

# White pawns advance toward rank index 0, Black toward 7.
_PAWN_DIRECTION = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_HOME_RANK = {Color.WHITE: 6, Color.BLACK: 1}


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def is_path_clear(from_sq: Square, to_sq: Square, board: Board) -> bool:
    """Whether every square strictly between *from_sq* and *to_sq* is empty.

    The two squares must share a file, a rank or a diagonal.  Neither
    endpoint is inspected.
    """
    step_f = _sign(to_sq.file - from_sq.file)
    step_r = _sign(to_sq.rank - from_sq.rank)

    file, rank = from_sq.file + step_f, from_sq.rank + step_r
    while (file, rank) != (to_sq.file, to_sq.rank):
        if board[Square(file, rank)] is not None:
            return False
        file += step_f
        rank += step_r
    return True


# ── Per-variant geometry ────────────────────────────────────────────────────


def _pawn_move(color: Color, from_sq: Square, to_sq: Square, board: Board) -> bool:
    direction = _PAWN_DIRECTION[color]
    df = to_sq.file - from_sq.file
    dr = to_sq.rank - from_sq.rank
    target = board[to_sq]

    if df == 0 and dr == direction:
        return target is None

    if df == 0 and dr == 2 * direction and from_sq.rank == _PAWN_HOME_RANK[color]:
        between = Square(from_sq.file, from_sq.rank + direction)
        return target is None and board[between] is None

    if abs(df) == 1 and dr == direction:
        return target is not None and target.color != color

    return False


def _knight_move(df: int, dr: int) -> bool:
    return (abs(df), abs(dr)) in ((1, 2), (2, 1))


def _bishop_line(df: int, dr: int) -> bool:
    return df != 0 and abs(df) == abs(dr)


def _rook_line(df: int, dr: int) -> bool:
    return (df == 0) != (dr == 0)


def _king_move(df: int, dr: int) -> bool:
    return abs(df) <= 1 and abs(dr) <= 1 and (df, dr) != (0, 0)


def is_valid_move(piece: Piece, from_sq: Square, to_sq: Square, board: Board) -> bool:
    """Geometry + obstruction legality of *piece* moving *from_sq* → *to_sq*.

    Assumes *piece* stands on *from_sq*.  Turn order and friendly-fire are
    not checked here.
    """
    df = to_sq.file - from_sq.file
    dr = to_sq.rank - from_sq.rank

    match piece.piece_type:
        case PieceType.PAWN:
            return _pawn_move(piece.color, from_sq, to_sq, board)
        case PieceType.KNIGHT:
            return _knight_move(df, dr)
        case PieceType.BISHOP:
            return _bishop_line(df, dr) and is_path_clear(from_sq, to_sq, board)
        case PieceType.ROOK:
            return _rook_line(df, dr) and is_path_clear(from_sq, to_sq, board)
        case PieceType.QUEEN:
            return (_bishop_line(df, dr) or _rook_line(df, dr)) and is_path_clear(
                from_sq, to_sq, board
            )
        case PieceType.KING:
            return _king_move(df, dr)
        case _:
            raise ValueError(f"Unknown piece type: {piece.piece_type!r}")


# ── End of game ─────────────────────────────────────────────────────────────


def is_game_over(board: Board) -> bool:
    """True once either side has no king left on the board."""
    return not (
        board.has_piece(Color.WHITE, PieceType.KING)
        and board.has_piece(Color.BLACK, PieceType.KING)
    )


def game_result(board: Board) -> GameResult:
    """The side whose king survives wins."""
    white_king = board.has_piece(Color.WHITE, PieceType.KING)
    black_king = board.has_piece(Color.BLACK, PieceType.KING)
    if white_king and black_king:
        return GameResult.IN_PROGRESS
    if white_king:
        return GameResult.WHITE_WINS
    if black_king:
        return GameResult.BLACK_WINS
    return GameResult.DRAW
