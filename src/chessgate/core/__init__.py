"""Core domain layer — move legality for an 8x8 board, no external dependencies.

Quick start::

    from chessgate.core import Position, parse_square

    pos = Position()
    outcome = pos.attempt_move(parse_square("e2"), parse_square("e4"))
    assert outcome.applied and not pos.white_to_move
"""

from chessgate.core.board import Board
from chessgate.core.enums import Color, GameResult, PieceType, Rejection
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
from chessgate.core.rules import game_result, is_game_over, is_path_clear, is_valid_move
from chessgate.core.types import (
    Square,
    all_squares,
    is_valid_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    "Rejection",
    # Types / helpers
    "Square",
    "all_squares",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveOutcome",
    "Piece",
    "Position",
    # Rules
    "game_result",
    "is_game_over",
    "is_path_clear",
    "is_valid_move",
    # Text
    "MoveParseError",
    "NotationError",
    "parse_move_text",
    "rejection_message",
    "render_board",
]
