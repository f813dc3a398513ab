"""Text forms: move input parsing, board diagrams and rejection messages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgate.core.enums import Color, Rejection
from chessgate.core.types import BOARD_SIZE, Square, parse_square, square_name

if TYPE_CHECKING:
    from chessgate.core.move import MoveOutcome
    from chessgate.core.position import Position

_FILES_HEADER = "   a b c d e f g h"
_BORDER = "  +-----------------+"


class MoveParseError(ValueError):
    """Raised when a ``"from to"`` line cannot be turned into two squares."""


class NotationError(MoveParseError):
    """Both tokens were present but at least one is not a square label."""


def parse_move_text(text: str) -> tuple[Square, Square]:
    """Parse ``"e2 e4"`` (any case, extra tokens ignored) into two squares."""
    tokens = text.split()
    if len(tokens) < 2:
        raise MoveParseError(f"Expected 'from to', got {text!r}")
    from_name, to_name = tokens[0].lower(), tokens[1].lower()
    try:
        return parse_square(from_name), parse_square(to_name)
    except ValueError as exc:
        raise NotationError(str(exc)) from exc


def render_board(position: Position) -> str:
    """ASCII diagram of *position*, eighth rank on top, plus the side to move."""
    lines = ["", _FILES_HEADER, _BORDER]
    for rank in range(BOARD_SIZE):
        label = BOARD_SIZE - rank
        cells: list[str] = []
        for file in range(BOARD_SIZE):
            piece = position.board[Square(file, rank)]
            if piece is None:
                cells.append("." if (rank + file) % 2 == 0 else " ")
            else:
                cells.append(str(piece))
        lines.append(f"{label} |{''.join(c + ' ' for c in cells)}| {label}")
    lines.append(_BORDER)
    lines.append(_FILES_HEADER)
    lines.append("")
    lines.append(f"{_color_name(position.side_to_move)} to move")
    return "\n".join(lines)


def rejection_message(outcome: MoveOutcome, side_to_move: Color) -> str:
    """Human-readable reason for a refused move."""
    reason = outcome.rejection
    if reason is None:
        return ""
    if reason == Rejection.OUT_OF_RANGE:
        return "Invalid coordinates."
    if reason == Rejection.NO_PIECE_AT_SOURCE:
        return f"No piece at position {square_name(outcome.move.from_sq)}."
    if reason == Rejection.WRONG_TURN:
        return f"It's {_color_name(side_to_move)}'s turn."
    if reason == Rejection.FRIENDLY_FIRE_CAPTURE:
        return "Cannot capture your own piece."
    if reason == Rejection.ILLEGAL_GEOMETRY:
        return f"Invalid move for {outcome.piece}."
    return "The game is over."


def _color_name(color: Color) -> str:
    return str(color).capitalize()
