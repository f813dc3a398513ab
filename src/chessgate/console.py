"""Text console front end: read ``from to`` lines, print the board."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO

from chessgate.core.notation import (
    MoveParseError,
    NotationError,
    parse_move_text,
    rejection_message,
    render_board,
)
from chessgate.game.controller import GameController

_LOGGER = logging.getLogger(__name__)

BANNER = (
    "========== Chessgate ==========\n"
    "Enter moves in algebraic notation (e.g., e2 e4)\n"
    "Enter 'quit' to exit"
)
PROMPT = "Enter move: "
QUIT_COMMAND = "quit"

MSG_BAD_FORMAT = "Invalid input format. Use 'from to' (e.g., e2 e4)."
MSG_BAD_NOTATION = "Invalid notation. Please use algebraic notation (e.g., e2 to e4)."
MSG_MOVE_FAILED = "Move failed. Try again."
MSG_GAME_OVER = "Game over!"
MSG_GOODBYE = "Thanks for playing!"


def run_console(
    controller: GameController | None = None,
    *,
    read_line: Callable[[str], str] | None = None,
    out: TextIO | None = None,
) -> int:
    """Play one game on a text terminal.

    *read_line* receives the prompt and returns one line of input; it
    defaults to :func:`input`.  End of input behaves like ``quit``.
    Returns a process exit code.
    """
    ctrl = controller if controller is not None else GameController()
    stream = out if out is not None else sys.stdout
    if read_line is None:
        read_line = _stdin_reader(stream)

    def say(text: str) -> None:
        print(text, file=stream)

    say(BANNER)

    while not ctrl.is_game_over():
        say(render_board(ctrl.position))
        try:
            line = read_line(PROMPT)
        except EOFError:
            break

        if line.strip() == QUIT_COMMAND:
            break

        try:
            from_sq, to_sq = parse_move_text(line)
        except NotationError:
            say(MSG_BAD_NOTATION)
            say(MSG_MOVE_FAILED)
            continue
        except MoveParseError:
            say(MSG_BAD_FORMAT)
            continue

        side = ctrl.position.side_to_move
        outcome = ctrl.submit_move(from_sq, to_sq)
        if not outcome.applied:
            say(rejection_message(outcome, side))
            say(MSG_MOVE_FAILED)

    if ctrl.is_game_over():
        say(render_board(ctrl.position))
        say(MSG_GAME_OVER)
        _LOGGER.info("Console game finished: %s", ctrl.state.result.name)

    say(MSG_GOODBYE)
    return 0


def _stdin_reader(stream: TextIO) -> Callable[[str], str]:
    def read(prompt: str) -> str:
        stream.write(prompt)
        stream.flush()
        line = sys.stdin.readline()
        if not line:
            raise EOFError
        return line

    return read
