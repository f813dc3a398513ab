"""Square type and algebraic-notation helpers.

Board layout (row-major, Black at the top)::

    rank index 0  ->  a8 b8 ... h8
    rank index 1  ->  a7 b7 ... h7
    ...
    rank index 7  ->  a1 b1 ... h1

``Square.file`` is 0–7 for a–h and ``Square.rank`` is the grid row, so
White's pawns start on rank index 6 and move toward rank index 0.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

BOARD_SIZE = 8


class Square(NamedTuple):
    """A ``(file, rank)`` coordinate pair; may lie outside the board."""

    file: int
    rank: int

    def __str__(self) -> str:
        if is_valid_square(self):
            return square_name(self)
        return f"({self.file}, {self.rank})"


def is_valid_square(sq: Square) -> bool:
    """Both components within ``[0, 7]``."""
    return 0 <= sq.file < BOARD_SIZE and 0 <= sq.rank < BOARD_SIZE


def all_squares() -> Iterator[Square]:
    """All 64 squares, rank index 0 first, files a–h within each row."""
    for rank in range(BOARD_SIZE):
        for file in range(BOARD_SIZE):
            yield Square(file, rank)


def square_name(sq: Square) -> str:
    """Algebraic label, e.g. ``Square(4, 6)`` → ``'e2'``."""
    if not is_valid_square(sq):
        raise ValueError(f"Square off the board: {tuple(sq)!r}")
    return chr(ord("a") + sq.file) + str(BOARD_SIZE - sq.rank)


def parse_square(name: str) -> Square:
    """Parse an algebraic label, e.g. ``'e2'`` → ``Square(4, 6)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(ord(name[0]) - ord("a"), BOARD_SIZE - int(name[1]))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Square(f, 0) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(f, 1) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(f, 2) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(f, 3) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(f, 4) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(f, 5) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(f, 6) for f in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Square(f, 7) for f in range(8))
