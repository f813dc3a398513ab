"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from chessgate.core.enums import Color, PieceType
from chessgate.core.piece import Piece
from chessgate.core.types import BOARD_SIZE, Square, all_squares, is_valid_square

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces, indexed by :class:`Square`."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        # [rank][file] -> piece or None
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        self._check(sq)
        return self._grid[sq.rank][sq.file]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._check(sq)
        self._grid[sq.rank][sq.file] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    @staticmethod
    def _check(sq: Square) -> None:
        # Negative indexes would silently wrap around the grid.
        if not is_valid_square(sq):
            raise IndexError(f"Square off the board: {tuple(sq)!r}")

    # -- Inspection ---------------------------------------------------------

    def cells(self) -> Iterator[tuple[Square, Piece | None]]:
        """Every cell with its occupant, rank index 0 first."""
        for sq in all_squares():
            yield sq, self._grid[sq.rank][sq.file]

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        for sq, piece in self.cells():
            if piece is not None:
                yield sq, piece

    def occupied_count(self) -> int:
        return sum(1 for _ in self.occupied())

    def has_piece(self, color: Color, piece_type: PieceType) -> bool:
        """Whether *color* has at least one piece of *piece_type* (full scan)."""
        target = Piece(color, piece_type)
        return any(piece == target for _, piece in self.occupied())

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: Black on ranks 0–1, White on 6–7."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b[Square(f, 0)] = Piece(Color.BLACK, pt)
            b[Square(f, 1)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(f, 6)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(f, 7)] = Piece(Color.WHITE, pt)
        return b

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Board:
        """Build a board from eight 8-character rows, eighth rank first.

        ``.`` marks an empty cell; any other character goes through
        :meth:`Piece.from_char`.
        """
        rows = list(rows)
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
        b = cls()
        for rank, row in enumerate(rows):
            if len(row) != BOARD_SIZE:
                raise ValueError(f"Invalid row width: {row!r}")
            for file, ch in enumerate(row):
                if ch != ".":
                    b[Square(file, rank)] = Piece.from_char(ch)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank, cells in enumerate(self._grid):
            row = [str(p) if p else "." for p in cells]
            rows.append(f"{BOARD_SIZE - rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
