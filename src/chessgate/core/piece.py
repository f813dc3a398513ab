"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessgate.core.enums import Color, PieceType

_TYPE_ORDER = (
    PieceType.PAWN,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.ROOK,
    PieceType.QUEEN,
    PieceType.KING,
)

# Board character ↔ (Color, PieceType); uppercase is White.
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    **{ch: (Color.WHITE, pt) for ch, pt in zip("PNBRQK", _TYPE_ORDER)},
    **{ch: (Color.BLACK, pt) for ch, pt in zip("pnbrqk", _TYPE_ORDER)},
}
_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

_GLYPHS: dict[tuple[Color, PieceType], str] = {
    **{(Color.WHITE, pt): g for g, pt in zip("♙♘♗♖♕♔", _TYPE_ORDER)},
    **{(Color.BLACK, pt): g for g, pt in zip("♟♞♝♜♛♚", _TYPE_ORDER)},
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece descriptor; the board moves it, it never moves itself."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Board character (uppercase = white, lowercase = black)."""
        return _CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from a board character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess glyph, e.g. ♞."""
        return _GLYPHS[(self.color, self.piece_type)]

    @property
    def is_white(self) -> bool:
        return self.color == Color.WHITE
