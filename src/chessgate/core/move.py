"""Move request and move outcome value objects."""

from __future__ import annotations

from dataclasses import dataclass

from chessgate.core.enums import Rejection
from chessgate.core.piece import Piece
from chessgate.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """A from/to pair, already resolved from notation."""

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}"


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of a move attempt: applied, or refused for one reason.

    ``piece`` is the mover and ``captured`` the piece taken off the board;
    both stay ``None`` when the gate that failed ran before they were known.
    """

    move: Move
    rejection: Rejection | None = None
    piece: Piece | None = None
    captured: Piece | None = None

    @property
    def applied(self) -> bool:
        return self.rejection is None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @classmethod
    def rejected(
        cls, move: Move, reason: Rejection, piece: Piece | None = None
    ) -> MoveOutcome:
        return cls(move=move, rejection=reason, piece=piece)
