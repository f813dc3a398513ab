"""Game state machine — tracks phase and result around a :class:`Position`."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessgate.core.enums import Color, GameResult, Rejection
from chessgate.core.move import Move, MoveOutcome
from chessgate.core.position import Position
from chessgate.core.types import Square
from chessgate.game.interfaces import GamePhase


@dataclass
class GameState:
    """Manages the game lifecycle: phase, result and ply count.

    Pure data and logic; locking lives in the controller.
    """

    position: Position = field(default_factory=Position, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    ply_count: int = field(default=0, init=False)

    def setup(self, position: Position | None = None) -> None:
        """Initialise (or reset) the game, optionally from a custom position."""
        self.position = position if position is not None else Position()
        self.ply_count = 0
        self.result = GameResult.IN_PROGRESS
        self.phase = GamePhase.AWAITING_MOVE
        self._check_game_over()

    def apply(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        """Attempt a move; refused outright once the game has finished."""
        if self.is_game_over:
            return MoveOutcome.rejected(Move(from_sq, to_sq), Rejection.GAME_OVER)

        outcome = self.position.attempt_move(from_sq, to_sq)
        if outcome.applied:
            self.ply_count += 1
            self._check_game_over()
        return outcome

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def fullmove_display(self) -> int:
        return (self.ply_count // 2) + 1

    def _check_game_over(self) -> None:
        result = self.position.result()
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.phase = GamePhase.GAME_OVER
