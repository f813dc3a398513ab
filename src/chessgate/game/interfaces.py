"""Abstract interfaces for the game layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessgate.core.move import MoveOutcome
    from chessgate.core.position import Position
    from chessgate.core.types import Square


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class IGameController(ABC):
    """Interface for the game orchestrator used by the front ends."""

    @abstractmethod
    def new_game(self, position: Position | None = None) -> None:
        """Start a fresh game from *position*, or the standard setup if omitted."""

    @abstractmethod
    def submit_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        """Attempt a move and report what happened."""

    @abstractmethod
    def is_game_over(self) -> bool:
        """Whether a king has been captured."""
