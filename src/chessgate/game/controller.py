"""GameController — the central orchestrator of a game.

Coordinates the :class:`GameState` and notifies listeners via simple
callbacks so the console, the Qt window and tests can subscribe.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from chessgate.core.enums import GameResult
from chessgate.core.move import MoveOutcome
from chessgate.core.position import Position
from chessgate.core.types import Square
from chessgate.game.interfaces import GamePhase, IGameController
from chessgate.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveOutcome, GameState], None]
RejectedCallback = Callable[[MoveOutcome, GameState], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Runs one game: forwards move attempts to the position, tracks the
    phase and notifies listeners.

    The position itself carries no synchronisation, so every state change
    goes through ``_lock``: concurrent callers see one move attempt at a
    time.  Callbacks run while the lock is held; the lock is re-entrant,
    so a handler on the same thread may query the controller.
    """

    __slots__ = ("_state", "_lock", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._state.setup()
        self._lock = threading.RLock()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def position(self) -> Position:
        return self._state.position

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, position: Position | None = None) -> None:
        with self._lock:
            self._state = GameState()
            self._state.setup(position)
            _LOGGER.info("New game started")
            if self._state.is_game_over:
                self._emit_game_over(self._state.result)
            else:
                self._emit_phase(GamePhase.AWAITING_MOVE)

    def submit_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        with self._lock:
            outcome = self._state.apply(from_sq, to_sq)
            if not outcome.applied:
                self._emit_rejected(outcome)
                return outcome

            self._emit_move(outcome)
            if self._state.is_game_over:
                _LOGGER.info(
                    "Game over after %d plies: %s",
                    self._state.ply_count,
                    self._state.result.name,
                )
                self._emit_game_over(self._state.result)
            return outcome

    def is_game_over(self) -> bool:
        with self._lock:
            return self._state.position.is_game_over()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, outcome: MoveOutcome) -> None:
        for cb in self.events.on_move:
            cb(outcome, self._state)

    def _emit_rejected(self, outcome: MoveOutcome) -> None:
        for cb in self.events.on_rejected:
            cb(outcome, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
