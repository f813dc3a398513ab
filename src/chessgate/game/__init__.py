"""Game management layer — controller, events, phase state machine.

Quick start::

    from chessgate.core import parse_square
    from chessgate.game import GameController

    ctrl = GameController()
    ctrl.events.on_game_over.append(print)
    ctrl.submit_move(parse_square("e2"), parse_square("e4"))
"""

from chessgate.game.controller import GameController, GameEvents
from chessgate.game.interfaces import GamePhase, IGameController
from chessgate.game.state import GameState

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
]
