"""MainWindow — board view, status line and a new-game button."""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chessgate.core.enums import GameResult
from chessgate.core.move import MoveOutcome
from chessgate.core.notation import rejection_message
from chessgate.core.types import Square, is_valid_square
from chessgate.game.controller import GameController
from chessgate.game.state import GameState
from chessgate.settings import AppSettings
from chessgate.ui.board.board_view import BoardView
from chessgate.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

_RESULT_TEXT = {
    GameResult.WHITE_WINS: "Game over! White wins.",
    GameResult.BLACK_WINS: "Game over! Black wins.",
    GameResult.DRAW: "Game over! No kings left.",
}


class MainWindow(QMainWindow):
    """Top-level window wiring the board scene to a :class:`GameController`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: GameController | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Chessgate")
        self._settings = settings if settings is not None else AppSettings()
        self._controller = controller if controller is not None else GameController()

        self._board_view = BoardView()
        self._status = QLabel()
        self._new_game_btn = QPushButton("New Game")

        controls = QHBoxLayout()
        controls.addWidget(self._status, 1)
        controls.addWidget(self._new_game_btn)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.addWidget(self._board_view, 1)
        layout.addLayout(controls)
        self.setCentralWidget(central)
        self.resize(720, 780)

        self._board_view.move_requested.connect(self._on_move_requested)
        self._new_game_btn.clicked.connect(self.new_game)

        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_rejected.append(self._on_rejected)
        events.on_game_over.append(self._on_game_over)

        self._apply_settings()
        self._refresh()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_text(self) -> str:
        return self._status.text()

    def new_game(self) -> None:
        self._controller.new_game()
        self._refresh()

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_move_requested(self, from_sq: Square, to_sq: Square) -> None:
        self._controller.submit_move(from_sq, to_sq)

    def _on_move(self, outcome: MoveOutcome, state: GameState) -> None:
        del outcome
        self._board_view.board_scene.set_position(state.position)
        self._status.setText(self._turn_text(state))

    def _on_rejected(self, outcome: MoveOutcome, state: GameState) -> None:
        message = rejection_message(outcome, state.side_to_move)
        _LOGGER.debug("Move %s refused: %s", outcome.move, message)
        self._status.setText(message)
        if is_valid_square(outcome.move.from_sq):
            self._board_view.board_scene.mark_rejected(outcome.move.from_sq)

    def _on_game_over(self, result: GameResult) -> None:
        self._board_view.board_scene.set_interactive(False)
        self._status.setText(_RESULT_TEXT.get(result, "Game over!"))

    # ── Internal helpers ─────────────────────────────────────────────────

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)

    def _refresh(self) -> None:
        state = self._controller.state
        scene = self._board_view.board_scene
        scene.set_position(state.position)
        scene.set_interactive(not state.is_game_over)
        if state.is_game_over:
            self._status.setText(_RESULT_TEXT.get(state.result, "Game over!"))
        else:
            self._status.setText(self._turn_text(state))

    @staticmethod
    def _turn_text(state: GameState) -> str:
        return f"{str(state.side_to_move).capitalize()} to move"
