"""Visual theme constants and QSS styles for Chessgate."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board."""

    light_square: QColor
    dark_square: QColor
    selected: QColor  # origin of the move being entered
    rejected: QColor  # flashes on the origin of a refused move
    white_piece: QColor
    black_piece: QColor
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            selected=QColor(255, 255, 0, 100),
            rejected=QColor(255, 0, 0, 110),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            light_square=QColor(224, 226, 231),
            dark_square=QColor(101, 110, 122),
            selected=QColor(255, 255, 0, 100),
            rejected=QColor(255, 0, 0, 110),
            white_piece=QColor(250, 250, 250),
            black_piece=QColor(15, 15, 25),
            coord_light=QColor(101, 110, 122),
            coord_dark=QColor(224, 226, 231),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Look up a preset by its settings name; unknown names get the default."""
        presets = {"Classic": cls.default, "Slate": cls.slate}
        return presets.get(name, cls.default)()


THEME_NAMES = ("Classic", "Slate")

# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-size: 14px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
}
QPushButton:hover {
    background: #505050;
}
"""
