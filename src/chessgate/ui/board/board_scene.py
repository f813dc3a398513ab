"""BoardScene — QGraphicsScene that draws the board and its pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessgate.core.types import BOARD_SIZE, Square, all_squares
from chessgate.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from chessgate.core.position import Position


class BoardScene(QGraphicsScene):
    """Renders squares, coordinates and piece glyphs; turns two clicks into
    a move request.

    The scene does not judge legality: any origin holding a piece of the
    side to move can be selected and any second square is forwarded.

    Signals:
        move_requested(Square, Square): origin and destination of a move.
    """

    move_requested = pyqtSignal(object, object)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._position: Position | None = None
        self._interactive = True
        self._show_coordinates = True

        self._selected_sq: Square | None = None

        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_position(self, position: Position) -> None:
        """Update the displayed position (full redraw of pieces)."""
        self._position = position
        self._clear_selection()
        self._sync_pieces()

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive
        if not interactive:
            self._clear_selection()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    @property
    def selected_square(self) -> Square | None:
        return self._selected_sq

    def piece_text(self, sq: Square) -> str | None:
        """Glyph currently drawn on *sq*, if any."""
        item = self._piece_items.get(sq)
        return item.text() if item is not None else None

    def mark_rejected(self, sq: Square) -> None:
        """Tint *sq* until the next selection or position sync."""
        self._clear_items(self._highlight_items)
        self._highlight_items.append(self._make_highlight(sq, self._theme.rejected))

    def click_square(self, sq: Square) -> None:
        """Select an origin, or complete a move from the selected origin."""
        if not self._interactive or self._position is None:
            return

        if self._selected_sq is not None:
            origin = self._selected_sq
            self._clear_selection()
            if origin != sq:
                self.move_requested.emit(origin, sq)
            return

        piece = self._position.board[sq]
        if piece is not None and piece.color == self._position.side_to_move:
            self._select_square(sq)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        font = QFont()
        font.setPointSize(max(9, t // 8))

        for sq in all_squares():
            is_light = (sq.file + sq.rank) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(sq.file * t, sq.rank * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_light else self._theme.coord_light
            # Rank numbers (left edge)
            if sq.file == 0:
                label = str(BOARD_SIZE - sq.rank)
                self._add_coord(label, font, text_color, QPointF(2, sq.rank * t + 1))
            # File letters (bottom edge)
            if sq.rank == BOARD_SIZE - 1:
                letter = chr(ord("a") + sq.file)
                pos = QPointF(sq.file * t + t - 12, sq.rank * t + t - 16)
                self._add_coord(letter, font, text_color, pos)

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(self, label: str, font: QFont, color: QColor, pos: QPointF) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(pos)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece glyphs from the current position."""
        self._clear_items(self._piece_items.values())
        self._piece_items.clear()
        if self._position is None:
            return

        t = self.TILE
        font = QFont()
        font.setPixelSize(int(t * 0.75))
        for sq, piece in self._position.board.occupied():
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            fill = self._theme.white_piece if piece.is_white else self._theme.black_piece
            item.setBrush(QBrush(fill))
            item.setPen(QPen(self._theme.black_piece if piece.is_white else fill))
            bounds = item.boundingRect()
            item.setPos(
                sq.file * t + (t - bounds.width()) / 2,
                sq.rank * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)
        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            self._clear_selection()
        else:
            self.click_square(sq)
        super().mousePressEvent(event)

    # ── Selection / highlights ───────────────────────────────────────────

    def _select_square(self, sq: Square) -> None:
        self._clear_selection()
        self._selected_sq = sq
        self._highlight_items.append(self._make_highlight(sq, self._theme.selected))

    def _clear_selection(self) -> None:
        self._selected_sq = None
        self._clear_items(self._highlight_items)

    def _clear_items(self, items) -> None:
        for item in list(items):
            self.removeItem(item)
        if isinstance(items, list):
            items.clear()

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return Square(col, row)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        rect = QGraphicsRectItem(sq.file * t, sq.rank * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
