"""BoardScene — QGraphicsScene that draws the board from a Model."""

from __future__ import annotations

from collections.abc import Iterable

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QPen
from PyQt6.QtWidgets import QGraphicsRectItem, QGraphicsScene, QGraphicsSceneMouseEvent

from fairychess.core.types import BOARD_SIZE, Position, all_positions
from fairychess.game.model import Model
from fairychess.ui.board.piece_item import PieceItem
from fairychess.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders squares, highlights and pieces; reports clicked squares.

    The scene never mutates the model. It redraws on :meth:`refresh`.

    Signals:
        square_clicked(Position): Emitted when the user clicks a board square.
    """

    square_clicked = pyqtSignal(object)

    TILE = 80  # default px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._tile = self.TILE
        self._model: Model | None = None
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Position, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Position, PieceItem] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_model(self, model: Model) -> None:
        self._model = model
        self.refresh()

    def refresh(self) -> None:
        """Redraw pieces and overlays from the model."""
        self._sync_pieces()
        self._sync_highlights()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def set_tile_size(self, size: int) -> None:
        if size <= 0 or size == self._tile:
            return
        self._tile = size
        self._draw_board()
        self.refresh()

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide destination highlights of the selected piece."""
        self._show_legal_moves = visible
        self._sync_highlights()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()

        t = self._tile
        for pos in all_positions():
            color = self._theme.light_square if pos.is_light else self._theme.dark_square
            rect = QGraphicsRectItem(pos.col * t, pos.row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[pos] = rect

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the model's board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._model is None:
            return

        for pos, piece in self._model.game.board.pieces():
            item = PieceItem(piece, pos, self._tile, self._theme.piece)
            self.addItem(item)
            self._piece_items[pos] = item

    # ── Selection / help overlays ────────────────────────────────────────

    def _sync_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        model = self._model
        if model is None:
            return

        selected = model.selected_pos
        if selected is not None:
            self._add_highlights([selected], self._theme.highlight_from)
            if self._show_legal_moves:
                self._add_highlights(model.selected_moves, self._theme.highlight_to)
            return

        current, opponent = model.help_moves()
        self._add_highlights(current, self._theme.help_current)
        self._add_highlights(opponent, self._theme.help_opponent)

    def _add_highlights(self, positions: Iterable[Position], color: QColor) -> None:
        for pos in sorted(positions):
            self._highlight_items.append(self._make_highlight(pos, color))

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)
        pos = self._pos_to_square(event.scenePos())
        if pos is not None:
            self.square_clicked.emit(pos)
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, point: QPointF) -> Position | None:
        """Scene point → board position."""
        t = self._tile
        pos = Position(int(point.y() // t), int(point.x() // t))
        if not pos.is_valid:
            return None
        return pos

    def _make_highlight(self, pos: Position, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self._tile
        rect = QGraphicsRectItem(pos.col * t, pos.row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
