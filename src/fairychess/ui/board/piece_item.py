"""PieceItem — a piece glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QFont
from PyQt6.QtWidgets import QGraphicsSimpleTextItem

from fairychess.core.piece import Piece
from fairychess.core.types import Position


class PieceItem(QGraphicsSimpleTextItem):
    """A single piece drawn as its Unicode symbol, centred on its tile."""

    _GLYPH_RATIO = 0.75
    _FONT_FAMILY = "DejaVu Sans"

    def __init__(self, piece: Piece, pos: Position, tile_size: int, color: QColor) -> None:
        super().__init__(piece.symbol)
        self.piece = piece
        self.board_pos = pos
        self.setBrush(QBrush(color))
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
        self.setZValue(1)
        self.set_tile_size(tile_size)

    def set_tile_size(self, size: int) -> None:
        """Resize the glyph and re-centre it on its tile."""
        font = QFont(self._FONT_FAMILY)
        font.setPixelSize(max(int(size * self._GLYPH_RATIO), 1))
        self.setFont(font)

        bounds = self.boundingRect()
        x = self.board_pos.col * size + (size - bounds.width()) / 2
        y = self.board_pos.row * size + (size - bounds.height()) / 2
        self.setPos(x, y)
