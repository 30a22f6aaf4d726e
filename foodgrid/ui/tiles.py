"""Grid tiles for the food grid window."""

from PySide6.QtWidgets import QGraphicsRectItem, QGraphicsTextItem
from PySide6.QtGui import QBrush, QPen, QColor, QFont

from ..domain.types import Cell
from .terminal import CELL_CHARS


class GridTile(QGraphicsRectItem):
    """Graphics item representing a single board cell."""

    # Fill and outline colors per cell content
    COLORS = {
        Cell.EMPTY: (QColor(240, 240, 240), QColor(180, 180, 180)),
        Cell.AGENT: (QColor(100, 180, 255), QColor(50, 120, 200)),
        Cell.FOOD: (QColor(255, 215, 0), QColor(218, 165, 32)),
    }

    def __init__(self, row: int, col: int, size: float):
        super().__init__(0, 0, size, size)
        self.row = row
        self.col = col
        self.size = size
        self.cell = Cell.EMPTY

        self.setPos(col * size, row * size)

        self._text = QGraphicsTextItem(parent=self)
        self._text.setFont(QFont("Courier", int(size * 0.45), QFont.Bold))

        self.update_appearance()

    def set_cell(self, cell: Cell):
        """Update the tile if its content changed."""
        if cell != self.cell:
            self.cell = cell
            self.update_appearance()

    def update_appearance(self):
        """Update tile colors and glyph based on its content."""
        brush_color, pen_color = self.COLORS[self.cell]
        self.setBrush(QBrush(brush_color))
        self.setPen(QPen(pen_color, 1))

        self._text.setPlainText(CELL_CHARS[self.cell].strip())
        rect = self._text.boundingRect()
        self._text.setPos(
            (self.size - rect.width()) / 2,
            (self.size - rect.height()) / 2
        )
