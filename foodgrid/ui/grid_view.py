"""Grid view for the food grid window."""

from typing import Dict
from PySide6.QtWidgets import QGraphicsView, QGraphicsScene
from PySide6.QtGui import QPainter

from ..app.controller import SimulationController
from ..domain.types import Coord
from .tiles import GridTile


class GridView(QGraphicsView):
    """Graphics view showing the board of the controlled simulation."""

    def __init__(self, controller: SimulationController, tile_size: float = 40.0):
        super().__init__()

        self.controller = controller
        self.scene = QGraphicsScene()
        self.setScene(self.scene)
        self.tile_size = tile_size
        self.tiles: Dict[Coord, GridTile] = {}

        self.setRenderHint(QPainter.Antialiasing)

        self._create_tiles()
        self.controller.board_updated.connect(self.update_grid)
        self.update_grid()

    def _create_tiles(self):
        board = self.controller.simulation.board
        self.scene.setSceneRect(0, 0, board.width * self.tile_size, board.height * self.tile_size)

        for row in range(board.height):
            for col in range(board.width):
                tile = GridTile(row, col, self.tile_size)
                self.scene.addItem(tile)
                self.tiles[(row, col)] = tile

    def update_grid(self):
        """Refresh every tile from the board cells."""
        cells = self.controller.simulation.board.cells()
        for (row, col), tile in self.tiles.items():
            tile.set_cell(cells[row][col])
