"""
Sigma maze: hexagonal cells.

Columns are stored in a skewed grid where the north-east neighbor is at
``(x + 1, y)`` and the south-east neighbor at ``(x + 1, y + 1)``. Shapes are
obtained by choosing the number of cells and the row offset of each column.
"""

from __future__ import annotations

from mazeforge.core.cell import Cell, GridCell, Side
from mazeforge.core.grid import Shape, ShapedMaze
from mazeforge.core.maze import MazeType


class SigmaSide(Side):
    NORTH = (1, (0, -1), "N", "SOUTH")
    NORTHEAST = (2, (1, 0), "NE", "SOUTHWEST")
    SOUTHEAST = (4, (1, 1), "SE", "NORTHWEST")
    SOUTH = (8, (0, 1), "S", "NORTH")
    SOUTHWEST = (16, (-1, 0), "SW", "NORTHEAST")
    NORTHWEST = (32, (-1, -1), "NW", "SOUTHEAST")


class SigmaCell(GridCell):
    sides = (
        SigmaSide.NORTH,
        SigmaSide.SOUTH,
        SigmaSide.NORTHEAST,
        SigmaSide.SOUTHWEST,
        SigmaSide.SOUTHEAST,
        SigmaSide.NORTHWEST,
    )

    def distance_to(self, cell: Cell) -> int:
        return self.position.hex_distance_to(cell.position)


class SigmaMaze(ShapedMaze):
    """
    Maze of hexagonal cells.

    Args:
        width: Number of columns, or size of a triangle or hexagon
        height: Number of rows (ignored for triangles and hexagons)
        shape: Overall maze shape
    """

    maze_type = MazeType.SIGMA
    cell_class = SigmaCell

    def _layout(self):
        width, height = self.width, self.height

        if self.shape is Shape.RECTANGLE:
            return width, lambda x: height, lambda x: x // 2

        if self.shape is Shape.HEXAGON:
            grid_width = 2 * width - 1
            return (
                grid_width,
                lambda x: grid_width - abs(x - width + 1),
                lambda x: 0 if x < width else x - width + 1,
            )

        if self.shape is Shape.TRIANGLE:
            return width, lambda x: x + 1, lambda x: 0

        return width, lambda x: height, lambda x: 0
