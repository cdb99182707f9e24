"""
Delta maze: triangular cells.

Triangles alternate between pointing up and down. The base of a cell is on its
north side when ``(x + y)`` is even and on its south side otherwise, so the
base neighbor is not a fixed offset.
"""

from __future__ import annotations

from mazeforge.core.cell import Cell, GridCell, Side
from mazeforge.core.grid import Shape, ShapedMaze
from mazeforge.core.maze import MazeType


class DeltaSide(Side):
    BASE = (1, None, "B", "BASE")
    EAST = (2, (1, 0), "E", "WEST")
    WEST = (4, (-1, 0), "W", "EAST")


class DeltaCell(GridCell):
    sides = (DeltaSide.BASE, DeltaSide.EAST, DeltaSide.WEST)

    @property
    def flat_topped(self) -> bool:
        return (self.position.x + self.position.y) % 2 == 0

    def cell_on_side(self, side: Side) -> Cell | None:
        if side is DeltaSide.BASE:
            dy = -1 if self.flat_topped else 1
            return self.maze.cell_at(self.position.x, self.position.y + dy)
        return super().cell_on_side(side)


class DeltaMaze(ShapedMaze):
    """
    Maze of triangular cells.

    Args:
        width: Width of the maze, or size of a triangle or hexagon
        height: Number of rows (ignored for triangles and hexagons)
        shape: Overall maze shape
    """

    maze_type = MazeType.DELTA
    cell_class = DeltaCell

    def _layout(self):
        width, height = self.width, self.height
        grid_width = 2 * width - 1

        if self.shape is Shape.RECTANGLE:
            return grid_width, lambda x: height, lambda x: 0

        if self.shape is Shape.HEXAGON:
            grid_width = 4 * width - 1

            def rows(x: int) -> int:
                if x < width:
                    return 2 * (x + 1)
                if x >= grid_width - width:
                    return 2 * (grid_width - x)
                return 2 * width

            def offset(x: int) -> int:
                if x < width:
                    base = width - x - 1
                elif x >= grid_width - width:
                    base = width + x - grid_width
                else:
                    base = 0
                return base + width % 2

            return grid_width, rows, offset

        if self.shape is Shape.TRIANGLE:
            return grid_width, lambda x: width - abs(x - grid_width // 2), lambda x: 0

        grid_width = 2 * width + height - 1

        def rhombus_rows(x: int) -> int:
            rows = height
            if x < height:
                rows -= height - x - 1
            if x >= grid_width - height:
                rows -= x - (grid_width - height)
            return rows

        return grid_width, rhombus_rows, lambda x: max(0, height - grid_width + x)
