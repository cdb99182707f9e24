"""
Zeta maze: square cells with passages at 45 degrees.

Every cell has eight sides. A diagonal passage would cross the corner shared
by the two cells beside it, so a diagonal side is only usable while those two
cells are not connected to each other. Neighbor lists are therefore derived
from the current walls on every call.
"""

from __future__ import annotations

from mazeforge.core.cell import Cell, GridCell, Side
from mazeforge.core.grid import GridMaze
from mazeforge.core.maze import MazeType


class ZetaSide(Side):
    NORTH = (1, (0, -1), "N", "SOUTH")
    NORTHEAST = (2, (1, -1), "NE", "SOUTHWEST")
    EAST = (4, (1, 0), "E", "WEST")
    SOUTHEAST = (8, (1, 1), "SE", "NORTHWEST")
    SOUTH = (16, (0, 1), "S", "NORTH")
    SOUTHWEST = (32, (-1, 1), "SW", "NORTHEAST")
    WEST = (64, (-1, 0), "W", "EAST")
    NORTHWEST = (128, (-1, -1), "NW", "SOUTHEAST")


class ZetaCell(GridCell):
    sides = (
        ZetaSide.NORTH,
        ZetaSide.SOUTH,
        ZetaSide.EAST,
        ZetaSide.WEST,
        ZetaSide.NORTHEAST,
        ZetaSide.SOUTHWEST,
        ZetaSide.SOUTHEAST,
        ZetaSide.NORTHWEST,
    )

    def is_shadowed(self, side: Side) -> bool:
        """True if a passage between the two cells beside a diagonal side blocks it."""
        if not side.is_diagonal:
            return False
        dx, dy = side.offset
        beside_x = self.maze.cell_at(self.position.x + dx, self.position.y)
        beside_y = self.maze.cell_at(self.position.x, self.position.y + dy)
        if beside_x is None or beside_y is None:
            return False
        between = beside_x.side_of(beside_y)
        return between is not None and not beside_x.has_side(between)

    def neighbors(self) -> list[Cell]:
        found: list[Cell] = []
        for side in self.all_sides:
            cell = self.cell_on_side(side)
            if cell is not None and not self.is_shadowed(side):
                found.append(cell)
        return found

    def accessible_neighbors(self) -> list[Cell]:
        found: list[Cell] = []
        for side in self.all_sides:
            if self.has_side(side):
                continue
            cell = self.cell_on_side(side)
            if cell is not None and not self.is_shadowed(side):
                found.append(cell)
        return found

    def distance_to(self, cell: Cell) -> int:
        # Diagonal moves change both coordinates
        return self.position.chebyshev_distance_to(cell.position)


class ZetaMaze(GridMaze):
    """
    Maze of square cells allowing diagonal passages.

    Args:
        width: Number of columns, at least 1
        height: Number of rows, at least 1
    """

    maze_type = MazeType.ZETA
    cell_class = ZetaCell
