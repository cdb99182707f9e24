"""
Upsilon maze: alternating octagonal and square cells.

A cell is a square when ``(x + y)`` is odd and an octagon otherwise. Octagons
have eight sides, squares only the four orthogonal ones. Diagonal bits of a
square cell are always kept set so its wall word stays consistent with the
octagons around it.
"""

from __future__ import annotations

from mazeforge.core.cell import Cell, GridCell, Side
from mazeforge.core.grid import GridMaze
from mazeforge.core.maze import MazeType


class UpsilonSide(Side):
    NORTH = (1, (0, -1), "N", "SOUTH")
    EAST = (2, (1, 0), "E", "WEST")
    SOUTH = (4, (0, 1), "S", "NORTH")
    WEST = (8, (-1, 0), "W", "EAST")
    NORTHEAST = (16, (1, -1), "NE", "SOUTHWEST")
    SOUTHEAST = (32, (1, 1), "SE", "NORTHWEST")
    SOUTHWEST = (64, (-1, 1), "SW", "NORTHEAST")
    NORTHWEST = (128, (-1, -1), "NW", "SOUTHEAST")


SQUARE_SIDES = (UpsilonSide.NORTH, UpsilonSide.SOUTH, UpsilonSide.EAST, UpsilonSide.WEST)
OCTAGON_SIDES = SQUARE_SIDES + (
    UpsilonSide.NORTHEAST,
    UpsilonSide.SOUTHWEST,
    UpsilonSide.SOUTHEAST,
    UpsilonSide.NORTHWEST,
)
DIAGONAL_BITS = 16 | 32 | 64 | 128


class UpsilonCell(GridCell):
    sides = OCTAGON_SIDES

    def __init__(self, maze, position):
        self.is_square = (position.x + position.y) % 2 != 0
        super().__init__(maze, position)
        self.value = 0

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        if self.is_square:
            value |= DIAGONAL_BITS
        self._value = value

    @property
    def all_sides(self):
        return SQUARE_SIDES if self.is_square else OCTAGON_SIDES

    def cell_on_side(self, side: Side) -> Cell | None:
        if self.is_square and side.is_diagonal:
            return None
        return super().cell_on_side(side)

    def distance_to(self, cell: Cell) -> int:
        return self.position.chebyshev_distance_to(cell.position)


class UpsilonMaze(GridMaze):
    """
    Maze of octagonal and square cells.

    Args:
        width: Number of columns, at least 1
        height: Number of rows, at least 1
    """

    maze_type = MazeType.UPSILON
    cell_class = UpsilonCell
