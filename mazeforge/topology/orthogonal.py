"""
Orthogonal maze: the classic grid of square cells.
"""

from __future__ import annotations

from mazeforge.core.cell import GridCell, Side
from mazeforge.core.grid import GridMaze
from mazeforge.core.maze import MazeType


class OrthogonalSide(Side):
    NORTH = (1, (0, -1), "N", "SOUTH")
    EAST = (2, (1, 0), "E", "WEST")
    SOUTH = (4, (0, 1), "S", "NORTH")
    WEST = (8, (-1, 0), "W", "EAST")


class OrthogonalCell(GridCell):
    sides = (OrthogonalSide.NORTH, OrthogonalSide.SOUTH, OrthogonalSide.WEST, OrthogonalSide.EAST)


class OrthogonalMaze(GridMaze):
    """
    Maze of ``width`` by ``height`` square cells.

    Args:
        width: Number of columns, at least 1
        height: Number of rows, at least 1
    """

    maze_type = MazeType.ORTHOGONAL
    cell_class = OrthogonalCell
