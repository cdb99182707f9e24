"""
NumPy exports of maze state for renderers and analysis code.

- ``to_numpy_array``: raster image of an orthogonal maze (1 = wall, 0 = passage)
- ``wall_array``: wall bit word of every cell
- ``distance_array``: distance map value of every cell

Cell arrays are indexed ``[row, column]``. Rows are grid rows (``y``) for grid
mazes and rings for theta mazes; positions without a cell hold -1.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from mazeforge.core.maze import MazeType
from mazeforge.core.position import PolarPosition
from mazeforge.topology.orthogonal import OrthogonalSide
from mazeforge.utils.exceptions import InvalidParameterError, UnsupportedTopologyError

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from mazeforge.core.cell import Cell
    from mazeforge.core.maze import Maze


def _array_index(cell: Cell) -> tuple[int, int]:
    pos = cell.position
    if isinstance(pos, PolarPosition):
        return pos.r, pos.x
    return pos.y, pos.x


def _cell_array(maze: Maze, attribute: str) -> NDArray[np.int64]:
    indices = [(_array_index(cell), getattr(cell, attribute)) for cell in maze.cells()]
    rows = max(index[0] for index, _ in indices) + 1
    cols = max(index[1] for index, _ in indices) + 1

    array = np.full((rows, cols), -1, dtype=np.int64)
    for (row, col), value in indices:
        array[row, col] = value
    return array


def wall_array(maze: Maze) -> NDArray[np.int64]:
    """Wall bit word of every cell, -1 where there is no cell."""
    return _cell_array(maze, "value")


def distance_array(maze: Maze) -> NDArray[np.int64]:
    """Distance map value of every cell, -1 where there is no cell or no distance."""
    return _cell_array(maze, "distance")


def to_numpy_array(maze: Maze, wall_thickness: int = 1) -> NDArray[np.int32]:
    """
    Convert an orthogonal maze to a raster array.

    Each cell becomes a ``wall_thickness`` square of passage surrounded by
    walls of the same thickness.

    Args:
        maze: Orthogonal maze
        wall_thickness: Thickness of walls and passages, in array cells

    Returns:
        Numpy array where 1 = wall, 0 = passage, of shape
        ``(2 * height + 1, 2 * width + 1) * wall_thickness``

    Raises:
        UnsupportedTopologyError: If the maze is not orthogonal
    """
    if maze.maze_type is not MazeType.ORTHOGONAL:
        raise UnsupportedTopologyError("to_numpy_array", maze.maze_type.value, [MazeType.ORTHOGONAL.value])
    if wall_thickness < 1:
        raise InvalidParameterError(
            "wall_thickness", wall_thickness, valid_range=(1, float("inf")), component="to_numpy_array"
        )

    t = wall_thickness
    cell_size = 2 * t
    height = maze.height * cell_size + t
    width = maze.width * cell_size + t

    array = np.ones((height, width), dtype=np.int32)

    for cell in maze.cells():
        r_start = cell.position.y * cell_size + t
        c_start = cell.position.x * cell_size + t

        array[r_start : r_start + t, c_start : c_start + t] = 0

        if not cell.has_side(OrthogonalSide.NORTH):
            array[r_start - t : r_start, c_start : c_start + t] = 0
        if not cell.has_side(OrthogonalSide.SOUTH):
            array[r_start + t : r_start + 2 * t, c_start : c_start + t] = 0
        if not cell.has_side(OrthogonalSide.WEST):
            array[r_start : r_start + t, c_start - t : c_start] = 0
        if not cell.has_side(OrthogonalSide.EAST):
            array[r_start : r_start + t, c_start + t : c_start + 2 * t] = 0

    return array
