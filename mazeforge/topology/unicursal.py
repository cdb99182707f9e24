"""
Unicursal conversion of orthogonal mazes.

Every cell of a perfect orthogonal maze is split into a 2x2 block, then a wall
is drawn down the middle of every passage. The result is a labyrinth twice the
size with a single path, without junctions, visiting every cell. The path
starts at (0, 0) and ends at (0, 1).
"""

from __future__ import annotations

from collections import deque

from mazeforge.topology.orthogonal import OrthogonalMaze, OrthogonalSide
from mazeforge.utils.exceptions import InvalidParameterError
from mazeforge.utils.maze_logging import get_logger

logger = get_logger(__name__)

NORTH = OrthogonalSide.NORTH
EAST = OrthogonalSide.EAST
SOUTH = OrthogonalSide.SOUTH
WEST = OrthogonalSide.WEST


def make_unicursal(maze: OrthogonalMaze) -> OrthogonalMaze:
    """
    Convert a generated orthogonal maze into a unicursal maze.

    Args:
        maze: Perfect orthogonal maze, left unchanged

    Returns:
        New orthogonal maze of twice the width and height

    Raises:
        InvalidParameterError: If ``maze`` is not a plain orthogonal maze
    """
    if type(maze) is not OrthogonalMaze:
        raise InvalidParameterError(
            "maze",
            type(maze).__name__,
            component="make_unicursal",
            reason="only orthogonal mazes can be made unicursal",
        )

    result = OrthogonalMaze(maze.width * 2, maze.height * 2)
    grid = result.grid

    # Scale walls up: every cell becomes a 2x2 block
    for x in range(maze.width):
        for y in range(maze.height):
            cell = maze.grid[x][y]
            nw, ne = grid[2 * x][2 * y], grid[2 * x + 1][2 * y]
            sw, se = grid[2 * x][2 * y + 1], grid[2 * x + 1][2 * y + 1]
            if cell.has_side(WEST):
                nw.close_side(WEST)
                sw.close_side(WEST)
            if cell.has_side(NORTH):
                nw.close_side(NORTH)
                ne.close_side(NORTH)
            if x == maze.width - 1 and cell.has_side(EAST):
                ne.close_side(EAST)
                se.close_side(EAST)
            if y == maze.height - 1 and cell.has_side(SOUTH):
                sw.close_side(SOUTH)
                se.close_side(SOUTH)

    # Split every passage in two lanes
    maze.clear_visited()
    start = maze.grid[0][0]
    start.visited = True
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for neighbor in cell.accessible_neighbors():
            if neighbor.visited:
                continue
            neighbor.visited = True
            queue.append(neighbor)

            x1, y1 = cell.position.x, cell.position.y
            x2, y2 = neighbor.position.x, neighbor.position.y
            if x1 != x2:
                cx = x1 + x2
                grid[cx][2 * y1].close_side(SOUTH)
                grid[cx + 1][2 * y1].close_side(SOUTH)
            else:
                cy = y1 + y2
                grid[2 * x1][cy].close_side(EAST)
                grid[2 * x1][cy + 1].close_side(EAST)

    # Break the single loop into a path from (0, 0) to (0, 1)
    grid[0][0].close_side(SOUTH)
    maze.clear_visited()

    logger.debug(f"Converted {maze} into unicursal {result}")
    return result
