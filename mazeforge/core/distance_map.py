"""
Single-source distance map.

Every cell receives its shortest distance from the start cell, counted in
cells travelled. A passage that runs under other cells (weave tunnels) costs
one per cell crossed, and the crossed cells record their own distance along
the tunnel in ``tunnel_distance``.
"""

from __future__ import annotations

import heapq
import itertools
from typing import TYPE_CHECKING

from mazeforge.utils.exceptions import DisconnectedMazeError
from mazeforge.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from mazeforge.core.cell import Cell
    from mazeforge.core.maze import Maze

logger = get_logger(__name__)


def compute_distance_map(maze: Maze, start: Cell) -> int:
    """
    Set ``distance`` on every cell of ``maze`` from ``start``.

    Args:
        maze: Maze to map
        start: Cell at distance 0

    Returns:
        The largest distance

    Raises:
        DisconnectedMazeError: If a cell cannot be reached. No distance is
            kept in that case.
    """
    for cell in maze.cells():
        cell.distance = -1

    counter = itertools.count()
    start.distance = 0
    frontier = [(0, next(counter), start)]
    settled: set[Cell] = set()

    while frontier:
        distance, _, cell = heapq.heappop(frontier)
        if cell in settled:
            continue
        settled.add(cell)

        for neighbor in cell.accessible_neighbors():
            between = cell.cells_between(neighbor)
            new_distance = distance + len(between) + 1
            if neighbor.distance == -1 or new_distance < neighbor.distance:
                neighbor.distance = new_distance
                for offset, tunnel in enumerate(between, start=1):
                    tunnel.tunnel_distance = distance + offset
                heapq.heappush(frontier, (new_distance, next(counter), neighbor))

    total = maze.cell_count
    if len(settled) != total:
        for cell in maze.cells():
            cell.distance = -1
        raise DisconnectedMazeError(total - len(settled), total, component=type(maze).__name__)

    max_distance = max(cell.distance for cell in settled)
    logger.debug(f"Distance map computed, max distance {max_distance}")
    return max_distance
