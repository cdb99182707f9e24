"""
A* path search between two cells of a maze.

The search only moves through open sides (``Cell.accessible_neighbors``). A
move costs the number of cells travelled, so a weave passage running under
other cells costs more than one, and ``Cell.distance_to`` is the heuristic.
"""

from __future__ import annotations

import heapq
import itertools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mazeforge.core.cell import Cell


def find_path(start: Cell, goal: Cell) -> list[Cell] | None:
    """
    Find a shortest path from ``start`` to ``goal``.

    Args:
        start: First cell of the path
        goal: Last cell of the path

    Returns:
        Cells of the path from start to goal, or None if goal is unreachable
    """
    counter = itertools.count()
    frontier = [(start.distance_to(goal), 0, next(counter), start)]
    parents: dict[Cell, Cell | None] = {start: None}
    costs: dict[Cell, int] = {start: 0}

    while frontier:
        _, cost, _, cell = heapq.heappop(frontier)
        if cell is goal:
            path = []
            node: Cell | None = cell
            while node is not None:
                path.append(node)
                node = parents[node]
            path.reverse()
            return path

        if cost > costs[cell]:
            # Stale entry
            continue

        for neighbor in cell.accessible_neighbors():
            new_cost = cost + len(cell.cells_between(neighbor)) + 1
            if neighbor not in costs or new_cost < costs[neighbor]:
                costs[neighbor] = new_cost
                parents[neighbor] = cell
                priority = new_cost + neighbor.distance_to(goal)
                heapq.heappush(frontier, (priority, new_cost, next(counter), neighbor))

    return None
