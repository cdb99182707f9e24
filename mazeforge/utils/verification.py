"""
Perfect maze verification.

A perfect maze must satisfy:
1. Connectivity: every cell is reachable from any cell
2. Acyclicity: exactly (n - 1) passages for n cells

Openings do not count as passages.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mazeforge.core.maze import Maze


def count_reachable(maze: Maze) -> int:
    """Number of cells reachable from the first cell through open sides."""
    cells = maze.cell_list()
    if not cells:
        return 0

    start = cells[0]
    seen = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbor in current.accessible_neighbors():
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return len(seen)


def verify_perfect_maze(maze: Maze) -> dict[str, Any]:
    """
    Verify that a maze is perfect (fully connected, no loops).

    Args:
        maze: Maze to verify

    Returns:
        Dictionary with verification results including:
        - is_perfect: Overall validity
        - is_connected: Connectivity check
        - is_no_loops: Acyclicity check
        - visited_cells: Number of reachable cells
        - total_cells: Total number of cells
        - passage_count: Number of passages
        - expected_passages: Expected passages for perfect maze
    """
    total_cells = maze.cell_count
    visited_cells = count_reachable(maze)
    passage_count = maze.connection_count()
    expected_passages = total_cells - 1

    is_connected = visited_cells == total_cells
    is_no_loops = passage_count == expected_passages

    return {
        "is_perfect": is_connected and is_no_loops,
        "is_connected": is_connected,
        "is_no_loops": is_no_loops,
        "visited_cells": visited_cells,
        "total_cells": total_cells,
        "passage_count": passage_count,
        "expected_passages": expected_passages,
    }
