"""
Aldous-Broder algorithm.

Random walk over the maze, carving a passage every time the walk enters a
cell for the first time. Samples every perfect maze with equal probability but
can take a long time to visit the last cells.
"""

from __future__ import annotations

import random

from mazeforge.core.maze import Maze

from .base import MazeGenerator


class AldousBroderGenerator(MazeGenerator):
    name = "AldousBroder"

    def _generate(self, maze: Maze, rng: random.Random) -> None:
        maze.fill_all()

        current = maze.random_cell(rng)
        current.visited = True
        remaining = maze.cell_count - 1

        while remaining > 0:
            # A weave cell hemmed in by tunnels can only be left through its passages
            candidates = current.neighbors() or current.accessible_neighbors()
            neighbor = rng.choice(candidates)
            if not neighbor.visited:
                current.connect_with(neighbor)
                neighbor.visited = True
                remaining -= 1
            current = neighbor
