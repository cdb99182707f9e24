"""
Sidewinder algorithm.

Processes rows one at a time, accumulating a run of cells. Each cell either
extends the run east (coin flip) or closes it by carving north from a random
cell of the run. The top row is a single corridor. Only works on mazes with
rows and columns of square cells.
"""

from __future__ import annotations

import random

from mazeforge.core.maze import Maze, MazeType
from mazeforge.topology.orthogonal import OrthogonalSide

from .base import MazeGenerator


class SidewinderGenerator(MazeGenerator):
    name = "Sidewinder"
    supported_types = frozenset({MazeType.ORTHOGONAL, MazeType.WEAVE})

    def _generate(self, maze: Maze, rng: random.Random) -> None:
        maze.fill_all()

        for y in range(maze.height):
            run = []
            for x in range(maze.width):
                cell = maze.cell_at(x, y)
                run.append(cell)
                has_north = cell.cell_on_side(OrthogonalSide.NORTH) is not None
                has_east = cell.cell_on_side(OrthogonalSide.EAST) is not None

                if has_east and (not has_north or rng.random() < 0.5):
                    cell.open_side(OrthogonalSide.EAST)
                elif has_north:
                    rng.choice(run).open_side(OrthogonalSide.NORTH)
                    run.clear()
