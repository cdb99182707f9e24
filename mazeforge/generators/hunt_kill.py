"""
Hunt-and-kill algorithm.

Alternates between two phases:
- kill: random walk to unvisited neighbors until the walk is stuck
- hunt: scan the cells in storage order for the first unvisited cell next to
  a visited one, connect it to its first visited neighbor (in side order) and
  resume the walk from there

Generation ends when a hunt finds no cell. The hunt is deterministic, only the
walk uses the random source.
"""

from __future__ import annotations

import random

from mazeforge.core.cell import Cell
from mazeforge.core.maze import Maze

from .base import MazeGenerator


class HuntKillGenerator(MazeGenerator):
    name = "HuntAndKill"

    def _generate(self, maze: Maze, rng: random.Random) -> None:
        maze.fill_all()
        cells = maze.cell_list()

        current: Cell | None = maze.random_cell(rng)
        current.visited = True
        while current is not None:
            self._kill(current, rng)
            current = self._hunt(cells)

    @staticmethod
    def _kill(cell: Cell, rng: random.Random) -> None:
        while True:
            unvisited = [neighbor for neighbor in cell.neighbors() if not neighbor.visited]
            if not unvisited:
                return
            neighbor = rng.choice(unvisited)
            cell.connect_with(neighbor)
            neighbor.visited = True
            cell = neighbor

    @staticmethod
    def _hunt(cells: list[Cell]) -> Cell | None:
        for cell in cells:
            if cell.visited:
                continue
            for neighbor in cell.neighbors():
                if neighbor.visited:
                    cell.connect_with(neighbor)
                    cell.visited = True
                    return cell
        return None
