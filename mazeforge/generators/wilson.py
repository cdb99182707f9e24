"""
Wilson's algorithm using loop-erased random walks.

Produces unbiased mazes: every perfect maze has the same probability.

Algorithm:
1. Mark one random cell as part of the maze
2. While unvisited cells remain:
   - Walk randomly from an unvisited cell, stepping straight back only out
     of a dead end, until the walk reaches the maze; a loop in the walk is
     erased
   - Carve the walk into the maze

Not supported on zeta and weave mazes, where carving a walk changes the
neighbors of the cells along it.
"""

from __future__ import annotations

import random

from mazeforge.core.maze import Maze, MazeType

from .base import MazeGenerator


class WilsonGenerator(MazeGenerator):
    name = "Wilson"
    supported_types = frozenset(MazeType) - {MazeType.ZETA, MazeType.WEAVE}

    def _generate(self, maze: Maze, rng: random.Random) -> None:
        maze.fill_all()

        unvisited = maze.cell_list()
        initial = unvisited.pop(rng.randrange(len(unvisited)))
        initial.visited = True
        remaining = set(unvisited)

        while unvisited:
            walk = [rng.choice(unvisited)]
            previous = None
            while True:
                current = walk[-1]
                neighbors = current.neighbors()
                forward = [cell for cell in neighbors if cell is not previous]
                # In a dead end the only way out is back, which erases the last step
                neighbor = rng.choice(forward or neighbors)
                previous = current
                if neighbor.visited:
                    walk.append(neighbor)
                    break

                if neighbor in walk:
                    del walk[walk.index(neighbor) :]
                walk.append(neighbor)

            for cell, following in zip(walk, walk[1:]):
                cell.connect_with(following)
                cell.visited = True
                remaining.discard(cell)
            unvisited = [cell for cell in unvisited if cell in remaining]
