"""
Simplified Prim's algorithm.

Keeps a frontier of cells adjacent to the maze. A random frontier cell is
connected to one random visited neighbor and its unvisited neighbors join the
frontier. Produces mazes with a radial texture and many short dead ends.
"""

from __future__ import annotations

import random

from mazeforge.core.maze import Maze

from .base import MazeGenerator


class PrimGenerator(MazeGenerator):
    name = "Prim"

    def _generate(self, maze: Maze, rng: random.Random) -> None:
        maze.fill_all()

        frontier = [maze.random_cell(rng)]
        in_frontier = set(frontier)
        while frontier:
            index = rng.randrange(len(frontier))
            # Swap-remove keeps the pick O(1)
            frontier[index], frontier[-1] = frontier[-1], frontier[index]
            current = frontier.pop()
            in_frontier.discard(current)

            neighbors = current.neighbors()
            rng.shuffle(neighbors)
            connected = False
            for neighbor in neighbors:
                if neighbor.visited:
                    if not connected:
                        current.connect_with(neighbor)
                        connected = True
                elif neighbor not in in_frontier:
                    frontier.append(neighbor)
                    in_frontier.add(neighbor)
            current.visited = True
