"""
Recursive backtracker (randomized depth-first search).

Creates mazes with long, winding passages and few dead ends.

Algorithm:
1. Start at a random cell, mark it visited and push it on a stack
2. While the stack is not empty:
   - Choose a random unvisited neighbor of the top cell
   - Connect it, mark it visited and push it
   - Pop the top cell when it has no unvisited neighbor left

An explicit stack is used so maze size is not limited by recursion depth.
"""

from __future__ import annotations

import random

from mazeforge.core.maze import Maze

from .base import MazeGenerator


class RecursiveBacktrackerGenerator(MazeGenerator):
    name = "RecursiveBacktracker"

    def _generate(self, maze: Maze, rng: random.Random) -> None:
        maze.fill_all()

        start = maze.random_cell(rng)
        start.visited = True
        stack = [start]

        while stack:
            current = stack[-1]
            unvisited = [cell for cell in current.neighbors() if not cell.visited]

            if unvisited:
                neighbor = rng.choice(unvisited)
                current.connect_with(neighbor)
                neighbor.visited = True
                stack.append(neighbor)
            else:
                stack.pop()
