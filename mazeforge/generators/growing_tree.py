"""
Growing tree algorithm.

A flexible algorithm whose texture depends on how the next cell is chosen
from the active list.

Algorithm:
1. Start with one random cell in the active list
2. While the active list is not empty:
   - Choose a cell from the list (strategy-dependent)
   - Connect it to a random unvisited neighbor and add that neighbor to the
     list, or remove the cell from the list if it has none

Selection uses three weights:
- random: choose a random cell (like simplified Prim's)
- newest: choose the last added cell (like the recursive backtracker)
- oldest: choose the first added cell (long straight corridors)
"""

from __future__ import annotations

import random

from mazeforge.core.maze import Maze
from mazeforge.utils.exceptions import InvalidParameterError

from .base import MazeGenerator


class GrowingTreeGenerator(MazeGenerator):
    """
    Growing tree generator.

    Args:
        random_weight: Weight of choosing a random cell
        newest_weight: Weight of choosing the newest cell
        oldest_weight: Weight of choosing the oldest cell
    """

    name = "GrowingTree"

    def __init__(self, random_weight: int = 1, newest_weight: int = 1, oldest_weight: int = 0):
        weights = {"random_weight": random_weight, "newest_weight": newest_weight, "oldest_weight": oldest_weight}
        for weight_name, weight in weights.items():
            if weight < 0:
                raise InvalidParameterError(
                    weight_name, weight, valid_range=(0, float("inf")), component=self.name
                )
        if random_weight + newest_weight + oldest_weight <= 0:
            raise InvalidParameterError(
                "weights", weights, component=self.name, reason="at least one weight must be positive"
            )

        self.random_weight = random_weight
        self.newest_weight = newest_weight
        self.oldest_weight = oldest_weight

    def _choose_index(self, size: int, rng: random.Random) -> int:
        total = self.random_weight + self.newest_weight + self.oldest_weight
        choice = rng.random() * total
        if choice < self.random_weight:
            return rng.randrange(size)
        if choice < self.random_weight + self.newest_weight:
            return size - 1
        return 0

    def _generate(self, maze: Maze, rng: random.Random) -> None:
        maze.fill_all()

        start = maze.random_cell(rng)
        start.visited = True
        active = [start]

        while active:
            index = self._choose_index(len(active), rng)
            current = active[index]

            unvisited = [cell for cell in current.neighbors() if not cell.visited]
            if unvisited:
                neighbor = rng.choice(unvisited)
                current.connect_with(neighbor)
                neighbor.visited = True
                active.append(neighbor)
            else:
                del active[index]

    def __repr__(self) -> str:
        return (
            f"GrowingTreeGenerator(random_weight={self.random_weight}, "
            f"newest_weight={self.newest_weight}, oldest_weight={self.oldest_weight})"
        )
