"""
Eller's algorithm for row-by-row maze generation.

Only the sets of the current row are kept in memory.

Algorithm:
1. Put every cell of the row that is not in a set yet in its own set
2. Randomly join adjacent cells of different sets (horizontal bias)
3. Carve down from at least one cell of every set (vertical bias), the cells
   below join the set
4. On the last row, join every adjacent pair of different sets

Reference: Eller (1982), "An Efficient Method for Generating Mazes"
"""

from __future__ import annotations

import random

from mazeforge.core.cell import Cell
from mazeforge.core.maze import Maze, MazeType
from mazeforge.topology.orthogonal import OrthogonalSide
from mazeforge.utils.exceptions import InvalidParameterError

from .base import MazeGenerator


def _check_bias(name: str, value: float) -> None:
    if not 0 < value <= 1:
        raise InvalidParameterError(
            name, value, valid_range=(0, 1), component="Eller", reason="must be in (0, 1]"
        )


class EllerGenerator(MazeGenerator):
    """
    Eller's generator.

    Args:
        horizontal_bias: Probability of joining two adjacent cells of a row
        vertical_bias: Probability of carving down from each cell of a set
    """

    name = "Eller"
    supported_types = frozenset({MazeType.ORTHOGONAL})

    def __init__(self, horizontal_bias: float = 0.5, vertical_bias: float = 0.5):
        _check_bias("horizontal_bias", horizontal_bias)
        _check_bias("vertical_bias", vertical_bias)
        self.horizontal_bias = horizontal_bias
        self.vertical_bias = vertical_bias

    def _generate(self, maze: Maze, rng: random.Random) -> None:
        maze.fill_all()

        set_of: dict[Cell, int] = {}
        members: dict[int, list[Cell]] = {}
        next_set = 0

        for y in range(maze.height):
            last_row = y == maze.height - 1
            row = [maze.cell_at(x, y) for x in range(maze.width)]

            for cell in row:
                if cell not in set_of:
                    set_of[cell] = next_set
                    members[next_set] = [cell]
                    next_set += 1

            for cell, following in zip(row, row[1:]):
                set_id, other_id = set_of[cell], set_of[following]
                if set_id != other_id and (last_row or rng.random() < self.horizontal_bias):
                    cell.open_side(OrthogonalSide.EAST)
                    for member in members.pop(other_id):
                        set_of[member] = set_id
                        members[set_id].append(member)

            if last_row:
                break

            row_sets = {set_of[cell] for cell in row}
            for set_id in sorted(row_sets):
                in_row = [cell for cell in members[set_id] if cell.position.y == y]
                carved = [cell for cell in in_row if rng.random() < self.vertical_bias]
                if not carved:
                    carved = [rng.choice(in_row)]

                members[set_id] = []
                for cell in in_row:
                    del set_of[cell]
                for cell in carved:
                    cell.open_side(OrthogonalSide.SOUTH)
                    below = cell.cell_on_side(OrthogonalSide.SOUTH)
                    set_of[below] = set_id
                    members[set_id].append(below)
