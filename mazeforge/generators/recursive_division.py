"""
Recursive division algorithm.

A wall adder rather than a passage carver: the maze starts without any inner
wall, then areas are split in two by a wall with a single passage, until
every area is one cell wide or high. Produces long straight walls with a
visible rectangular texture.

Areas are processed from a FIFO work queue. Only works on mazes with rows and
columns of square cells.
"""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass

from mazeforge.core.maze import Maze, MazeType
from mazeforge.topology.orthogonal import OrthogonalSide

from .base import MazeGenerator


@dataclass(frozen=True)
class Area:
    x: int
    y: int
    width: int
    height: int


class RecursiveDivisionGenerator(MazeGenerator):
    name = "RecursiveDivision"
    supported_types = frozenset({MazeType.ORTHOGONAL, MazeType.WEAVE})

    def _generate(self, maze: Maze, rng: random.Random) -> None:
        maze.reset_all()
        for cell in maze.cells():
            for side in cell.all_sides:
                if cell.cell_on_side(side) is None:
                    cell.value |= side.bit

        queue = deque([Area(0, 0, maze.width, maze.height)])
        while queue:
            area = queue.popleft()
            if area.width <= 1 or area.height <= 1:
                continue

            horizontal = area.width < area.height or (area.width == area.height and rng.random() < 0.5)
            if horizontal:
                wall_y = area.y + rng.randint(1, area.height - 1)
                passage = rng.randrange(area.width)
                for i in range(area.width):
                    if i != passage:
                        maze.cell_at(area.x + i, wall_y).close_side(OrthogonalSide.NORTH)
                top_height = wall_y - area.y
                queue.append(Area(area.x, area.y, area.width, top_height))
                queue.append(Area(area.x, wall_y, area.width, area.height - top_height))
            else:
                wall_x = area.x + rng.randint(1, area.width - 1)
                passage = rng.randrange(area.height)
                for i in range(area.height):
                    if i != passage:
                        maze.cell_at(wall_x, area.y + i).close_side(OrthogonalSide.WEST)
                left_width = wall_x - area.x
                queue.append(Area(area.x, area.y, left_width, area.height))
                queue.append(Area(wall_x, area.y, area.width - left_width, area.height))
