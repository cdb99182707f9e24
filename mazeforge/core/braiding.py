"""
Braiding: removal of deadends from a generated maze.

Braiding opens a wall of some deadends, which introduces loops. The amount is
given either as a number of deadends or as a fraction of all deadends present
when braiding starts.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from mazeforge.utils.exceptions import InvalidParameterError
from mazeforge.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from mazeforge.core.maze import Maze

logger = get_logger(__name__)


class Braiding:
    """
    Braiding setting.

    Exactly one of ``count`` and ``percent`` must be given.

    Args:
        count: Number of deadends to remove, at least 0
        percent: Fraction of deadends to remove, between 0 and 1
    """

    def __init__(self, count: int | None = None, percent: float | None = None):
        if (count is None) == (percent is None):
            raise InvalidParameterError(
                "braiding",
                {"count": count, "percent": percent},
                component="Braiding",
                reason="give exactly one of count or percent",
            )
        if count is not None and count < 0:
            raise InvalidParameterError("count", count, valid_range=(0, float("inf")), component="Braiding")
        if percent is not None and not 0 <= percent <= 1:
            raise InvalidParameterError("percent", percent, valid_range=(0, 1), component="Braiding")

        self.count = count
        self.percent = percent

    @property
    def by_count(self) -> bool:
        return self.count is not None

    def deadends_to_remove(self, total: int) -> int:
        """Number of deadends to remove out of ``total`` deadends."""
        if self.count is not None:
            return min(self.count, total)
        return round(total * self.percent)

    def __repr__(self) -> str:
        if self.count is not None:
            return f"Braiding(count={self.count})"
        return f"Braiding(percent={self.percent})"

    def __str__(self) -> str:
        if self.count is not None:
            return f"Remove {self.count} deadends"
        return f"Remove {self.percent * 100:g}% of deadends"


def braid_maze(maze: Maze, braiding: Braiding, rng: random.Random | None = None) -> int:
    """
    Open walls of deadends according to ``braiding``.

    Deadends are collected once, then drawn uniformly without replacement.
    A drawn cell that stopped being a deadend (because a neighbor was braided
    into it) is consumed without change. Otherwise it is connected to a walled
    neighbor, preferably the one opposite its only open side.

    Args:
        maze: Generated maze to braid
        braiding: Amount of deadends to remove
        rng: Random source

    Returns:
        Number of walls actually opened
    """
    rng = rng or random.Random()

    deadends = [cell for cell in maze.cells() if cell.is_deadend]
    count = braiding.deadends_to_remove(len(deadends))
    logger.debug(f"Braiding {count} of {len(deadends)} deadends")

    opened = 0
    removed = 0
    while deadends and removed < count:
        deadend = deadends.pop(rng.randrange(len(deadends)))
        removed += 1
        if not deadend.is_deadend:
            continue

        accessible = deadend.accessible_neighbors()
        targets = [cell for cell in deadend.neighbors() if cell not in accessible]
        if not targets:
            continue

        target = targets[0]
        open_sides = [side for side in deadend.all_sides if not deadend.has_side(side)]
        if open_sides:
            facing = deadend.cell_on_side(open_sides[0].opposite)
            if facing is not None and facing in targets:
                target = facing

        deadend.connect_with(target)
        opened += 1

    return opened
