"""
Cell positions and their distance metrics.

Two coordinate systems are used by the maze topologies:

- ``Position2D``: cartesian column/row pair used by every grid-based maze.
  Distance is the Manhattan distance; Chebyshev and hexagonal distances are
  available for topologies with diagonal moves.
- ``PolarPosition``: index in a ring plus ring number, used by theta mazes.
  Distance wraps around the ring.

Both are immutable, hashable and totally ordered so they can be used as keys
and as heap tie-breakers.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class Position2D:
    """Column ``x`` and row ``y`` of a cell in a grid."""

    x: int
    y: int

    def __add__(self, offset: tuple[int, int]) -> Position2D:
        dx, dy = offset
        return Position2D(self.x + dx, self.y + dy)

    def distance_to(self, other: Position2D) -> int:
        """Manhattan distance to another position."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def chebyshev_distance_to(self, other: Position2D) -> int:
        """Distance when a single move can change both coordinates."""
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def hex_distance_to(self, other: Position2D) -> int:
        """Distance on a hexagonal grid skewed so that ``(1, 1)`` is a single move."""
        dx = other.x - self.x
        dy = other.y - self.y
        return max(abs(dx), abs(dy), abs(dx - dy))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, order=True)
class PolarPosition:
    """
    Index ``x`` of a cell in ring ``r`` of a circular maze.

    ``row_width`` is the number of cells in the ring and is only used to wrap
    distances. It does not take part in equality or ordering.
    """

    r: int
    x: int
    row_width: int = field(default=0, compare=False)

    def distance_to(self, other: PolarPosition) -> int:
        """Ring distance plus the shortest way around the ring."""
        dx = abs(self.x - other.x)
        return abs(self.r - other.r) + min(dx, self.row_width - dx)

    def __str__(self) -> str:
        return f"(x: {self.x}, r: {self.r})"
