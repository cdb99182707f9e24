"""
Cell and side abstractions shared by every maze topology.

A cell stores its walls in an integer bit word: one bit per side, a set bit is
a wall and a clear bit is a passage. Opening or closing a side always updates
the cell across that side too, so the two halves of a shared wall never
disagree.

Each topology defines:
- a ``Side`` enumeration (bit, relative offset, symbol, opposite side name)
- a ``Cell`` subclass resolving the neighbor across each side

Algorithms only use the ``Cell`` interface below, so the same generator code
runs on square, hexagonal, triangular, circular and weave mazes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mazeforge.core.maze import Maze


class Side(Enum):
    """
    Base class for the side enumeration of a topology.

    Members are declared as ``NAME = (bit, offset, symbol, opposite_name)``
    where ``offset`` is the relative position of the neighbor across the side,
    or ``None`` when it depends on the cell.
    """

    def __init__(self, bit: int, offset: tuple[int, int] | None, symbol: str, opposite_name: str):
        self.bit = bit
        self.offset = offset
        self.symbol = symbol
        self._opposite_name = opposite_name

    @property
    def opposite(self) -> Side:
        return type(self)[self._opposite_name]

    @property
    def is_diagonal(self) -> bool:
        return self.offset is not None and self.offset[0] != 0 and self.offset[1] != 0


class Cell(ABC):
    """
    A single cell of a maze.

    Cells compare by identity: there is exactly one cell per position of a
    maze.

    Attributes:
        maze: Maze owning this cell
        position: Position of the cell in its maze
        visited: Scratch flag used by generators and searches
        distance: Distance map value, -1 when no distance map is computed
    """

    sides: ClassVar[Sequence[Side]] = ()

    def __init__(self, maze: Maze, position):
        self.maze = maze
        self.position = position
        self.visited = False
        self.distance = -1
        self._value = 0

    @property
    def value(self) -> int:
        """Wall bit word of the cell."""
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = value

    @property
    def all_sides(self) -> Sequence[Side]:
        """Sides of this cell, in enumeration order."""
        return self.sides

    @property
    def all_sides_value(self) -> int:
        """Value of the cell with every wall set."""
        total = 0
        for side in self.all_sides:
            total |= side.bit
        return total

    @abstractmethod
    def cell_on_side(self, side: Side) -> Cell | None:
        """Return the neighbor across ``side``, or None at the maze border."""

    def neighbors(self) -> list[Cell]:
        """Cells that can validly be connected to this cell right now."""
        found: list[Cell] = []
        for side in self.all_sides:
            cell = self.cell_on_side(side)
            if cell is not None and cell not in found:
                found.append(cell)
        return found

    def accessible_neighbors(self) -> list[Cell]:
        """Neighbors reachable from this cell through an open side."""
        found: list[Cell] = []
        for side in self.all_sides:
            if not self.has_side(side):
                cell = self.cell_on_side(side)
                if cell is not None and cell not in found:
                    found.append(cell)
        return found

    def has_side(self, side: Side) -> bool:
        """Return True if there is a wall on ``side``."""
        return self.value & side.bit == side.bit

    def open_side(self, side: Side) -> None:
        """Remove the wall on ``side``, on both this cell and the cell across it."""
        cell = self.cell_on_side(side)
        if cell is not None:
            cell.value = cell.value & ~side.opposite.bit
        self.value = self.value & ~side.bit

    def close_side(self, side: Side) -> None:
        """Add a wall on ``side``, on both this cell and the cell across it."""
        cell = self.cell_on_side(side)
        if cell is not None:
            cell.value = cell.value | side.opposite.bit
        self.value = self.value | side.bit

    def connect_with(self, cell: Cell) -> None:
        """
        Open the wall shared with ``cell``.

        Does nothing if ``cell`` is not adjacent to this cell.
        """
        side = self.side_of(cell)
        if side is not None:
            cell.value = cell.value & ~side.opposite.bit
            self.value = self.value & ~side.bit

    def side_of(self, cell: Cell) -> Side | None:
        """Return the side of this cell on which ``cell`` lies, if adjacent."""
        if cell.maze is not self.maze:
            return None
        for side in self.all_sides:
            if self.cell_on_side(side) is cell:
                return side
        return None

    def cells_between(self, cell: Cell) -> list[Cell]:
        """Cells that a passage from this cell to ``cell`` runs under."""
        return []

    def distance_to(self, cell: Cell) -> int:
        """
        Lower bound on the number of cells travelled to reach ``cell``.

        Used as the path search heuristic, so it must never overestimate. The
        default is the position distance, exact for grids where every move
        changes a single coordinate by one.
        """
        return self.position.distance_to(cell.position)

    @property
    def wall_count(self) -> int:
        return sum(1 for side in self.all_sides if self.has_side(side))

    @property
    def is_deadend(self) -> bool:
        """A deadend has exactly one open side."""
        return self.wall_count == len(self.all_sides) - 1

    def __repr__(self) -> str:
        walls = ",".join(side.symbol for side in self.all_sides if self.has_side(side)) or "NONE"
        state = "visited" if self.visited else "unvisited"
        return f"{type(self).__name__}(pos={self.position}, walls={walls}, {state})"


class GridCell(Cell):
    """Cell whose neighbors are found by adding a fixed offset to its position."""

    def cell_on_side(self, side: Side) -> Cell | None:
        if side.offset is None:
            return None
        pos = self.position + side.offset
        return self.maze.cell_at(pos.x, pos.y)
