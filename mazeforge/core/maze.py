"""
Maze container shared by every topology.

A maze owns a fixed set of cells created once at construction. On top of the
cells it tracks:

- the opening cells, in creation order (the first two are the solve endpoints)
- the last computed solution path
- whether a distance map is currently stored on the cells

Topology subclasses provide cell storage and coordinate lookup; every
algorithm (generation, solving, distance map, braiding) goes through the
``Cell`` interface only.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from mazeforge.core.braiding import Braiding, braid_maze
from mazeforge.core.distance_map import compute_distance_map
from mazeforge.core.solver import find_path
from mazeforge.utils.exceptions import InvalidOpeningError, NotEnoughOpeningsError
from mazeforge.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from mazeforge.core.cell import Cell
    from mazeforge.core.opening import Opening

logger = get_logger(__name__)


class MazeType(Enum):
    """Available maze topologies."""

    ORTHOGONAL = "orthogonal"
    WEAVE = "weave"
    SIGMA = "sigma"
    DELTA = "delta"
    UPSILON = "upsilon"
    ZETA = "zeta"
    THETA = "theta"

    @property
    def is_quadrilateral(self) -> bool:
        """Square-celled types with rows and columns of four-sided cells."""
        return self in (MazeType.ORTHOGONAL, MazeType.WEAVE)


class Maze(ABC):
    """
    Base class for all mazes.

    Attributes:
        openings: Opening cells in creation order
        solution: Cells of the last solution path from the first to the second
            opening, or None if no solution was found or computed
        has_distance_map: Whether cell distances are currently set
    """

    maze_type: ClassVar[MazeType]

    def __init__(self):
        self.openings: list[Cell] = []
        self.solution: list[Cell] | None = None
        self.has_distance_map = False

    @abstractmethod
    def cell_at(self, x: int, y: int) -> Cell | None:
        """Return the cell at the given coordinates, or None if there is none."""

    @abstractmethod
    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell, in storage order."""

    @abstractmethod
    def opening_cell(self, opening: Opening) -> Cell | None:
        """Resolve an opening to the cell it designates."""

    @abstractmethod
    def describe_size(self) -> str:
        """Human readable dimensions, used in messages."""

    @property
    def cell_count(self) -> int:
        return sum(1 for _ in self.cells())

    def cell_list(self) -> list[Cell]:
        return list(self.cells())

    def random_cell(self, rng: random.Random | None = None) -> Cell:
        """Return a uniformly chosen cell."""
        return (rng or random.Random()).choice(self.cell_list())

    def reset_all(self) -> None:
        """Clear every wall and every visited flag."""
        for cell in self.cells():
            cell.value = 0
            cell.visited = False

    def fill_all(self) -> None:
        """Set every wall and clear every visited flag."""
        for cell in self.cells():
            cell.value = cell.all_sides_value
            cell.visited = False

    def clear_visited(self) -> None:
        for cell in self.cells():
            cell.visited = False

    def connection_count(self) -> int:
        """Number of passages between pairs of cells."""
        return sum(len(cell.accessible_neighbors()) for cell in self.cells()) // 2

    def create_opening(self, opening: Opening) -> Cell:
        """
        Create an opening in the maze.

        The first side of the opening cell without a neighbor is opened. A cell
        without such a side is still recorded as an opening.

        Args:
            opening: Opening coordinates

        Returns:
            The opening cell

        Raises:
            InvalidOpeningError: If the opening designates no cell or an
                existing opening
        """
        cell = self.opening_cell(opening)
        if cell is None:
            raise InvalidOpeningError(
                opening,
                "does not resolve to a cell",
                component=type(self).__name__,
                maze_size=self.describe_size(),
            )
        if cell in self.openings:
            raise InvalidOpeningError(opening, "is already an opening", component=type(self).__name__)

        for side in cell.all_sides:
            if cell.cell_on_side(side) is None:
                cell.open_side(side)
                break
        else:
            logger.warning(f"Opening {opening} is not on the maze border, no wall was removed")

        self.openings.append(cell)
        return cell

    def solve(self) -> bool:
        """
        Find the path from the first opening to the second.

        Returns:
            True if a path was found and stored in ``solution``

        Raises:
            NotEnoughOpeningsError: If the maze has less than two openings
        """
        if len(self.openings) < 2:
            raise NotEnoughOpeningsError(len(self.openings), component=type(self).__name__)

        self.solution = find_path(self.openings[0], self.openings[1])
        if self.solution is None:
            logger.info("No path between the first two openings")
            return False

        logger.debug(f"Solution found with {len(self.solution)} cells")
        return True

    def generate_distance_map(self, start: Opening | None = None, rng: random.Random | None = None) -> Cell:
        """
        Compute the distance of every cell from a start cell.

        Args:
            start: Start position, a random cell when None
            rng: Random source used to pick the start cell

        Returns:
            The start cell

        Raises:
            InvalidOpeningError: If ``start`` designates no cell
            DisconnectedMazeError: If some cell cannot be reached
        """
        if start is None:
            start_cell = self.random_cell(rng)
        else:
            start_cell = self.opening_cell(start)
            if start_cell is None:
                raise InvalidOpeningError(
                    start,
                    "does not resolve to a cell",
                    component=type(self).__name__,
                    maze_size=self.describe_size(),
                )

        self.clear_distance_map()
        compute_distance_map(self, start_cell)
        self.has_distance_map = True
        return start_cell

    def clear_distance_map(self) -> None:
        for cell in self.cells():
            cell.distance = -1
        self.has_distance_map = False

    @property
    def max_distance(self) -> int:
        """Largest distance of the distance map, -1 without a distance map."""
        return max((cell.distance for cell in self.cells()), default=-1)

    def braid(self, braiding: Braiding, rng: random.Random | None = None) -> int:
        """Remove deadends according to ``braiding``. Returns the number of walls opened."""
        return braid_maze(self, braiding, rng)

    def __str__(self) -> str:
        return f"{type(self).__name__}[{self.describe_size()}]"
