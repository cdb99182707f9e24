"""
Storage bases for grid mazes.

- ``GridMaze``: full rectangle of ``width`` columns by ``height`` rows
  (orthogonal, weave, upsilon, zeta).
- ``ShapedMaze``: columns of varying length, each shifted by a row offset, so
  that the cells form a rectangle, triangle, hexagon or rhombus (delta and
  sigma). Positions stay in the skewed grid space, lookups subtract the column
  offset.
"""

from __future__ import annotations

from abc import abstractmethod
from collections import deque
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from mazeforge.core.maze import Maze
from mazeforge.core.opening import Opening
from mazeforge.core.position import Position2D
from mazeforge.utils.exceptions import InvalidParameterError, validate_parameter_value

if TYPE_CHECKING:
    from collections.abc import Iterator

    from mazeforge.core.cell import Cell


class Shape(Enum):
    """Overall shape of a delta or sigma maze."""

    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"
    HEXAGON = "hexagon"
    RHOMBUS = "rhombus"

    @property
    def single_size(self) -> bool:
        """Triangles and hexagons only use the width as size."""
        return self in (Shape.TRIANGLE, Shape.HEXAGON)


def validate_dimension(value, name: str, component: str) -> None:
    validate_parameter_value(value, name, expected_type=int, valid_range=(1, float("inf")), component=component)


class GridMaze(Maze):
    """Rectangular maze stored as ``grid[x][y]``."""

    cell_class: ClassVar[type[Cell]]

    def __init__(self, width: int, height: int):
        super().__init__()
        validate_dimension(width, "width", type(self).__name__)
        validate_dimension(height, "height", type(self).__name__)
        self.width = width
        self.height = height
        self.grid: list[list[Cell]] = [
            [self.cell_class(self, Position2D(x, y)) for y in range(height)] for x in range(width)
        ]

    def cell_at(self, x: int, y: int) -> Cell | None:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.grid[x][y]
        return None

    def cells(self) -> Iterator[Cell]:
        for column in self.grid:
            yield from column

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def opening_cell(self, opening: Opening) -> Cell | None:
        x = Opening.resolve_axis(opening.x, self.width)
        y = Opening.resolve_axis(opening.y, self.height)
        return self.cell_at(x, y)

    def describe_size(self) -> str:
        return f"{self.width}x{self.height}"


class ShapedMaze(Maze):
    """Maze stored as columns of varying length with per-column row offsets."""

    cell_class: ClassVar[type[Cell]]

    def __init__(self, width: int, height: int, shape: Shape | str = Shape.RECTANGLE):
        super().__init__()
        self.shape = Shape(shape)
        validate_dimension(width, "width", type(self).__name__)
        if not self.shape.single_size:
            validate_dimension(height, "height", type(self).__name__)
        self.width = width
        self.height = width if self.shape.single_size else height

        grid_width, rows_for_column, row_offset = self._layout()
        self.row_offsets = [row_offset(x) for x in range(grid_width)]
        self.grid: list[list[Cell]] = [
            [self.cell_class(self, Position2D(x, y + self.row_offsets[x])) for y in range(rows_for_column(x))]
            for x in range(grid_width)
        ]

        if not self._is_connected():
            raise InvalidParameterError(
                "shape",
                self.describe_size(),
                component=type(self).__name__,
                reason="the cells do not form a single connected maze",
            )

    def _is_connected(self) -> bool:
        start = next(self.cells())
        seen = {start}
        queue = deque([start])
        while queue:
            for neighbor in queue.popleft().neighbors():
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(neighbor)
        return len(seen) == self.cell_count

    @abstractmethod
    def _layout(self) -> tuple[int, Callable[[int], int], Callable[[int], int]]:
        """Return the number of columns, the rows of a column and its row offset."""

    def cell_at(self, x: int, y: int) -> Cell | None:
        if not 0 <= x < len(self.grid):
            return None
        actual_y = y - self.row_offsets[x]
        if not 0 <= actual_y < len(self.grid[x]):
            return None
        return self.grid[x][actual_y]

    def cells(self) -> Iterator[Cell]:
        for column in self.grid:
            yield from column

    @property
    def cell_count(self) -> int:
        return sum(len(column) for column in self.grid)

    def opening_cell(self, opening: Opening) -> Cell | None:
        x = Opening.resolve_axis(opening.x, len(self.grid))
        if not 0 <= x < len(self.grid):
            return None
        y = Opening.resolve_axis(opening.y, len(self.grid[x])) + self.row_offsets[x]
        return self.cell_at(x, y)

    def describe_size(self) -> str:
        if self.shape.single_size:
            return f"{self.shape.value} of size {self.width}"
        return f"{self.shape.value} {self.width}x{self.height}"
