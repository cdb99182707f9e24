"""
Weave maze: orthogonal maze where passages can run under other passages.

A passage may skip up to ``max_weave`` consecutive cells on its axis, as long
as each skipped cell is a straight corridor perpendicular to it. Skipped cells
are flagged as tunnels; they keep their own walls and the passage continues
underneath them.
"""

from __future__ import annotations

from mazeforge.core.cell import Cell, Side
from mazeforge.core.grid import GridMaze
from mazeforge.core.maze import MazeType
from mazeforge.topology.orthogonal import OrthogonalCell, OrthogonalSide
from mazeforge.utils.exceptions import InvalidParameterError, validate_parameter_value

TUNNEL = 16

# Wall words of a straight corridor, tunnel flag excluded
HORIZONTAL_PASSAGE = OrthogonalSide.NORTH.bit | OrthogonalSide.SOUTH.bit
VERTICAL_PASSAGE = OrthogonalSide.EAST.bit | OrthogonalSide.WEST.bit


class WeaveCell(OrthogonalCell):
    """
    Cell of a weave maze.

    Attributes:
        tunnel_distance: Distance map value of the passage running under this
            cell, -1 if there is none
    """

    def __init__(self, maze, position):
        super().__init__(maze, position)
        self.tunnel_distance = -1

    @property
    def has_tunnel(self) -> bool:
        return self.value & TUNNEL == TUNNEL

    def is_passage_perpendicular_to(self, side: Side) -> bool:
        """True if this cell is a straight corridor crossing the ``side`` axis."""
        if side in (OrthogonalSide.NORTH, OrthogonalSide.SOUTH):
            return self.value == HORIZONTAL_PASSAGE
        return self.value == VERTICAL_PASSAGE

    def _cells_ahead(self, side: Side):
        dx, dy = side.offset
        for i in range(self.maze.max_weave + 1):
            distance = i + 1
            yield i, self.maze.cell_at(self.position.x + dx * distance, self.position.y + dy * distance)

    def neighbors(self) -> list[Cell]:
        found: list[Cell] = []
        for side in self.all_sides:
            for _, cell in self._cells_ahead(side):
                if cell is None or cell.has_tunnel:
                    break
                found.append(cell)
                if not cell.is_passage_perpendicular_to(side):
                    break
        return found

    def accessible_neighbors(self) -> list[Cell]:
        found: list[Cell] = []
        for side in self.all_sides:
            for i, cell in self._cells_ahead(side):
                if cell is None or (i == 0 and self.has_side(side)):
                    break
                if not cell.has_tunnel or not cell.has_side(side):
                    found.append(cell)
                    break
        return found

    def _axis_to(self, cell: Cell) -> tuple[Side, int]:
        dx = cell.position.x - self.position.x
        dy = cell.position.y - self.position.y
        if dx != 0 and dy == 0:
            return (OrthogonalSide.EAST if dx > 0 else OrthogonalSide.WEST), abs(dx)
        if dy != 0 and dx == 0:
            return (OrthogonalSide.SOUTH if dy > 0 else OrthogonalSide.NORTH), abs(dy)
        raise ValueError(f"Cells {self.position} and {cell.position} are not on the same row or column")

    def side_of(self, cell: Cell) -> Side | None:
        if cell.maze is not self.maze or cell is self:
            return None
        try:
            side, _ = self._axis_to(cell)
        except ValueError:
            return None
        return side

    def cells_between(self, cell: Cell) -> list[Cell]:
        side, diff = self._axis_to(cell)
        dx, dy = side.offset
        return [self.maze.cell_at(self.position.x + dx * i, self.position.y + dy * i) for i in range(1, diff)]

    def connect_with(self, cell: Cell) -> None:
        """
        Connect with a cell on the same row or column.

        Cells between the two are flagged as tunnels. Their walls are left
        untouched.

        Raises:
            ValueError: If the cells are not on the same row or column
        """
        if cell.maze is not self.maze:
            return
        side, _ = self._axis_to(cell)
        self.value = self.value & ~side.bit
        for tunnel in self.cells_between(cell):
            tunnel.value = tunnel.value | TUNNEL
        cell.value = cell.value & ~side.opposite.bit


class WeaveMaze(GridMaze):
    """
    Orthogonal maze with passages weaving under others.

    Args:
        width: Number of columns, at least 1
        height: Number of rows, at least 1
        max_weave: Maximum number of cells a passage can run under, at least 0
    """

    maze_type = MazeType.WEAVE
    cell_class = WeaveCell

    def __init__(self, width: int, height: int, max_weave: int = 1):
        validate_parameter_value(max_weave, "max_weave", expected_type=int, component="WeaveMaze")
        if max_weave < 0:
            raise InvalidParameterError(
                "max_weave", max_weave, valid_range=(0, float("inf")), component="WeaveMaze"
            )
        self.max_weave = max_weave
        super().__init__(width, height)

    def fill_all(self) -> None:
        super().fill_all()
        for cell in self.cells():
            cell.tunnel_distance = -1

    def reset_all(self) -> None:
        super().reset_all()
        for cell in self.cells():
            cell.tunnel_distance = -1

    def clear_distance_map(self) -> None:
        super().clear_distance_map()
        for cell in self.cells():
            cell.tunnel_distance = -1
