"""
Theta maze: concentric rings of cells around a center cell.

Ring widths grow with the circumference. A ring is subdivided when its
circumference reaches ``subdivision`` times the width of the last subdivided
ring, and every ring width is a multiple of the previous one. Consequently a
cell has one inward neighbor and one or several outward neighbors.

Positions are ``PolarPosition(r, x)`` and indices wrap around each ring.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from mazeforge.core.cell import Cell, Side
from mazeforge.core.maze import Maze, MazeType
from mazeforge.core.opening import Opening
from mazeforge.core.position import PolarPosition
from mazeforge.utils.exceptions import InvalidParameterError, validate_parameter_value

if TYPE_CHECKING:
    from collections.abc import Iterator


class ThetaSide(Side):
    OUT = (1, None, "OUT", "IN")
    IN = (2, None, "IN", "OUT")
    CW = (4, (-1, 0), "CW", "CCW")
    CCW = (8, (1, 0), "CCW", "CW")


class ThetaCell(Cell):
    """
    Cell of a theta maze.

    The OUT bit is only meaningful on the outermost ring. Elsewhere the state
    of the outward side is read from the IN walls of the outward cells.
    """

    sides = (ThetaSide.OUT, ThetaSide.IN, ThetaSide.CW, ThetaSide.CCW)

    def cell_on_side(self, side: Side) -> Cell | None:
        if side is ThetaSide.OUT:
            return self.maze.outward_cell_of(self)
        if side is ThetaSide.IN:
            return self.maze.inward_cell_of(self)
        dx, _ = side.offset
        cell = self.maze.cell_at(self.position.x + dx, self.position.r)
        return None if cell is self else cell

    def outward_cells(self) -> list[Cell]:
        return self.maze.outward_cells_of(self)

    def neighbors(self) -> list[Cell]:
        found: list[Cell] = []
        for side in self.all_sides:
            candidates = self.outward_cells() if side is ThetaSide.OUT else [self.cell_on_side(side)]
            for cell in candidates:
                if cell is not None and cell not in found:
                    found.append(cell)
        return found

    def accessible_neighbors(self) -> list[Cell]:
        found: list[Cell] = []
        for side in self.all_sides:
            if side is ThetaSide.OUT:
                candidates = [cell for cell in self.outward_cells() if not cell.has_side(ThetaSide.IN)]
            elif not self.has_side(side):
                candidates = [self.cell_on_side(side)]
            else:
                candidates = []
            for cell in candidates:
                if cell is not None and cell not in found:
                    found.append(cell)
        return found

    def has_side(self, side: Side) -> bool:
        if side is ThetaSide.OUT:
            outward = self.outward_cells()
            if outward:
                return all(cell.has_side(ThetaSide.IN) for cell in outward)
        return super().has_side(side)

    def side_of(self, cell: Cell) -> Side | None:
        if cell.maze is not self.maze:
            return None
        for side in self.all_sides:
            if side is ThetaSide.OUT:
                if any(outward is cell for outward in self.outward_cells()):
                    return side
            elif self.cell_on_side(side) is cell:
                return side
        return None

    def distance_to(self, cell: Cell) -> int:
        """
        Ring difference.

        Cutting through inner rings can be shorter than following a ring, so
        the index difference is not a lower bound.
        """
        return abs(self.position.r - cell.position.r)


class ThetaMaze(Maze):
    """
    Circular maze.

    Args:
        radius: Number of rings including the center cell, at least 1
        center_radius: Radius of the center cell relative to the ring width
        subdivision: Ratio between the circumference of a ring and the width
            of the last subdivided ring required to subdivide again
    """

    maze_type = MazeType.THETA

    def __init__(self, radius: int, center_radius: float = 1.0, subdivision: float = 1.5):
        super().__init__()
        validate_parameter_value(radius, "radius", int, (1, math.inf), component="ThetaMaze")
        for name, value in (("center_radius", center_radius), ("subdivision", subdivision)):
            validate_parameter_value(value, name, (int, float), component="ThetaMaze")
            if value <= 0:
                raise InvalidParameterError(name, value, component="ThetaMaze", reason="must be greater than 0")

        self.radius = radius
        self.center_radius = center_radius
        self.subdivision = subdivision

        self.rings: list[list[ThetaCell]] = []
        last_width = 1
        for r in range(radius):
            circumference = 0.0 if r == 0 else (r + center_radius - 1) * math.tau
            if circumference < last_width * subdivision:
                row_width = last_width
            else:
                # Largest multiple of the last width, at least doubling it
                row_width = max(int(circumference // last_width) * last_width, last_width * 2)
                last_width = row_width
            self.rings.append(
                [ThetaCell(self, PolarPosition(r=r, x=x, row_width=row_width)) for x in range(row_width)]
            )

    def cell_at(self, x: int, r: int) -> ThetaCell | None:
        if not 0 <= r < len(self.rings):
            return None
        ring = self.rings[r]
        return ring[x % len(ring)]

    def cells(self) -> Iterator[ThetaCell]:
        for ring in self.rings:
            yield from ring

    @property
    def cell_count(self) -> int:
        return sum(len(ring) for ring in self.rings)

    def ring_width(self, r: int) -> int:
        return len(self.rings[r])

    def inward_cell_of(self, cell: ThetaCell) -> ThetaCell | None:
        pos = cell.position
        if pos.r == 0:
            return None
        inner = self.rings[pos.r - 1]
        return inner[pos.x * len(inner) // len(self.rings[pos.r])]

    def outward_cell_of(self, cell: ThetaCell) -> ThetaCell | None:
        pos = cell.position
        if pos.r == len(self.rings) - 1:
            return None
        outer = self.rings[pos.r + 1]
        return outer[pos.x * len(outer) // len(self.rings[pos.r])]

    def outward_cells_of(self, cell: ThetaCell) -> list[ThetaCell]:
        pos = cell.position
        if pos.r == len(self.rings) - 1:
            return []
        outer = self.rings[pos.r + 1]
        factor = len(outer) // len(self.rings[pos.r])
        return outer[pos.x * factor : pos.x * factor + factor]

    def opening_cell(self, opening: Opening) -> ThetaCell | None:
        r = Opening.resolve_axis(opening.y, len(self.rings))
        if not 0 <= r < len(self.rings):
            return None
        x = Opening.resolve_axis(opening.x, len(self.rings[r]))
        return self.cell_at(x, r)

    def describe_size(self) -> str:
        return f"radius {self.radius}"
