"""
Binary tree algorithm.

Every cell carves a passage toward one of two bias sides, chosen by a coin flip
when both neighbors exist. The result is a tree rooted in the corner where
neither bias neighbor exists, with long corridors along both bias sides.

Default bias:
- orthogonal and weave: north, east
- sigma: north, south-east
- theta: inward, clockwise

On theta mazes the clockwise neighbor of the first cell of a ring wraps around
the ring; that wrap is ignored so no ring becomes a closed loop.

A bias leaving more than one cell without a neighbor toward either side, such
as the default sigma bias on a single row, is rejected before any wall changes.
"""

from __future__ import annotations

import random

from mazeforge.core.cell import Cell, Side
from mazeforge.core.maze import Maze, MazeType
from mazeforge.topology.orthogonal import OrthogonalSide
from mazeforge.topology.sigma import SigmaSide
from mazeforge.topology.theta import ThetaSide
from mazeforge.utils.exceptions import InvalidParameterError

from .base import MazeGenerator

DEFAULT_BIAS: dict[MazeType, tuple[Side, Side]] = {
    MazeType.ORTHOGONAL: (OrthogonalSide.NORTH, OrthogonalSide.EAST),
    MazeType.WEAVE: (OrthogonalSide.NORTH, OrthogonalSide.EAST),
    MazeType.SIGMA: (SigmaSide.NORTH, SigmaSide.SOUTHEAST),
    MazeType.THETA: (ThetaSide.IN, ThetaSide.CW),
}


class BinaryTreeGenerator(MazeGenerator):
    """
    Binary tree generator.

    Args:
        bias: Pair of sides to carve toward, the default bias of the maze type
            when None
    """

    name = "BinaryTree"
    supported_types = frozenset(DEFAULT_BIAS)

    def __init__(self, bias: tuple[Side, Side] | None = None):
        if bias is not None and (len(bias) != 2 or bias[0] is bias[1]):
            raise InvalidParameterError("bias", bias, component=self.name, reason="expected two different sides")
        self.bias = bias

    def _generate(self, maze: Maze, rng: random.Random) -> None:
        side1, side2 = self.bias or DEFAULT_BIAS[maze.maze_type]
        sides = set(maze.cell_list()[0].all_sides)
        if side1 not in sides or side2 not in sides:
            raise InvalidParameterError(
                "bias",
                (side1, side2),
                component=self.name,
                reason=f"sides are not valid for {maze.maze_type.value} mazes",
            )

        # Every root starts its own tree
        roots = sum(
            1
            for cell in maze.cells()
            if self._cell_toward(cell, side1) is None and self._cell_toward(cell, side2) is None
        )
        if roots > 1:
            raise InvalidParameterError(
                "bias",
                (side1.name, side2.name),
                component=self.name,
                reason=f"{roots} cells of {maze} have no neighbor toward either side, the maze would be disconnected",
            )

        maze.fill_all()
        for cell in maze.cells():
            cell1 = self._cell_toward(cell, side1)
            cell2 = self._cell_toward(cell, side2)
            if rng.random() < 0.5:
                target = cell1 or cell2
            else:
                target = cell2 or cell1
            if target is not None:
                cell.connect_with(target)

    @staticmethod
    def _cell_toward(cell: Cell, side: Side) -> Cell | None:
        if side is ThetaSide.CW and cell.position.x == 0:
            return None
        if side is ThetaSide.CCW and cell.position.x == cell.position.row_width - 1:
            return None
        return cell.cell_on_side(side)
