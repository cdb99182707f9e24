"""
Maze topologies.

- orthogonal: square cells
- weave: square cells with passages running under others
- sigma: hexagonal cells
- delta: triangular cells
- upsilon: octagonal and square cells
- zeta: square cells with diagonal passages
- theta: rings of cells around a center
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mazeforge.core.grid import Shape
from mazeforge.core.maze import MazeType

from .delta import DeltaCell, DeltaMaze, DeltaSide
from .orthogonal import OrthogonalCell, OrthogonalMaze, OrthogonalSide
from .sigma import SigmaCell, SigmaMaze, SigmaSide
from .theta import ThetaCell, ThetaMaze, ThetaSide
from .unicursal import make_unicursal
from .upsilon import UpsilonCell, UpsilonMaze, UpsilonSide
from .weave import WeaveCell, WeaveMaze
from .zeta import ZetaCell, ZetaMaze, ZetaSide

if TYPE_CHECKING:
    from mazeforge.core.maze import Maze


def create_maze(
    maze_type: MazeType | str,
    width: int = 1,
    height: int | None = None,
    *,
    shape: Shape | str = Shape.RECTANGLE,
    radius: int | None = None,
    center_radius: float = 1.0,
    subdivision: float = 1.5,
    max_weave: int = 1,
) -> Maze:
    """
    Create an empty maze of the given type.

    Args:
        maze_type: Topology of the maze
        width: Number of columns (or shape size for delta and sigma)
        height: Number of rows, defaults to ``width``
        shape: Shape of delta and sigma mazes
        radius: Number of rings of theta mazes, defaults to ``width``
        center_radius: Relative center cell radius of theta mazes
        subdivision: Ring subdivision factor of theta mazes
        max_weave: Maximum tunnel length of weave mazes

    Returns:
        New maze with all walls cleared
    """
    maze_type = MazeType(maze_type)
    if height is None:
        height = width

    if maze_type is MazeType.ORTHOGONAL:
        return OrthogonalMaze(width, height)
    if maze_type is MazeType.WEAVE:
        return WeaveMaze(width, height, max_weave=max_weave)
    if maze_type is MazeType.SIGMA:
        return SigmaMaze(width, height, shape)
    if maze_type is MazeType.DELTA:
        return DeltaMaze(width, height, shape)
    if maze_type is MazeType.UPSILON:
        return UpsilonMaze(width, height)
    if maze_type is MazeType.ZETA:
        return ZetaMaze(width, height)
    return ThetaMaze(radius if radius is not None else width, center_radius, subdivision)


__all__ = [
    "DeltaCell",
    "DeltaMaze",
    "DeltaSide",
    "MazeType",
    "OrthogonalCell",
    "OrthogonalMaze",
    "OrthogonalSide",
    "Shape",
    "SigmaCell",
    "SigmaMaze",
    "SigmaSide",
    "ThetaCell",
    "ThetaMaze",
    "ThetaSide",
    "UpsilonCell",
    "UpsilonMaze",
    "UpsilonSide",
    "WeaveCell",
    "WeaveMaze",
    "ZetaCell",
    "ZetaMaze",
    "ZetaSide",
    "create_maze",
    "make_unicursal",
]
