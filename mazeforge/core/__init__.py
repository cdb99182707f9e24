"""Topology-independent maze model: cells, mazes, openings and maze algorithms."""

from __future__ import annotations

from .braiding import Braiding, braid_maze
from .cell import Cell, GridCell, Side
from .distance_map import compute_distance_map
from .grid import GridMaze, Shape, ShapedMaze
from .maze import Maze, MazeType
from .opening import Opening, OpeningAnchor
from .position import PolarPosition, Position2D
from .solver import find_path

__all__ = [
    "Braiding",
    "Cell",
    "GridCell",
    "GridMaze",
    "Maze",
    "MazeType",
    "Opening",
    "OpeningAnchor",
    "PolarPosition",
    "Position2D",
    "Shape",
    "ShapedMaze",
    "Side",
    "braid_maze",
    "compute_distance_map",
    "find_path",
]
