"""
Maze generation algorithms.

All generators share the same interface, ``generate(maze, rng)``, and work
through the cell interface only, so most of them run on every topology:

| Algorithm            | Topologies                         |
|----------------------|------------------------------------|
| recursive_backtracker| all                                |
| hunt_kill            | all                                |
| kruskal              | all                                |
| aldous_broder        | all                                |
| prim                 | all                                |
| growing_tree         | all                                |
| wilson               | all except zeta and weave          |
| binary_tree          | orthogonal, weave, sigma, theta    |
| sidewinder           | orthogonal, weave                  |
| recursive_division   | orthogonal, weave                  |
| eller                | orthogonal                         |

Every algorithm produces a perfect maze: one path between any two cells.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .aldous_broder import AldousBroderGenerator
from .base import MazeGenerator
from .binary_tree import BinaryTreeGenerator
from .eller import EllerGenerator
from .growing_tree import GrowingTreeGenerator
from .hunt_kill import HuntKillGenerator
from .kruskal import KruskalGenerator
from .prim import PrimGenerator
from .recursive_backtracker import RecursiveBacktrackerGenerator
from .recursive_division import RecursiveDivisionGenerator
from .sidewinder import SidewinderGenerator
from .wilson import WilsonGenerator


class MazeAlgorithm(Enum):
    """Available maze generation algorithms."""

    RECURSIVE_BACKTRACKER = "recursive_backtracker"
    HUNT_KILL = "hunt_kill"
    KRUSKAL = "kruskal"
    SIDEWINDER = "sidewinder"
    BINARY_TREE = "binary_tree"
    RECURSIVE_DIVISION = "recursive_division"
    ALDOUS_BRODER = "aldous_broder"
    WILSON = "wilson"
    PRIM = "prim"
    GROWING_TREE = "growing_tree"
    ELLER = "eller"


GENERATORS: dict[MazeAlgorithm, type[MazeGenerator]] = {
    MazeAlgorithm.RECURSIVE_BACKTRACKER: RecursiveBacktrackerGenerator,
    MazeAlgorithm.HUNT_KILL: HuntKillGenerator,
    MazeAlgorithm.KRUSKAL: KruskalGenerator,
    MazeAlgorithm.SIDEWINDER: SidewinderGenerator,
    MazeAlgorithm.BINARY_TREE: BinaryTreeGenerator,
    MazeAlgorithm.RECURSIVE_DIVISION: RecursiveDivisionGenerator,
    MazeAlgorithm.ALDOUS_BRODER: AldousBroderGenerator,
    MazeAlgorithm.WILSON: WilsonGenerator,
    MazeAlgorithm.PRIM: PrimGenerator,
    MazeAlgorithm.GROWING_TREE: GrowingTreeGenerator,
    MazeAlgorithm.ELLER: EllerGenerator,
}


def create_generator(algorithm: MazeAlgorithm | str, **options: Any) -> MazeGenerator:
    """
    Create a generator instance.

    Args:
        algorithm: Algorithm enum member or its name
        **options: Algorithm options (``bias`` for binary tree, weights for
            growing tree, biases for Eller's)

    Returns:
        Generator instance
    """
    return GENERATORS[MazeAlgorithm(algorithm)](**options)


__all__ = [
    "GENERATORS",
    "AldousBroderGenerator",
    "BinaryTreeGenerator",
    "EllerGenerator",
    "GrowingTreeGenerator",
    "HuntKillGenerator",
    "KruskalGenerator",
    "MazeAlgorithm",
    "MazeGenerator",
    "PrimGenerator",
    "RecursiveBacktrackerGenerator",
    "RecursiveDivisionGenerator",
    "SidewinderGenerator",
    "WilsonGenerator",
    "create_generator",
]
