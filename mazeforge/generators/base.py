"""
Base class for maze generators.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from mazeforge.core.maze import MazeType
from mazeforge.utils.exceptions import UnsupportedTopologyError
from mazeforge.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from mazeforge.core.maze import Maze

logger = get_logger(__name__)


class MazeGenerator(ABC):
    """
    Base class for generation algorithms.

    Subclasses implement ``_generate`` and restrict ``supported_types`` when
    they only work on some topologies. The maze type is checked before the
    maze is touched.
    """

    name: ClassVar[str] = "Generator"
    supported_types: ClassVar[frozenset[MazeType]] = frozenset(MazeType)

    def is_supported(self, maze: Maze) -> bool:
        return maze.maze_type in self.supported_types

    def generate(self, maze: Maze, rng: random.Random | None = None) -> Maze:
        """
        Generate ``maze`` in place.

        Args:
            maze: Maze to generate, its previous walls are discarded
            rng: Random source, a fresh unseeded one when None

        Returns:
            The generated maze

        Raises:
            UnsupportedTopologyError: If this algorithm cannot generate the maze type
        """
        if not self.is_supported(maze):
            raise UnsupportedTopologyError(
                self.name,
                maze.maze_type.value,
                sorted(t.value for t in self.supported_types),
            )

        rng = rng or random.Random()
        logger.debug(f"{self.name}: generating {maze}")
        self._generate(maze, rng)
        return maze

    @abstractmethod
    def _generate(self, maze: Maze, rng: random.Random) -> None:
        """Carve passages in ``maze``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
