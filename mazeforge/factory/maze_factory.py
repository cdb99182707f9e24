"""
Maze factory: turns a ``MazeConfig`` into a generated maze.

Pipeline
--------
1. Create the empty maze for the configured topology
2. Run the generation algorithm with a random source seeded from the config
3. Convert to a unicursal labyrinth (optional)
4. Verify the maze is perfect (optional)
5. Create the openings
6. Braid (optional)
7. Solve between the first two openings (optional)
8. Compute the distance map (optional)
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from mazeforge.config import MazeConfig
from mazeforge.generators import create_generator
from mazeforge.topology import create_maze, make_unicursal
from mazeforge.utils.exceptions import MazeGenerationError
from mazeforge.utils.maze_logging import LoggedOperation, get_logger, log_generation_summary
from mazeforge.utils.verification import verify_perfect_maze

if TYPE_CHECKING:
    from mazeforge.core.cell import Cell
    from mazeforge.core.maze import Maze

logger = get_logger(__name__)


@dataclass
class MazeResult:
    """
    Generated maze with the outcome of each pipeline step.

    Attributes:
        maze: Generated maze
        config: Configuration used
        verification: Perfect maze verification results, None if not verified
        braided_walls: Number of walls opened by braiding
        solved: Whether a solution was found, None if not solved
        distance_map_start: Start cell of the distance map, None without one
        generation_time: Duration of the generation algorithm, in seconds
    """

    maze: Maze
    config: MazeConfig
    verification: dict[str, Any] | None = None
    braided_walls: int = 0
    solved: bool | None = None
    distance_map_start: Cell | None = None
    generation_time: float = 0.0
    timings: dict[str, float] = field(default_factory=dict)

    @property
    def solution(self) -> list[Cell] | None:
        return self.maze.solution

    @property
    def metrics(self) -> dict[str, Any]:
        metrics: dict[str, Any] = {
            "algorithm": self.config.algorithm.value,
            "cells": self.maze.cell_count,
            "passages": self.maze.connection_count(),
            "time": f"{self.generation_time:.3f}s",
        }
        if self.braided_walls:
            metrics["braided"] = self.braided_walls
        if self.solved is not None:
            metrics["solution"] = len(self.solution) if self.solution else None
        if self.distance_map_start is not None:
            metrics["max_distance"] = self.maze.max_distance
        return metrics


def create_maze_from_config(config: MazeConfig) -> Maze:
    """Create the empty maze described by ``config``."""
    return create_maze(
        config.maze_type,
        config.width,
        config.height,
        shape=config.shape,
        radius=config.radius,
        center_radius=config.center_radius,
        subdivision=config.subdivision,
        max_weave=config.max_weave,
    )


def generate_maze(config: MazeConfig | None = None, **kwargs: Any) -> MazeResult:
    """
    Generate a maze from a configuration.

    Args:
        config: Maze configuration, built from ``kwargs`` when None
        **kwargs: Configuration fields, overriding those of ``config``

    Returns:
        MazeResult holding the maze and the outcome of each step

    Raises:
        pydantic.ValidationError: If the configuration is invalid
        UnsupportedTopologyError: If the algorithm does not support the topology
        InvalidOpeningError: If an opening designates no cell
        MazeGenerationError: If verification is enabled and fails
        DisconnectedMazeError: If the distance map cannot reach every cell

    Example:
        >>> result = generate_maze(maze_type="delta", width=10, height=8, seed=3)
        >>> result.maze.connection_count() == result.maze.cell_count - 1
        True
    """
    if config is None:
        config = MazeConfig(**kwargs)
    elif kwargs:
        config = MazeConfig.model_validate({**config.model_dump(), **kwargs})

    rng = random.Random(config.seed)
    maze = create_maze_from_config(config)
    generator = create_generator(config.algorithm, **config.algorithm_options)
    result = MazeResult(maze=maze, config=config)

    with LoggedOperation(logger, f"{generator.name} generation of {maze}") as op:
        generator.generate(maze, rng)
    result.generation_time = op.duration or 0.0
    result.timings["generate"] = result.generation_time

    if config.unicursal:
        maze = make_unicursal(maze)
        result.maze = maze

    if config.verify:
        result.verification = verify_perfect_maze(maze)
        if not result.verification["is_perfect"]:
            raise MazeGenerationError(result.verification, component=generator.name)

    for opening in config.opening_list:
        maze.create_opening(opening)

    if config.braiding is not None:
        result.braided_walls = maze.braid(config.braiding.to_braiding(), rng)

    if config.solve:
        with LoggedOperation(logger, f"solving {maze}") as op:
            result.solved = maze.solve()
        result.timings["solve"] = op.duration or 0.0

    if config.distance_map:
        with LoggedOperation(logger, f"distance map of {maze}") as op:
            result.distance_map_start = maze.generate_distance_map(config.distance_map_opening, rng)
        result.timings["distance_map"] = op.duration or 0.0

    log_generation_summary(logger, str(maze), result.metrics)
    return result
