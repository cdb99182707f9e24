"""
Maze generation configuration.

A configuration specifies WHAT maze to build (topology, size, shape) and HOW
to build it (algorithm, braiding, post-processing). It holds validated
primitives only; ``mazeforge.factory.generate_maze`` turns it into a maze.

Presets
-------
>>> from mazeforge.config import create_default_config
>>> config = create_default_config(20, 15, solve=True)
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from mazeforge.core.braiding import Braiding
from mazeforge.core.grid import Shape
from mazeforge.core.maze import MazeType
from mazeforge.core.opening import Opening
from mazeforge.generators import MazeAlgorithm

Coordinate = int | str


class BraidingConfig(BaseModel):
    """
    Configuration for braiding (deadend removal).

    Exactly one of ``count`` and ``percent`` must be given.

    Attributes
    ----------
    count : int | None
        Number of deadends to remove, capped by the deadends present
    percent : float | None
        Fraction of deadends to remove, in [0, 1]
    """

    count: int | None = Field(default=None, ge=0)
    percent: float | None = Field(default=None, ge=0, le=1)

    @model_validator(mode="after")
    def validate_exactly_one(self) -> BraidingConfig:
        """Validate that exactly one braiding amount is set."""
        if (self.count is None) == (self.percent is None):
            raise ValueError("Exactly one of count and percent must be set")
        return self

    def to_braiding(self) -> Braiding:
        return Braiding(count=self.count, percent=self.percent)


class MazeConfig(BaseModel):
    """
    Complete maze generation configuration.

    Attributes
    ----------
    maze_type : MazeType
        Topology of the maze (default: orthogonal)
    width : int
        Number of columns, or shape size for delta and sigma mazes (default: 10)
    height : int | None
        Number of rows, defaults to ``width``
    shape : Shape
        Shape of delta and sigma mazes (default: rectangle)
    radius : int | None
        Number of rings of theta mazes, defaults to ``width``
    center_radius : float
        Relative center cell radius of theta mazes (default: 1.0)
    subdivision : float
        Ring subdivision factor of theta mazes (default: 1.5)
    max_weave : int
        Maximum number of cells a weave passage may run under (default: 1)
    algorithm : MazeAlgorithm
        Generation algorithm (default: recursive_backtracker)
    algorithm_options : dict[str, Any]
        Keyword options passed to the generator (bias, weights)
    braiding : BraidingConfig | None
        Deadend removal applied after generation (default: None)
    openings : list[tuple[int | str, int | str]]
        Openings as (x, y) pairs; coordinates are indices or anchors S, C, E
    solve : bool
        Solve between the first two openings (default: False)
    distance_map : bool
        Compute a distance map (default: False)
    distance_map_start : tuple[int | str, int | str] | None
        Start of the distance map, random cell when None
    unicursal : bool
        Convert the generated maze to a unicursal labyrinth, orthogonal only
    verify : bool
        Verify the generated maze is perfect before braiding (default: False)
    seed : int | None
        Random seed, nondeterministic when None
    """

    maze_type: MazeType = MazeType.ORTHOGONAL
    width: int = Field(default=10, ge=1)
    height: int | None = Field(default=None, ge=1)
    shape: Shape = Shape.RECTANGLE
    radius: int | None = Field(default=None, ge=1)
    center_radius: float = Field(default=1.0, gt=0)
    subdivision: float = Field(default=1.5, gt=0)
    max_weave: int = Field(default=1, ge=0)

    algorithm: MazeAlgorithm = MazeAlgorithm.RECURSIVE_BACKTRACKER
    algorithm_options: dict[str, Any] = Field(default_factory=dict)
    braiding: BraidingConfig | None = None

    openings: list[tuple[Coordinate, Coordinate]] = Field(default_factory=list)
    solve: bool = False
    distance_map: bool = False
    distance_map_start: tuple[Coordinate, Coordinate] | None = None
    unicursal: bool = False
    verify: bool = False
    seed: int | None = None

    @field_validator("openings")
    @classmethod
    def validate_openings(cls, value: list[tuple[Coordinate, Coordinate]]) -> list[tuple[Coordinate, Coordinate]]:
        """Validate opening coordinates and reject duplicates."""
        parsed = [Opening.of(x, y) for x, y in value]
        if len(set(parsed)) != len(parsed):
            raise ValueError("Duplicate openings")
        return value

    @field_validator("distance_map_start")
    @classmethod
    def validate_distance_map_start(
        cls, value: tuple[Coordinate, Coordinate] | None
    ) -> tuple[Coordinate, Coordinate] | None:
        if value is not None:
            Opening.of(*value)
        return value

    @model_validator(mode="after")
    def validate_solve(self) -> MazeConfig:
        """Validate that solving has a start and an end opening."""
        if self.solve and len(self.openings) < 2:
            raise ValueError("solve requires at least 2 openings")
        return self

    @model_validator(mode="after")
    def validate_unicursal(self) -> MazeConfig:
        """Validate that unicursal conversion targets an orthogonal maze."""
        if self.unicursal and self.maze_type is not MazeType.ORTHOGONAL:
            raise ValueError(f"unicursal requires an orthogonal maze, got {self.maze_type.value}")
        return self

    @property
    def opening_list(self) -> list[Opening]:
        return [Opening.of(x, y) for x, y in self.openings]

    @property
    def distance_map_opening(self) -> Opening | None:
        if self.distance_map_start is None:
            return None
        return Opening.of(*self.distance_map_start)


# =============================================================================
# Presets
# =============================================================================


def create_default_config(
    width: int = 10,
    height: int | None = None,
    *,
    maze_type: MazeType | str = MazeType.ORTHOGONAL,
    algorithm: MazeAlgorithm | str = MazeAlgorithm.RECURSIVE_BACKTRACKER,
    solve: bool = False,
    seed: int | None = None,
    **kwargs: Any,
) -> MazeConfig:
    """
    Default configuration with an entrance and an exit.

    Openings are placed at the top-left and bottom-right corners, using
    anchors so they fit any size.

    Parameters
    ----------
    width, height : int
        Maze size
    maze_type : MazeType | str
        Topology (default: orthogonal)
    algorithm : MazeAlgorithm | str
        Generation algorithm (default: recursive_backtracker)
    solve : bool
        Solve between the openings
    seed : int | None
        Random seed
    **kwargs
        Any other ``MazeConfig`` field

    Returns
    -------
    MazeConfig
        Validated configuration
    """
    kwargs.setdefault("openings", [("S", "S"), ("E", "E")])
    return MazeConfig(
        maze_type=maze_type,
        width=width,
        height=height,
        algorithm=algorithm,
        solve=solve,
        seed=seed,
        **kwargs,
    )


def create_braided_config(
    width: int = 10, height: int | None = None, percent: float = 0.5, **kwargs: Any
) -> MazeConfig:
    """Default configuration with a fraction of deadends removed."""
    return create_default_config(width, height, braiding=BraidingConfig(percent=percent), **kwargs)
