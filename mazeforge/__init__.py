from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("mazeforge")  # Matches the name in pyproject.toml
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

from .config import BraidingConfig, MazeConfig, create_default_config
from .core import Braiding, Cell, Maze, MazeType, Opening, Shape
from .factory import MazeResult, create_maze_from_config, generate_maze
from .generators import MazeAlgorithm, create_generator
from .topology import (
    DeltaMaze,
    OrthogonalMaze,
    SigmaMaze,
    ThetaMaze,
    UpsilonMaze,
    WeaveMaze,
    ZetaMaze,
    create_maze,
    make_unicursal,
)
from .utils import MazeError, configure_logging, get_logger

__all__ = [
    "Braiding",
    "BraidingConfig",
    "Cell",
    "DeltaMaze",
    "Maze",
    "MazeAlgorithm",
    "MazeConfig",
    "MazeError",
    "MazeResult",
    "MazeType",
    "Opening",
    "OrthogonalMaze",
    "Shape",
    "SigmaMaze",
    "ThetaMaze",
    "UpsilonMaze",
    "WeaveMaze",
    "ZetaMaze",
    "__version__",
    "configure_logging",
    "create_default_config",
    "create_generator",
    "create_maze",
    "create_maze_from_config",
    "generate_maze",
    "get_logger",
    "make_unicursal",
]
