"""
Maze factory.

- generate_maze() - Run the full generation pipeline from a configuration
- create_maze_from_config() - Create the empty maze of a configuration
"""

from .maze_factory import MazeResult, create_maze_from_config, generate_maze

__all__ = [
    "MazeResult",
    "create_maze_from_config",
    "generate_maze",
]
