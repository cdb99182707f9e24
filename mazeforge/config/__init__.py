"""
Configuration for maze generation.

Quick Start
-----------
>>> from mazeforge.config import MazeConfig, BraidingConfig
>>> config = MazeConfig(
...     maze_type="sigma",
...     width=12,
...     shape="hexagon",
...     algorithm="kruskal",
...     braiding=BraidingConfig(percent=0.25),
... )
"""

from .maze_config import BraidingConfig, MazeConfig, create_braided_config, create_default_config

__all__ = [
    "BraidingConfig",
    "MazeConfig",
    "create_braided_config",
    "create_default_config",
]
