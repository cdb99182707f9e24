"""
Integration tests for the maze generation pipeline.
"""

import pytest

from mazeforge import generate_maze
from mazeforge.config import BraidingConfig, MazeConfig, create_default_config
from mazeforge.core.maze import MazeType
from mazeforge.factory import create_maze_from_config
from mazeforge.topology import OrthogonalMaze, SigmaMaze, ThetaMaze, WeaveMaze
from mazeforge.utils.exceptions import InvalidOpeningError, UnsupportedTopologyError

from conftest import supported_pairs


class TestCreateMazeFromConfig:
    def test_orthogonal(self):
        maze = create_maze_from_config(MazeConfig(width=7, height=3))

        assert isinstance(maze, OrthogonalMaze)
        assert (maze.width, maze.height) == (7, 3)

    def test_weave(self):
        maze = create_maze_from_config(MazeConfig(maze_type="weave", width=4, max_weave=3))

        assert isinstance(maze, WeaveMaze)
        assert maze.max_weave == 3

    def test_sigma_shape(self):
        maze = create_maze_from_config(MazeConfig(maze_type="sigma", width=3, shape="hexagon"))

        assert isinstance(maze, SigmaMaze)
        assert maze.cell_count == 19

    def test_theta(self):
        maze = create_maze_from_config(MazeConfig(maze_type="theta", radius=4, subdivision=2.0))

        assert isinstance(maze, ThetaMaze)
        assert maze.radius == 4


class TestGenerateMaze:
    @pytest.mark.parametrize(("algorithm", "maze_type"), supported_pairs())
    def test_verified_generation(self, algorithm, maze_type):
        result = generate_maze(
            maze_type=maze_type, algorithm=algorithm, width=6, height=5, radius=4, verify=True, seed=1
        )

        assert result.verification["is_perfect"]
        assert result.generation_time >= 0
        assert result.metrics["passages"] == result.maze.cell_count - 1

    def test_full_pipeline(self):
        config = create_default_config(
            12,
            10,
            solve=True,
            seed=3,
            braiding=BraidingConfig(percent=0.5),
            distance_map=True,
            distance_map_start=("S", "S"),
        )

        result = generate_maze(config)
        maze = result.maze

        assert result.solved
        assert result.solution[0] is maze.cell_at(0, 0)
        assert result.solution[-1] is maze.cell_at(11, 9)
        assert result.braided_walls > 0
        assert maze.connection_count() == maze.cell_count - 1 + result.braided_walls
        assert result.distance_map_start is maze.cell_at(0, 0)
        assert maze.has_distance_map
        assert set(result.timings) == {"generate", "solve", "distance_map"}
        assert result.metrics["max_distance"] == maze.max_distance

    def test_seed_is_reproducible(self):
        config = MazeConfig(maze_type="sigma", width=6, height=6, algorithm="wilson", seed=99)

        first = generate_maze(config)
        second = generate_maze(config)

        assert [c.value for c in first.maze.cells()] == [c.value for c in second.maze.cells()]

    def test_overrides(self):
        base = MazeConfig(width=4, seed=1)

        result = generate_maze(base, width=6, algorithm="eller")

        assert result.config.width == 6
        assert result.config.algorithm.value == "eller"
        assert base.width == 4

    def test_algorithm_options(self):
        result = generate_maze(
            algorithm="growing_tree",
            algorithm_options={"random_weight": 0, "newest_weight": 0, "oldest_weight": 1},
            verify=True,
            seed=2,
        )
        assert result.verification["is_perfect"]

    def test_unicursal(self):
        result = generate_maze(width=4, height=3, unicursal=True, verify=True, seed=5)

        assert (result.maze.width, result.maze.height) == (8, 6)
        assert result.verification["is_perfect"]

    def test_theta_openings(self):
        result = generate_maze(
            maze_type=MazeType.THETA, radius=5, openings=[("S", "S"), ("C", "E")], solve=True, seed=8
        )
        assert result.solved

    def test_unsupported_combination(self):
        with pytest.raises(UnsupportedTopologyError):
            generate_maze(maze_type="theta", algorithm="sidewinder", radius=3)

    def test_opening_outside_maze(self):
        with pytest.raises(InvalidOpeningError):
            generate_maze(width=4, height=4, openings=[(9, 9)])
