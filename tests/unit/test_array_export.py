"""
Unit tests for NumPy exports of maze state.
"""

import random

import pytest

import numpy as np

from mazeforge.core.opening import Opening
from mazeforge.generators import KruskalGenerator, RecursiveBacktrackerGenerator
from mazeforge.topology import OrthogonalMaze, SigmaMaze, ThetaMaze
from mazeforge.utils.array_export import distance_array, to_numpy_array, wall_array
from mazeforge.utils.exceptions import InvalidParameterError, UnsupportedTopologyError


@pytest.fixture
def orthogonal_maze():
    maze = OrthogonalMaze(10, 8)
    RecursiveBacktrackerGenerator().generate(maze, random.Random(42))
    return maze


class TestToNumpyArray:
    def test_dimensions(self, orthogonal_maze):
        array = to_numpy_array(orthogonal_maze)

        assert array.shape == (17, 21)
        assert array.dtype == np.int32
        assert np.all((array == 0) | (array == 1))

    def test_thickness(self, orthogonal_maze):
        array = to_numpy_array(orthogonal_maze, wall_thickness=3)
        assert array.shape == (8 * 6 + 3, 10 * 6 + 3)

    def test_closed_border(self, orthogonal_maze):
        array = to_numpy_array(orthogonal_maze)

        assert np.all(array[0, :] == 1)
        assert np.all(array[-1, :] == 1)
        assert np.all(array[:, 0] == 1)
        assert np.all(array[:, -1] == 1)

    def test_opening_in_border(self, orthogonal_maze):
        orthogonal_maze.create_opening(Opening.of(0, 0))
        array = to_numpy_array(orthogonal_maze)

        assert array[0, 1] == 0

    def test_passage_count(self, orthogonal_maze):
        array = to_numpy_array(orthogonal_maze)

        # Cell centers plus one open wall tile per passage
        cell_tiles = 10 * 8
        assert np.sum(array == 0) == cell_tiles + cell_tiles - 1

    def test_reproducible(self):
        arrays = []
        for _ in range(2):
            maze = OrthogonalMaze(6, 6)
            KruskalGenerator().generate(maze, random.Random(5))
            arrays.append(to_numpy_array(maze))

        np.testing.assert_array_equal(arrays[0], arrays[1])

    def test_unsupported_topology(self):
        with pytest.raises(UnsupportedTopologyError):
            to_numpy_array(SigmaMaze(3, 3))

    def test_invalid_thickness(self, orthogonal_maze):
        with pytest.raises(InvalidParameterError):
            to_numpy_array(orthogonal_maze, wall_thickness=0)


class TestCellArrays:
    def test_wall_array_orthogonal(self, orthogonal_maze):
        array = wall_array(orthogonal_maze)

        assert array.shape == (8, 10)
        assert array[3, 7] == orthogonal_maze.cell_at(7, 3).value

    def test_wall_array_pads_shaped_maze(self):
        maze = SigmaMaze(4, 4)
        maze.fill_all()

        array = wall_array(maze)

        # Column 2 is shifted down by one row
        assert array.shape == (5, 4)
        assert array[0, 2] == -1
        assert array[4, 2] == maze.cell_at(2, 4).value
        assert np.sum(array >= 0) == maze.cell_count

    def test_distance_array_theta(self):
        maze = ThetaMaze(3)
        RecursiveBacktrackerGenerator().generate(maze, random.Random(1))
        maze.generate_distance_map(Opening.of(0, 0))

        array = distance_array(maze)

        assert array.shape == (3, 12)
        assert array[0, 0] == 0
        assert np.all(array[0, 1:] == -1)
        assert np.all(array[1, :6] >= 1)
        np.testing.assert_array_equal(array[2], [cell.distance for cell in maze.rings[2]])
