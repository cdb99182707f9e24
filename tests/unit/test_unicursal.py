"""
Unit tests for unicursal conversion.
"""

import random

import pytest

from mazeforge.core.opening import Opening
from mazeforge.generators import RecursiveBacktrackerGenerator, create_generator
from mazeforge.topology import OrthogonalMaze, WeaveMaze, make_unicursal
from mazeforge.utils.exceptions import InvalidParameterError
from mazeforge.utils.verification import verify_perfect_maze


def generated(width, height, algorithm="recursive_backtracker", seed=0):
    maze = OrthogonalMaze(width, height)
    create_generator(algorithm).generate(maze, random.Random(seed))
    return maze


class TestMakeUnicursal:
    @pytest.mark.parametrize(("width", "height"), [(1, 1), (2, 3), (5, 5), (8, 4)])
    def test_single_path(self, width, height):
        maze = generated(width, height)

        result = make_unicursal(maze)

        assert (result.width, result.height) == (2 * width, 2 * height)
        assert verify_perfect_maze(result)["is_perfect"]
        for cell in result.cells():
            assert len(cell.accessible_neighbors()) <= 2

        ends = [cell for cell in result.cells() if len(cell.accessible_neighbors()) == 1]
        assert ends == [result.cell_at(0, 0), result.cell_at(0, 1)]

    @pytest.mark.parametrize("algorithm", ["kruskal", "eller", "recursive_division"])
    def test_any_orthogonal_algorithm(self, algorithm):
        result = make_unicursal(generated(6, 6, algorithm, seed=3))
        assert verify_perfect_maze(result)["is_perfect"]

    def test_source_unchanged(self):
        maze = generated(4, 4)
        before = [cell.value for cell in maze.cells()]

        make_unicursal(maze)

        assert [cell.value for cell in maze.cells()] == before
        assert not any(cell.visited for cell in maze.cells())

    def test_solvable_end_to_end(self):
        result = make_unicursal(generated(3, 3))
        result.create_opening(Opening.of(0, 0))
        result.create_opening(Opening.of(0, 1))

        assert result.solve()
        assert len(result.solution) == result.cell_count

    def test_rejects_weave(self):
        maze = WeaveMaze(3, 3)
        RecursiveBacktrackerGenerator().generate(maze, random.Random(0))

        with pytest.raises(InvalidParameterError):
            make_unicursal(maze)
