"""
Unit tests for perfect maze verification.
"""

import random

from mazeforge.core.opening import Opening
from mazeforge.generators import PrimGenerator
from mazeforge.topology import OrthogonalMaze
from mazeforge.utils.verification import count_reachable, verify_perfect_maze


def test_empty_walls():
    maze = OrthogonalMaze(3, 3)
    maze.fill_all()

    result = verify_perfect_maze(maze)

    assert not result["is_perfect"]
    assert not result["is_connected"]
    assert result["is_no_loops"] is False
    assert result["visited_cells"] == 1
    assert result["expected_passages"] == 8


def test_generated_maze_is_perfect():
    maze = OrthogonalMaze(6, 4)
    PrimGenerator().generate(maze, random.Random(3))

    result = verify_perfect_maze(maze)

    assert result["is_perfect"]
    assert result["passage_count"] == 23
    assert count_reachable(maze) == 24


def test_openings_are_not_passages():
    maze = OrthogonalMaze(4, 4)
    PrimGenerator().generate(maze, random.Random(3))
    maze.create_opening(Opening.of("S", "S"))
    maze.create_opening(Opening.of("E", "E"))

    assert verify_perfect_maze(maze)["is_perfect"]


def test_loop_detected():
    maze = OrthogonalMaze(2, 2)
    maze.fill_all()
    for x, y in [(0, 0), (1, 0), (1, 1), (0, 1)]:
        cell = maze.cell_at(x, y)
        for neighbor in cell.neighbors():
            cell.connect_with(neighbor)

    result = verify_perfect_maze(maze)

    assert result["is_connected"]
    assert not result["is_no_loops"]
    assert result["passage_count"] == 4
