"""
Unit tests for maze topologies.

Tests cell storage, neighbor resolution and shared wall consistency for every
tiling.
"""

import pytest

from mazeforge.core.grid import Shape
from mazeforge.core.maze import MazeType
from mazeforge.topology import (
    DeltaMaze,
    DeltaSide,
    OrthogonalMaze,
    OrthogonalSide,
    SigmaMaze,
    SigmaSide,
    ThetaMaze,
    ThetaSide,
    UpsilonMaze,
    UpsilonSide,
    WeaveMaze,
    ZetaMaze,
    ZetaSide,
    create_maze,
)
from mazeforge.topology.weave import HORIZONTAL_PASSAGE, TUNNEL
from mazeforge.utils.exceptions import InvalidParameterError

from conftest import make_maze


class TestOrthogonalMaze:
    def test_cell_lookup(self):
        maze = OrthogonalMaze(4, 3)

        assert maze.cell_count == 12
        assert maze.cell_at(3, 2).position.x == 3
        assert maze.cell_at(4, 0) is None
        assert maze.cell_at(0, -1) is None

    def test_cells_column_major(self):
        maze = OrthogonalMaze(2, 2)
        order = [(cell.position.x, cell.position.y) for cell in maze.cells()]
        assert order == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_neighbors_of_corner_and_center(self):
        maze = OrthogonalMaze(3, 3)

        assert len(maze.cell_at(0, 0).neighbors()) == 2
        assert len(maze.cell_at(1, 1).neighbors()) == 4

    def test_open_side_updates_both_cells(self):
        maze = OrthogonalMaze(2, 1)
        maze.fill_all()
        left, right = maze.cell_at(0, 0), maze.cell_at(1, 0)

        left.open_side(OrthogonalSide.EAST)

        assert not left.has_side(OrthogonalSide.EAST)
        assert not right.has_side(OrthogonalSide.WEST)
        assert left.accessible_neighbors() == [right]
        assert right.accessible_neighbors() == [left]

        right.close_side(OrthogonalSide.WEST)
        assert left.has_side(OrthogonalSide.EAST)

    def test_connect_symmetric_and_idempotent(self):
        maze = OrthogonalMaze(3, 3)
        maze.fill_all()
        a, b = maze.cell_at(1, 1), maze.cell_at(1, 2)

        a.connect_with(b)
        first = (a.value, b.value)
        b.connect_with(a)
        a.connect_with(b)

        assert (a.value, b.value) == first
        assert b in a.accessible_neighbors()
        assert a in b.accessible_neighbors()

    def test_connect_non_adjacent_does_nothing(self):
        maze = OrthogonalMaze(3, 3)
        maze.fill_all()
        a, c = maze.cell_at(0, 0), maze.cell_at(2, 2)

        a.connect_with(c)

        assert a.value == a.all_sides_value
        assert c.value == c.all_sides_value

    def test_cells_of_other_maze_are_not_adjacent(self):
        maze1, maze2 = OrthogonalMaze(2, 2), OrthogonalMaze(2, 2)
        assert maze1.cell_at(0, 0).side_of(maze2.cell_at(1, 0)) is None

    def test_deadend(self):
        maze = OrthogonalMaze(2, 1)
        maze.fill_all()
        cell = maze.cell_at(0, 0)
        assert not cell.is_deadend

        cell.open_side(OrthogonalSide.EAST)
        assert cell.is_deadend
        assert cell.wall_count == 3

    def test_invalid_dimensions(self):
        with pytest.raises(InvalidParameterError):
            OrthogonalMaze(0, 5)
        with pytest.raises(InvalidParameterError):
            OrthogonalMaze(5, 2.5)


class TestSigmaMaze:
    @pytest.mark.parametrize(
        ("shape", "width", "height", "expected"),
        [
            (Shape.RECTANGLE, 5, 4, 20),
            (Shape.RHOMBUS, 5, 4, 20),
            (Shape.TRIANGLE, 4, None, 10),
            (Shape.HEXAGON, 3, None, 19),
        ],
    )
    def test_cell_count(self, shape, width, height, expected):
        maze = SigmaMaze(width, height or width, shape)
        assert maze.cell_count == expected

    def test_hexagon_center_has_six_neighbors(self):
        maze = SigmaMaze(3, 3, Shape.HEXAGON)
        center = maze.cell_at(2, 2)

        assert len(center.neighbors()) == 6

    def test_opposite_sides(self):
        assert SigmaSide.NORTHEAST.opposite is SigmaSide.SOUTHWEST
        assert SigmaSide.NORTHWEST.opposite is SigmaSide.SOUTHEAST

    def test_neighbor_relation_symmetric(self):
        maze = SigmaMaze(4, 4, Shape.RECTANGLE)
        for cell in maze.cells():
            for neighbor in cell.neighbors():
                assert cell in neighbor.neighbors()

    def test_string_shape(self):
        maze = SigmaMaze(3, 3, "hexagon")
        assert maze.shape is Shape.HEXAGON


class TestDeltaMaze:
    @pytest.mark.parametrize(
        ("shape", "width", "height", "expected"),
        [
            (Shape.RECTANGLE, 5, 4, 36),
            (Shape.TRIANGLE, 3, None, 9),
            (Shape.HEXAGON, 1, None, 6),
            (Shape.HEXAGON, 2, None, 24),
            (Shape.RHOMBUS, 2, 2, 8),
        ],
    )
    def test_cell_count(self, shape, width, height, expected):
        maze = DeltaMaze(width, height or width, shape)
        assert maze.cell_count == expected

    def test_base_alternates(self):
        maze = DeltaMaze(3, 2, Shape.RECTANGLE)
        flat = maze.cell_at(1, 1)
        pointed = maze.cell_at(1, 0)

        assert flat.flat_topped
        assert not pointed.flat_topped
        assert flat.cell_on_side(DeltaSide.BASE) is pointed
        assert pointed.cell_on_side(DeltaSide.BASE) is flat

    def test_base_is_its_own_opposite(self):
        assert DeltaSide.BASE.opposite is DeltaSide.BASE

    def test_neighbor_relation_symmetric(self):
        maze = DeltaMaze(3, 3, Shape.HEXAGON)
        for cell in maze.cells():
            for neighbor in cell.neighbors():
                assert cell in neighbor.neighbors()

    @pytest.mark.parametrize("height", [2, 3, 6])
    def test_single_column_rejected(self, height):
        # The top triangle's base faces the border and it has no side neighbors
        with pytest.raises(InvalidParameterError, match="connected") as exc_info:
            DeltaMaze(1, height)

        assert exc_info.value.parameter_name == "shape"

    @pytest.mark.parametrize(("width", "height", "shape"), [(1, 1, "rectangle"), (1, 3, "rhombus"), (2, 1, "rhombus")])
    def test_narrow_shapes_are_connected(self, width, height, shape):
        maze = DeltaMaze(width, height, shape)

        cells = maze.cell_list()
        reached = {cells[0]}
        frontier = [cells[0]]
        while frontier:
            for neighbor in frontier.pop().neighbors():
                if neighbor not in reached:
                    reached.add(neighbor)
                    frontier.append(neighbor)
        assert len(reached) == maze.cell_count


class TestUpsilonMaze:
    def test_square_and_octagon_sides(self):
        maze = UpsilonMaze(3, 3)
        octagon = maze.cell_at(1, 1)
        square = maze.cell_at(1, 0)

        assert not octagon.is_square
        assert square.is_square
        assert len(octagon.all_sides) == 8
        assert len(square.all_sides) == 4
        assert len(octagon.neighbors()) == 8

    def test_square_keeps_diagonal_bits(self):
        maze = UpsilonMaze(3, 3)
        square = maze.cell_at(1, 0)

        square.value = 0
        assert square.has_side(UpsilonSide.NORTHEAST)
        assert square.cell_on_side(UpsilonSide.NORTHEAST) is None
        assert square.wall_count == 0

    def test_octagons_connect_diagonally(self):
        maze = UpsilonMaze(3, 3)
        maze.fill_all()
        a, b = maze.cell_at(0, 0), maze.cell_at(1, 1)

        a.connect_with(b)

        assert not a.has_side(UpsilonSide.SOUTHEAST)
        assert not b.has_side(UpsilonSide.NORTHWEST)
        assert a.is_deadend


class TestZetaMaze:
    def test_diagonal_shadowed_by_crossing_passage(self):
        maze = ZetaMaze(2, 2)
        maze.fill_all()
        a = maze.cell_at(0, 0)
        d = maze.cell_at(1, 1)
        b, c = maze.cell_at(1, 0), maze.cell_at(0, 1)

        assert d in a.neighbors()

        b.connect_with(c)

        assert a.is_shadowed(ZetaSide.SOUTHEAST)
        assert d not in a.neighbors()
        assert a not in d.neighbors()
        assert c in b.accessible_neighbors()

    def test_orthogonal_never_shadowed(self):
        maze = ZetaMaze(3, 3)
        maze.reset_all()
        assert not maze.cell_at(1, 1).is_shadowed(ZetaSide.NORTH)


class TestThetaMaze:
    def test_ring_widths(self):
        maze = ThetaMaze(3)
        assert [maze.ring_width(r) for r in range(3)] == [1, 6, 12]
        assert maze.cell_count == 19

    def test_center_neighbors_are_first_ring(self):
        maze = ThetaMaze(3)
        center = maze.cell_at(0, 0)

        assert center.neighbors() == maze.rings[1]
        assert center.cell_on_side(ThetaSide.CW) is None

    def test_outward_cells_split(self):
        maze = ThetaMaze(3)
        cell = maze.cell_at(1, 1)

        assert cell.outward_cells() == maze.rings[2][2:4]
        assert maze.cell_at(3, 2).cell_on_side(ThetaSide.IN) is cell

    def test_index_wraps(self):
        maze = ThetaMaze(3)
        first = maze.cell_at(0, 1)

        assert first.cell_on_side(ThetaSide.CW) is maze.cell_at(5, 1)
        assert maze.cell_at(6, 1) is first

    def test_outward_side_open_through_inner_walls(self):
        maze = ThetaMaze(3)
        maze.fill_all()
        cell = maze.cell_at(1, 1)
        outer = cell.outward_cells()[1]

        assert cell.has_side(ThetaSide.OUT)
        cell.connect_with(outer)

        assert not cell.has_side(ThetaSide.OUT)
        assert not outer.has_side(ThetaSide.IN)
        assert cell.accessible_neighbors() == [outer]
        assert outer.accessible_neighbors() == [cell]

    def test_invalid_parameters(self):
        with pytest.raises(InvalidParameterError):
            ThetaMaze(0)
        with pytest.raises(InvalidParameterError):
            ThetaMaze(3, center_radius=0)
        with pytest.raises(InvalidParameterError):
            ThetaMaze(3, subdivision=-1.0)


class TestWeaveMaze:
    def test_neighbors_extend_over_perpendicular_corridor(self):
        maze = WeaveMaze(3, 3, max_weave=1)
        maze.fill_all()
        center = maze.cell_at(1, 1)
        maze.cell_at(0, 1).connect_with(center)
        center.connect_with(maze.cell_at(2, 1))

        assert center.value == HORIZONTAL_PASSAGE
        assert maze.cell_at(1, 2) in maze.cell_at(1, 0).neighbors()

    def test_tunnel_connection(self):
        maze = WeaveMaze(3, 3, max_weave=1)
        maze.fill_all()
        center = maze.cell_at(1, 1)
        top, bottom = maze.cell_at(1, 0), maze.cell_at(1, 2)
        maze.cell_at(0, 1).connect_with(center)
        center.connect_with(maze.cell_at(2, 1))

        top.connect_with(bottom)

        assert center.has_tunnel
        assert center.value == HORIZONTAL_PASSAGE | TUNNEL
        assert top.cells_between(bottom) == [center]
        assert bottom in top.accessible_neighbors()
        assert top in bottom.accessible_neighbors()
        assert center not in top.accessible_neighbors()
        assert center not in top.neighbors()

    def test_no_weave_without_max_weave(self):
        maze = WeaveMaze(3, 3, max_weave=0)
        maze.fill_all()
        center = maze.cell_at(1, 1)
        maze.cell_at(0, 1).connect_with(center)
        center.connect_with(maze.cell_at(2, 1))

        assert maze.cell_at(1, 2) not in maze.cell_at(1, 0).neighbors()

    def test_connect_off_axis_raises(self):
        maze = WeaveMaze(3, 3)
        with pytest.raises(ValueError, match="same row or column"):
            maze.cell_at(0, 0).connect_with(maze.cell_at(1, 1))

    def test_invalid_max_weave(self):
        with pytest.raises(InvalidParameterError):
            WeaveMaze(3, 3, max_weave=-1)


class TestCreateMaze:
    @pytest.mark.parametrize("maze_type", list(MazeType))
    def test_creates_each_type(self, maze_type):
        maze = make_maze(maze_type)
        assert maze.maze_type is maze_type
        assert maze.cell_count > 1

    def test_accepts_string_type(self):
        maze = create_maze("sigma", 4, 3, shape="rhombus")
        assert isinstance(maze, SigmaMaze)
        assert maze.shape is Shape.RHOMBUS

    def test_height_defaults_to_width(self):
        maze = create_maze(MazeType.ORTHOGONAL, 7)
        assert (maze.width, maze.height) == (7, 7)

    def test_theta_radius_defaults_to_width(self):
        maze = create_maze(MazeType.THETA, 3)
        assert maze.radius == 3

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            create_maze("hexagonal", 3)

    @pytest.mark.parametrize("maze_type", list(MazeType))
    def test_single_cell_maze(self, maze_type):
        maze = create_maze(maze_type, 1, 1, radius=1)

        assert maze.cell_count == 1
        assert maze.connection_count() == 0
