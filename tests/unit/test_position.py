"""
Unit tests for cell positions.
"""

from mazeforge.core.position import PolarPosition, Position2D


class TestPosition2D:
    def test_add_offset(self):
        assert Position2D(2, 3) + (1, -1) == Position2D(3, 2)

    def test_manhattan_distance(self):
        assert Position2D(0, 0).distance_to(Position2D(3, 4)) == 7
        assert Position2D(3, 4).distance_to(Position2D(0, 0)) == 7

    def test_chebyshev_distance(self):
        assert Position2D(0, 0).chebyshev_distance_to(Position2D(3, 4)) == 4
        assert Position2D(2, 2).chebyshev_distance_to(Position2D(0, 0)) == 2

    def test_hex_distance(self):
        origin = Position2D(0, 0)
        # (1, 1) and (-1, -1) are single moves, (1, -1) is not
        assert origin.hex_distance_to(Position2D(3, 3)) == 3
        assert origin.hex_distance_to(Position2D(-2, -2)) == 2
        assert origin.hex_distance_to(Position2D(2, -2)) == 4
        assert origin.hex_distance_to(Position2D(3, 1)) == 3

    def test_hashable_and_ordered(self):
        positions = {Position2D(1, 2), Position2D(1, 2), Position2D(0, 5)}
        assert len(positions) == 2
        assert sorted(positions) == [Position2D(0, 5), Position2D(1, 2)]


class TestPolarPosition:
    def test_distance_wraps_around_ring(self):
        a = PolarPosition(r=2, x=0, row_width=12)
        b = PolarPosition(r=2, x=11, row_width=12)
        assert a.distance_to(b) == 1

    def test_distance_adds_ring_difference(self):
        a = PolarPosition(r=1, x=1, row_width=6)
        b = PolarPosition(r=3, x=4, row_width=6)
        assert a.distance_to(b) == 2 + 3

    def test_row_width_not_compared(self):
        assert PolarPosition(r=1, x=2, row_width=6) == PolarPosition(r=1, x=2)
