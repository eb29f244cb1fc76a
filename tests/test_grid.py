"""Tests for the grid model."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.room import Room
from models.seating import Seat
from engine.grid import Grid, new_grid
from engine.errors import InvalidDimensions


class TestGridConstruction:
    def test_zero_rows_rejected(self):
        with pytest.raises(InvalidDimensions) as exc:
            new_grid(0, 5)
        assert exc.value.rows == 0
        assert exc.value.columns == 5

    def test_negative_columns_rejected(self):
        with pytest.raises(InvalidDimensions):
            Grid(3, -1)

    def test_capacity(self):
        assert Grid(2, 3).capacity == 6

    def test_for_room_uses_geometry_not_declared_capacity(self):
        room = Room("R1", "101", rows=3, columns=4, capacity=99)
        grid = Grid.for_room(room)
        assert grid.capacity == 12


class TestTraversalOrder:
    def test_row_major(self):
        order = Grid(2, 3).traversal_order()
        assert order == [
            Seat(0, 0), Seat(0, 1), Seat(0, 2),
            Seat(1, 0), Seat(1, 1), Seat(1, 2),
        ]

    def test_stable_across_calls(self):
        grid = Grid(4, 5)
        assert grid.traversal_order() == grid.traversal_order()

    def test_matches_seat_ordering(self):
        order = Grid(3, 3).traversal_order()
        assert order == sorted(order)


class TestNeighbors:
    def test_first_seat_has_no_predecessors(self):
        assert Grid(3, 3).neighbors(Seat(0, 0)) == []

    def test_first_row_only_left(self):
        assert Grid(3, 3).neighbors(Seat(0, 2)) == [Seat(0, 1)]

    def test_first_column_only_top(self):
        assert Grid(3, 3).neighbors(Seat(1, 0)) == [Seat(0, 0)]

    def test_interior_left_and_top(self):
        assert Grid(3, 3).neighbors(Seat(1, 1)) == [Seat(1, 0), Seat(0, 1)]

    def test_all_neighbors_corner(self):
        assert set(Grid(2, 2).all_neighbors(Seat(0, 0))) == {Seat(1, 0), Seat(0, 1)}

    def test_all_neighbors_centre(self):
        assert len(Grid(3, 3).all_neighbors(Seat(1, 1))) == 4

    def test_diagonal_is_not_adjacent(self):
        assert not Seat(0, 0).is_adjacent(Seat(1, 1))
        assert Seat(0, 0).is_adjacent(Seat(0, 1))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
