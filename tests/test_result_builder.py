"""Tests for the allocation result builder."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.room import Room
from models.seating import Seat, SeatAssignment, GridCell
from models.student import Student
from engine.grid import Grid
from engine.result_builder import (
    to_seat_assignments,
    to_grid,
    grid_from_assignments,
    grid_to_records,
)


def make_student(student_id, department="CS", roll_number=None):
    return Student(student_id, f"Student {student_id}", department, roll_number=roll_number)


def make_room(rows=2, columns=3):
    return Room("R1", "101", rows, columns)


class TestToSeatAssignments:
    def test_one_row_per_occupied_seat_in_traversal_order(self):
        seat_map = {
            Seat(1, 0): make_student("3"),
            Seat(0, 1): make_student("2"),
            Seat(0, 0): make_student("1"),
        }
        rows = to_seat_assignments(seat_map, "EX1", "R1")
        assert rows == [
            SeatAssignment("EX1", "R1", "1", 0, 0),
            SeatAssignment("EX1", "R1", "2", 0, 1),
            SeatAssignment("EX1", "R1", "3", 1, 0),
        ]

    def test_empty_mapping(self):
        assert to_seat_assignments({}, "EX1", "R1") == []


class TestToGrid:
    def test_shape_and_empty_cells(self):
        grid = to_grid({Seat(0, 2): make_student("1")}, Grid(2, 3))
        assert len(grid) == 2
        assert all(len(row) == 3 for row in grid)
        assert grid[0][0] is None
        assert grid[0][2].student_id == "1"

    def test_public_fields_only(self):
        grid = to_grid({Seat(0, 0): make_student("1", "ME", roll_number="ME-001")}, Grid(1, 1))
        assert grid[0][0] == GridCell("1", "Student 1", "ME-001", "ME")

    def test_roll_number_defaults_to_id_and_department_to_unknown(self):
        grid = to_grid({Seat(0, 0): make_student("42", None)}, Grid(1, 1))
        assert grid[0][0].roll_number == "42"
        assert grid[0][0].department == "UNKNOWN"


class TestGridFromAssignments:
    def test_rebuilds_snapshot(self):
        students = [make_student("1"), make_student("2", "ME")]
        stored = [
            SeatAssignment("EX1", "R1", "1", 0, 0),
            SeatAssignment("EX1", "R1", "2", 1, 2),
        ]
        grid = grid_from_assignments(stored, students, make_room())
        assert grid[0][0].student_id == "1"
        assert grid[1][2].department == "ME"
        assert sum(1 for row in grid for c in row if c) == 2

    def test_skips_unknown_students_and_out_of_range_seats(self):
        students = [make_student("1")]
        stored = [
            SeatAssignment("EX1", "R1", "1", 5, 5),
            SeatAssignment("EX1", "R1", "ghost", 0, 0),
        ]
        grid = grid_from_assignments(stored, students, make_room())
        assert all(c is None for row in grid for c in row)


class TestGridToRecords:
    def test_serialisable_shape(self):
        grid = to_grid({Seat(0, 0): make_student("1", "CS")}, Grid(1, 2))
        records = grid_to_records(grid)
        assert records == [[
            {"studentId": "1", "studentName": "Student 1", "rollNumber": "1", "department": "CS"},
            None,
        ]]


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
