"""Tests for the placement engine."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.seating import Seat, Conflict
from models.student import Student
from engine.grid import Grid
from engine.interleaver import interleave_by_department
from engine.placement import allocate, find_adjacency_violations
from engine.errors import InsufficientCapacity


def make_student(student_id, department="CS"):
    return Student(student_id, f"Student {student_id}", department)


def make_pool(sizes):
    """sizes: {department: head count}, students listed department by department."""
    return [make_student(f"{d}{i}", d) for d, n in sizes.items() for i in range(n)]


def place(sizes, rows, columns):
    return allocate(interleave_by_department(make_pool(sizes)), Grid(rows, columns))


class TestCapacity:
    def test_insufficient_capacity(self):
        with pytest.raises(InsufficientCapacity) as exc:
            allocate(make_pool({"A": 3, "B": 2}), Grid(2, 2))
        assert exc.value.required == 5
        assert exc.value.available == 4

    def test_exact_fit(self):
        result = place({"A": 2, "B": 2}, 2, 2)
        assert len(result.seat_map) == 4

    def test_spare_seats_left_empty(self):
        result = allocate(make_pool({"A": 1, "B": 1, "C": 1}), Grid(3, 3))
        assert set(result.seat_map) == {Seat(0, 0), Seat(0, 1), Seat(0, 2)}
        assert result.conflicts == []


class TestSwapAhead:
    def test_blocked_candidate_stays_in_front(self):
        seq = [make_student("A1", "A"), make_student("A2", "A"), make_student("B1", "B")]
        result = allocate(seq, Grid(1, 3))
        assert result.seat_map[Seat(0, 0)].student_id == "A1"
        assert result.seat_map[Seat(0, 1)].student_id == "B1"
        assert result.seat_map[Seat(0, 2)].student_id == "A2"
        assert result.conflicts == []
        assert result.repairs == 1

    def test_top_neighbour_blocks(self):
        seq = [make_student("A1", "A"), make_student("A2", "A"), make_student("B1", "B")]
        result = allocate(seq, Grid(3, 1))
        assert result.seat_map[Seat(1, 0)].student_id == "B1"
        assert result.seat_map[Seat(2, 0)].student_id == "A2"

    def test_forced_placement_records_conflict(self):
        seq = [make_student("A1", "A"), make_student("A2", "A")]
        result = allocate(seq, Grid(1, 2))
        assert len(result.seat_map) == 2
        assert len(result.conflicts) == 1
        conflict = result.conflicts[0]
        assert conflict.seat == Seat(0, 1)
        assert conflict.department == "A"
        assert conflict.student_id == "A2"


class TestScenarios:
    def test_four_departments_four_each(self):
        result = place({"A": 4, "B": 4, "C": 4, "D": 4}, 4, 4)
        assert len(result.seat_map) == 16
        assert result.conflicts == []
        assert find_adjacency_violations(result.seat_map, Grid(4, 4)) == []

    def test_single_department_reports_conflicts(self):
        result = place({"CS": 10}, 2, 6)
        assert len(result.seat_map) == 10
        assert len(result.conflicts) > 0

    @pytest.mark.parametrize("sizes,rows,columns", [
        ({"A": 8, "B": 8}, 4, 4),
        ({"A": 5, "B": 4}, 3, 3),
        ({"A": 4, "B": 4, "C": 4}, 3, 4),
        ({"A": 4, "B": 4, "C": 4, "D": 4}, 4, 4),
    ])
    def test_balanced_pools_place_cleanly(self, sizes, rows, columns):
        result = place(sizes, rows, columns)
        assert result.conflicts == []
        assert find_adjacency_violations(result.seat_map, Grid(rows, columns)) == []

    def test_half_capacity_pool_with_spare_seats_can_clash(self):
        # A0 B0 A1 fill row 0; A2 is left for (1, 0) under A0
        result = place({"A": 3, "B": 1}, 2, 3)
        assert len(result.seat_map) == 4
        assert result.conflicts == [Conflict(Seat(1, 0), "A", "A2")]
        assert result.repairs == 0


class TestDeterminismAndMonotonicity:
    def test_identical_runs(self):
        first = place({"A": 6, "B": 3, "C": 5}, 4, 4)
        second = place({"A": 6, "B": 3, "C": 5}, 4, 4)
        assert first.seat_map == second.seat_map
        assert first.conflicts == second.conflicts

    def test_adding_rows_keeps_filled_positions(self):
        small = place({"A": 5, "B": 3, "C": 2}, 3, 4)
        large = place({"A": 5, "B": 3, "C": 2}, 5, 4)
        assert small.seat_map == large.seat_map
        assert len(large.conflicts) <= len(small.conflicts)

    def test_no_seat_or_student_used_twice(self):
        result = place({"A": 7, "B": 2, "C": 9}, 4, 5)
        placed_ids = [s.student_id for s in result.seat_map.values()]
        assert len(placed_ids) == len(set(placed_ids)) == 18


class TestFindAdjacencyViolations:
    def test_reports_each_pair_once(self):
        seat_map = {
            Seat(0, 0): make_student("1", "A"),
            Seat(0, 1): make_student("2", "A"),
            Seat(1, 0): make_student("3", "B"),
        }
        assert find_adjacency_violations(seat_map, Grid(2, 2)) == [(Seat(0, 0), Seat(0, 1))]

    def test_ignores_diagonals(self):
        seat_map = {
            Seat(0, 0): make_student("1", "A"),
            Seat(1, 1): make_student("2", "A"),
        }
        assert find_adjacency_violations(seat_map, Grid(2, 2)) == []

    def test_vertical_pair(self):
        seat_map = {
            Seat(0, 1): make_student("1", "A"),
            Seat(1, 1): make_student("2", "A"),
        }
        assert find_adjacency_violations(seat_map, Grid(2, 2)) == [(Seat(0, 1), Seat(1, 1))]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
