"""Projection of a seat mapping into stored assignments and the grid snapshot."""

import logging
from typing import Dict, Iterable, List, Optional

from models.room import Room
from models.seating import Seat, SeatAssignment, GridCell
from models.student import Student
from engine.grid import Grid

logger = logging.getLogger(__name__)


def _cell_for(student: Student) -> GridCell:
    return GridCell(
        student_id=student.student_id,
        student_name=student.name,
        roll_number=student.display_roll_number,
        department=student.department_key,
    )


def to_seat_assignments(
    seat_map: Dict[Seat, Student],
    exam_id: str,
    room_id: str,
) -> List[SeatAssignment]:
    """One assignment per occupied seat, in traversal order."""
    return [
        SeatAssignment(
            exam_id=exam_id,
            room_id=room_id,
            student_id=seat_map[seat].student_id,
            row=seat.row,
            column=seat.column,
        )
        for seat in sorted(seat_map)
    ]


def to_grid(seat_map: Dict[Seat, Student], grid: Grid) -> List[List[Optional[GridCell]]]:
    """R x C matrix; empty seats are None."""
    matrix: List[List[Optional[GridCell]]] = [
        [None] * grid.columns for _ in range(grid.rows)
    ]
    for seat, student in seat_map.items():
        matrix[seat.row][seat.column] = _cell_for(student)
    return matrix


def grid_from_assignments(
    assignments: Iterable[SeatAssignment],
    students: Iterable[Student],
    room: Room,
) -> List[List[Optional[GridCell]]]:
    """Rebuild the snapshot from stored assignment rows.

    Rows pointing at unknown students or outside the room are skipped.
    """
    grid = Grid.for_room(room)
    student_map = {s.student_id: s for s in students}
    seat_map: Dict[Seat, Student] = {}
    for a in assignments:
        student = student_map.get(a.student_id)
        if student is None:
            logger.warning("Assignment references unknown student %s; skipped", a.student_id)
            continue
        if not grid.contains(a.seat):
            logger.warning(
                "Assignment for %s at (%d, %d) lies outside room %s; skipped",
                a.student_id, a.row, a.column, room.room_id,
            )
            continue
        seat_map[a.seat] = student
    return to_grid(seat_map, grid)


def grid_to_records(grid: List[List[Optional[GridCell]]]) -> List[List[Optional[dict]]]:
    """JSON-ready 2-D list for a grid visualiser."""
    return [[cell.to_dict() if cell else None for cell in row] for row in grid]
