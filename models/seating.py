from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, order=True)
class Seat:
    """A grid coordinate. Ordering follows the row-major traversal."""
    row: int
    column: int

    def is_adjacent(self, other: "Seat") -> bool:
        return abs(self.row - other.row) + abs(self.column - other.column) == 1


@dataclass(frozen=True)
class SeatAssignment:
    exam_id: str
    room_id: str
    student_id: str
    row: int
    column: int

    @property
    def seat(self) -> Seat:
        return Seat(self.row, self.column)


@dataclass(frozen=True)
class GridCell:
    """Public display fields of a seated student."""
    student_id: str
    student_name: str
    roll_number: str
    department: str

    def to_dict(self) -> dict:
        return {
            "studentId": self.student_id,
            "studentName": self.student_name,
            "rollNumber": self.roll_number,
            "department": self.department,
        }


@dataclass(frozen=True)
class Conflict:
    seat: Seat
    department: str
    student_id: Optional[str] = None
