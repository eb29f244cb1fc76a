from dataclasses import dataclass, field
from typing import Dict, List, Optional

from models.seating import Seat, SeatAssignment, GridCell, Conflict
from models.student import Student


@dataclass
class AllocationResult:
    exam_id: str
    room_id: str
    seat_map: Dict[Seat, Student]
    assignments: List[SeatAssignment]
    grid: List[List[Optional[GridCell]]]
    conflicts: List[Conflict] = field(default_factory=list)
    explanation_steps: List[str] = field(default_factory=list)

    @property
    def seated_count(self) -> int:
        return len(self.assignments)

    @property
    def empty_seats(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell is None)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)
