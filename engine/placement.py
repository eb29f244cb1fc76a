"""Forward placement of an ordered pool onto the grid with swap-ahead repair."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from models.seating import Seat, Conflict
from models.student import Student
from engine.grid import Grid
from engine.errors import InsufficientCapacity

logger = logging.getLogger(__name__)


@dataclass
class PlacementResult:
    seat_map: Dict[Seat, Student]
    conflicts: List[Conflict] = field(default_factory=list)
    repairs: int = 0   # Seats filled by pulling a later student forward


def _placed_neighbor_departments(
    seat: Seat,
    grid: Grid,
    seat_map: Dict[Seat, Student],
) -> Set[str]:
    return {
        seat_map[n].department_key
        for n in grid.neighbors(seat)
        if n in seat_map
    }


def allocate(sequence: List[Student], grid: Grid) -> PlacementResult:
    """Assign ``sequence`` to seats in traversal order.

    When the front of the queue shares a department with a placed left/top
    neighbour, the first later student that clashes with none of them is
    seated instead and the blocked candidate stays at the front. If the whole
    tail clashes, the candidate is seated anyway and a Conflict is recorded.
    Never backtracks, so it always terminates.
    """
    required = len(sequence)
    if required > grid.capacity:
        raise InsufficientCapacity(required, grid.capacity)

    queue = list(sequence)
    seat_map: Dict[Seat, Student] = {}
    conflicts: List[Conflict] = []
    repairs = 0

    for seat in grid.traversal_order():
        if not queue:
            break

        blocked = _placed_neighbor_departments(seat, grid, seat_map)
        candidate = queue[0]

        if candidate.department_key not in blocked:
            seat_map[seat] = queue.pop(0)
            continue

        swap_idx = next(
            (i for i in range(1, len(queue)) if queue[i].department_key not in blocked),
            None,
        )
        if swap_idx is not None:
            seat_map[seat] = queue.pop(swap_idx)
            repairs += 1
            continue

        seat_map[seat] = queue.pop(0)
        conflicts.append(Conflict(seat, candidate.department_key, candidate.student_id))
        logger.debug(
            "Forced %s (%s) into seat (%d, %d); no conflict-free student left",
            candidate.student_id, candidate.department_key, seat.row, seat.column,
        )

    return PlacementResult(seat_map=seat_map, conflicts=conflicts, repairs=repairs)


def find_adjacency_violations(
    seat_map: Dict[Seat, Student],
    grid: Grid,
) -> List[Tuple[Seat, Seat]]:
    """Every 4-adjacent pair of occupied seats sharing a department, each pair once."""
    violations = []
    for seat in sorted(seat_map):
        student = seat_map[seat]
        for n in grid.all_neighbors(seat):
            if n <= seat or n not in seat_map:
                continue
            if seat_map[n].department_key == student.department_key:
                violations.append((seat, n))
    return violations
