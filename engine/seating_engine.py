"""Seating pipeline: grid -> interleave -> place -> build results."""

import logging
import random
from collections import OrderedDict
from typing import Dict, Iterable, List, Optional

from models.student import Student
from models.room import Room
from models.allocation import AllocationResult
from engine.grid import Grid
from engine.interleaver import interleave_by_department, count_consecutive_same_department
from engine.placement import allocate
from engine.result_builder import to_seat_assignments, to_grid
from engine.explainer import explain_allocation
from engine.errors import NoStudents
from config.defaults import (
    STUDENT_ROLE, ACTIVE_STATUS,
    INTERLEAVE_BY_DEPARTMENT, DEFAULT_SHUFFLE_SEED,
)

logger = logging.getLogger(__name__)


def filter_eligible_students(users: Iterable[Student]) -> List[Student]:
    """Keep active students only. Callers apply this before run_allocation."""
    return [
        u for u in users
        if u.role == STUDENT_ROLE and u.academic_status == ACTIVE_STATUS
    ]


def seeded_shuffle(students: List[Student], seed: int) -> List[Student]:
    """Reproducible permutation of the pool; the input list is left untouched."""
    shuffled = list(students)
    random.Random(seed).shuffle(shuffled)
    return shuffled


def department_summary(students: Iterable[Student]) -> Dict[str, int]:
    """Head count per department, first-seen order."""
    counts: Dict[str, int] = OrderedDict()
    for s in students:
        counts[s.department_key] = counts.get(s.department_key, 0) + 1
    return counts


def run_allocation(
    students: List[Student],
    room: Room,
    exam_id: str,
    rule_config: Optional[dict] = None,
) -> AllocationResult:
    """Full allocation pipeline for one (exam, room) pair.

    Raises InvalidDimensions, NoStudents or InsufficientCapacity (in that
    order of checking) before anything is placed.
    """
    cfg = rule_config or {}
    shuffle_seed = cfg.get("shuffle_seed", DEFAULT_SHUFFLE_SEED)
    interleave = cfg.get("interleave", INTERLEAVE_BY_DEPARTMENT)

    grid = Grid.for_room(room)
    if not students:
        raise NoStudents()

    pool = seeded_shuffle(students, shuffle_seed) if shuffle_seed is not None else list(students)
    sequence = interleave_by_department(pool) if interleave else pool

    placement = allocate(sequence, grid)

    assignments = to_seat_assignments(placement.seat_map, exam_id, room.room_id)
    snapshot = to_grid(placement.seat_map, grid)

    explanation = explain_allocation(
        room_label=room.label,
        rows=grid.rows,
        columns=grid.columns,
        department_counts=department_summary(pool),
        runs_before=count_consecutive_same_department(pool),
        runs_after=count_consecutive_same_department(sequence),
        shuffle_seed=shuffle_seed,
        seated=len(assignments),
        repairs=placement.repairs,
        conflicts=placement.conflicts,
    )

    if placement.conflicts:
        logger.warning(
            "Exam %s room %s: %d adjacency conflict(s) could not be avoided",
            exam_id, room.room_id, len(placement.conflicts),
        )
    logger.info(
        "Exam %s room %s: seated %d/%d, %d repair(s), %d conflict(s)",
        exam_id, room.room_id, len(assignments), grid.capacity,
        placement.repairs, len(placement.conflicts),
    )

    return AllocationResult(
        exam_id=exam_id,
        room_id=room.room_id,
        seat_map=placement.seat_map,
        assignments=assignments,
        grid=snapshot,
        conflicts=placement.conflicts,
        explanation_steps=explanation,
    )
