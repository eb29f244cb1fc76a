"""Generates human-readable explanations for a seating allocation run."""

from typing import Dict, List, Optional

from models.seating import Conflict


def explain_allocation(
    room_label: str,
    rows: int,
    columns: int,
    department_counts: Dict[str, int],
    runs_before: int,
    runs_after: int,
    shuffle_seed: Optional[int],
    seated: int,
    repairs: int,
    conflicts: List[Conflict],
) -> List[str]:
    """Produce step-by-step explanation for an allocation run."""
    steps = []
    total = sum(department_counts.values())
    capacity = rows * columns

    breakdown = ", ".join(f"{d}: {n}" for d, n in department_counts.items())
    steps.append(
        f"Step 1 - Pool: {total} students across {len(department_counts)} "
        f"department(s) ({breakdown})"
    )

    if shuffle_seed is not None:
        steps.append(f"Step 2 - Ordering: pool shuffled with seed {shuffle_seed} before interleaving")
    else:
        steps.append("Step 2 - Ordering: pool kept in input order")

    steps.append(
        f"Step 3 - Interleaving: same-department neighbours in sequence "
        f"{runs_before} => {runs_after}"
    )

    steps.append(
        f"Step 4 - Room {room_label}: {rows} x {columns} = {capacity} seats, "
        f"{seated} filled ({seated / capacity:.0%}), {capacity - seated} empty"
    )

    steps.append(f"Step 5 - Repairs: {repairs} seat(s) filled by pulling a later student forward")

    if conflicts:
        depts = sorted({c.department for c in conflicts})
        steps.append(
            f"Step 6 - Conflicts: {len(conflicts)} unavoidable adjacency clash(es) "
            f"in {', '.join(depts)}"
        )
        largest = max(department_counts.values())
        if largest > (capacity + 1) // 2:
            steps.append(
                f"Note: largest department has {largest} students, more than half "
                f"the room ({capacity}); clashes cannot all be avoided"
            )
    else:
        steps.append("Step 6 - Conflicts: none, no two adjacent students share a department")

    return steps
