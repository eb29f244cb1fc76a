"""Tab 1: Seating Allocation — run the allocator and inspect the room grid."""

import logging

import streamlit as st
from sqlalchemy.exc import SQLAlchemyError

from data.session_store import (
    get_students, get_room, get_exam, get_result, set_result, clear_result,
    get_rule_config, add_audit_entry, is_data_loaded, open_db_session,
)
from data.seating_repository import (
    replace_seatings, get_seatings, delete_seatings, allocation_state,
)
from engine.seating_engine import run_allocation, filter_eligible_students, department_summary
from engine.result_builder import grid_from_assignments
from engine.grid import Grid
from engine.placement import find_adjacency_violations
from engine.errors import SeatAllocationError, InsufficientCapacity
from components.charts import seating_grid_heatmap, department_distribution_bar, utilization_donut
from components.tables import assignments_to_df, render_assignment_table
from components.metrics_cards import render_allocation_metrics, render_alert_card
from config.defaults import STATE_ALLOCATED

logger = logging.getLogger(__name__)


def _allocate(students, room, exam, rule_config):
    """Compute a fresh allocation and swap it into storage."""
    try:
        result = run_allocation(students, room, exam.exam_id, rule_config)
    except InsufficientCapacity as e:
        render_alert_card(
            f"{e.required} students need seats but {room.label} has only {e.available}. "
            "Choose a larger room or split the cohort.",
            level="error",
        )
        return None
    except SeatAllocationError as e:
        render_alert_card(str(e), level="error")
        return None

    try:
        with open_db_session() as session:
            previous = allocation_state(session, exam.exam_id, room.room_id)
            replace_seatings(session, exam.exam_id, room.room_id, result.assignments)
    except SQLAlchemyError as e:
        logger.exception("Storing seating for %s in %s failed", exam.exam_id, room.room_id)
        render_alert_card(
            f"Saving the seating for {room.label} failed; the previous allocation is unchanged. ({e})",
            level="error",
        )
        return None

    set_result(result)
    add_audit_entry(
        "reallocate" if previous == STATE_ALLOCATED else "allocate",
        f"{exam.label} in {room.label}",
        exam_id=exam.exam_id,
        room_id=room.room_id,
        seated=result.seated_count,
        conflicts=len(result.conflicts),
        rationale=f"seed={rule_config.get('shuffle_seed')}",
    )
    return result


def _render_stored(exam, room, students):
    """Show the stored allocation rebuilt from assignment rows."""
    with open_db_session() as session:
        stored = get_seatings(session, exam.exam_id, room.room_id)
    if not stored:
        st.info("No seating stored for this exam and room yet. Run the allocation above.")
        return

    grid = grid_from_assignments(stored, students, room)
    student_map = {s.student_id: s for s in students}
    seat_map = {a.seat: student_map[a.student_id] for a in stored if a.student_id in student_map}
    violations = find_adjacency_violations(seat_map, Grid.for_room(room))

    st.caption(f"Stored allocation: {len(stored)} seats (rebuilt from saved rows)")
    if violations:
        render_alert_card(f"{len(violations)} adjacent same-department pair(s) in stored seating.")
    st.plotly_chart(seating_grid_heatmap(
        grid, title=f"{room.label}", department_order=list(department_summary(students)),
    ), use_container_width=True)
    render_assignment_table(assignments_to_df(stored, grid))


def render(sidebar_state):
    """Render the Seating Allocation tab."""
    st.header("Seating Allocation")
    st.caption("Smart seat assignment ensuring no department clustering.")

    if not is_data_loaded():
        st.info("No data loaded. Please upload data in the Admin tab.")
        return

    exam = get_exam(sidebar_state.exam_id)
    room = get_room(sidebar_state.room_id)
    if not exam or not room:
        st.info("Select an exam and a room in the sidebar.")
        return

    students = filter_eligible_students(get_students())
    excluded = len(get_students()) - len(students)

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(department_distribution_bar(department_summary(students)), use_container_width=True)
    with col2:
        st.metric("Eligible Students", len(students))
        st.metric("Excluded (inactive / non-student)", excluded)
        st.metric("Room Seats", room.seat_count)

    rule_config = dict(get_rule_config())
    shuffle = st.checkbox(
        "Shuffle before allocating",
        value=rule_config.get("shuffle_seed") is not None,
        key="alloc_shuffle",
        help="Applies a reproducible seeded shuffle to the pool. Same seed, same seating.",
    )
    if shuffle:
        rule_config["shuffle_seed"] = int(st.number_input(
            "Shuffle seed", min_value=0, value=rule_config.get("shuffle_seed") or 1, step=1,
            key="alloc_seed",
        ))
    else:
        rule_config["shuffle_seed"] = None

    btn_col1, btn_col2 = st.columns(2)
    with btn_col1:
        run_clicked = st.button("Auto-Allocate", type="primary", key="btn_allocate")
    with btn_col2:
        clear_clicked = st.button("Clear Allocation", key="btn_clear")

    if clear_clicked:
        with open_db_session() as session:
            removed = delete_seatings(session, exam.exam_id, room.room_id)
        clear_result(exam.exam_id, room.room_id)
        add_audit_entry("clear", f"{exam.label} in {room.label}",
                        exam_id=exam.exam_id, room_id=room.room_id)
        st.success(f"Removed {removed} stored seat(s).")

    if run_clicked:
        if _allocate(students, room, exam, rule_config):
            st.success("Smart seating allocation completed")

    st.divider()

    result = get_result(exam.exam_id, room.room_id)
    if result is None:
        _render_stored(exam, room, students)
        return

    render_allocation_metrics(result, room.seat_count)

    col1, col2 = st.columns([3, 1])
    with col1:
        st.plotly_chart(
            seating_grid_heatmap(
                result.grid, result.conflicts, title=room.label,
                department_order=list(department_summary(students)),
            ),
            use_container_width=True,
        )
    with col2:
        st.plotly_chart(utilization_donut(result.seated_count, room.seat_count), use_container_width=True)

    if result.conflicts:
        for c in result.conflicts:
            render_alert_card(
                f"Row {c.seat.row + 1}, Column {c.seat.column + 1}: {c.department} "
                f"student {c.student_id} sits next to the same department."
            )
    else:
        st.success("No two adjacent students share a department.")

    with st.expander("How this seating was produced"):
        for step in result.explanation_steps:
            st.markdown(f"- {step}")

    st.subheader("Seat List")
    render_assignment_table(assignments_to_df(result.assignments, result.grid, result.conflicts))
