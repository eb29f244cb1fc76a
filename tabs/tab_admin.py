"""Tab 2: Admin — data upload, allocation defaults and audit trail."""

import streamlit as st
import pandas as pd

from data.loader import load_file, load_multi_sheet_excel, parse_students, parse_rooms, parse_exams
from data.validator import validate_students, validate_rooms, validate_exams, validate_room_fit
from data.sample_data import generate_students_df, generate_rooms_df, generate_exams_df
from data.session_store import (
    set_students, set_rooms, set_exams, set_data_loaded,
    get_audit_log, get_rule_config, set_rule_config, add_audit_entry,
)


def _load_and_validate(students_df, rooms_df, exams_df):
    """Validate and store uploaded data."""
    errors = []
    warnings = []

    for r in [validate_students(students_df), validate_rooms(rooms_df), validate_exams(exams_df)]:
        errors.extend(r.errors)
        warnings.extend(r.warnings)

    if not errors:
        warnings.extend(validate_room_fit(students_df, rooms_df).warnings)

    if errors:
        for e in errors:
            st.error(e)
        return False

    for w in warnings:
        st.warning(w)

    students = parse_students(students_df)
    rooms = parse_rooms(rooms_df)
    exams = parse_exams(exams_df)

    set_students(students)
    set_rooms(rooms)
    set_exams(exams)
    set_data_loaded(True)

    add_audit_entry(
        "upload",
        f"{len(students)} students, {len(rooms)} rooms, {len(exams)} exams",
        rationale="Data upload",
    )

    st.success(f"Data loaded: {len(students)} students, {len(rooms)} rooms, {len(exams)} exams")
    return True


def render(sidebar_state):
    """Render the Admin tab."""
    st.header("Admin")

    # --- Data Upload Section ---
    st.subheader("Data Upload")

    upload_mode = st.radio(
        "Upload mode",
        ["Single Excel file (3 tabs)", "Three separate files"],
        horizontal=True,
        key="upload_mode",
    )

    if upload_mode == "Single Excel file (3 tabs)":
        st.caption(
            "Upload one `.xlsx` file with three sheets named: "
            "**Students**, **Rooms**, **Exams** "
            "(also accepts aliases like 'Student List', 'Exam Halls', 'Exam Schedule')"
        )
        single_file = st.file_uploader("Excel workbook with 3 tabs", type=["xlsx"], key="upload_single")
        if st.button("Upload & Validate", type="primary", key="btn_upload_single"):
            if single_file:
                try:
                    s_df, r_df, e_df = load_multi_sheet_excel(single_file)
                    _load_and_validate(s_df, r_df, e_df)
                except Exception as e:
                    st.error(f"Error loading file: {e}")
            else:
                st.warning("Please upload an Excel file.")
    else:
        col1, col2, col3 = st.columns(3)
        with col1:
            students_file = st.file_uploader("Students", type=["csv", "xlsx"], key="upload_students")
        with col2:
            rooms_file = st.file_uploader("Rooms", type=["csv", "xlsx"], key="upload_rooms")
        with col3:
            exams_file = st.file_uploader("Exams", type=["csv", "xlsx"], key="upload_exams")

        if st.button("Upload & Validate", type="primary", key="btn_upload_multi"):
            if students_file and rooms_file and exams_file:
                try:
                    _load_and_validate(load_file(students_file), load_file(rooms_file), load_file(exams_file))
                except Exception as e:
                    st.error(f"Error loading files: {e}")
            else:
                st.warning("Please upload all three files.")

    if st.button("Load Sample Data", key="btn_sample"):
        _load_and_validate(generate_students_df(), generate_rooms_df(), generate_exams_df())

    st.divider()

    # --- Allocation Defaults ---
    st.subheader("Allocation Defaults")
    config = dict(get_rule_config())
    interleave = st.checkbox(
        "Interleave departments before placement",
        value=config.get("interleave", True),
        key="cfg_interleave",
        help="Round-robin the pool by department so the placement pass has less to repair.",
    )
    if st.button("Save Defaults", key="btn_save_cfg"):
        config["interleave"] = interleave
        set_rule_config(config)
        st.success("Allocation defaults saved.")

    st.divider()

    # --- Audit Trail ---
    st.subheader("Audit Trail")
    log = get_audit_log()
    if log:
        st.dataframe(pd.DataFrame([{
            "Time": e.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
            "Action": e.action,
            "Exam": e.exam_id or "—",
            "Room": e.room_id or "—",
            "Detail": e.detail,
            "Seated": e.seated,
            "Conflicts": e.conflicts,
            "Rationale": e.rationale,
        } for e in reversed(log)]), use_container_width=True)
    else:
        st.caption("No actions recorded yet.")
