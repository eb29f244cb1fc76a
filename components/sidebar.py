"""Global sidebar controls for exam and room selection."""

import streamlit as st
from dataclasses import dataclass
from typing import Optional
from data.session_store import get_exams, get_rooms, is_data_loaded, set_selection


@dataclass
class SidebarState:
    exam_id: Optional[str]
    room_id: Optional[str]


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Exam Seating")
        st.divider()

        exams = get_exams()
        rooms = get_rooms()

        exam_labels = {e.exam_id: e.label for e in exams}
        room_labels = {r.room_id: f"{r.label} ({r.rows}x{r.columns})" for r in rooms}

        exam_id = st.selectbox(
            "Exam",
            options=list(exam_labels.keys()),
            format_func=lambda x: exam_labels.get(x, x),
            key="sidebar_exam",
        ) if exams else None

        room_id = st.selectbox(
            "Room",
            options=list(room_labels.keys()),
            format_func=lambda x: room_labels.get(x, x),
            key="sidebar_room",
        ) if rooms else None

        set_selection(exam_id, room_id)

        st.divider()

        if is_data_loaded():
            st.success("Data loaded")
        else:
            st.warning("No data loaded — go to Admin tab")

    return SidebarState(exam_id=exam_id, room_id=room_id)
