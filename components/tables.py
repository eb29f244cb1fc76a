"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import List, Optional

from models.seating import Conflict, GridCell, SeatAssignment


def assignments_to_df(
    assignments: List[SeatAssignment],
    grid: List[List[Optional[GridCell]]],
    conflicts: Optional[List[Conflict]] = None,
) -> pd.DataFrame:
    """Flatten seat assignments with display fields and a conflict flag."""
    conflict_seats = {(c.seat.row, c.seat.column) for c in conflicts or []}
    rows = []
    for a in assignments:
        cell = grid[a.row][a.column]
        rows.append({
            "Row": a.row + 1,
            "Column": a.column + 1,
            "Student ID": a.student_id,
            "Name": cell.student_name if cell else "",
            "Department": cell.department if cell else "",
            "Conflict": "YES" if (a.row, a.column) in conflict_seats else "",
        })
    return pd.DataFrame(rows)


def render_assignment_table(df: pd.DataFrame, conflict_column: str = "Conflict"):
    """Render the seat list with conflicting seats highlighted."""
    def color_conflict(val):
        if val == "YES":
            return "background-color: #ffcccc; color: #cc0000; font-weight: bold"
        return ""

    if conflict_column in df.columns:
        styled = df.style.map(color_conflict, subset=[conflict_column])
        st.dataframe(styled, use_container_width=True, height=400)
    else:
        st.dataframe(df, use_container_width=True, height=400)
