"""Plotly chart builders for the Exam Seat Allocation planner."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import Dict, List, Optional

from models.seating import GridCell, Conflict
from config.defaults import DEPARTMENT_COLORS, EMPTY_SEAT_COLOR, CONFLICT_MARKER_COLOR


def department_color_map(departments: List[str]) -> Dict[str, str]:
    """Stable colour per department, cycling through the palette."""
    return {d: DEPARTMENT_COLORS[i % len(DEPARTMENT_COLORS)] for i, d in enumerate(departments)}


def ordered_departments(
    grid: List[List[Optional[GridCell]]],
    department_order: Optional[List[str]] = None,
) -> List[str]:
    """Departments in the given order, then any others found in the grid in seat order."""
    departments = list(department_order or [])
    for row in grid:
        for cell in row:
            if cell and cell.department not in departments:
                departments.append(cell.department)
    return departments


def seating_grid_heatmap(
    grid: List[List[Optional[GridCell]]],
    conflicts: Optional[List[Conflict]] = None,
    title: str = "Seating Grid",
    department_order: Optional[List[str]] = None,
) -> go.Figure:
    """Room grid coloured by department; empty seats grey, conflicts outlined.

    Pass the pool's department order so colours match department_distribution_bar.
    """
    departments = ordered_departments(grid, department_order)
    dept_index = {d: i + 1 for i, d in enumerate(departments)}
    colors = department_color_map(departments)

    z, text, hover = [], [], []
    for row in grid:
        z.append([dept_index[c.department] if c else 0 for c in row])
        text.append([c.roll_number if c else "" for c in row])
        hover.append([
            f"{c.student_name}<br>{c.roll_number}<br>{c.department}" if c else "Empty"
            for c in row
        ])

    # Discrete colour scale: band 0 = empty, band i = department i
    n = len(departments) + 1
    scale = []
    for i, color in enumerate([EMPTY_SEAT_COLOR] + [colors[d] for d in departments]):
        scale.append([i / n, color])
        scale.append([(i + 1) / n, color])

    fig = go.Figure(data=go.Heatmap(
        z=z,
        text=text,
        customdata=hover,
        texttemplate="%{text}",
        hovertemplate="Row %{y}, Col %{x}<br>%{customdata}<extra></extra>",
        colorscale=scale,
        zmin=-0.5,
        zmax=n - 0.5,
        showscale=False,
        xgap=3,
        ygap=3,
    ))

    for c in conflicts or []:
        fig.add_shape(
            type="rect",
            x0=c.seat.column - 0.5, x1=c.seat.column + 0.5,
            y0=c.seat.row - 0.5, y1=c.seat.row + 0.5,
            line=dict(color=CONFLICT_MARKER_COLOR, width=3),
        )

    rows = len(grid)
    fig.update_layout(
        title=title,
        xaxis_title="Column",
        yaxis_title="Row",
        yaxis_autorange="reversed",
        height=max(300, rows * 60),
    )
    return fig


def department_distribution_bar(department_counts: Dict[str, int], title: str = "Students by Department") -> go.Figure:
    """Bar chart of head count per department."""
    df = pd.DataFrame(
        [{"department": d, "students": n} for d, n in department_counts.items()],
        columns=["department", "students"],
    )
    fig = px.bar(
        df, x="department", y="students",
        color="department",
        color_discrete_map=department_color_map(list(department_counts.keys())),
        labels={"department": "Department", "students": "Students"},
        title=title,
    )
    fig.update_layout(showlegend=False, height=350)
    return fig


def utilization_donut(used: int, total: int, title: str = "Room Fill") -> go.Figure:
    """Donut chart showing occupied vs empty seats."""
    available = total - used
    fig = go.Figure(data=[go.Pie(
        labels=["Seated", "Empty"],
        values=[used, available],
        hole=0.6,
        marker_colors=["#E8734A", "#4A90D9"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{used}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig
