"""KPI metric cards for an allocation run."""

import streamlit as st

from models.allocation import AllocationResult


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_allocation_metrics(result: AllocationResult, capacity: int):
    render_metric_row([
        {"label": "Seated", "value": f"{result.seated_count:,}"},
        {"label": "Capacity", "value": f"{capacity:,}"},
        {"label": "Empty Seats", "value": f"{result.empty_seats:,}"},
        {
            "label": "Conflicts",
            "value": len(result.conflicts),
            "delta": "clean" if not result.has_conflicts else "review",
            "delta_color": "normal" if not result.has_conflicts else "inverse",
        },
    ])


def render_alert_card(message: str, level: str = "warning"):
    """Render an alert card with appropriate styling."""
    if level == "error":
        st.error(message, icon="🔴")
    elif level == "warning":
        st.warning(message, icon="🟡")
    else:
        st.info(message, icon="🔵")
