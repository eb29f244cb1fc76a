"""Exam Seat Allocation planner — Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config.logging_config import configure_logging
from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import tab_seating_allocation, tab_admin


def main():
    st.set_page_config(
        page_title="Exam Seating",
        page_icon="🪑",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    configure_logging()
    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2 = st.tabs([
        "🪑 Seating Allocation",
        "⚙️ Admin",
    ])

    with tab1:
        tab_seating_allocation.render(sidebar_state)
    with tab2:
        tab_admin.render(sidebar_state)


if __name__ == "__main__":
    main()
