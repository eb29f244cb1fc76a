"""Tests for the Plotly chart builders."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
import plotly.graph_objects as go

from models.seating import GridCell
from models.student import Student
from engine.seating_engine import filter_eligible_students, department_summary
from components.charts import (
    department_color_map,
    ordered_departments,
    seating_grid_heatmap,
    department_distribution_bar,
)


def make_cell(student_id, department):
    return GridCell(student_id, f"Student {student_id}", student_id, department)


def make_grid():
    # A is seen first in seat order, B first in the pool below
    return [
        [make_cell("A0", "A"), make_cell("B0", "B")],
        [make_cell("C0", "C"), None],
    ]


class TestDepartmentBar:
    def test_no_eligible_students(self):
        pool = [Student(str(i), f"S{i}", "CS", academic_status="detained") for i in range(3)]
        counts = department_summary(filter_eligible_students(pool))
        assert counts == {}
        fig = department_distribution_bar(counts)
        assert isinstance(fig, go.Figure)
        assert all(len(trace.x or ()) == 0 for trace in fig.data)

    def test_one_bar_per_department(self):
        fig = department_distribution_bar({"CS": 4, "EE": 2})
        assert [t.name for t in fig.data] == ["CS", "EE"]


class TestDepartmentColours:
    def test_given_order_comes_first(self):
        assert ordered_departments(make_grid(), ["B", "A"]) == ["B", "A", "C"]

    def test_grid_order_without_hint(self):
        assert ordered_departments(make_grid()) == ["A", "B", "C"]

    def test_heatmap_matches_bar_colours(self):
        counts = {"B": 1, "A": 1, "C": 1}
        order = list(counts)
        bar = department_distribution_bar(counts)
        heat = seating_grid_heatmap(make_grid(), department_order=order)

        bar_colors = {t.name: t.marker.color for t in bar.data}
        expected = department_color_map(order)
        assert bar_colors == expected

        band_colors = [color for _, color in heat.data[0].colorscale][2::2]
        assert band_colors == [expected[d] for d in order]

    def test_heatmap_bands_follow_given_order(self):
        heat = seating_grid_heatmap(make_grid(), department_order=["B", "A", "C"])
        z = [list(row) for row in heat.data[0].z]
        assert z == [[2, 1], [3, 0]]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
