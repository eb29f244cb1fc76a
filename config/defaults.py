"""Default configuration constants for the Exam Seat Allocation planner."""

import os

# Department tag used when a student record has none
UNKNOWN_DEPARTMENT = "UNKNOWN"

# Caller-side eligibility filter (the engine itself never filters)
STUDENT_ROLE = "student"
ACTIVE_STATUS = "active"
ACADEMIC_STATUSES = ["active", "detained"]

# Ordering
INTERLEAVE_BY_DEPARTMENT = True
DEFAULT_SHUFFLE_SEED = None  # None = keep the pool in input order

# Allocation states per (exam, room)
STATE_ABSENT = "absent"
STATE_ALLOCATED = "allocated"

# Persistence
DEFAULT_DATABASE_URL = os.environ.get("SEATING_DATABASE_URL", "sqlite:///./seating.db")

# Logging
LOG_LEVEL = os.environ.get("SEATING_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Grid visualisation
DEPARTMENT_COLORS = [
    "#4A90D9",
    "#E8734A",
    "#5CB85C",
    "#F5C542",
    "#9B59B6",
    "#1ABC9C",
    "#E74C3C",
    "#34495E",
]
EMPTY_SEAT_COLOR = "#EEEEEE"
CONFLICT_MARKER_COLOR = "#CC0000"

# Sample data
SAMPLE_DEPARTMENTS = [
    "Computer Science",
    "Electronics",
    "Mechanical",
    "Civil",
    "Electrical",
]
SAMPLE_STUDENTS_PER_DEPARTMENT = 12
SAMPLE_SEED = 42
