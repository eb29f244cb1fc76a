"""File upload parsing — CSV/XLSX into typed model lists."""

import pandas as pd
from typing import List, Optional, Tuple
from models.student import Student
from models.room import Room
from models.exam import Exam
from config.defaults import ACTIVE_STATUS, STUDENT_ROLE


def _optional_str(row, df: pd.DataFrame, column: str) -> Optional[str]:
    if column in df.columns and pd.notna(row.get(column)):
        value = str(row[column]).strip()
        return value or None
    return None


def _optional_int(row, df: pd.DataFrame, column: str) -> Optional[int]:
    if column in df.columns and pd.notna(row.get(column)):
        return int(row[column])
    return None


def parse_students(df: pd.DataFrame) -> List[Student]:
    """Convert a students DataFrame into Student objects."""
    students = []
    for _, row in df.iterrows():
        students.append(Student(
            student_id=str(row["Student ID"]).strip(),
            name=str(row["Name"]).strip(),
            department=_optional_str(row, df, "Department"),
            academic_status=(_optional_str(row, df, "Academic Status") or ACTIVE_STATUS).lower(),
            role=(_optional_str(row, df, "Role") or STUDENT_ROLE).lower(),
            year=_optional_int(row, df, "Year"),
            roll_number=_optional_str(row, df, "Roll Number"),
        ))
    return students


def parse_rooms(df: pd.DataFrame) -> List[Room]:
    """Convert a rooms DataFrame into Room objects."""
    rooms = []
    for _, row in df.iterrows():
        room_number = str(row["Room Number"]).strip()
        rooms.append(Room(
            room_id=_optional_str(row, df, "Room ID") or room_number,
            room_number=room_number,
            rows=int(row["Rows"]),
            columns=int(row["Columns"]),
            capacity=_optional_int(row, df, "Capacity"),
            building=_optional_str(row, df, "Building"),
        ))
    return rooms


def parse_exams(df: pd.DataFrame) -> List[Exam]:
    """Convert an exams DataFrame into Exam objects."""
    exams = []
    for _, row in df.iterrows():
        exam_date = None
        if "Exam Date" in df.columns and pd.notna(row.get("Exam Date")):
            exam_date = pd.to_datetime(row["Exam Date"]).date()
        exams.append(Exam(
            exam_id=str(row["Exam ID"]).strip(),
            subject_name=str(row["Subject Name"]).strip(),
            subject_code=str(row["Subject Code"]).strip(),
            exam_date=exam_date,
            department=_optional_str(row, df, "Department"),
            semester=_optional_int(row, df, "Semester"),
        ))
    return exams


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")


# Expected sheet names for multi-tab Excel (case-insensitive matching)
SHEET_ALIASES = {
    "students": ["students", "student", "student list", "candidates"],
    "rooms": ["rooms", "room", "halls", "exam halls", "examination rooms"],
    "exams": ["exams", "exam", "exam schedule", "timetable"],
}


def _match_sheet(sheet_names: List[str], category: str) -> str:
    """Find a sheet name matching the given category. Returns the matched name or raises."""
    aliases = SHEET_ALIASES[category]
    lower_map = {s.lower().strip(): s for s in sheet_names}
    for alias in aliases:
        if alias in lower_map:
            return lower_map[alias]
    raise ValueError(
        f"Could not find a sheet for '{category}'. "
        f"Expected one of: {aliases}. "
        f"Found sheets: {sheet_names}"
    )


def load_multi_sheet_excel(uploaded_file) -> Tuple[pd.DataFrame, pd.DataFrame, pd.DataFrame]:
    """Load a single Excel file with 3 tabs: Students, Rooms, Exams.

    Sheet names are matched case-insensitively; see SHEET_ALIASES.

    Returns (students_df, rooms_df, exams_df).
    """
    xl = pd.ExcelFile(uploaded_file, engine="openpyxl")
    sheet_names = xl.sheet_names

    students_df = pd.read_excel(xl, sheet_name=_match_sheet(sheet_names, "students"))
    rooms_df = pd.read_excel(xl, sheet_name=_match_sheet(sheet_names, "rooms"))
    exams_df = pd.read_excel(xl, sheet_name=_match_sheet(sheet_names, "exams"))

    return students_df, rooms_df, exams_df
