"""Schema validation for uploaded data files."""

from dataclasses import dataclass, field
from typing import List
import pandas as pd

from config.defaults import ACADEMIC_STATUSES


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


STUDENT_REQUIRED_COLUMNS = [
    "Student ID",
    "Name",
    "Department",
]

ROOM_REQUIRED_COLUMNS = [
    "Room Number",
    "Rows",
    "Columns",
]

EXAM_REQUIRED_COLUMNS = [
    "Exam ID",
    "Subject Name",
    "Subject Code",
]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def validate_students(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, STUDENT_REQUIRED_COLUMNS, "Students")
    if not result.is_valid:
        return result

    dupes = df.duplicated(subset=["Student ID"], keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(
            f"Students: Duplicate student IDs: {df[dupes]['Student ID'].astype(str).unique().tolist()}"
        )

    missing_dept = df["Department"].isna().sum()
    if missing_dept:
        result.warnings.append(
            f"Students: {missing_dept} student(s) have no department and will be grouped as UNKNOWN."
        )

    if "Academic Status" in df.columns:
        statuses = df["Academic Status"].dropna().astype(str).str.strip().str.lower()
        unknown = sorted(set(statuses) - set(ACADEMIC_STATUSES))
        if unknown:
            result.warnings.append(f"Students: Unrecognised academic status values: {', '.join(unknown)}")

    return result


def validate_rooms(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, ROOM_REQUIRED_COLUMNS, "Rooms")
    if not result.is_valid:
        return result

    if (df["Rows"] <= 0).any() or (df["Columns"] <= 0).any():
        result.is_valid = False
        result.errors.append("Rooms: Rows and Columns must be positive.")
        return result

    dupes = df.duplicated(subset=["Room Number"], keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(
            f"Rooms: Duplicate room numbers: {df[dupes]['Room Number'].astype(str).unique().tolist()}"
        )

    if "Capacity" in df.columns:
        declared = df["Capacity"]
        mismatch = declared.notna() & (declared != df["Rows"] * df["Columns"])
        if mismatch.any():
            rooms = df[mismatch]["Room Number"].astype(str).tolist()
            result.warnings.append(
                f"Rooms: Declared capacity differs from rows x columns for: {', '.join(rooms)}. "
                "The grid size will be used."
            )

    return result


def validate_exams(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, EXAM_REQUIRED_COLUMNS, "Exams")
    if not result.is_valid:
        return result

    dupes = df.duplicated(subset=["Exam ID"], keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(
            f"Exams: Duplicate exam IDs: {df[dupes]['Exam ID'].astype(str).unique().tolist()}"
        )

    return result


def validate_room_fit(students_df: pd.DataFrame, rooms_df: pd.DataFrame) -> ValidationResult:
    """Warn when no single room can seat the whole pool."""
    result = ValidationResult()
    headcount = len(students_df)
    largest = int((rooms_df["Rows"] * rooms_df["Columns"]).max())
    if headcount > largest:
        result.warnings.append(
            f"{headcount} students exceed the largest room ({largest} seats). "
            "Split the cohort or pick a larger room before allocating."
        )
    return result
