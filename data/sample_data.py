"""Generate synthetic test datasets for the Exam Seat Allocation planner."""

import pandas as pd
import random
import os

from config.defaults import SAMPLE_DEPARTMENTS, SAMPLE_STUDENTS_PER_DEPARTMENT, SAMPLE_SEED

FIRST_NAMES = [
    "Aarav", "Diya", "Ishaan", "Meera", "Rohan", "Sneha", "Kabir", "Ananya",
    "Vikram", "Priya", "Arjun", "Kavya", "Rahul", "Nisha", "Aditya", "Pooja",
]
LAST_NAMES = ["Sharma", "Iyer", "Reddy", "Nair", "Gupta", "Menon", "Rao", "Das"]

DEPARTMENT_CODES = {
    "Computer Science": "CS",
    "Electronics": "EC",
    "Mechanical": "ME",
    "Civil": "CE",
    "Electrical": "EE",
}


def generate_students_df() -> pd.DataFrame:
    """Generate a student roster: one block per department, a few detained students."""
    random.seed(SAMPLE_SEED)
    rows = []
    for dept in SAMPLE_DEPARTMENTS:
        code = DEPARTMENT_CODES.get(dept, dept[:2].upper())
        for i in range(1, SAMPLE_STUDENTS_PER_DEPARTMENT + 1):
            year = random.choice([1, 2, 3, 4])
            rows.append({
                "Student ID": f"{code}{year}{i:03d}",
                "Name": f"{random.choice(FIRST_NAMES)} {random.choice(LAST_NAMES)}",
                "Department": dept,
                "Year": year,
                "Academic Status": "detained" if random.random() < 0.05 else "active",
            })
    return pd.DataFrame(rows)


def generate_rooms_df() -> pd.DataFrame:
    """Generate examination rooms of a few typical sizes."""
    rooms = [
        {"Room ID": "R-101", "Room Number": "101", "Building": "Main Block", "Rows": 5, "Columns": 6},
        {"Room ID": "R-102", "Room Number": "102", "Building": "Main Block", "Rows": 6, "Columns": 8},
        {"Room ID": "R-201", "Room Number": "201", "Building": "Science Block", "Rows": 8, "Columns": 8},
        {"Room ID": "R-LH1", "Room Number": "LH-1", "Building": "Lecture Hall", "Rows": 4, "Columns": 4},
    ]
    for r in rooms:
        r["Capacity"] = r["Rows"] * r["Columns"]
    return pd.DataFrame(rooms)


def generate_exams_df() -> pd.DataFrame:
    """Generate a short exam schedule."""
    exams = [
        {"Exam ID": "EX-MA201", "Subject Name": "Engineering Mathematics III", "Subject Code": "MA201",
         "Exam Date": "2026-11-16", "Department": "Common", "Semester": 3},
        {"Exam ID": "EX-HS101", "Subject Name": "Professional Communication", "Subject Code": "HS101",
         "Exam Date": "2026-11-18", "Department": "Common", "Semester": 1},
        {"Exam ID": "EX-ES203", "Subject Name": "Environmental Studies", "Subject Code": "ES203",
         "Exam Date": "2026-11-20", "Department": "Common", "Semester": 3},
    ]
    return pd.DataFrame(exams)


def generate_sample_csvs(output_dir: str):
    """Write sample CSV files to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    generate_students_df().to_csv(os.path.join(output_dir, "students.csv"), index=False)
    generate_rooms_df().to_csv(os.path.join(output_dir, "rooms.csv"), index=False)
    generate_exams_df().to_csv(os.path.join(output_dir, "exams.csv"), index=False)


def generate_sample_excel(output_dir: str):
    """Write a single multi-tab Excel file with all three datasets."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "sample_data.xlsx")
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        generate_students_df().to_excel(writer, sheet_name="Students", index=False)
        generate_rooms_df().to_excel(writer, sheet_name="Rooms", index=False)
        generate_exams_df().to_excel(writer, sheet_name="Exams", index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csvs(out)
    generate_sample_excel(out)
    print("Sample CSV and Excel files generated in sample_files/")
