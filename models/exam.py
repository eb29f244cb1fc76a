from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Exam:
    exam_id: str
    subject_name: str
    subject_code: str
    exam_date: Optional[date] = None
    department: Optional[str] = None
    semester: Optional[int] = None

    @property
    def label(self) -> str:
        return f"{self.subject_code} - {self.subject_name}"
