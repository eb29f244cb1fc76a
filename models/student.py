from dataclasses import dataclass
from typing import Optional

from config.defaults import UNKNOWN_DEPARTMENT, STUDENT_ROLE, ACTIVE_STATUS


@dataclass(frozen=True)
class Student:
    student_id: str
    name: str
    department: Optional[str] = None
    academic_status: str = ACTIVE_STATUS
    role: str = STUDENT_ROLE
    year: Optional[int] = None
    roll_number: Optional[str] = None

    @property
    def department_key(self) -> str:
        """Department tag used for clustering; missing departments share one bucket."""
        return self.department or UNKNOWN_DEPARTMENT

    @property
    def display_roll_number(self) -> str:
        return self.roll_number or self.student_id

    @property
    def is_active(self) -> bool:
        return self.academic_status == ACTIVE_STATUS
