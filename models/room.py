from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Room:
    room_id: str
    room_number: str
    rows: int
    columns: int
    capacity: Optional[int] = None   # Declared capacity, expected to equal rows * columns
    building: Optional[str] = None

    @property
    def seat_count(self) -> int:
        return self.rows * self.columns

    @property
    def label(self) -> str:
        if self.building:
            return f"{self.building} / {self.room_number}"
        return self.room_number
