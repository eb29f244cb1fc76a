from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class AuditEntry:
    timestamp: datetime
    action: str              # "upload", "allocate", "reallocate", "clear"
    exam_id: Optional[str]
    room_id: Optional[str]
    detail: str
    seated: int = 0
    conflicts: int = 0
    rationale: str = ""
