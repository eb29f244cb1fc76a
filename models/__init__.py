from models.student import Student
from models.room import Room
from models.exam import Exam
from models.seating import Seat, SeatAssignment, GridCell, Conflict
from models.allocation import AllocationResult
from models.audit import AuditEntry
