from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, UniqueConstraint

from data.database import Base


class SeatingDB(Base):
    __tablename__ = "seatings"
    __table_args__ = (
        UniqueConstraint("exam_id", "room_id", "row", "column", name="uq_seating_seat"),
        UniqueConstraint("exam_id", "room_id", "student_id", name="uq_seating_student"),
    )

    id = Column(Integer, primary_key=True, index=True)
    exam_id = Column(String, nullable=False, index=True)
    room_id = Column(String, nullable=False, index=True)
    student_id = Column(String, nullable=False, index=True)
    row = Column(Integer, nullable=False)
    column = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.now)
