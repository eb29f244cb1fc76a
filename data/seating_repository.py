"""Stored seat assignments: atomic replace and typed reads."""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.seating import SeatAssignment
from data.db_models import SeatingDB
from config.defaults import STATE_ABSENT, STATE_ALLOCATED

logger = logging.getLogger(__name__)


def _to_assignment(row: SeatingDB) -> SeatAssignment:
    return SeatAssignment(
        exam_id=row.exam_id,
        room_id=row.room_id,
        student_id=row.student_id,
        row=row.row,
        column=row.column,
    )


def _pair_query(session: Session, exam_id: str, room_id: str):
    return session.query(SeatingDB).filter(
        SeatingDB.exam_id == exam_id,
        SeatingDB.room_id == room_id,
    )


def replace_seatings(
    session: Session,
    exam_id: str,
    room_id: str,
    assignments: List[SeatAssignment],
) -> int:
    """Swap the stored allocation for (exam, room) in one transaction.

    Readers see either the previous rows or the new ones. On any database
    error the transaction is rolled back and the previous rows survive.
    """
    foreign = [a for a in assignments if a.exam_id != exam_id or a.room_id != room_id]
    if foreign:
        raise ValueError(
            f"{len(foreign)} assignment(s) do not belong to exam {exam_id} / room {room_id}"
        )

    try:
        removed = _pair_query(session, exam_id, room_id).delete(synchronize_session=False)
        session.add_all([
            SeatingDB(
                exam_id=a.exam_id,
                room_id=a.room_id,
                student_id=a.student_id,
                row=a.row,
                column=a.column,
            )
            for a in assignments
        ])
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Replacing seatings for exam %s room %s failed", exam_id, room_id)
        raise

    logger.info(
        "Exam %s room %s: replaced %d stored seat(s) with %d",
        exam_id, room_id, removed, len(assignments),
    )
    return len(assignments)


def get_seatings(session: Session, exam_id: str, room_id: str) -> List[SeatAssignment]:
    rows = _pair_query(session, exam_id, room_id).order_by(SeatingDB.row, SeatingDB.column).all()
    return [_to_assignment(r) for r in rows]


def get_seatings_for_exam(session: Session, exam_id: str) -> List[SeatAssignment]:
    rows = (
        session.query(SeatingDB)
        .filter(SeatingDB.exam_id == exam_id)
        .order_by(SeatingDB.room_id, SeatingDB.row, SeatingDB.column)
        .all()
    )
    return [_to_assignment(r) for r in rows]


def get_seatings_for_student(session: Session, student_id: str) -> List[SeatAssignment]:
    rows = session.query(SeatingDB).filter(SeatingDB.student_id == student_id).all()
    return [_to_assignment(r) for r in rows]


def delete_seatings(session: Session, exam_id: str, room_id: str) -> int:
    try:
        removed = _pair_query(session, exam_id, room_id).delete(synchronize_session=False)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise
    return removed


def allocation_state(session: Session, exam_id: str, room_id: str) -> str:
    """'absent' when nothing is stored for the pair, otherwise 'allocated'."""
    exists = _pair_query(session, exam_id, room_id).first() is not None
    return STATE_ALLOCATED if exists else STATE_ABSENT
