"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import List, Optional
from datetime import datetime
from models.student import Student
from models.room import Room
from models.exam import Exam
from models.allocation import AllocationResult
from models.audit import AuditEntry
from data.database import SessionLocal, engine, init_db
from config.defaults import DEFAULT_SHUFFLE_SEED, INTERLEAVE_BY_DEPARTMENT


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "students": [],
        "rooms": [],
        "exams": [],
        "results": {},
        "audit_log": [],
        "data_loaded": False,
        "db_ready": False,
        "rule_config": {
            "shuffle_seed": DEFAULT_SHUFFLE_SEED,
            "interleave": INTERLEAVE_BY_DEPARTMENT,
        },
        "sidebar_state": {
            "exam_id": None,
            "room_id": None,
        },
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default

    if not st.session_state["db_ready"]:
        init_db(engine)
        st.session_state["db_ready"] = True


# --- Getters ---

def get_students() -> List[Student]:
    return st.session_state.get("students", [])


def get_rooms() -> List[Room]:
    return st.session_state.get("rooms", [])


def get_exams() -> List[Exam]:
    return st.session_state.get("exams", [])


def get_room(room_id: Optional[str]) -> Optional[Room]:
    return next((r for r in get_rooms() if r.room_id == room_id), None)


def get_exam(exam_id: Optional[str]) -> Optional[Exam]:
    return next((e for e in get_exams() if e.exam_id == exam_id), None)


def get_result(exam_id: str, room_id: str) -> Optional[AllocationResult]:
    """Most recent in-session run for the pair (carries conflicts and explanation)."""
    return st.session_state.get("results", {}).get((exam_id, room_id))


def get_audit_log() -> List[AuditEntry]:
    return st.session_state.get("audit_log", [])


def get_rule_config() -> dict:
    return st.session_state.get("rule_config", {})


def is_data_loaded() -> bool:
    return st.session_state.get("data_loaded", False)


def open_db_session():
    return SessionLocal()


# --- Setters ---

def set_students(students: List[Student]):
    st.session_state["students"] = students


def set_rooms(rooms: List[Room]):
    st.session_state["rooms"] = rooms


def set_exams(exams: List[Exam]):
    st.session_state["exams"] = exams


def set_data_loaded(loaded: bool):
    st.session_state["data_loaded"] = loaded


def set_result(result: AllocationResult):
    st.session_state["results"][(result.exam_id, result.room_id)] = result


def clear_result(exam_id: str, room_id: str):
    st.session_state["results"].pop((exam_id, room_id), None)


def set_rule_config(config: dict):
    st.session_state["rule_config"] = config


def set_selection(exam_id: Optional[str], room_id: Optional[str]):
    st.session_state["sidebar_state"] = {"exam_id": exam_id, "room_id": room_id}


# --- Audit ---

def add_audit_entry(
    action: str,
    detail: str,
    exam_id: Optional[str] = None,
    room_id: Optional[str] = None,
    seated: int = 0,
    conflicts: int = 0,
    rationale: str = "",
):
    entry = AuditEntry(
        timestamp=datetime.now(),
        action=action,
        exam_id=exam_id,
        room_id=room_id,
        detail=detail,
        seated=seated,
        conflicts=conflicts,
        rationale=rationale,
    )
    st.session_state["audit_log"].append(entry)
