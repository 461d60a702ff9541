from __future__ import annotations

from typing import List, Optional

from edu_control.attendance.model import AttendanceRecord
from edu_control.core.enums import AttendanceStatus
from edu_control.schedules.model import ScheduleEntry
from edu_control.users.model import Admin, Director, Student, Teacher


class FakeGenerator:
    """Scripted stand-in for the Gemini client."""

    def __init__(self, reply: str = "ok", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls: List[dict] = []

    def generate(self, contents, *, system_instruction=None, model=None) -> str:
        self.calls.append({"contents": list(contents), "system_instruction": system_instruction, "model": model})
        if self.error:
            raise self.error
        return self.reply


def make_student(sid: str, *, group: str = "CS-101", course: Optional[int] = 1, name: str = "") -> Student:
    return Student(
        id=sid,
        full_name=name or f"Student {sid}",
        email=f"{sid}@edu.test",
        registered_at=0,
        group=group,
        course=course,
    )


def make_teacher(tid: str, subjects=("Programming",), name: str = "") -> Teacher:
    return Teacher(
        id=tid,
        full_name=name or f"Teacher {tid}",
        email=f"{tid}@edu.test",
        registered_at=0,
        subjects=tuple(subjects),
    )


def make_admin(aid: str = "adm") -> Admin:
    return Admin(id=aid, full_name="Admin", email=f"{aid}@edu.test", registered_at=0)


def make_director(did: str = "dir") -> Director:
    return Director(id=did, full_name="Director", email=f"{did}@edu.test", registered_at=0)


def mark(student_id: str, status: AttendanceStatus, *, day: str = "2025-03-10", subject: str = "Math", rid: str = "") -> AttendanceRecord:
    return AttendanceRecord(
        id=rid or f"{student_id}-{day}-{subject}",
        student_id=student_id,
        date=day,
        status=status,
        subject=subject,
    )


def lesson(eid: str, *, group: str = "CS-101", subject: str = "Math", day: int = 0, time: str = "08:30 - 10:00") -> ScheduleEntry:
    return ScheduleEntry(id=eid, group=group, subject=subject, teacher="T. Teacher", room="101", day=day, time=time)
