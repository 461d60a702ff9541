from __future__ import annotations

from datetime import date
from typing import List, Mapping, Optional

from ..common.ids import new_id
from ..common.log import get_logger
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import AuthorizationError, ValidationError
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .resolver import AttendanceSession, AttendanceSessionResolver

log = get_logger(__name__)


def _parse_marks(marks: Optional[Mapping[str, str]]) -> dict[str, AttendanceStatus]:
    if marks is None:
        return {}
    if not isinstance(marks, Mapping):
        raise ValidationError("Marks must map student ids to statuses")
    parsed: dict[str, AttendanceStatus] = {}
    for student_id, value in marks.items():
        try:
            parsed[str(student_id)] = AttendanceStatus(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown attendance status: {value!r}")
    return parsed


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, resolver: AttendanceSessionResolver):
        self._attendance = attendance
        self._resolver = resolver

    def open_session(self, *, current_role: Role, group: str, day: date, lesson_id: Optional[str] = None) -> AttendanceSession:
        if current_role == Role.STUDENT:
            raise AuthorizationError("Students cannot mark attendance")
        return self._resolver.resolve(group=group, day=day, lesson_id=lesson_id)

    def save_session(
        self,
        *,
        current_role: Role,
        group: str,
        day: date,
        lesson_id: Optional[str] = None,
        marks: Optional[Mapping[str, str]] = None,
    ) -> List[AttendanceRecord]:
        """Record the whole roster for the active lesson.

        Students missing from ``marks`` are saved as present. Marks for ids
        outside the roster are ignored.
        """
        if current_role == Role.STUDENT:
            raise AuthorizationError("Students cannot mark attendance")

        statuses = _parse_marks(marks)
        session = self._resolver.resolve(group=group, day=day, lesson_id=lesson_id) if group else None
        if session is None or not session.can_save:
            log.warning("attendance save rejected", extra={"group": group, "date": str(day)})
            raise ValidationError("Select group and lesson")

        lesson = session.active_lesson
        records = [
            AttendanceRecord(
                id=new_id(),
                student_id=student.id,
                date=session.date,
                status=statuses.get(student.id, AttendanceStatus.PRESENT),
                subject=lesson.subject,
                teacher=lesson.teacher,
                time=lesson.time,
            )
            for student in session.roster
        ]
        self._attendance.save_batch(records)
        log.info(
            "attendance saved",
            extra={"group": group, "date": session.date, "subject": lesson.subject, "records": len(records)},
        )
        return records

    def student_history(self, student_id: str) -> List[AttendanceRecord]:
        return list(self._attendance.list_for_student(student_id))
