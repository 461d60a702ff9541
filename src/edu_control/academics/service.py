from __future__ import annotations

import math
from typing import List

from ..common.datetime_utils import format_iso_date, parse_iso_date, today_local
from ..common.ids import new_id
from ..common.log import get_logger
from ..common.validators import require_non_empty
from ..core.enums import STAFF_ROLES, Role, Severity
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..users.model import Student
from ..users.repository import UserRepository
from .model import DisciplineRecord, GradeRecord
from .repository import DisciplineRepository, GradeRepository

log = get_logger(__name__)


class AcademicsService:
    """Use case: teachers record grades and discipline remarks."""

    def __init__(self, grades: GradeRepository, discipline: DisciplineRepository, users: UserRepository):
        self._grades = grades
        self._discipline = discipline
        self._users = users

    def _require_student(self, student_id: str) -> Student:
        student = self._users.get_by_id(student_id)
        if not isinstance(student, Student):
            raise NotFoundError("Student not found")
        return student

    def add_grade(self, *, current_role: Role, student_id: str, subject: str, value, on: str = "") -> GradeRecord:
        if current_role not in STAFF_ROLES:
            raise AuthorizationError("You are not allowed to grade students")
        self._require_student(student_id)
        try:
            numeric = float(value)
        except (TypeError, ValueError):
            raise ValidationError("Grade value must be a number")
        if not math.isfinite(numeric):
            raise ValidationError("Grade value must be a number")

        record = GradeRecord(
            id=new_id(),
            student_id=student_id,
            subject=require_non_empty(subject, "Subject"),
            value=int(numeric) if numeric.is_integer() else numeric,
            date=format_iso_date(parse_iso_date(on)) if on else format_iso_date(today_local()),
        )
        self._grades.add(record)
        log.info("grade recorded", extra={"student_id": student_id, "subject": record.subject})
        return record

    def add_remark(
        self, *, current_role: Role, teacher_id: str, student_id: str, remark: str, severity: str = "low"
    ) -> DisciplineRecord:
        if current_role not in STAFF_ROLES:
            raise AuthorizationError("You are not allowed to add remarks")
        self._require_student(student_id)
        try:
            level = Severity(str(severity).lower())
        except ValueError:
            raise ValidationError("Severity must be low, medium or high")

        record = DisciplineRecord(
            id=new_id(),
            student_id=student_id,
            teacher_id=teacher_id,
            remark=require_non_empty(remark, "Remark"),
            severity=level,
            date=format_iso_date(today_local()),
        )
        self._discipline.add(record)
        log.info("discipline remark recorded", extra={"student_id": student_id, "severity": level.value})
        return record

    def grades_for(self, student_id: str) -> List[GradeRecord]:
        return [g for g in self._grades.list_all() if g.student_id == student_id]
