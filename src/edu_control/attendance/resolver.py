from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from ..common.datetime_utils import format_iso_date
from ..core.enums import AttendanceStatus
from ..schedules.model import ScheduleEntry
from ..schedules.repository import ScheduleRepository
from ..users.model import Student
from ..users.repository import UserRepository
from .repository import AttendanceRepository

SATURDAY_SLOT = 5


def school_weekday(day: date) -> int:
    """Map a calendar date to the schedule's 0=Monday .. 5=Saturday index.

    Works from the Sunday-first numbering (0=Sunday .. 6=Saturday) with
    ``5 if raw == 0 else raw - 1``, so Sunday shares Saturday's slot.
    """
    raw = (day.weekday() + 1) % 7
    return SATURDAY_SLOT if raw == 0 else raw - 1


@dataclass(frozen=True)
class AttendanceSession:
    """Everything needed to mark one lesson of one group on one date."""

    group: str
    date: str
    weekday: int
    lessons: List[ScheduleEntry]
    active_lesson: Optional[ScheduleEntry]
    roster: List[Student]
    marks: Dict[str, AttendanceStatus] = field(default_factory=dict)

    @property
    def can_save(self) -> bool:
        return bool(self.group) and self.active_lesson is not None

    def status_for(self, student_id: str) -> AttendanceStatus:
        """Stored mark, or ``present`` for a student not marked yet."""
        return self.marks.get(student_id, AttendanceStatus.PRESENT)


class AttendanceSessionResolver:
    """Resolve (group, date) to the lessons, roster and existing marks."""

    def __init__(self, schedules: ScheduleRepository, users: UserRepository, attendance: AttendanceRepository):
        self._schedules = schedules
        self._users = users
        self._attendance = attendance

    def lessons_for(self, *, group: str, day: date) -> List[ScheduleEntry]:
        """Lessons of ``group`` on the weekday of ``day`` in schedule order."""
        return list(self._schedules.list_for_group_and_day(group=group, day=school_weekday(day)))

    def roster(self, group: str) -> List[Student]:
        """Students of ``group``; independent of which lesson is active."""
        return [s for s in self._users.list_students() if s.group == group]

    def existing_marks(self, *, roster: List[Student], day: str, subject: str) -> Dict[str, AttendanceStatus]:
        roster_ids = {s.id for s in roster}
        return {
            r.student_id: r.status
            for r in self._attendance.list_for_lesson(date=day, subject=subject)
            if r.student_id in roster_ids
        }

    def resolve(self, *, group: str, day: date, lesson_id: Optional[str] = None) -> AttendanceSession:
        """Build the marking session.

        Without ``lesson_id`` the first lesson of the day is active. An id
        that is not among the day's lessons leaves the session without an
        active lesson, and such a session cannot be saved.
        """
        lessons = self.lessons_for(group=group, day=day) if group else []

        if lesson_id is None:
            active = lessons[0] if lessons else None
        else:
            active = next((e for e in lessons if e.id == lesson_id), None)

        roster = self.roster(group) if group else []
        day_s = format_iso_date(day)
        marks = self.existing_marks(roster=roster, day=day_s, subject=active.subject) if active else {}

        return AttendanceSession(
            group=group,
            date=day_s,
            weekday=school_weekday(day),
            lessons=lessons,
            active_lesson=active,
            roster=roster,
            marks=marks,
        )
