from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional

from ..common.ids import new_id
from ..common.log import get_logger
from ..common.validators import require_non_empty
from ..core.constants import SCHOOL_DAYS
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import ScheduleEntry
from .repository import ScheduleRepository

log = get_logger(__name__)

SCHEDULE_EDITORS = frozenset({Role.ADMIN, Role.TEACHER})


@dataclass(frozen=True)
class ScheduleDay:
    day: int
    date: date
    lessons: List[ScheduleEntry]


def week_monday(today: date, *, week_offset: int = 0) -> date:
    return today - timedelta(days=today.weekday()) + timedelta(weeks=week_offset)


class ScheduleService:
    def __init__(self, schedules: ScheduleRepository):
        self._schedules = schedules

    def list_for_group(self, group: str) -> List[ScheduleEntry]:
        return [e for e in self._schedules.list_all() if e.group == group]

    def week_view(self, *, group: str, today: date, week_offset: int = 0) -> List[ScheduleDay]:
        """Monday..Saturday of the requested week with each day's lessons by time."""
        monday = week_monday(today, week_offset=week_offset)
        entries = self.list_for_group(group)
        return [
            ScheduleDay(
                day=day,
                date=monday + timedelta(days=day),
                lessons=sorted((e for e in entries if e.day == day), key=lambda e: e.time),
            )
            for day in range(SCHOOL_DAYS)
        ]

    def today_lessons(self, *, group: Optional[str], today: date) -> List[ScheduleEntry]:
        """Lessons of ``group`` for ``today`` sorted by time.

        Sunday is a day off here (no slot), unlike attendance marking.
        """
        if not group:
            return []
        day = today.weekday()
        if day >= SCHOOL_DAYS:
            return []
        return sorted(self._schedules.list_for_group_and_day(group=group, day=day), key=lambda e: e.time)

    def _validated(self, *, entry_id: str, group: str, subject: str, teacher: str, room: str, day, time: str) -> ScheduleEntry:
        try:
            day_i = int(day)
        except (TypeError, ValueError):
            raise ValidationError("Day must be a number from 0 (Monday) to 5 (Saturday)")
        if not 0 <= day_i < SCHOOL_DAYS:
            raise ValidationError("Day must be a number from 0 (Monday) to 5 (Saturday)")

        return ScheduleEntry(
            id=entry_id,
            group=require_non_empty(group, "Group"),
            subject=require_non_empty(subject, "Subject"),
            teacher=(teacher or "").strip(),
            room=(room or "").strip(),
            day=day_i,
            time=require_non_empty(time, "Time"),
        )

    def create(self, *, current_role: Role, group: str, subject: str, teacher: str, room: str, day, time: str) -> ScheduleEntry:
        if current_role not in SCHEDULE_EDITORS:
            raise AuthorizationError("You are not allowed to edit the schedule")

        entry = self._validated(
            entry_id=new_id(), group=group, subject=subject, teacher=teacher, room=room, day=day, time=time
        )
        self._schedules.add(entry)
        log.info("schedule entry created", extra={"entry_id": entry.id, "group": entry.group, "day": entry.day})
        return entry

    def update(self, *, current_role: Role, entry_id: str, **fields) -> ScheduleEntry:
        if current_role not in SCHEDULE_EDITORS:
            raise AuthorizationError("You are not allowed to edit the schedule")

        existing = self._schedules.get_by_id(entry_id)
        if not existing:
            raise NotFoundError("Schedule entry not found")

        merged = {**existing.to_dict(), **{k: v for k, v in fields.items() if v is not None}}
        merged.pop("id")
        entry = self._validated(entry_id=existing.id, **merged)
        self._schedules.update(entry)
        log.info("schedule entry updated", extra={"entry_id": entry.id})
        return entry

    def delete(self, *, current_role: Role, entry_id: str) -> None:
        if current_role not in SCHEDULE_EDITORS:
            raise AuthorizationError("You are not allowed to edit the schedule")
        if not self._schedules.delete_by_id(entry_id):
            raise NotFoundError("Schedule entry not found")
        log.info("schedule entry deleted", extra={"entry_id": entry_id})
