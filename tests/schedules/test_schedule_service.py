from __future__ import annotations

from datetime import date

import pytest

from edu_control.core.constants import StorageKeys
from edu_control.core.enums import Role
from edu_control.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from edu_control.schedules.kv_schedule_repository import KVScheduleRepository
from edu_control.schedules.service import ScheduleService, week_monday
from helpers import lesson


@pytest.fixture
def service(gateway) -> ScheduleService:
    gateway.save(
        StorageKeys.SCHEDULE,
        [
            lesson("late", day=2, time="13:00 - 14:30", subject="Physics").to_dict(),
            lesson("early", day=2, time="08:30 - 10:00").to_dict(),
            lesson("sat", day=5, subject="History").to_dict(),
            lesson("other", group="ECON-202", day=2).to_dict(),
        ],
    )
    return ScheduleService(KVScheduleRepository(gateway))


def test_week_monday(fixed_today):
    assert week_monday(fixed_today) == date(2025, 3, 10)
    assert week_monday(fixed_today, week_offset=-1) == date(2025, 3, 3)


def test_week_view(service, fixed_today):
    days = service.week_view(group="CS-101", today=fixed_today)

    assert [d.date for d in days] == [date(2025, 3, 10 + i) for i in range(6)]
    assert [e.id for e in days[2].lessons] == ["early", "late"]
    assert [e.id for e in days[5].lessons] == ["sat"]
    assert days[0].lessons == []


def test_today_lessons_sorted_by_time(service, fixed_today):
    assert [e.id for e in service.today_lessons(group="CS-101", today=fixed_today)] == ["early", "late"]


def test_sunday_is_a_day_off(service):
    assert service.today_lessons(group="CS-101", today=date(2025, 3, 16)) == []
    assert service.today_lessons(group=None, today=date(2025, 3, 12)) == []


def test_editors(service):
    entry = service.create(
        current_role=Role.TEACHER, group="CS-101", subject="Chemistry", teacher="X", room="7", day="1", time="10:10 - 11:40"
    )
    assert entry.day == 1

    updated = service.update(current_role=Role.ADMIN, entry_id=entry.id, room="8")
    assert (updated.room, updated.subject) == ("8", "Chemistry")

    with pytest.raises(AuthorizationError):
        service.delete(current_role=Role.DIRECTOR, entry_id=entry.id)
    service.delete(current_role=Role.ADMIN, entry_id=entry.id)
    with pytest.raises(NotFoundError):
        service.delete(current_role=Role.ADMIN, entry_id=entry.id)


@pytest.mark.parametrize("day", [6, -1, "mon", None])
def test_day_must_be_a_school_day(service, day):
    with pytest.raises(ValidationError):
        service.create(current_role=Role.ADMIN, group="CS-101", subject="Art", teacher="", room="", day=day, time="09:00")
