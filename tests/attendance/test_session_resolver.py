from __future__ import annotations

from datetime import date

import pytest

from edu_control.attendance.kv_attendance_repository import KVAttendanceRepository
from edu_control.attendance.resolver import AttendanceSessionResolver, school_weekday
from edu_control.core.constants import StorageKeys
from edu_control.core.enums import AttendanceStatus
from edu_control.schedules.kv_schedule_repository import KVScheduleRepository
from edu_control.users.kv_user_repository import KVUserRepository
from helpers import lesson, make_student, make_teacher, mark

MONDAY = date(2025, 3, 10)
SATURDAY = date(2025, 3, 8)
SUNDAY = date(2025, 3, 9)


@pytest.mark.parametrize(
    "day,slot",
    [(MONDAY, 0), (date(2025, 3, 12), 2), (SATURDAY, 5), (SUNDAY, 5)],
)
def test_school_weekday(day, slot):
    assert school_weekday(day) == slot


@pytest.fixture
def resolver(gateway, seed_users) -> AttendanceSessionResolver:
    seed_users(
        make_student("a"),
        make_student("b"),
        make_teacher("t"),
        make_student("x", group="ECON-202", course=2),
        make_student("c"),
    )
    gateway.save(
        StorageKeys.SCHEDULE,
        [
            lesson("m1", subject="Math", day=0).to_dict(),
            lesson("m2", subject="Physics", day=0, time="10:10 - 11:40").to_dict(),
            lesson("sat", subject="History", day=5).to_dict(),
            lesson("econ", group="ECON-202", subject="Economics", day=0).to_dict(),
        ],
    )
    return AttendanceSessionResolver(
        KVScheduleRepository(gateway), KVUserRepository(gateway), KVAttendanceRepository(gateway)
    )


def test_first_lesson_is_active_by_default(resolver):
    session = resolver.resolve(group="CS-101", day=MONDAY)

    assert [e.id for e in session.lessons] == ["m1", "m2"]
    assert session.active_lesson.id == "m1"
    assert [s.id for s in session.roster] == ["a", "b", "c"]
    assert session.date == "2025-03-10"
    assert session.can_save


def test_explicit_lesson(resolver):
    session = resolver.resolve(group="CS-101", day=MONDAY, lesson_id="m2")
    assert session.active_lesson.subject == "Physics"


def test_unknown_lesson_leaves_no_active_lesson(resolver):
    session = resolver.resolve(group="CS-101", day=MONDAY, lesson_id="econ")

    assert session.active_lesson is None
    assert not session.can_save
    # roster does not depend on the lesson
    assert len(session.roster) == 3


def test_sunday_uses_saturday_lessons(resolver):
    assert [e.id for e in resolver.resolve(group="CS-101", day=SUNDAY).lessons] == ["sat"]
    assert [e.id for e in resolver.resolve(group="CS-101", day=SATURDAY).lessons] == ["sat"]


def test_day_without_lessons(resolver):
    session = resolver.resolve(group="CS-101", day=date(2025, 3, 11))

    assert session.lessons == []
    assert not session.can_save


def test_no_group_means_empty_session(resolver):
    session = resolver.resolve(group="", day=MONDAY)

    assert session.roster == [] and session.lessons == []
    assert not session.can_save


def test_existing_marks_are_hydrated(resolver, gateway):
    KVAttendanceRepository(gateway).save_batch(
        [
            mark("a", AttendanceStatus.LATE, day="2025-03-10", subject="Math"),
            mark("b", AttendanceStatus.ABSENT, day="2025-03-10", subject="Physics"),
        ]
    )

    session = resolver.resolve(group="CS-101", day=MONDAY)

    assert session.status_for("a") == AttendanceStatus.LATE
    # marked for another subject only
    assert session.status_for("b") == AttendanceStatus.PRESENT
    assert session.status_for("c") == AttendanceStatus.PRESENT
