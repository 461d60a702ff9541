from __future__ import annotations

import pytest

from edu_control.academics.kv_academics_repository import KVDisciplineRepository, KVGradeRepository
from edu_control.attendance.kv_attendance_repository import KVAttendanceRepository
from edu_control.core.enums import AttendanceBucket, AttendanceStatus, Role
from edu_control.core.exceptions import AuthorizationError, NotFoundError
from edu_control.groups.kv_group_repository import KVGroupRepository
from edu_control.ratings.profile import derive_profile
from edu_control.ratings.service import LeaderboardFilter, RatingService
from edu_control.scores.kv_score_repository import KVScoreRepository
from edu_control.scores.model import ScoreEntry
from edu_control.users.kv_user_repository import KVUserRepository
from helpers import make_student, make_teacher, mark

P, L, A = AttendanceStatus.PRESENT, AttendanceStatus.LATE, AttendanceStatus.ABSENT


@pytest.fixture
def ratings(gateway, seed_users) -> RatingService:
    seed_users(
        make_student("s1", group="CS-101", course=1),
        make_teacher("t1"),
        make_student("s2", group="CS-101", course=1),
        make_student("s3", group="ECON-202", course=2),
        # no course of its own; IT-303 is a 3rd-year group
        make_student("s4", group="IT-303", course=None),
    )
    attendance = KVAttendanceRepository(gateway)
    attendance.save_batch([mark("s1", P), mark("s2", A), mark("s3", P)])
    attendance.save_batch([mark("s3", A, subject="Physics")])

    scores = KVScoreRepository(gateway)
    scores.put("s1", ScoreEntry(current=90))
    scores.put("s2", ScoreEntry(current=60))
    scores.put("s3", ScoreEntry(current=90))

    return RatingService(
        KVUserRepository(gateway),
        attendance,
        scores,
        KVGroupRepository(gateway),
        KVGradeRepository(gateway),
        KVDisciplineRepository(gateway),
    )


def _ids(profiles):
    return [p.id for p in profiles]


def test_profiles_cover_students_only(ratings):
    by_id = {p.id: p for p in ratings.profiles()}

    assert set(by_id) == {"s1", "s2", "s3", "s4"}
    assert (by_id["s1"].attendance_rate, by_id["s1"].rating, by_id["s1"].grade) == (100, 92, 5)
    assert (by_id["s2"].attendance_rate, by_id["s2"].rating, by_id["s2"].grade) == (0, 48, 2)
    assert (by_id["s3"].attendance_rate, by_id["s3"].rating, by_id["s3"].grade) == (50, 82, 4)
    # no records and no score entry
    assert (by_id["s4"].attendance_rate, by_id["s4"].academic_score, by_id["s4"].rating) == (100, 0, 20)


def test_leaderboard_sorted_by_rating(ratings):
    assert _ids(ratings.leaderboard()) == ["s1", "s3", "s2", "s4"]


def test_leaderboard_filters_intersect(ratings):
    assert _ids(ratings.leaderboard(LeaderboardFilter(course=1))) == ["s1", "s2"]
    assert _ids(ratings.leaderboard(LeaderboardFilter(course=1, group="CS-101", bucket=AttendanceBucket.HIGH))) == ["s1"]
    assert _ids(ratings.leaderboard(LeaderboardFilter(course=1, bucket=AttendanceBucket.LOW))) == ["s2"]


def test_leaderboard_empty_intersection(ratings):
    assert ratings.leaderboard(LeaderboardFilter(course=2, group="CS-101")) == []


def test_course_falls_back_to_group_course(ratings):
    assert _ids(ratings.leaderboard(LeaderboardFilter(course=3))) == ["s4"]
    assert ratings.effective_courses() == {"s1": 1, "s2": 1, "s3": 2, "s4": 3}


def test_low_bucket_is_strictly_below_50(ratings):
    low = _ids(ratings.leaderboard(LeaderboardFilter(bucket=AttendanceBucket.LOW)))
    assert "s3" not in low


def test_equal_ratings_keep_insertion_order(gateway, seed_users):
    seed_users(make_student("b"), make_student("a"), make_student("c"))
    service = RatingService(
        KVUserRepository(gateway),
        KVAttendanceRepository(gateway),
        KVScoreRepository(gateway),
        KVGroupRepository(gateway),
        KVGradeRepository(gateway),
        KVDisciplineRepository(gateway),
    )
    assert _ids(service.leaderboard()) == ["b", "a", "c"]


def test_update_score_clamps(ratings):
    assert ratings.update_score(current_role=Role.TEACHER, student_id="s4", score=150).current == 100
    assert ratings.update_score(current_role=Role.TEACHER, student_id="s4", score=-10).current == 0


def test_update_score_keeps_previous(ratings):
    ratings.update_score(current_role=Role.ADMIN, student_id="s4", score=40)
    entry = ratings.update_score(current_role=Role.ADMIN, student_id="s4", score=60)

    assert entry.to_dict() == {"current": 60, "previous": 40}
    assert ratings.profile_for("s4").academic_score == 60


def test_update_score_rejects_students_and_unknown_ids(ratings):
    with pytest.raises(AuthorizationError):
        ratings.update_score(current_role=Role.STUDENT, student_id="s1", score=99)
    with pytest.raises(NotFoundError):
        ratings.update_score(current_role=Role.TEACHER, student_id="t1", score=99)


def test_group_stats(ratings):
    stats = {s.name: s for s in ratings.group_stats()}

    assert (stats["CS-101"].rating, stats["CS-101"].attendance) == (70, 50)
    assert (stats["ECON-202"].rating, stats["ECON-202"].attendance) == (82, 50)
    assert (stats["IT-303"].rating, stats["IT-303"].attendance) == (20, 100)
    assert (stats["MGMT-404"].rating, stats["MGMT-404"].attendance) == (0, 100)


def test_college_summary(ratings):
    summary = ratings.college_summary()

    assert summary["collegeSummary"] == {"totalStudents": 4, "averageRating": 61}
    assert len(summary["groupsStats"]) == 4


def test_derive_profile_is_pure():
    student = make_student("x")
    records = [mark("x", P, day="2025-03-10"), mark("x", L, day="2025-03-11"), mark("other", A)]

    profile = derive_profile(student, records, None)

    assert [r.student_id for r in profile.attendance] == ["x", "x"]
    assert profile.academic_score == 0
    assert profile.attendance_rate == 75
    assert profile.rating == 15
    assert (profile.stats.present, profile.stats.late, profile.stats.absent) == (1, 1, 0)
    assert profile.recent_marks() == [P, L]


def test_profile_json_has_no_password_hash(ratings):
    data = ratings.profile_for("s1").to_dict()

    assert "passwordHash" not in data
    assert data["rating"] == 92
    assert data["stats"]["present"] == 1
