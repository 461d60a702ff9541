from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, List, Optional

from ..academics.repository import DisciplineRepository, GradeRepository
from ..attendance.repository import AttendanceRepository
from ..common.log import get_logger
from ..common.validators import clamp_score
from ..core.constants import DEFAULT_ATTENDANCE_RATE, HIGH_ATTENDANCE_MIN, LOW_ATTENDANCE_MAX
from ..core.enums import STAFF_ROLES, AttendanceBucket, AttendanceStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError
from ..groups.model import Group
from ..groups.repository import GroupRepository
from ..scores.model import ScoreEntry
from ..scores.repository import ScoreRepository
from ..users.model import Student
from ..users.repository import UserRepository
from .calculator.base import RatingCalculator
from .calculator.standard_calculator import StandardRatingCalculator, round_half_up
from .profile import StudentProfile, derive_profile, effective_course

log = get_logger(__name__)


@dataclass(frozen=True)
class LeaderboardFilter:
    """Optional, conjunctive leaderboard filters; ``None`` means any."""

    course: Optional[int] = None
    group: Optional[str] = None
    bucket: AttendanceBucket = AttendanceBucket.ALL


@dataclass(frozen=True)
class GroupStats:
    name: str
    rating: int
    attendance: int

    def to_dict(self) -> dict:
        return {"name": self.name, "rating": self.rating, "attendance": self.attendance}


def in_bucket(rate: int, bucket: AttendanceBucket) -> bool:
    if bucket == AttendanceBucket.HIGH:
        return rate >= HIGH_ATTENDANCE_MIN
    if bucket == AttendanceBucket.LOW:
        return rate < LOW_ATTENDANCE_MAX
    return True


def _groups_by_name(groups) -> Dict[str, Group]:
    by_name: Dict[str, Group] = {}
    for g in groups:
        by_name.setdefault(g.name, g)
    return by_name


class RatingService:
    """Use case: derive student profiles, leaderboard and score edits.

    Nothing is cached; every call recomputes from the stored collections.
    """

    def __init__(
        self,
        users: UserRepository,
        attendance: AttendanceRepository,
        scores: ScoreRepository,
        groups: GroupRepository,
        grades: GradeRepository,
        discipline: DisciplineRepository,
        *,
        calculator: Optional[RatingCalculator] = None,
    ):
        self._users = users
        self._attendance = attendance
        self._scores = scores
        self._groups = groups
        self._grades = grades
        self._discipline = discipline
        self._calculator = calculator or StandardRatingCalculator()

    def profiles(self) -> List[StudentProfile]:
        """Profiles of all students in user insertion order."""
        students = self._users.list_students()
        attendance = list(self._attendance.list_all())
        scores = self._scores.get_all()
        grades = list(self._grades.list_all())
        discipline = list(self._discipline.list_all())

        return [
            derive_profile(
                s,
                attendance,
                scores.get(s.id),
                grades=grades,
                discipline=discipline,
                calculator=self._calculator,
            )
            for s in students
        ]

    def profile_for(self, student_id: str) -> StudentProfile:
        profile = next((p for p in self.profiles() if p.id == student_id), None)
        if not profile:
            raise NotFoundError("Student not found")
        return profile

    def leaderboard(self, flt: Optional[LeaderboardFilter] = None) -> List[StudentProfile]:
        """Filtered profiles by rating, highest first.

        Ties keep user insertion order (stable sort).
        """
        flt = flt or LeaderboardFilter()
        by_name = _groups_by_name(self._groups.list_all())

        def matches(p: StudentProfile) -> bool:
            if flt.course is not None and effective_course(p.student, by_name) != flt.course:
                return False
            if flt.group is not None and p.student.group != flt.group:
                return False
            return in_bucket(p.attendance_rate, flt.bucket)

        return sorted((p for p in self.profiles() if matches(p)), key=lambda p: p.rating, reverse=True)

    def effective_courses(self) -> Dict[str, Optional[int]]:
        """Course of every student, falling back to the course of their group."""
        by_name = _groups_by_name(self._groups.list_all())
        return {s.id: effective_course(s, by_name) for s in self._users.list_students()}

    def update_score(self, *, current_role: Role, student_id: str, score) -> ScoreEntry:
        """Clamp ``score`` to [0, 100] and push the old current into previous."""
        if current_role not in STAFF_ROLES:
            raise AuthorizationError("You are not allowed to edit scores")

        student = self._users.get_by_id(student_id)
        if not isinstance(student, Student):
            raise NotFoundError("Student not found")

        value = clamp_score(score)
        entry = (self._scores.get(student_id) or ScoreEntry()).advanced(value)
        self._scores.put(student_id, entry)
        log.info("score updated", extra={"student_id": student_id, "current": entry.current, "previous": entry.previous})
        return entry

    def group_stats(self) -> List[GroupStats]:
        """Average rating and present share per group, in group order."""
        profiles = self.profiles()
        out: List[GroupStats] = []
        for g in self._groups.list_all():
            members = [p for p in profiles if p.student.group == g.name]
            records = [r for p in members for r in p.attendance]
            if records:
                present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)
                attendance = round_half_up(Fraction(present * 100, len(records)))
            else:
                attendance = DEFAULT_ATTENDANCE_RATE
            rating = round_half_up(Fraction(sum(p.rating for p in members), len(members))) if members else 0
            out.append(GroupStats(name=g.name, rating=rating, attendance=attendance))
        return out

    def college_summary(self) -> dict:
        """Aggregate payload for the administration report."""
        profiles = self.profiles()
        average = round_half_up(Fraction(sum(p.rating for p in profiles), len(profiles))) if profiles else 0
        return {
            "collegeSummary": {"totalStudents": len(profiles), "averageRating": average},
            "groupsStats": [s.to_dict() for s in self.group_stats()],
        }
