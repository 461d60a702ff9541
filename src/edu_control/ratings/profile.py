from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence

from ..academics.model import DisciplineRecord, GradeRecord
from ..attendance.model import AttendanceRecord
from ..core.constants import RECENT_MARKS
from ..core.enums import AttendanceStatus
from ..groups.model import Group
from ..scores.model import ScoreEntry
from ..users.model import Student, public_user_dict
from .calculator.base import RatingCalculator
from .calculator.standard_calculator import StandardRatingCalculator


@dataclass(frozen=True)
class AttendanceStats:
    rate: int
    present: int
    absent: int
    late: int


@dataclass(frozen=True)
class StudentProfile:
    """Read-model: a student joined with everything the rating depends on.

    Never stored; rebuilt from the raw collections on every read.
    """

    student: Student
    attendance: List[AttendanceRecord]
    academic_score: int
    attendance_rate: int
    rating: int
    grade: int
    stats: AttendanceStats
    grades: List[GradeRecord] = field(default_factory=list)
    discipline: List[DisciplineRecord] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.student.id

    def recent_marks(self, n: int = RECENT_MARKS) -> List[AttendanceStatus]:
        return [r.status for r in self.attendance[-n:]] if n > 0 else []

    def to_dict(self) -> dict:
        out = public_user_dict(self.student)
        out.update(
            {
                "attendance": [r.to_dict() for r in self.attendance],
                "grades": [g.to_dict() for g in self.grades],
                "discipline": [d.to_dict() for d in self.discipline],
                "academicScore": self.academic_score,
                "attendanceRate": self.attendance_rate,
                "rating": self.rating,
                "grade": self.grade,
                "stats": {
                    "rate": self.stats.rate,
                    "present": self.stats.present,
                    "absent": self.stats.absent,
                    "late": self.stats.late,
                },
                "recent": [s.value for s in self.recent_marks()],
            }
        )
        return out


def attendance_stats(records: Sequence[AttendanceRecord], *, calculator: Optional[RatingCalculator] = None) -> AttendanceStats:
    calculator = calculator or StandardRatingCalculator()
    return AttendanceStats(
        rate=calculator.attendance_rate(records),
        present=sum(1 for r in records if r.status == AttendanceStatus.PRESENT),
        absent=sum(1 for r in records if r.status == AttendanceStatus.ABSENT),
        late=sum(1 for r in records if r.status == AttendanceStatus.LATE),
    )


def derive_profile(
    student: Student,
    attendance: Sequence[AttendanceRecord],
    score: Optional[ScoreEntry],
    *,
    grades: Sequence[GradeRecord] = (),
    discipline: Sequence[DisciplineRecord] = (),
    calculator: Optional[RatingCalculator] = None,
) -> StudentProfile:
    """Pure derivation of a profile; no storage access.

    ``attendance`` may contain other students' records, only the student's
    own are used. A missing score entry counts as 0.
    """
    calculator = calculator or StandardRatingCalculator()
    own = [r for r in attendance if r.student_id == student.id]
    academic_score = score.current if score else 0
    stats = attendance_stats(own, calculator=calculator)
    rating = calculator.composite_rating(academic_score=academic_score, attendance_rate=stats.rate)

    return StudentProfile(
        student=student,
        attendance=own,
        academic_score=academic_score,
        attendance_rate=stats.rate,
        rating=rating,
        grade=calculator.grade(rating),
        stats=stats,
        grades=[g for g in grades if g.student_id == student.id],
        discipline=[d for d in discipline if d.student_id == student.id],
    )


def effective_course(student: Student, groups_by_name: Mapping[str, Group]) -> Optional[int]:
    """The student's own course, else the course of the group they belong to."""
    if student.course:
        return student.course
    group = groups_by_name.get(student.group)
    return group.course if group else None
