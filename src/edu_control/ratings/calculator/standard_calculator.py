from __future__ import annotations

import math
from fractions import Fraction
from typing import Sequence

from ...attendance.model import AttendanceRecord
from ...core.constants import (
    ABSENT_CREDIT,
    ACADEMIC_WEIGHT,
    ATTENDANCE_WEIGHT,
    DEFAULT_ATTENDANCE_RATE,
    GRADE_THRESHOLDS,
    LATE_CREDIT,
    LOWEST_GRADE,
    PRESENT_CREDIT,
)
from ...core.enums import AttendanceStatus
from .base import RatingCalculator

_CREDIT = {
    AttendanceStatus.PRESENT: PRESENT_CREDIT,
    AttendanceStatus.LATE: LATE_CREDIT,
    AttendanceStatus.ABSENT: ABSENT_CREDIT,
}


def round_half_up(value: Fraction) -> int:
    """Nearest integer with .5 going up, on exact fractions."""
    return math.floor(value + Fraction(1, 2))


class StandardRatingCalculator(RatingCalculator):
    """Standard rule: rating = 80% academic score + 20% attendance rate.

    Late counts as half a presence; a student without records gets a rate of
    100. Arithmetic is done on fractions so that 12.5 rounds to 13.
    """

    def attendance_rate(self, records: Sequence[AttendanceRecord]) -> int:
        if not records:
            return DEFAULT_ATTENDANCE_RATE
        points = sum((_CREDIT.get(r.status, ABSENT_CREDIT) for r in records), Fraction(0))
        return round_half_up(points / len(records) * 100)

    def composite_rating(self, *, academic_score: int, attendance_rate: int) -> int:
        return round_half_up(Fraction(academic_score) * ACADEMIC_WEIGHT + Fraction(attendance_rate) * ATTENDANCE_WEIGHT)

    def grade(self, rating: int) -> int:
        for minimum, grade in GRADE_THRESHOLDS:
            if rating >= minimum:
                return grade
        return LOWEST_GRADE
