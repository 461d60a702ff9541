from itertools import product

import pytest

from edu_control.core.enums import AttendanceStatus
from edu_control.ratings.calculator.standard_calculator import StandardRatingCalculator
from helpers import mark

P, L, A = AttendanceStatus.PRESENT, AttendanceStatus.LATE, AttendanceStatus.ABSENT


def _records(statuses):
    return [mark("s1", st, day=f"2025-03-{i + 1:02d}") for i, st in enumerate(statuses)]


def test_rate_without_records_is_100():
    assert StandardRatingCalculator().attendance_rate([]) == 100


def test_late_counts_as_half_a_presence():
    calc = StandardRatingCalculator()
    assert calc.attendance_rate(_records([P, L])) == 75
    assert calc.attendance_rate(_records([L, L])) == 50
    assert calc.attendance_rate(_records([A, A])) == 0


def test_rate_rounds_half_up():
    # 0.5 / 4 * 100 = 12.5
    assert StandardRatingCalculator().attendance_rate(_records([L, A, A, A])) == 13


def test_rate_never_drops_when_a_mark_improves():
    calc = StandardRatingCalculator()
    better = {A: L, L: P}
    for statuses in product((P, L, A), repeat=3):
        base = calc.attendance_rate(_records(statuses))
        for i, st in enumerate(statuses):
            if st in better:
                improved = list(statuses)
                improved[i] = better[st]
                assert calc.attendance_rate(_records(improved)) >= base


@pytest.mark.parametrize(
    "academic,rate,expected",
    [(100, 100, 100), (0, 0, 0), (50, 75, 55), (81, 62, 77), (1, 0, 1), (0, 100, 20)],
)
def test_composite_rating(academic, rate, expected):
    assert StandardRatingCalculator().composite_rating(academic_score=academic, attendance_rate=rate) == expected


@pytest.mark.parametrize(
    "rating,grade",
    [(100, 5), (87, 5), (86, 4), (74, 4), (73, 3), (60, 3), (59, 2), (40, 2), (39, 1), (0, 1)],
)
def test_grade_thresholds(rating, grade):
    assert StandardRatingCalculator().grade(rating) == grade
