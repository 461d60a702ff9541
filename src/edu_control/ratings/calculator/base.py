from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...attendance.model import AttendanceRecord


class RatingCalculator(ABC):
    """Calculator interface (Strategy Pattern for student ratings)."""

    @abstractmethod
    def attendance_rate(self, records: Sequence[AttendanceRecord]) -> int:
        raise NotImplementedError

    @abstractmethod
    def composite_rating(self, *, academic_score: int, attendance_rate: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def grade(self, rating: int) -> int:
        raise NotImplementedError
