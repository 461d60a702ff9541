from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_lesson(self, *, date: str, subject: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def save_batch(self, records: Sequence[AttendanceRecord]) -> None:
        """Replace-or-insert by (studentId, date, subject).

        Stored records sharing a key with the batch are dropped, the rest are
        kept in order and the batch is appended.
        """

        raise NotImplementedError
