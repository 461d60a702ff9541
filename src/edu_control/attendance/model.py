from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's mark for one subject on one date."""

    id: str
    student_id: str
    date: str
    status: AttendanceStatus
    subject: str
    teacher: Optional[str] = None
    time: Optional[str] = None

    @property
    def lesson_key(self) -> tuple[str, str, str]:
        """At most one record may exist per (studentId, date, subject)."""
        return (self.student_id, self.date, self.subject)

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceRecord":
        return cls(
            id=str(data["id"]),
            student_id=str(data.get("studentId", "")),
            date=str(data.get("date", "")),
            status=AttendanceStatus.parse(data.get("status")),
            subject=str(data.get("subject", "")),
            teacher=data.get("teacher"),
            time=data.get("time"),
        )

    def to_dict(self) -> dict:
        out = {
            "id": self.id,
            "studentId": self.student_id,
            "date": self.date,
            "status": self.status.value,
            "subject": self.subject,
        }
        if self.teacher is not None:
            out["teacher"] = self.teacher
        if self.time is not None:
            out["time"] = self.time
        return out
