from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Severity


@dataclass(frozen=True)
class GradeRecord:
    id: str
    student_id: str
    subject: str
    value: float
    date: str

    @classmethod
    def from_dict(cls, data: dict) -> "GradeRecord":
        return cls(
            id=str(data["id"]),
            student_id=str(data.get("studentId", "")),
            subject=str(data.get("subject", "")),
            value=data.get("value", 0),
            date=str(data.get("date", "")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "studentId": self.student_id,
            "subject": self.subject,
            "value": self.value,
            "date": self.date,
        }


@dataclass(frozen=True)
class DisciplineRecord:
    id: str
    student_id: str
    teacher_id: str
    remark: str
    severity: Severity
    date: str

    @classmethod
    def from_dict(cls, data: dict) -> "DisciplineRecord":
        return cls(
            id=str(data["id"]),
            student_id=str(data.get("studentId", "")),
            teacher_id=str(data.get("teacherId", "")),
            remark=str(data.get("remark", "")),
            severity=Severity(data.get("severity") or Severity.LOW.value),
            date=str(data.get("date", "")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "studentId": self.student_id,
            "teacherId": self.teacher_id,
            "remark": self.remark,
            "severity": self.severity.value,
            "date": self.date,
        }
