from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorisation."""

    STUDENT = "student"
    TEACHER = "teacher"
    ADMIN = "admin"
    DIRECTOR = "director"


class AttendanceStatus(str, Enum):
    """Mark stored on an attendance record."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"

    @classmethod
    def parse(cls, value) -> "AttendanceStatus":
        """Lenient decode for stored data; anything unknown counts as absent."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.ABSENT


class AttendanceBucket(str, Enum):
    """Leaderboard filter on the attendance rate."""

    ALL = "all"
    HIGH = "high"
    LOW = "low"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AiTaskState(str, Enum):
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


STAFF_ROLES = frozenset({Role.TEACHER, Role.ADMIN, Role.DIRECTOR})
MANAGEMENT_ROLES = frozenset({Role.ADMIN, Role.DIRECTOR})
