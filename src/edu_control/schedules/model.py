from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScheduleEntry:
    """One weekly lesson of a group.

    ``group`` references the group by name, ``day`` is 0=Monday .. 5=Saturday
    and ``time`` is a zero-padded ``"HH:MM - HH:MM"`` range.
    """

    id: str
    group: str
    subject: str
    teacher: str
    room: str
    day: int
    time: str

    @classmethod
    def from_dict(cls, data: dict) -> "ScheduleEntry":
        return cls(
            id=str(data["id"]),
            group=str(data.get("group", "")),
            subject=str(data.get("subject", "")),
            teacher=str(data.get("teacher", "")),
            room=str(data.get("room", "")),
            day=int(data.get("day") or 0),
            time=str(data.get("time", "")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "group": self.group,
            "subject": self.subject,
            "teacher": self.teacher,
            "room": self.room,
            "day": self.day,
            "time": self.time,
        }
