from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Group:
    id: str
    name: str
    department: str
    course: int

    @classmethod
    def from_dict(cls, data: dict) -> "Group":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            department=str(data.get("department", "")),
            course=int(data.get("course") or 0),
        )

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "department": self.department, "course": self.course}
