from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Tuple, Union

from ..core.enums import Role


@dataclass(frozen=True)
class BaseUser:
    """Fields shared by every role.

    Role-specific data lives on the subclasses, so a teacher can never carry a
    group and a student can never carry subjects.
    """

    role: ClassVar[Role]

    id: str
    full_name: str
    email: str
    registered_at: int
    avatar: Optional[str] = None
    streak_count: Optional[int] = None
    last_login_date: Optional[str] = None
    password_hash: Optional[str] = field(default=None, repr=False)


@dataclass(frozen=True)
class Student(BaseUser):
    role: ClassVar[Role] = Role.STUDENT

    group: str = ""
    course: Optional[int] = None


@dataclass(frozen=True)
class Teacher(BaseUser):
    role: ClassVar[Role] = Role.TEACHER

    subjects: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Admin(BaseUser):
    role: ClassVar[Role] = Role.ADMIN


@dataclass(frozen=True)
class Director(BaseUser):
    role: ClassVar[Role] = Role.DIRECTOR


User = Union[Student, Teacher, Admin, Director]

_VARIANTS = {cls.role: cls for cls in (Student, Teacher, Admin, Director)}


def user_from_dict(data: dict) -> User:
    """Build the variant matching ``data["role"]`` from a stored record.

    Fields belonging to other roles are dropped.
    """
    role = Role(data["role"])
    common = dict(
        id=str(data["id"]),
        full_name=str(data.get("fullName", "")),
        email=str(data.get("email", "")),
        registered_at=int(data.get("registeredAt") or 0),
        avatar=data.get("avatar"),
        streak_count=data.get("streakCount"),
        last_login_date=data.get("lastLoginDate"),
        password_hash=data.get("passwordHash"),
    )
    if role == Role.STUDENT:
        course = data.get("course")
        return Student(**common, group=str(data.get("group") or ""), course=int(course) if course else None)
    if role == Role.TEACHER:
        return Teacher(**common, subjects=tuple(data.get("subjects") or ()))
    return _VARIANTS[role](**common)


def user_to_dict(user: User) -> dict:
    out = {
        "id": user.id,
        "fullName": user.full_name,
        "email": user.email,
        "role": user.role.value,
        "registeredAt": user.registered_at,
    }
    if isinstance(user, Student):
        out["group"] = user.group
        if user.course is not None:
            out["course"] = user.course
    elif isinstance(user, Teacher):
        out["subjects"] = list(user.subjects)

    for key, value in (
        ("avatar", user.avatar),
        ("streakCount", user.streak_count),
        ("lastLoginDate", user.last_login_date),
        ("passwordHash", user.password_hash),
    ):
        if value is not None:
            out[key] = value
    return out


def public_user_dict(user: User) -> dict:
    """Stored shape minus credentials, for API responses."""
    out = user_to_dict(user)
    out.pop("passwordHash", None)
    return out
