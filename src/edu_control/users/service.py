from __future__ import annotations

import dataclasses
from datetime import date
from typing import Iterable, List, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import format_iso_date, now_ms, parse_iso_date, today_local
from ..common.ids import new_id
from ..common.log import get_logger
from ..common.validators import require_course, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH, SYSTEM_SUBJECTS
from ..core.enums import MANAGEMENT_ROLES, Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from ..groups.repository import GroupRepository
from .model import Admin, Director, Student, Teacher, User
from .repository import UserRepository

log = get_logger(__name__)

DEMO_ROLES = (Role.ADMIN, Role.STUDENT)
DEMO_GROUP = "CS-101"


def next_streak(user: User, today: date) -> Optional[int]:
    """Login streak after logging in on ``today``; None when already counted."""
    if user.last_login_date == format_iso_date(today):
        return None
    if not user.last_login_date:
        return 1
    gap = abs((today - parse_iso_date(user.last_login_date)).days)
    return (user.streak_count or 1) + 1 if gap == 1 else 1


class AuthService:
    """Use case: register and log users in."""

    def __init__(self, users: UserRepository, groups: GroupRepository, *, admin_registration_key: str):
        self._users = users
        self._groups = groups
        self._admin_key = admin_registration_key

    def register(
        self,
        *,
        full_name: str,
        email: str,
        password: str = "",
        role: str,
        group: str = "",
        course=None,
        subjects: Iterable[str] = (),
        secret_key: str = "",
    ) -> User:
        try:
            role_e = Role(role)
        except ValueError:
            raise ValidationError("Unknown role")

        if role_e in MANAGEMENT_ROLES and secret_key != self._admin_key:
            raise ValidationError("Invalid registration key")

        full_name = require_non_empty(full_name, "Full name")
        email = require_non_empty(email, "Email")
        if self._users.get_by_email(email):
            raise ValidationError("Email is already registered")

        password_hash = None
        if password:
            password_hash = generate_password_hash(require_min_length(password, "Password", MIN_PASSWORD_LENGTH))

        common = dict(
            id=new_id(),
            full_name=full_name,
            email=email,
            registered_at=now_ms(),
            password_hash=password_hash,
        )

        user: User
        if role_e == Role.STUDENT:
            if not group or not self._groups.get_by_name(group):
                raise ValidationError("Please select a group")
            user = Student(**common, group=group, course=require_course(course))
        elif role_e == Role.TEACHER:
            cleaned = _unique([s.strip() for s in subjects if s and s.strip()])
            if not cleaned:
                raise ValidationError("Please select at least one subject")
            user = Teacher(**common, subjects=tuple(cleaned))
        elif role_e == Role.ADMIN:
            user = Admin(**common)
        else:
            user = Director(**common)

        self._users.add(user)
        log.info("user registered", extra={"user_id": user.id, "role": role_e.value})
        return self.touch_streak(user)

    def login(self, *, email: str, password: str = "") -> User:
        user = self._users.get_by_email((email or "").strip())
        if not user:
            log.warning("login for unknown email")
            raise NotFoundError("User not found")

        if user.password_hash:
            try:
                ok = check_password_hash(user.password_hash, password or "")
            except ValueError:
                # e.g. a hash written by a different tool
                ok = False
            if not ok:
                raise AuthenticationError("Wrong email or password")

        return self.touch_streak(user)

    def demo_login(self, role: str) -> User:
        """Log in as the demo admin or demo student, creating it on first use."""
        try:
            role_e = Role(role)
        except ValueError:
            raise ValidationError("Unknown role")
        if role_e not in DEMO_ROLES:
            raise ValidationError("Demo login is available for admin and student only")

        demo = next((u for u in self._users.list_all() if u.role == role_e and "demo" in u.email), None)
        if not demo:
            demo = build_demo_user(role_e)
            self._users.add(demo)
            log.info("demo user created", extra={"user_id": demo.id, "role": role_e.value})
        return self.touch_streak(demo)

    def touch_streak(self, user: User, *, today: Optional[date] = None) -> User:
        today = today or today_local()
        streak = next_streak(user, today)
        if streak is None:
            return user
        updated = dataclasses.replace(user, streak_count=streak, last_login_date=format_iso_date(today))
        self._users.update(updated)
        return updated


def build_demo_user(role: Role) -> User:
    common = dict(id=new_id(), email=f"{role.value}@demo.edu", registered_at=now_ms())
    if role == Role.STUDENT:
        return Student(**common, full_name="Demo Student", group=DEMO_GROUP, course=1)
    return Admin(**common, full_name="Demo Admin")


class UserService:
    """Use case: user lookups and a teacher's own subject list."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get(self, user_id: str) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def list_users(self, *, current_role: Role) -> List[User]:
        if current_role == Role.STUDENT:
            raise AuthorizationError("You are not allowed to list users")
        return list(self._users.list_all())

    def available_subjects(self) -> List[str]:
        """Built-in subjects plus every teacher's subjects, unique and sorted."""
        teacher_subjects = [s for u in self._users.list_all() if isinstance(u, Teacher) for s in u.subjects]
        return sorted(set(SYSTEM_SUBJECTS) | set(teacher_subjects))

    def add_subject(self, *, user_id: str, subject: str) -> Teacher:
        teacher = self._require_teacher(user_id)
        subject = require_non_empty(subject, "Subject")
        updated = dataclasses.replace(teacher, subjects=tuple(_unique([*teacher.subjects, subject])))
        self._users.update(updated)
        return updated

    def remove_subject(self, *, user_id: str, subject: str) -> Teacher:
        teacher = self._require_teacher(user_id)
        updated = dataclasses.replace(teacher, subjects=tuple(s for s in teacher.subjects if s != subject))
        self._users.update(updated)
        return updated

    def _require_teacher(self, user_id: str) -> Teacher:
        user = self.get(user_id)
        if not isinstance(user, Teacher):
            raise AuthorizationError("Only teachers have a subject list")
        return user


def _unique(items: Iterable[str]) -> List[str]:
    seen: dict[str, None] = {}
    for item in items:
        seen.setdefault(item, None)
    return list(seen)
