from __future__ import annotations

from typing import Optional

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date, today_local
from ..common.web import current_user, json_body, login_required, ok
from ..container import Container
from ..users.model import public_user_dict
from .resolver import AttendanceSession


def _day(raw: Optional[str]):
    return parse_iso_date(raw) if raw else today_local()


def session_to_dict(s: AttendanceSession) -> dict:
    return {
        "group": s.group,
        "date": s.date,
        "weekday": s.weekday,
        "lessons": [e.to_dict() for e in s.lessons],
        "activeLesson": s.active_lesson.to_dict() if s.active_lesson else None,
        "canSave": s.can_save,
        "roster": [
            {**public_user_dict(student), "status": s.status_for(student.id).value} for student in s.roster
        ],
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/session", endpoint="attendance_session")
    @login_required
    def attendance_session():
        s = container.attendance_service.open_session(
            current_role=current_user().role,
            group=request.args.get("group", "").strip(),
            day=_day(request.args.get("date", "").strip()),
            lesson_id=request.args.get("lesson", "").strip() or None,
        )
        return ok(session_to_dict(s))

    @app.route("/api/attendance/session", methods=["POST"], endpoint="attendance_save")
    @login_required
    def attendance_save():
        data = json_body()
        records = container.attendance_service.save_session(
            current_role=current_user().role,
            group=str(data.get("group") or "").strip(),
            day=_day(str(data.get("date") or "").strip()),
            lesson_id=str(data.get("lessonId") or "").strip() or None,
            marks=data.get("marks"),
        )
        return ok([r.to_dict() for r in records])

    @app.route("/api/attendance/me", endpoint="attendance_me")
    @login_required
    def attendance_me():
        records = container.attendance_service.student_history(current_user().id)
        return ok([r.to_dict() for r in records])
