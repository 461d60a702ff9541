from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import format_iso_date, today_local
from ..common.web import current_user, json_body, login_required, ok, query_int
from ..container import Container
from ..users.model import Student

_FIELDS = ("group", "subject", "teacher", "room", "day", "time")


def _group_param() -> str:
    """Explicit ``?group=``, else the logged-in student's own group."""
    group = request.args.get("group", "").strip()
    if group:
        return group
    me = current_user()
    return me.group if isinstance(me, Student) else ""


def register(app: Flask, container: Container) -> None:
    @app.route("/api/schedule", endpoint="schedule_week")
    @login_required
    def schedule_week():
        group = _group_param()
        days = container.schedule_service.week_view(
            group=group, today=today_local(), week_offset=query_int("week") or 0
        )
        return ok(
            {
                "group": group,
                "days": [
                    {"day": d.day, "date": format_iso_date(d.date), "lessons": [e.to_dict() for e in d.lessons]}
                    for d in days
                ],
            }
        )

    @app.route("/api/schedule/today", endpoint="schedule_today")
    @login_required
    def schedule_today():
        lessons = container.schedule_service.today_lessons(group=_group_param(), today=today_local())
        return ok([e.to_dict() for e in lessons])

    @app.route("/api/schedule", methods=["POST"], endpoint="schedule_create")
    @login_required
    def schedule_create():
        data = json_body()
        entry = container.schedule_service.create(
            current_role=current_user().role, **{k: data.get(k, "") for k in _FIELDS}
        )
        return ok(entry.to_dict(), 201)

    @app.route("/api/schedule/<entry_id>", methods=["PUT"], endpoint="schedule_update")
    @login_required
    def schedule_update(entry_id: str):
        data = json_body()
        entry = container.schedule_service.update(
            current_role=current_user().role, entry_id=entry_id, **{k: data.get(k) for k in _FIELDS}
        )
        return ok(entry.to_dict())

    @app.route("/api/schedule/<entry_id>", methods=["DELETE"], endpoint="schedule_delete")
    @login_required
    def schedule_delete(entry_id: str):
        container.schedule_service.delete(current_role=current_user().role, entry_id=entry_id)
        return ok()
