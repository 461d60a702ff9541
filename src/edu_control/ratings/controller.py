from __future__ import annotations

import csv
import io
from typing import Iterable, Mapping, Optional

from flask import Flask, Response, request

from ..common.datetime_utils import format_iso_date, today_local
from ..common.web import current_user, json_body, login_required, ok, query_int, roles_required
from ..container import Container
from ..core.enums import STAFF_ROLES, AttendanceBucket
from ..core.exceptions import ValidationError
from .profile import StudentProfile
from .service import LeaderboardFilter

EXPORT_HEADER = ("Rank", "Full name", "Email", "Group", "Course", "Academic score", "Attendance %", "Rating", "Grade")


def _filter_from_args() -> LeaderboardFilter:
    raw_bucket = request.args.get("attendance", "").strip().lower() or AttendanceBucket.ALL.value
    try:
        bucket = AttendanceBucket(raw_bucket)
    except ValueError:
        raise ValidationError("attendance must be one of all, high, low")
    return LeaderboardFilter(
        course=query_int("course"),
        group=request.args.get("group", "").strip() or None,
        bucket=bucket,
    )


def leaderboard_csv(profiles: Iterable[StudentProfile], courses: Mapping[str, Optional[int]]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(EXPORT_HEADER)
    for rank, p in enumerate(profiles, start=1):
        writer.writerow(
            [
                rank,
                p.student.full_name,
                p.student.email,
                p.student.group,
                courses.get(p.id) or "",
                p.academic_score,
                p.attendance_rate,
                p.rating,
                p.grade,
            ]
        )
    return buf.getvalue()


def register(app: Flask, container: Container) -> None:
    @app.route("/api/ratings", endpoint="ratings_list")
    @login_required
    def ratings_list():
        profiles = container.rating_service.leaderboard(_filter_from_args())
        return ok([p.to_dict() for p in profiles])

    @app.route("/api/ratings/me", endpoint="ratings_me")
    @login_required
    def ratings_me():
        return ok(container.rating_service.profile_for(current_user().id).to_dict())

    @app.route("/api/ratings/<student_id>/score", methods=["PUT"], endpoint="ratings_update_score")
    @login_required
    def ratings_update_score(student_id: str):
        entry = container.rating_service.update_score(
            current_role=current_user().role,
            student_id=student_id,
            score=json_body().get("score"),
        )
        return ok(entry.to_dict())

    @app.route("/api/ratings/export.csv", endpoint="ratings_export")
    @roles_required(*STAFF_ROLES)
    def ratings_export():
        ratings = container.rating_service
        body = leaderboard_csv(ratings.leaderboard(_filter_from_args()), ratings.effective_courses())
        filename = f"leaderboard_{format_iso_date(today_local())}.csv"
        # BOM so spreadsheet apps pick UTF-8 for Cyrillic names
        return Response(
            "\ufeff" + body,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/ratings/groups", endpoint="ratings_groups")
    @login_required
    def ratings_groups():
        return ok([s.to_dict() for s in container.rating_service.group_stats()])
