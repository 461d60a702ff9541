from __future__ import annotations

from flask import Flask

from ..common.web import current_user, fail, json_body, login_required, ok
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students/<student_id>/grades", endpoint="grades_list")
    @login_required
    def grades_list(student_id: str):
        me = current_user()
        if me.role == Role.STUDENT and me.id != student_id:
            return fail("You can only view your own grades", 403)
        return ok([g.to_dict() for g in container.academics_service.grades_for(student_id)])

    @app.route("/api/students/<student_id>/grades", methods=["POST"], endpoint="grades_add")
    @login_required
    def grades_add(student_id: str):
        data = json_body()
        record = container.academics_service.add_grade(
            current_role=current_user().role,
            student_id=student_id,
            subject=data.get("subject", ""),
            value=data.get("value"),
            on=data.get("date", ""),
        )
        return ok(record.to_dict(), 201)

    @app.route("/api/students/<student_id>/remarks", methods=["POST"], endpoint="remarks_add")
    @login_required
    def remarks_add(student_id: str):
        data = json_body()
        me = current_user()
        record = container.academics_service.add_remark(
            current_role=me.role,
            teacher_id=me.id,
            student_id=student_id,
            remark=data.get("remark", ""),
            severity=data.get("severity", "low"),
        )
        return ok(record.to_dict(), 201)
