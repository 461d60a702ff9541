from __future__ import annotations

from flask import Flask

from ..common.web import current_user, json_body, login_required, ok, query_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/groups", endpoint="groups_list")
    def groups_list():
        groups = container.group_service.list_groups(course=query_int("course"))
        return ok([g.to_dict() for g in groups])

    @app.route("/api/groups", methods=["POST"], endpoint="groups_create")
    @login_required
    def groups_create():
        data = json_body()
        group = container.group_service.create(
            current_role=current_user().role,
            name=data.get("name", ""),
            department=data.get("department", ""),
            course=data.get("course"),
        )
        return ok(group.to_dict(), 201)

    @app.route("/api/groups/<group_id>", methods=["DELETE"], endpoint="groups_delete")
    @login_required
    def groups_delete(group_id: str):
        container.group_service.delete(current_role=current_user().role, group_id=group_id)
        return ok()
