from __future__ import annotations

from flask import Flask, request, session

from ..common.log import get_logger
from ..common.web import current_user, fail, json_body, login_required, ok, sign_in
from ..container import Container
from ..core.enums import Role
from .model import public_user_dict

log = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/register", methods=["POST"], endpoint="auth_register")
    def auth_register():
        data = json_body()
        user = container.auth_service.register(
            full_name=data.get("fullName", ""),
            email=data.get("email", ""),
            password=data.get("password", ""),
            role=data.get("role", ""),
            group=data.get("group", ""),
            course=data.get("course"),
            subjects=data.get("subjects") or (),
            secret_key=data.get("secretKey", ""),
        )
        sign_in(user)
        return ok(public_user_dict(user), 201)

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def auth_login():
        data = json_body()
        user = container.auth_service.login(email=data.get("email", ""), password=data.get("password", ""))
        sign_in(user)
        log.info("user logged in", extra={"user_id": user.id})
        return ok(public_user_dict(user))

    @app.route("/api/auth/demo", methods=["POST"], endpoint="auth_demo")
    def auth_demo():
        user = container.auth_service.demo_login(json_body().get("role", ""))
        sign_in(user)
        return ok(public_user_dict(user))

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def auth_logout():
        session.clear()
        return ok()

    @app.route("/api/auth/me", endpoint="auth_me")
    @login_required
    def auth_me():
        return ok(public_user_dict(current_user()))

    @app.route("/api/users", endpoint="users_list")
    @login_required
    def users_list():
        me = current_user()
        users = container.user_service.list_users(current_role=me.role)
        role = request.args.get("role", "").strip()
        if role:
            users = [u for u in users if u.role.value == role]
        return ok([public_user_dict(u) for u in users])

    @app.route("/api/subjects", endpoint="subjects_list")
    def subjects_list():
        return ok(container.user_service.available_subjects())

    @app.route("/api/me/subjects", methods=["POST", "DELETE"], endpoint="my_subjects")
    @login_required
    def my_subjects():
        me = current_user()
        if me.role != Role.TEACHER:
            return fail("Only teachers have a subject list", 403)
        subject = json_body().get("subject", "")
        if request.method == "POST":
            teacher = container.user_service.add_subject(user_id=me.id, subject=subject)
        else:
            teacher = container.user_service.remove_subject(user_id=me.id, subject=subject)
        return ok(public_user_dict(teacher))
