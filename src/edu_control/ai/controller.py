from __future__ import annotations

from flask import Flask

from ..common.web import current_user, json_body, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/ai/chat", endpoint="ai_chat_history")
    @login_required
    def ai_chat_history():
        return ok(container.ai_service.chat_history(current_user().id))

    @app.route("/api/ai/chat", methods=["POST"], endpoint="ai_chat")
    @login_required
    def ai_chat():
        task = container.ai_service.chat(current_user(), json_body().get("message", ""))
        return ok(task.to_dict())

    @app.route("/api/ai/report/me", methods=["POST"], endpoint="ai_student_report")
    @login_required
    def ai_student_report():
        return ok(container.ai_service.student_report(current_user()).to_dict())

    @app.route("/api/ai/report/college", methods=["POST"], endpoint="ai_college_report")
    @login_required
    def ai_college_report():
        return ok(container.ai_service.collective_report(current_user()).to_dict())
