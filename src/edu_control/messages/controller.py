from __future__ import annotations

from flask import Flask, request

from ..common.web import current_user, json_body, login_required, ok
from ..container import Container
from ..users.model import public_user_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/contacts", endpoint="contacts_list")
    @login_required
    def contacts_list():
        contacts = container.message_service.contacts(current_user(), request.args.get("q", ""))
        return ok([public_user_dict(u) for u in contacts])

    @app.route("/api/messages/<contact_id>", endpoint="messages_conversation")
    @login_required
    def messages_conversation(contact_id: str):
        messages = container.message_service.conversation(current_user(), contact_id)
        return ok([m.to_dict() for m in messages])

    @app.route("/api/messages/<contact_id>", methods=["POST"], endpoint="messages_send")
    @login_required
    def messages_send(contact_id: str):
        message = container.message_service.send(current_user(), contact_id, json_body().get("text", ""))
        return ok(message.to_dict(), 201)
