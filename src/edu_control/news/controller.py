from __future__ import annotations

from flask import Flask

from ..common.web import current_user, json_body, login_required, ok, query_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/news", endpoint="news_list")
    @login_required
    def news_list():
        items = container.news_service.latest(query_int("limit"))
        return ok([n.to_dict() for n in items])

    @app.route("/api/news", methods=["POST"], endpoint="news_publish")
    @login_required
    def news_publish():
        data = json_body()
        item = container.news_service.publish(
            author=current_user(), title=data.get("title", ""), content=data.get("content", "")
        )
        return ok(item.to_dict(), 201)

    @app.route("/api/news/<news_id>", methods=["DELETE"], endpoint="news_delete")
    @login_required
    def news_delete(news_id: str):
        container.news_service.delete(current_user=current_user(), news_id=news_id)
        return ok()
