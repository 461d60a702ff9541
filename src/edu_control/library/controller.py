from __future__ import annotations

from flask import Flask, request

from ..common.web import current_user, json_body, login_required, ok
from ..container import Container

_FIELDS = ("title", "author", "category", "description", "url")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/library", endpoint="library_search")
    @login_required
    def library_search():
        books = container.library_service.search(request.args.get("q", ""))
        return ok([b.to_dict() for b in books])

    @app.route("/api/library", methods=["POST"], endpoint="library_create")
    @login_required
    def library_create():
        data = json_body()
        book = container.library_service.save(
            current_role=current_user().role, **{k: data.get(k, "") for k in _FIELDS}
        )
        return ok(book.to_dict(), 201)

    @app.route("/api/library/<book_id>", methods=["PUT"], endpoint="library_update")
    @login_required
    def library_update(book_id: str):
        data = json_body()
        book = container.library_service.save(
            current_role=current_user().role, book_id=book_id, **{k: data.get(k, "") for k in _FIELDS}
        )
        return ok(book.to_dict())

    @app.route("/api/library/<book_id>", methods=["DELETE"], endpoint="library_delete")
    @login_required
    def library_delete(book_id: str):
        container.library_service.delete(current_role=current_user().role, book_id=book_id)
        return ok()
