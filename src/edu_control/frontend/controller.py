from __future__ import annotations

from pathlib import Path

from flask import Flask, abort, jsonify, send_from_directory


def register(app: Flask, *, static_dir: str) -> None:
    """Health check plus the built single-page app with index.html fallback."""
    root = Path(static_dir).resolve()

    @app.route("/api/test", endpoint="api_test")
    def api_test():
        return jsonify({"status": "ok"})

    @app.route("/", defaults={"path": ""}, endpoint="spa")
    @app.route("/<path:path>", endpoint="spa")
    def spa(path: str):
        if path.startswith("api/"):
            abort(404)
        if path and (root / path).is_file():
            return send_from_directory(root, path)
        if (root / "index.html").is_file():
            return send_from_directory(root, "index.html")
        abort(404)
