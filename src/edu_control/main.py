from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .academics.controller import register as register_academics
from .ai.client import TextGenerator
from .ai.controller import register as register_ai
from .attendance.controller import register as register_attendance
from .common.log import configure_logging, get_logger
from .common.web import EXTENSION_KEY, register_error_handlers
from .config import get_settings_module
from .container import build_container
from .database.bootstrap import apply_schema, list_tables, seed_defaults
from .frontend.controller import register as register_frontend
from .groups.controller import register as register_groups
from .library.controller import register as register_library
from .messages.controller import register as register_messages
from .news.controller import register as register_news
from .ratings.controller import register as register_ratings
from .schedules.controller import register as register_schedules
from .storage.gateway import KeyValueStore
from .users.controller import register as register_users

log = get_logger(__name__)


def create_app(
    settings_module: Optional[str] = None,
    *,
    store: Optional[KeyValueStore] = None,
    generator: Optional[TextGenerator] = None,
) -> Flask:
    load_dotenv(override=False)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", None))

    app = Flask(__name__, static_folder=None)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", 3000))

    backend = str(getattr(settings, "STORAGE_BACKEND", "file")).lower()
    log.info("starting", extra={"settings": settings_module, "backend": backend})

    if store is None and backend == "mysql" and getattr(settings, "AUTO_INIT_DB", False):
        db_config = getattr(settings, "DB_CONFIG")
        apply_schema(db_config)
        log.info("schema ready", extra={"tables": len(list_tables(db_config))})

    container = build_container(settings, store=store, generator=generator)
    if getattr(settings, "AUTO_SEED_DB", False):
        seed_defaults(container.gateway)

    app.extensions[EXTENSION_KEY] = container
    register_error_handlers(app)

    register_users(app, container)
    register_groups(app, container)
    register_schedules(app, container)
    register_attendance(app, container)
    register_ratings(app, container)
    register_academics(app, container)
    register_library(app, container)
    register_news(app, container)
    register_messages(app, container)
    register_ai(app, container)
    register_frontend(app, static_dir=getattr(settings, "STATIC_DIR", "dist"))

    return app
