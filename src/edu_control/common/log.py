"""JSON logging configuration and helpers.

Log records are rendered as single-line JSON objects on stdout. Extra fields
passed through ``extra=`` end up under ``context`` with sensitive values
redacted.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Mapping, Optional

from flask import has_request_context, request

_REDACTED = "[REDACTED]"
_SENSITIVE_FIELDS = frozenset({"password", "passwordhash", "password_hash", "email", "token", "api_key"})

# Attributes populated by logging.LogRecord itself.
_RESERVED = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime"}


def redact_sensitive_data(data: Any, fields: Optional[Iterable[str]] = None) -> Any:
    """Recursively replace values of sensitive keys in mappings and sequences."""

    fields_set = {f.lower() for f in (fields or _SENSITIVE_FIELDS)}

    if isinstance(data, Mapping):
        return {
            key: _REDACTED if str(key).lower() in fields_set else redact_sensitive_data(value, fields_set)
            for key, value in data.items()
        }
    if isinstance(data, (list, tuple, set)):
        return [redact_sensitive_data(item, fields_set) for item in data]
    return data


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if has_request_context():
            payload["method"] = request.method
            payload["path"] = request.path

        if record.exc_info:
            payload["error_type"] = record.exc_info[0].__name__
            payload["error"] = str(record.exc_info[1])
            payload["stack"] = self.formatException(record.exc_info)

        context = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED and not key.startswith("_")
        }
        if context:
            payload["context"] = redact_sensitive_data(context)

        return json.dumps(payload, default=str, ensure_ascii=False, separators=(",", ":"))


_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """Install the JSON handler on the root logger (once)."""

    global _configured
    if _configured:
        return

    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(JSONFormatter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))
    root.handlers = [handler]
    logging.captureWarnings(True)

    # the dev server logs every request line at INFO
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
