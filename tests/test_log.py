from __future__ import annotations

import json
import logging
import sys

from edu_control.common.log import JSONFormatter, redact_sensitive_data


def test_redact_nested():
    data = {"user": {"email": "a@b.c", "fullName": "A"}, "items": [{"password": "x"}], "ok": 1}

    assert redact_sensitive_data(data) == {
        "user": {"email": "[REDACTED]", "fullName": "A"},
        "items": [{"password": "[REDACTED]"}],
        "ok": 1,
    }


def test_json_formatter_puts_extras_in_context():
    record = logging.LogRecord("edu_control.test", logging.INFO, __file__, 1, "user registered", (), None)
    record.user_id = "abc"
    record.email = "secret@edu.test"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["msg"] == "user registered"
    assert payload["context"] == {"user_id": "abc", "email": "[REDACTED]"}


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

    payload = json.loads(JSONFormatter().format(record))
    assert (payload["error_type"], payload["error"]) == ("RuntimeError", "boom")
