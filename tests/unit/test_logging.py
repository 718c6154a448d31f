"""Unit tests for structured logging."""

from __future__ import annotations

import io
import json
import logging
import sys

from agentflow_cli.marketplace.logging import JsonFormatter, configure_logging


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.LogRecord(
        name="agentflow_cli.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Workflow %s",
        args=("installed",),
        exc_info=None,
    )
    record.workflow_id = "3"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "agentflow_cli.test"
    assert payload["message"] == "Workflow installed"
    assert payload["extra"] == {"workflow_id": "3"}
    assert "exception" not in payload


def test_json_formatter_includes_exception() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.getLogger("t").makeRecord(
            "t", logging.ERROR, __file__, 1, "failed", (), exc_info=sys.exc_info()
        )

    payload = json.loads(JsonFormatter().format(record))
    assert "RuntimeError: boom" in payload["exception"]


def test_configure_logging_replaces_root_handlers() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    stream = io.StringIO()
    try:
        configure_logging("debug", stream=stream)
        configure_logging("info", stream=stream)

        assert len(root.handlers) == 1
        assert root.level == logging.INFO

        logging.getLogger("agentflow_cli.test").info("hello", extra={"state": "main_menu"})
        lines = stream.getvalue().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["extra"] == {"state": "main_menu"}
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
