from __future__ import annotations

import json
import logging

from vlist.api.logging import LoggingConfig
from vlist.runtime.logging import (
    JsonFormatter,
    configure_logging,
    setup_logging,
    shutdown_logging,
)


def _record(message: str, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="vlist.size_index",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_setup_logging_adds_handler_when_missing(monkeypatch) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
        monkeypatch.setenv("VLIST_LOG_LEVEL", "DEBUG")
        setup_logging()
        assert root.handlers
        assert root.level == logging.DEBUG
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_setup_logging_does_not_override_existing_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    sentinel = logging.NullHandler()
    try:
        root.handlers.clear()
        root.addHandler(sentinel)
        root.setLevel(logging.WARNING)
        setup_logging()
        assert root.handlers == [sentinel]
        assert root.level == logging.WARNING
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_json_formatter_preserves_extra_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record("measure_extend", frontier=4)))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "vlist.size_index"
    assert payload["msg"] == "measure_extend"
    assert payload["fields"] == {"frontier": 4}
    assert "ts" in payload


def test_json_formatter_omits_fields_without_extras() -> None:
    payload = json.loads(JsonFormatter().format(_record("plain")))
    assert "fields" not in payload


def test_configure_logging_streams_json_to_file(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_path = tmp_path / "logs" / "vlist.jsonl"
    try:
        configure_logging(
            LoggingConfig(
                level_name="info",
                console_format="text",
                file_path=str(log_path),
                file_format="json",
            )
        )
        assert root.level == logging.INFO
        logging.getLogger("vlist.viewport").info("items_updated", extra={"count": 3})
        shutdown_logging()

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        entry = json.loads(lines[0])
        assert entry["logger"] == "vlist.viewport"
        assert entry["fields"] == {"count": 3}
    finally:
        shutdown_logging()
        for handler in root.handlers:
            handler.close()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_configure_logging_console_only_uses_single_handler() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        configure_logging(LoggingConfig(level_name="warning", console_format="json"))
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert root.level == logging.WARNING
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)
