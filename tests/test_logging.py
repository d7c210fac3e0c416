import json
import logging

from envload.observability.logging import JsonFormatter, setup_logging


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("envload.loader", logging.DEBUG, __file__, 1, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_basic_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record("env merged")))

    assert payload["level"] == "DEBUG"
    assert payload["logger"] == "envload.loader"
    assert payload["msg"] == "env merged"
    assert payload["ts"].endswith("Z")


def test_json_formatter_includes_extra_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record("env merged", path=".env")))

    assert payload["path"] == ".env"


def test_setup_logging_installs_single_handler() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging(level="debug", json_logs=True)
        setup_logging(level="debug", json_logs=True)

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_defaults_to_plain_text(monkeypatch) -> None:
    monkeypatch.setenv("LOG_FORMAT", "json")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging()

        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
