"""Structured logging — JSON formatter fields and handler replacement."""

import json
import logging

from marketplace.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="marketplace.services.handle_parts", level=logging.INFO,
        pathname=__file__, lineno=1, msg="Auto part listed", args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "marketplace.services.handle_parts"
    assert payload["message"] == "Auto part listed"
    assert "timestamp" in payload


def test_json_formatter_surfaces_entity_extras():
    payload = json.loads(JSONFormatter().format(
        _record(entity="AutoPart", entity_id=7, unrelated="dropped"),
    ))
    assert payload["entity"] == "AutoPart"
    assert payload["entity_id"] == 7
    assert "unrelated" not in payload


def test_setup_logging_replaces_its_own_handler():
    before = list(logging.root.handlers)
    try:
        first = setup_logging("DEBUG", "json")
        second = setup_logging("INFO", "text")
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert not isinstance(second.formatter, JSONFormatter)
        assert logging.root.level == logging.INFO
    finally:
        for handler in list(logging.root.handlers):
            if handler not in before:
                logging.root.removeHandler(handler)
