"""Structured logging — JSON formatter fields and setup."""

import json
import logging

from farm.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "farm.services.farm_service", logging.INFO, __file__, 1,
        "Created barn RED-1", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    data = json.loads(JSONFormatter().format(_record()))
    assert data["level"] == "INFO"
    assert data["logger"] == "farm.services.farm_service"
    assert data["message"] == "Created barn RED-1"
    assert "timestamp" in data


def test_json_formatter_surfaces_farm_extras():
    data = json.loads(JSONFormatter().format(
        _record(color="RED", barn_id=2, barn_count=2, unrelated="x"),
    ))
    assert data["color"] == "RED"
    assert data["barn_id"] == 2
    assert data["barn_count"] == 2
    assert "unrelated" not in data
    assert "animal_id" not in data


def test_setup_logging_installs_handler():
    previous = logging.root.level
    handler = setup_logging("debug", "text")
    try:
        assert handler in logging.root.handlers
        assert logging.root.level == logging.DEBUG
        assert not isinstance(handler.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(previous)


def test_setup_logging_json_by_default():
    handler = setup_logging()
    try:
        assert isinstance(handler.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(handler)
