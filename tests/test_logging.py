"""Tests for the structured log formatter."""

import logging
import sys

from app.core.logging import StructuredFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("app.test", logging.INFO, __file__, 10, "Indexed task:t1", None, None)
    record.__dict__.update(extra)
    return record


def test_extra_context_is_rendered_as_key_value_pairs():
    line = StructuredFormatter().format(_record(user_id="user-1", entity_type="task"))

    assert "message=Indexed task:t1" in line
    assert "user_id=user-1" in line
    assert "entity_type=task" in line


def test_standard_record_attributes_are_not_repeated():
    line = StructuredFormatter().format(_record())

    assert "levelno=" not in line
    assert "pathname=" not in line
    assert "extra_data=" not in line


def test_exception_is_appended():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord(
            "app.test", logging.ERROR, __file__, 10, "Search failed", None, sys.exc_info()
        )

    line = StructuredFormatter().format(record)

    assert line.startswith("timestamp=")
    assert "ValueError: boom" in line
