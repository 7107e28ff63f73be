"""
Tests for JSON and text formatters.
"""

import json
import logging
import sys

import pytest

from api_manager.core.logging.formatters import JSONFormatter, TextFormatter, get_formatter


def make_record(message="Request completed", level=logging.INFO, exc_info=None, **extra):
    record = logging.LogRecord(
        "api_manager", level, __file__, 10, message, None, exc_info
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "api_manager"
        assert data["message"] == "Request completed"
        assert data["timestamp"].endswith("+00:00")

    def test_extra_fields_included(self):
        record = make_record(method="GET", status_code=200, duration_ms=12.5)
        data = json.loads(JSONFormatter().format(record))

        assert data["method"] == "GET"
        assert data["status_code"] == 200
        assert data["duration_ms"] == 12.5
        assert "pathname" not in data
        assert "args" not in data

    def test_non_serializable_values_stringified(self):
        record = make_record(target_type=int)
        data = json.loads(JSONFormatter().format(record))

        assert data["target_type"] == str(int)

    def test_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record(level=logging.ERROR, exc_info=sys.exc_info())

        data = json.loads(JSONFormatter().format(record))

        assert "ValueError: boom" in data["exception"]


class TestTextFormatter:
    def test_format(self):
        output = TextFormatter().format(make_record(method="POST", status_code=201))

        assert "[INFO] [api_manager] Request completed" in output
        assert output.endswith("method=POST status_code=201")

    def test_without_extras(self):
        output = TextFormatter().format(make_record("plain"))
        assert output.endswith("plain")


class TestGetFormatter:
    @pytest.mark.parametrize("name, formatter_class", [
        ("json", JSONFormatter),
        ("TEXT", TextFormatter),
    ])
    def test_known(self, name, formatter_class):
        assert isinstance(get_formatter(name), formatter_class)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown format type"):
            get_formatter("xml")
