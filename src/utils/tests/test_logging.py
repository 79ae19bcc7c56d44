"""Tests for structured JSON logging."""

import json
import logging
import sys
import unittest

from utils.logging import JSONFormatter


def make_record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger", level=logging.INFO, pathname=__file__, lineno=1,
        msg=msg, args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter(unittest.TestCase):

    def setUp(self):
        self.formatter = JSONFormatter()

    def test_base_fields(self):
        data = json.loads(self.formatter.format(make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "hello"
        assert data["timestamp"].endswith("Z")

    def test_extra_fields_are_included(self):
        data = json.loads(self.formatter.format(make_record(user_id="u1")))

        assert data["user_id"] == "u1"
        assert "lineno" not in data

    def test_sensitive_fields_are_redacted(self):
        data = json.loads(self.formatter.format(make_record(password="secret1", token="abc")))

        assert data["password"] == "[REDACTED]"
        assert data["token"] == "[REDACTED]"

    def test_non_serializable_values_are_stringified(self):
        data = json.loads(self.formatter.format(make_record(origins={"a"})))

        assert data["origins"] == "{'a'}"

    def test_exception_is_formatted(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = make_record(exc_info=sys.exc_info())

        data = json.loads(self.formatter.format(record))

        assert "RuntimeError: boom" in data["exception"]


if __name__ == '__main__':
    unittest.main()
