"""Tests for formatters and filters"""

import json

from stdsync_logger import LEVEL_KEY, LevelOption, LogEntry, LogLevel
from stdsync_logger.filters import LevelFilter
from stdsync_logger.formatters import JSONFormatter, formatter_for


class TestJSONFormatter:
    """Test JSONFormatter class."""

    def test_format(self):
        formatter = JSONFormatter()
        output = formatter.format(["key", "value", "n", 3, "ok", True])
        assert json.loads(output) == {"key": "value", "n": 3, "ok": True}

    def test_single_line(self):
        output = JSONFormatter().format(["msg", "line one\nline two"])
        assert "\n" not in output

    def test_level_rendered_as_label(self):
        output = JSONFormatter().format([LEVEL_KEY, LogLevel.ERROR])
        assert json.loads(output) == {"level": "error"}

    def test_exception_rendered_as_text(self):
        output = JSONFormatter().format(["err", ValueError("bad input")])
        assert json.loads(output)["err"] == "bad input"

    def test_unserializable_value(self):
        class Thing:
            def __str__(self):
                return "thing"

        output = JSONFormatter().format(["obj", Thing()])
        assert json.loads(output)["obj"] == "thing"

    def test_non_string_key(self):
        output = JSONFormatter().format([1, "one"])
        assert json.loads(output) == {"1": "one"}

    def test_duplicate_key_keeps_first_position(self):
        output = JSONFormatter().format(["a", 1, "b", 2, "a", 3])
        assert list(json.loads(output).items()) == [("a", 3), ("b", 2)]

    def test_missing_value(self):
        output = JSONFormatter().format(["dangling"])
        assert json.loads(output) == {"dangling": "(MISSING)"}

    def test_non_ascii(self):
        output = JSONFormatter().format(["msg", "café"])
        assert "café" in output

    def test_callable(self):
        formatter = JSONFormatter()
        assert formatter(["a", 1]) == formatter.format(["a", 1])


class TestFormatterFor:
    """Test format selection."""

    def test_json(self):
        assert isinstance(formatter_for("json"), JSONFormatter)
        assert isinstance(formatter_for(" JSON "), JSONFormatter)

    def test_unknown_falls_back_to_json(self):
        assert isinstance(formatter_for("logfmt"), JSONFormatter)
        assert isinstance(formatter_for(""), JSONFormatter)


class TestLevelFilter:
    """Test LevelFilter class."""

    def test_min_level(self):
        log_filter = LevelFilter(LevelOption.ALLOW_WARN)
        assert log_filter.should_log(LogEntry(LogLevel.ERROR)) is True
        assert log_filter.should_log(LogEntry(LogLevel.WARN)) is True
        assert log_filter.should_log(LogEntry(LogLevel.INFO)) is False

    def test_from_string(self):
        log_filter = LevelFilter("  Error ")
        assert log_filter.option is LevelOption.ALLOW_ERROR
        assert log_filter(LogEntry(LogLevel.WARN)) is False

    def test_no_severity(self):
        assert LevelFilter().should_log(LogEntry(None)) is False

    def test_allow_none(self):
        log_filter = LevelFilter("none")
        assert not any(log_filter.should_log(LogEntry(level)) for level in LogLevel)

    def test_repr(self):
        assert "ALLOW_INFO" in repr(LevelFilter("info"))
