"""Basic tests for levels, entries and configuration"""

import pytest

from stdsync_logger import (
    LEVEL_KEY,
    LevelOption,
    LogEntry,
    LoggerConfig,
    LogLevel,
    configuration,
)
from stdsync_logger.core.log_entry import MISSING_VALUE


class CustomLevel:
    """A level-like value that is not a LogLevel."""

    def __str__(self):
        return "invalid"


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARN
        assert LogLevel.WARN < LogLevel.ERROR

    def test_from_string(self):
        assert LogLevel.from_string("DEBUG") == LogLevel.DEBUG
        assert LogLevel.from_string(" info ") == LogLevel.INFO

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            LogLevel.from_string("verbose")

    def test_label(self):
        assert LogLevel.ERROR.label == "error"
        assert str(LogLevel.WARN) == "warn"

    def test_from_value(self):
        assert LogLevel.from_value(LogLevel.INFO) is LogLevel.INFO
        assert LogLevel.from_value("info") is None
        assert LogLevel.from_value(20) is None
        assert LogLevel.from_value(CustomLevel()) is None


class TestLevelOption:
    """Test level string resolution."""

    @pytest.mark.parametrize("level_str,expected", [
        ("none", LevelOption.ALLOW_NONE),
        ("error", LevelOption.ALLOW_ERROR),
        ("warn", LevelOption.ALLOW_WARN),
        ("info", LevelOption.ALLOW_INFO),
        ("debug", LevelOption.ALLOW_DEBUG),
        ("  WaRn \t", LevelOption.ALLOW_WARN),
        (" NONE ", LevelOption.ALLOW_NONE),
        ("all", LevelOption.ALLOW_ALL),
        ("invalid-garbage", LevelOption.ALLOW_ALL),
        ("", LevelOption.ALLOW_ALL),
    ])
    def test_resolve(self, level_str, expected):
        assert LevelOption.resolve(level_str) is expected

    def test_allows(self):
        assert LevelOption.ALLOW_WARN.allows(LogLevel.ERROR)
        assert LevelOption.ALLOW_WARN.allows(LogLevel.WARN)
        assert not LevelOption.ALLOW_WARN.allows(LogLevel.INFO)
        assert LevelOption.ALLOW_ALL.allows(LogLevel.DEBUG)
        assert LevelOption.ALLOW_DEBUG.allows(LogLevel.DEBUG)
        assert not LevelOption.ALLOW_ERROR.allows(LogLevel.WARN)

    def test_allow_none_allows_nothing(self):
        for level in LogLevel:
            assert not LevelOption.ALLOW_NONE.allows(level)


class TestLogEntry:
    """Test log entry structure."""

    def test_from_keyvals(self):
        entry = LogEntry.from_keyvals(LEVEL_KEY, LogLevel.INFO, "key", "value", "n", 1)
        assert entry.severity == LogLevel.INFO
        assert entry.fields == (("key", "value"), ("n", 1))
        assert entry.logger_name == ""

    def test_level_anywhere_in_sequence(self):
        entry = LogEntry.from_keyvals("key", "value", LEVEL_KEY, LogLevel.ERROR)
        assert entry.severity == LogLevel.ERROR
        assert entry.fields == (("key", "value"),)

    def test_missing_level(self):
        entry = LogEntry.from_keyvals("key", "value")
        assert entry.severity is None

    def test_unrecognized_level(self):
        entry = LogEntry.from_keyvals(LEVEL_KEY, CustomLevel(), "key", "value")
        assert entry.severity is None
        assert entry.fields == (("key", "value"),)

    def test_level_as_string_is_unrecognized(self):
        entry = LogEntry.from_keyvals(LEVEL_KEY, "error")
        assert entry.severity is None

    def test_odd_keyvals(self):
        entry = LogEntry.from_keyvals(LEVEL_KEY, LogLevel.INFO, "dangling")
        assert entry.fields == (("dangling", MISSING_VALUE),)

    def test_with_logger_is_copy(self):
        entry = LogEntry.from_keyvals(LEVEL_KEY, LogLevel.INFO, "key", "value")
        tagged = entry.with_logger("fake")
        assert tagged.logger_name == "fake"
        assert entry.logger_name == ""
        assert tagged.fields == entry.fields

    def test_to_keyvals_order(self):
        entry = LogEntry(LogLevel.WARN, [("a", 1)]).with_logger("fake")
        assert entry.to_keyvals([("ts", "now")]) == [
            LEVEL_KEY, LogLevel.WARN, "a", 1, "ts", "now", "logger", "fake"
        ]

    def test_level_position(self):
        entry = LogEntry.from_keyvals("key", "value", LEVEL_KEY, LogLevel.INFO, "n", 1)
        assert entry.level_position == 1
        assert entry.to_keyvals() == ["key", "value", LEVEL_KEY, LogLevel.INFO, "n", 1]

    def test_level_last(self):
        entry = LogEntry.from_keyvals("key", "value", LEVEL_KEY, LogLevel.ERROR)
        assert entry.with_logger("fake").to_keyvals([("ts", "now")]) == [
            "key", "value", LEVEL_KEY, LogLevel.ERROR, "ts", "now", "logger", "fake"
        ]

    def test_level_only(self):
        assert LogEntry(LogLevel.DEBUG).to_keyvals() == [LEVEL_KEY, LogLevel.DEBUG]

    def test_frozen(self):
        entry = LogEntry(LogLevel.INFO)
        with pytest.raises(AttributeError):
            entry.severity = LogLevel.ERROR


class TestLoggerConfig:
    """Test logger configuration."""

    def test_default_config(self):
        config = LoggerConfig()
        assert config.to_dict() == {"format": "json", "level": "info"}

    def test_configuration(self):
        config = configuration()
        assert config.format == "json"
        assert config.level == "info"
        assert config == LoggerConfig.default()

    def test_configuration_returns_new_instance(self):
        assert configuration() is not configuration()

    @pytest.mark.parametrize("level", ["none", "NONE", "  None\n", "\tnOnE"])
    def test_is_level_none(self, level):
        assert LoggerConfig(level=level).is_level_none is True

    def test_is_not_level_none(self):
        assert LoggerConfig(level="nothing").is_level_none is False
        assert LoggerConfig().is_level_none is False

    def test_level_option(self):
        assert LoggerConfig(level="warn").level_option is LevelOption.ALLOW_WARN
        assert LoggerConfig(level="bogus").level_option is LevelOption.ALLOW_ALL

    def test_from_dict(self):
        config = LoggerConfig.from_dict({"format": "json", "level": "debug"})
        assert config.level == "debug"

    def test_from_dict_defaults(self):
        assert LoggerConfig.from_dict({}) == LoggerConfig()
        assert LoggerConfig.from_dict(None) == LoggerConfig()
        assert LoggerConfig.from_dict({"level": "error"}).format == "json"

    def test_invalid_types(self):
        with pytest.raises(TypeError):
            LoggerConfig(level=None)
        with pytest.raises(TypeError):
            LoggerConfig(format=1)
