"""Logger construction: create_logger and the builder pattern"""

from typing import Any, Dict, Optional, Union

from stdsync_logger.core.appender import (
    CALLER_DEPTH,
    CALLER_KEY,
    TIMESTAMP_KEY,
    FilteredAppender,
    StreamAppender,
    caller,
    timestamp_utc,
)
from stdsync_logger.core.log_level import LogLevel
from stdsync_logger.core.logger import Logger, NopLogger, RoutingLogger
from stdsync_logger.core.logger_config import LoggerConfig
from stdsync_logger.filters.level_filter import LevelFilter
from stdsync_logger.formatters.json_formatter import formatter_for
from stdsync_logger.writers.registry import StdWriterRegistry, default_registry


def create_logger(
    name: str,
    counter: Optional[Any] = None,
    config: Optional[LoggerConfig] = None,
    registry: Optional[StdWriterRegistry] = None
) -> Logger:
    """
    Create a logger routing errors to stderr and the rest to stdout.

    Args:
        name: Logical source name added to every record as "logger"
        counter: Optional object with increment(label), called once per
                 entry with the severity's lowercase name
        config: Logging configuration (default: LoggerConfig.default())
        registry: Shared stream writers (default: default_registry())

    Returns:
        NopLogger when config.level is "none", RoutingLogger otherwise

    Example:
        logger = create_logger("orders", InMemoryCounter(), LoggerConfig(level="warn"))
        logger.error("msg", "payment declined")
    """
    config = config or LoggerConfig.default()

    # Checked before any writer is created
    if config.is_level_none:
        return NopLogger()

    option = config.level_option
    out_writer, err_writer = (registry or default_registry()).writers()
    formatter = formatter_for(config.format)

    out_appender = FilteredAppender(
        StreamAppender(out_writer, formatter, stamps=[(TIMESTAMP_KEY, timestamp_utc)]),
        LevelFilter(option)
    )
    # Errors are never filtered
    err_appender = StreamAppender(
        err_writer,
        formatter,
        stamps=[(TIMESTAMP_KEY, timestamp_utc), (CALLER_KEY, caller(CALLER_DEPTH))]
    )

    destinations: Dict[LogLevel, Any] = {
        LogLevel.ERROR: err_appender,
        LogLevel.WARN: out_appender,
        LogLevel.INFO: out_appender,
        LogLevel.DEBUG: out_appender,
    }

    return RoutingLogger(name, destinations, counter=counter)


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._name = "logger"
        self._counter: Optional[Any] = None
        self._config = LoggerConfig()
        self._registry: Optional[StdWriterRegistry] = None

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._name = name
        return self

    def with_counter(self, counter: Any) -> "LoggerBuilder":
        """Set the per-severity counter."""
        self._counter = counter
        return self

    def with_format(self, format_name: str) -> "LoggerBuilder":
        """Set output format."""
        self._config = LoggerConfig(format=format_name, level=self._config.level)
        return self

    def with_level(self, level: Union[str, LogLevel]) -> "LoggerBuilder":
        """
        Set minimum log level.

        Args:
            level: "none", "error", "warn", "info", "debug", or a LogLevel

        Returns:
            Self for method chaining

        Raises:
            TypeError: If level is not a string or LogLevel
        """
        if isinstance(level, LogLevel):
            level = level.label
        self._config = LoggerConfig(format=self._config.format, level=level)
        return self

    def with_config(self, config: LoggerConfig) -> "LoggerBuilder":
        """Replace format and level with the given configuration."""
        self._config = LoggerConfig(format=config.format, level=config.level)
        return self

    def with_registry(self, registry: StdWriterRegistry) -> "LoggerBuilder":
        """
        Set the shared writer registry.

        Args:
            registry: Registry owning the stdout/stderr writers

        Returns:
            Self for method chaining

        Example:
            registry = StdWriterRegistry()

            orders = LoggerBuilder().with_name("orders").with_registry(registry).build()
            billing = LoggerBuilder().with_name("billing").with_registry(registry).build()
        """
        self._registry = registry
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        return create_logger(
            self._name,
            counter=self._counter,
            config=self._config,
            registry=self._registry
        )
