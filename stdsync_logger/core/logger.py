"""
Logger classes - severity routing and instrumentation

RoutingLogger sends each entry to the destination registered for its
severity and counts entries per severity.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Mapping, Optional

from stdsync_logger.core.log_entry import LogEntry
from stdsync_logger.core.log_level import LEVEL_KEY, LogLevel


class Logger(ABC):
    """
    Abstract base class for loggers.

    Every method returns None on success or the exception raised while
    encoding or writing the entry, it never raises for a dropped entry.
    """

    @abstractmethod
    def log_entry(self, entry: LogEntry) -> Optional[Exception]:
        """Log a structured entry."""
        pass

    @abstractmethod
    def log(self, *keyvals: Any) -> Optional[Exception]:
        """Log alternating keys and values."""
        pass

    @abstractmethod
    def debug(self, *keyvals: Any) -> Optional[Exception]:
        """Log debug entry."""
        pass

    @abstractmethod
    def info(self, *keyvals: Any) -> Optional[Exception]:
        """Log info entry."""
        pass

    @abstractmethod
    def warn(self, *keyvals: Any) -> Optional[Exception]:
        """Log warning entry."""
        pass

    @abstractmethod
    def error(self, *keyvals: Any) -> Optional[Exception]:
        """Log error entry."""
        pass


class NopLogger(Logger):
    """Logger that writes nothing and counts nothing."""

    def log_entry(self, entry: LogEntry) -> Optional[Exception]:
        return None

    def log(self, *keyvals: Any) -> Optional[Exception]:
        return None

    def debug(self, *keyvals: Any) -> Optional[Exception]:
        return None

    def info(self, *keyvals: Any) -> Optional[Exception]:
        return None

    def warn(self, *keyvals: Any) -> Optional[Exception]:
        return None

    def error(self, *keyvals: Any) -> Optional[Exception]:
        return None

    def __repr__(self) -> str:
        """String representation."""
        return "NopLogger()"


class RoutingLogger(Logger):
    """
    Routes entries to a destination per severity.

    Every public method calls _route directly so that the caller frame
    sits at the same stack depth for all of them.

    Thread Safety:
        The destination map is read-only after construction. Sinks and
        counters synchronize themselves.

    Example:
        logger = RoutingLogger(
            "orders",
            {LogLevel.ERROR: err_appender, LogLevel.INFO: out_appender},
            counter=InMemoryCounter()
        )
        logger.log("level", LogLevel.INFO, "order_id", 42)
        logger.error("msg", "payment declined")
    """

    def __init__(
        self,
        name: str,
        destinations: Mapping[LogLevel, Any],
        counter: Optional[Any] = None
    ):
        """
        Initialize routing logger.

        Args:
            name: Logical source name added to every routed entry
            destinations: Destination appender per severity
            counter: Optional object with increment(label)
        """
        self._name = name
        self._destinations = MappingProxyType(dict(destinations))
        self._counter = counter

    @property
    def name(self) -> str:
        """Logical source name."""
        return self._name

    @property
    def destinations(self) -> Mapping[LogLevel, Any]:
        """Read-only destination map."""
        return self._destinations

    @property
    def counter(self) -> Optional[Any]:
        """Counter incremented per severity, if any."""
        return self._counter

    def log_entry(self, entry: LogEntry) -> Optional[Exception]:
        """
        Route a structured entry.

        Args:
            entry: Log entry; dropped when it has no severity

        Returns:
            None, or the destination's encoding or write failure
        """
        return self._route(entry)

    def log(self, *keyvals: Any) -> Optional[Exception]:
        """
        Route alternating keys and values.

        The severity is the value paired with LEVEL_KEY and must be a
        LogLevel member, otherwise the entry is dropped.

        Returns:
            None, or the destination's encoding or write failure
        """
        return self._route(LogEntry.from_keyvals(*keyvals))

    def debug(self, *keyvals: Any) -> Optional[Exception]:
        """Route entry at DEBUG."""
        return self._route(LogEntry.from_keyvals(LEVEL_KEY, LogLevel.DEBUG, *keyvals))

    def info(self, *keyvals: Any) -> Optional[Exception]:
        """Route entry at INFO."""
        return self._route(LogEntry.from_keyvals(LEVEL_KEY, LogLevel.INFO, *keyvals))

    def warn(self, *keyvals: Any) -> Optional[Exception]:
        """Route entry at WARN."""
        return self._route(LogEntry.from_keyvals(LEVEL_KEY, LogLevel.WARN, *keyvals))

    def error(self, *keyvals: Any) -> Optional[Exception]:
        """Route entry at ERROR."""
        return self._route(LogEntry.from_keyvals(LEVEL_KEY, LogLevel.ERROR, *keyvals))

    def _route(self, entry: LogEntry) -> Optional[Exception]:
        severity = entry.severity
        if severity is None:
            return None

        # Counted whether or not a destination exists
        if self._counter is not None:
            self._counter.increment(severity.label)

        target = self._destinations.get(severity)
        if target is None:
            return None

        return target.log_entry(entry.with_logger(self._name))

    def __repr__(self) -> str:
        """String representation."""
        levels = [level.label for level in self._destinations]
        return f"RoutingLogger(name={self._name!r}, destinations={levels})"
