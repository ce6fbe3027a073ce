"""
Appenders - destination loggers

An appender encodes a log entry and writes it to one sink, stamping
context values (timestamp, caller) computed at log time.
"""

from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional, Sequence, Tuple

from stdsync_logger.core.log_entry import LogEntry
from stdsync_logger.filters.base_filter import BaseFilter
from stdsync_logger.formatters.base_formatter import BaseFormatter
from stdsync_logger.writers.sync_writer import SyncWriter

# Stamp keys
TIMESTAMP_KEY = "ts"
CALLER_KEY = "caller"

# Frames between the caller valuer and the code calling a public
# RoutingLogger method: valuer, StreamAppender._stamps,
# StreamAppender.log_entry, RoutingLogger._route, RoutingLogger.<method>
CALLER_DEPTH = 5

Valuer = Callable[[], Any]


def timestamp_utc() -> str:
    """Current UTC time in RFC 3339 format with microseconds."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def caller(depth: int) -> Valuer:
    """
    Create a valuer returning the "file:line" of a calling frame.

    Args:
        depth: Number of frames above the valuer itself

    Returns:
        Callable producing the source location, or "unknown" when the
        stack is not that deep
    """
    def value() -> str:
        try:
            frame = sys._getframe(depth)
        except ValueError:
            return "unknown"
        return f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"

    return value


class StreamAppender:
    """
    Encode entries and write them to a SyncWriter.

    Example:
        appender = StreamAppender(
            registry.stderr,
            JSONFormatter(),
            stamps=[("ts", timestamp_utc), ("caller", caller(CALLER_DEPTH))]
        )
    """

    def __init__(
        self,
        writer: SyncWriter,
        formatter: BaseFormatter,
        stamps: Optional[Sequence[Tuple[str, Valuer]]] = None
    ):
        """
        Initialize stream appender.

        Args:
            writer: Destination sink
            formatter: Record encoder
            stamps: Ordered (key, valuer) pairs added to every record
        """
        self.writer = writer
        self.formatter = formatter
        self.stamps = tuple(stamps or ())

    def log_entry(self, entry: LogEntry) -> Optional[Exception]:
        """
        Encode and write one entry.

        Args:
            entry: Log entry to write

        Returns:
            None on success, the encoder's or the sink's exception if
            the entry could not be written
        """
        keyvals = entry.to_keyvals(self._stamps())
        try:
            record = self.formatter.format(keyvals)
        except Exception as e:
            # Any encoding failure is returned, as write failures are
            return e
        try:
            self.writer.write(record)
        except (OSError, ValueError) as e:
            return e
        return None

    def _stamps(self) -> List[Tuple[str, Any]]:
        # Plain loop: a comprehension adds a frame on some interpreters
        values = []
        for key, valuer in self.stamps:
            values.append((key, valuer()))
        return values

    def __repr__(self) -> str:
        """String representation."""
        keys = [key for key, _ in self.stamps]
        return f"StreamAppender(writer={self.writer!r}, stamps={keys})"


class FilteredAppender:
    """
    Pass entries to an inner appender only when all filters accept them.
    """

    def __init__(self, inner: Any, *filters: BaseFilter):
        self.inner = inner
        self.filters = filters

    def log_entry(self, entry: LogEntry) -> Optional[Exception]:
        """Write entry through the inner appender if every filter allows it."""
        for f in self.filters:
            if not f.should_log(entry):
                return None
        return self.inner.log_entry(entry)

    def __repr__(self) -> str:
        """String representation."""
        return f"FilteredAppender(inner={self.inner!r}, filters={list(self.filters)})"
