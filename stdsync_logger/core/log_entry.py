"""
Log entry data structure

A structured, immutable form of a key/value log event.
"""

from dataclasses import dataclass, field, replace
from typing import Any, List, Optional, Sequence, Tuple

from stdsync_logger.core.log_level import LEVEL_KEY, LogLevel

# Value paired with a trailing key that has no value
MISSING_VALUE = "(MISSING)"

# Key added to every routed entry
LOGGER_KEY = "logger"


@dataclass(frozen=True)
class LogEntry:
    """
    Log entry data structure.

    The severity is kept apart from the ordinary fields so that a
    missing or unrecognized severity is simply None. level_position is
    the index among fields where the level pair originally appeared.
    """

    severity: Optional[LogLevel] = None
    fields: Tuple[Tuple[Any, Any], ...] = field(default_factory=tuple)
    logger_name: str = ""
    level_position: int = 0

    def __post_init__(self):
        """Normalize fields to a tuple of pairs."""
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(tuple(p) for p in self.fields))

    @classmethod
    def from_keyvals(cls, *keyvals: Any) -> "LogEntry":
        """
        Create log entry from alternating keys and values.

        The first LEVEL_KEY pair becomes the severity; a value that is
        not a LogLevel leaves the severity unset. Later LEVEL_KEY pairs
        are kept as ordinary fields.

        Args:
            keyvals: key1, value1, key2, value2, ...

        Returns:
            New LogEntry instance
        """
        severity = None
        found = False
        position = 0
        fields: List[Tuple[Any, Any]] = []

        for i in range(0, len(keyvals), 2):
            key = keyvals[i]
            value = keyvals[i + 1] if i + 1 < len(keyvals) else MISSING_VALUE
            if not found and key == LEVEL_KEY:
                found = True
                severity = LogLevel.from_value(value)
                position = len(fields)
                continue
            fields.append((key, value))

        return cls(severity=severity, fields=tuple(fields), level_position=position)

    def with_logger(self, name: str) -> "LogEntry":
        """Return a copy tagged with the logical logger name."""
        return replace(self, logger_name=name)

    def to_keyvals(self, extra: Sequence[Tuple[Any, Any]] = ()) -> List[Any]:
        """
        Flatten to an alternating key/value list.

        Args:
            extra: Pairs placed after the fields and before the logger name

        Returns:
            [*fields, *extra, logger, name] with the level pair back at
            its original position; level and logger pairs are present
            only when set
        """
        keyvals: List[Any] = []
        for index, (key, value) in enumerate(self.fields):
            if index == self.level_position and self.severity is not None:
                keyvals.extend((LEVEL_KEY, self.severity))
            keyvals.extend((key, value))
        if self.severity is not None and self.level_position >= len(self.fields):
            keyvals.extend((LEVEL_KEY, self.severity))
        for key, value in extra:
            keyvals.extend((key, value))
        if self.logger_name:
            keyvals.extend((LOGGER_KEY, self.logger_name))
        return keyvals
