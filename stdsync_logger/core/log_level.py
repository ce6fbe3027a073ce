"""
Log level enumeration and threshold resolution

Severity levels used for routing, plus the options a configured
level string resolves to.
"""

from enum import Enum, IntEnum
from typing import Any, Dict, Optional


# Reserved key identifying the severity within a key/value sequence
LEVEL_KEY = "level"


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Ordered DEBUG < INFO < WARN < ERROR for filtering purposes.
    """

    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages

    def __str__(self) -> str:
        """String representation of log level."""
        return self.label

    @property
    def label(self) -> str:
        """Lowercase name, used in records and as the counter label."""
        return self.name.lower()

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level_str = level_str.strip().upper()
        if level_str in cls.__members__:
            return cls[level_str]
        raise ValueError(f"Invalid log level: {level_str}")

    @classmethod
    def from_value(cls, value: Any) -> Optional["LogLevel"]:
        """
        Return value if it is a recognized level, None otherwise.

        Plain strings and integers are not recognized, only members.
        """
        if isinstance(value, cls):
            return value
        return None


class LevelOption(Enum):
    """
    Minimum severity a destination accepts.

    The value is the lowest allowed level, or None when nothing is allowed.
    """

    ALLOW_NONE = None
    ALLOW_ALL = 0
    ALLOW_DEBUG = int(LogLevel.DEBUG)
    ALLOW_INFO = int(LogLevel.INFO)
    ALLOW_WARN = int(LogLevel.WARN)
    ALLOW_ERROR = int(LogLevel.ERROR)

    def allows(self, level: LogLevel) -> bool:
        """Check whether level passes this threshold."""
        if self.value is None:
            return False
        return level >= self.value

    @classmethod
    def resolve(cls, level_str: str) -> "LevelOption":
        """
        Resolve a configured level string.

        Matching is case-insensitive and ignores surrounding whitespace.
        Unrecognized strings resolve to ALLOW_ALL so that a misconfigured
        level never hides logs.

        Args:
            level_str: Configured level ("none", "error", "warn", "info",
                       "debug" or anything else)

        Returns:
            Resolved LevelOption
        """
        return _OPTIONS_BY_NAME.get(level_str.strip().lower(), cls.ALLOW_ALL)


_OPTIONS_BY_NAME: Dict[str, LevelOption] = {
    "none": LevelOption.ALLOW_NONE,
    "error": LevelOption.ALLOW_ERROR,
    "warn": LevelOption.ALLOW_WARN,
    "info": LevelOption.ALLOW_INFO,
    "debug": LevelOption.ALLOW_DEBUG,
}
