"""
Logger configuration management
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from stdsync_logger.core.log_level import LevelOption

# Default logging output format
DEFAULT_FORMAT = "json"

# Default logging severity level
DEFAULT_LEVEL = "info"


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Attributes:
        format: Output format. Only "json" is meaningful for now, any
                other value falls back to JSON.
        level: Minimum severity for the standard output stream, one of
               "none", "error", "warn", "info", "debug". "none" disables
               the logger entirely, anything unrecognized allows all.
    """

    format: str = DEFAULT_FORMAT
    level: str = DEFAULT_LEVEL

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.format, str):
            raise TypeError("format must be a string")
        if not isinstance(self.level, str):
            raise TypeError("level must be a string")

    @property
    def is_level_none(self) -> bool:
        """Whether the logger is configured not to log anything."""
        return self.level.strip().lower() == "none"

    @property
    def level_option(self) -> LevelOption:
        """Resolved minimum severity threshold."""
        return LevelOption.resolve(self.level)

    def to_dict(self) -> Dict[str, str]:
        """
        Convert configuration to dictionary.

        Returns:
            Dictionary with "format" and "level" keys
        """
        return {"format": self.format, "level": self.level}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "LoggerConfig":
        """
        Create configuration from dictionary.

        Args:
            data: Dictionary with optional "format" and "level" keys

        Returns:
            New LoggerConfig instance, defaults filling missing keys
        """
        data = data or {}
        return cls(
            format=data.get("format", DEFAULT_FORMAT),
            level=data.get("level", DEFAULT_LEVEL),
        )

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()


def configuration() -> LoggerConfig:
    """Return a new instance of the default logging configuration."""
    return LoggerConfig.default()
