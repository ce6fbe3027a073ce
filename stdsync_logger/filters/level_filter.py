"""
Level-based filter

Filters log entries against a minimum severity threshold
"""

from typing import Union

from stdsync_logger.core.log_entry import LogEntry
from stdsync_logger.core.log_level import LevelOption
from stdsync_logger.filters.base_filter import BaseFilter


class LevelFilter(BaseFilter):
    """
    Filter log entries based on log level.

    Entries without a severity never pass.
    """

    def __init__(self, option: Union[LevelOption, str] = LevelOption.ALLOW_ALL):
        """
        Initialize level filter.

        Args:
            option: Threshold, or a level string resolved with
                    LevelOption.resolve

        Example:
            # Only log WARN and above
            filter = LevelFilter(LevelOption.ALLOW_WARN)

            # Same, from configuration
            filter = LevelFilter("warn")
        """
        if isinstance(option, str):
            option = LevelOption.resolve(option)
        self.option = option

    def should_log(self, entry: LogEntry) -> bool:
        """
        Check if entry's level passes the threshold.

        Args:
            entry: Log entry to check

        Returns:
            True if entry level is allowed, False otherwise
        """
        if entry.severity is None:
            return False
        return self.option.allows(entry.severity)

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(option={self.option.name})"
