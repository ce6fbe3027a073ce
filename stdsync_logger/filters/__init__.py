"""
Log filters module

Provides filter implementations for controlling log output.
"""

from stdsync_logger.filters.base_filter import BaseFilter
from stdsync_logger.filters.level_filter import LevelFilter

__all__ = [
    "BaseFilter",
    "LevelFilter",
]
