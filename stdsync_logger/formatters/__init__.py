"""
Log formatters module

Provides the record encoders used by stream appenders.
"""

from stdsync_logger.formatters.base_formatter import BaseFormatter
from stdsync_logger.formatters.json_formatter import JSONFormatter, formatter_for

__all__ = [
    "BaseFormatter",
    "JSONFormatter",
    "formatter_for",
]
