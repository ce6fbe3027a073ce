"""
Core module for logger system

This module contains the fundamental classes:
- RoutingLogger: Routes entries to stdout/stderr by severity
- create_logger / LoggerBuilder: Logger construction
- LogEntry: Log entry data structure
- LogLevel / LevelOption: Severity levels and thresholds
- LoggerConfig: Configuration management
"""

from stdsync_logger.core.log_level import LEVEL_KEY, LevelOption, LogLevel
from stdsync_logger.core.log_entry import LogEntry
from stdsync_logger.core.logger_config import LoggerConfig, configuration
from stdsync_logger.core.logger import Logger, NopLogger, RoutingLogger
from stdsync_logger.core.logger_builder import LoggerBuilder, create_logger

__all__ = [
    "LEVEL_KEY",
    "LevelOption",
    "LogLevel",
    "LogEntry",
    "LoggerConfig",
    "configuration",
    "Logger",
    "NopLogger",
    "RoutingLogger",
    "LoggerBuilder",
    "create_logger",
]
