"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python StdSync Logger - Structured logging routed to stdout and stderr
by severity, with per-severity counters
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from stdsync_logger.core.log_level import LEVEL_KEY, LevelOption, LogLevel
from stdsync_logger.core.log_entry import LogEntry
from stdsync_logger.core.logger_config import (
    DEFAULT_FORMAT,
    DEFAULT_LEVEL,
    LoggerConfig,
    configuration,
)
from stdsync_logger.core.logger import Logger, NopLogger, RoutingLogger
from stdsync_logger.core.logger_builder import LoggerBuilder, create_logger
from stdsync_logger.writers.registry import StdWriterRegistry, default_registry

# Import submodules (not all classes by default)
from stdsync_logger import filters
from stdsync_logger import formatters
from stdsync_logger import monitoring
from stdsync_logger import writers

__all__ = [
    "LEVEL_KEY",
    "LevelOption",
    "LogLevel",
    "LogEntry",
    "DEFAULT_FORMAT",
    "DEFAULT_LEVEL",
    "LoggerConfig",
    "configuration",
    "Logger",
    "NopLogger",
    "RoutingLogger",
    "LoggerBuilder",
    "create_logger",
    "StdWriterRegistry",
    "default_registry",
    "filters",
    "formatters",
    "monitoring",
    "writers",
]
