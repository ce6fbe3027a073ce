#!/usr/bin/env python3
"""Basic usage example"""

from stdsync_logger import LEVEL_KEY, LoggerBuilder, LoggerConfig, LogLevel, create_logger
from stdsync_logger.monitoring import InMemoryCounter

def main():
    counter = InMemoryCounter()

    # Errors go to stderr, everything else at or above "info" to stdout
    logger = create_logger("example", counter, LoggerConfig(format="json", level="info"))

    logger.log(LEVEL_KEY, LogLevel.INFO, "msg", "Application started")
    logger.debug("msg", "This is debug")     # filtered out
    logger.warn("msg", "This is warning")
    logger.error("msg", "This is error", "code", 500)
    logger.log("msg", "No level, dropped")

    # Same streams, built with the builder pattern
    audit = (LoggerBuilder()
        .with_name("audit")
        .with_level("debug")
        .with_counter(counter)
        .build())
    audit.debug("msg", "Audit trail enabled")

    print(counter.snapshot())

if __name__ == "__main__":
    main()
