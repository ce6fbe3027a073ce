"""Writers module - Synchronized output sinks"""

from stdsync_logger.writers.sync_writer import SyncWriter
from stdsync_logger.writers.registry import StdWriterRegistry, default_registry

__all__ = ["SyncWriter", "StdWriterRegistry", "default_registry"]
