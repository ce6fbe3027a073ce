"""
Registry of the shared standard stream writers

Owns exactly one SyncWriter per physical stream so that every logger
writing to stdout or stderr shares the same lock.
"""

from __future__ import annotations

import sys
import threading
from typing import Optional, TextIO, Tuple

from stdsync_logger.writers.sync_writer import SyncWriter


class StdWriterRegistry:
    """
    Lazily creates and holds the stdout and stderr writers.

    Writers are created on the first call to writers(). Concurrent first
    callers block until creation completes, and all callers observe the
    same two instances afterwards.

    Thread Safety:
        All methods are thread-safe for concurrent access.

    Example:
        registry = StdWriterRegistry()
        out_writer, err_writer = registry.writers()
    """

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None
    ):
        """
        Initialize writer registry.

        Args:
            stdout: Standard output stream (default: sys.stdout at first use)
            stderr: Standard error stream (default: sys.stderr at first use)
        """
        self._stdout_stream = stdout
        self._stderr_stream = stderr
        self._stdout: Optional[SyncWriter] = None
        self._stderr: Optional[SyncWriter] = None
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        """Whether the writers have been created."""
        return self._stderr is not None

    def writers(self) -> Tuple[SyncWriter, SyncWriter]:
        """
        Get the shared writers, creating them on first use.

        Returns:
            (stdout writer, stderr writer)
        """
        if not self.initialized:
            with self._lock:
                if not self.initialized:
                    self._stdout = SyncWriter(self._stdout_stream or sys.stdout)
                    # stderr last: initialized checks it
                    self._stderr = SyncWriter(self._stderr_stream or sys.stderr)
        return self._stdout, self._stderr

    @property
    def stdout(self) -> SyncWriter:
        """Shared standard output writer."""
        return self.writers()[0]

    @property
    def stderr(self) -> SyncWriter:
        """Shared standard error writer."""
        return self.writers()[1]

    def __repr__(self) -> str:
        """String representation."""
        return f"StdWriterRegistry(initialized={self.initialized})"


_default_registry: Optional[StdWriterRegistry] = None
_default_registry_lock = threading.Lock()


def default_registry() -> StdWriterRegistry:
    """
    Get the process-wide registry used when none is passed explicitly.

    Returns:
        The same StdWriterRegistry on every call
    """
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = StdWriterRegistry()
    return _default_registry
