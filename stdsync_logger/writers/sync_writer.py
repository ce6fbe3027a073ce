"""Synchronized stream writer"""

import threading
from typing import TextIO


class SyncWriter:
    """
    Write records to a text stream, one whole record at a time.

    Thread Safety:
        Each write holds an internal lock, so records written from
        different threads never interleave.
    """

    def __init__(self, stream: TextIO):
        """
        Initialize sync writer.

        Args:
            stream: Output stream (e.g. sys.stdout)
        """
        self.stream = stream
        self._lock = threading.Lock()

    def write(self, record: str) -> None:
        """
        Write one record followed by a newline and flush.

        Raises:
            OSError: If the stream fails
            ValueError: If the stream is closed
        """
        with self._lock:
            self.stream.write(record + "\n")
            self.stream.flush()

    def flush(self):
        """Flush stream."""
        with self._lock:
            self.stream.flush()

    def __repr__(self) -> str:
        """String representation."""
        return f"SyncWriter(stream={getattr(self.stream, 'name', self.stream)!r})"
