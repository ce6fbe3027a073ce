"""
Per-severity counters

A counter is any object with an increment(label) method. The routing
logger calls it once per leveled entry with the severity's lowercase name.
"""

from __future__ import annotations
import threading
from typing import Dict


class CounterRegistrationError(ValueError):
    """Raised when a counter collides with one already registered."""


class InMemoryCounter:
    """
    Count increments per label in memory.

    Thread Safety:
        All methods are thread-safe for concurrent access.
    """

    def __init__(self):
        self._counts: Dict[str, int] = {}
        self._lock = threading.Lock()

    def increment(self, label: str) -> None:
        """
        Add one to the count for label.

        Args:
            label: Severity name, e.g. "error"
        """
        with self._lock:
            self._counts[label] = self._counts.get(label, 0) + 1

    def get(self, label: str) -> int:
        """Current count for label (0 if never incremented)."""
        with self._lock:
            return self._counts.get(label, 0)

    @property
    def total(self) -> int:
        """Sum of all counts."""
        with self._lock:
            return sum(self._counts.values())

    def snapshot(self) -> Dict[str, int]:
        """
        Get a copy of all counts.

        Returns:
            Dictionary of label to count
        """
        with self._lock:
            return dict(self._counts)

    def reset(self) -> None:
        """Reset all counts."""
        with self._lock:
            self._counts.clear()

    def __repr__(self) -> str:
        """String representation."""
        return f"InMemoryCounter({self.snapshot()})"
