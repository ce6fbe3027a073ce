"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert an alternating key/value sequence into one
    serialized record, without a trailing newline.
    """

    @abstractmethod
    def format(self, keyvals: Sequence[Any]) -> str:
        """
        Format a key/value sequence into a string.

        Args:
            keyvals: key1, value1, key2, value2, ...

        Returns:
            Serialized record
        """
        pass

    def __call__(self, keyvals: Sequence[Any]) -> str:
        """Allow formatters to be callable."""
        return self.format(keyvals)
