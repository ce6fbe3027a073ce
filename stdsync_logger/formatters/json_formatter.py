"""
JSON formatter for structured logging

Formats key/value sequences as JSON objects
"""

import json
from enum import Enum
from typing import Any, Dict, Sequence

from stdsync_logger.core.log_entry import MISSING_VALUE
from stdsync_logger.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format key/value sequences as JSON objects.

    Produces one compact JSON object per record. A key repeated later in
    the sequence overwrites the earlier value but keeps its position.
    """

    def __init__(self, indent: int = None, ensure_ascii: bool = False):
        """
        Initialize JSON formatter.

        Args:
            indent: JSON indentation (None for compact, one record per line)
            ensure_ascii: Escape non-ASCII characters
        """
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(self, keyvals: Sequence[Any]) -> str:
        """
        Format key/value sequence as JSON.

        Args:
            keyvals: key1, value1, key2, value2, ...

        Returns:
            JSON string
        """
        record: Dict[str, Any] = {}
        for i in range(0, len(keyvals), 2):
            value = keyvals[i + 1] if i + 1 < len(keyvals) else MISSING_VALUE
            record[self._key(keyvals[i])] = self._value(value)

        return json.dumps(
            record,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            default=str,
        )

    @staticmethod
    def _key(key: Any) -> str:
        if isinstance(key, str):
            return key
        return str(key)

    @staticmethod
    def _value(value: Any) -> Any:
        # Enums and exceptions render as their text, not their payload
        if isinstance(value, (Enum, BaseException)):
            return str(value)
        return value

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"


_FORMATTERS = {
    "json": JSONFormatter,
}


def formatter_for(format_name: str) -> BaseFormatter:
    """
    Return the formatter for a configured format name.

    JSON is the only encoding, so every name, including unknown ones,
    yields a JSONFormatter.

    Args:
        format_name: Configured format, e.g. "json"

    Returns:
        Formatter instance
    """
    factory = _FORMATTERS.get((format_name or "").strip().lower(), JSONFormatter)
    return factory()
