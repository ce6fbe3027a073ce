"""
Prometheus counter implementation

Counts log entries per severity with the prometheus_client library.
"""

from __future__ import annotations
from typing import Any, Optional

from stdsync_logger.monitoring.counter import CounterRegistrationError

# Optional dependency
try:
    from prometheus_client import Counter, REGISTRY
    HAS_PROMETHEUS = True
except ImportError:
    HAS_PROMETHEUS = False
    Counter = None
    REGISTRY = None

# Label carrying the severity name
LEVEL_LABEL = "level"


class PrometheusCounter:
    """
    Count log entries per severity in Prometheus.

    Requires prometheus_client package:
        pip install prometheus-client

    Example:
        from stdsync_logger.monitoring import PrometheusCounter

        counter = PrometheusCounter.register(
            "entries_total",
            "Number of log entries for each severity level.",
            namespace="myapp",
            subsystem="logger_orders"
        )

        # Metric available:
        # myapp_logger_orders_entries_total{level="error"}
    """

    def __init__(self, counter: Any):
        """
        Initialize Prometheus counter.

        Args:
            counter: prometheus_client.Counter with a single "level" label

        Raises:
            ImportError: If prometheus_client is not installed
        """
        if not HAS_PROMETHEUS:
            raise ImportError(
                "prometheus_client not installed. "
                "Install with: pip install prometheus-client"
            )

        self._counter = counter

    @classmethod
    def register(
        cls,
        name: str,
        documentation: str,
        namespace: str = "",
        subsystem: str = "",
        registry=None
    ) -> "PrometheusCounter":
        """
        Create and register a per-severity counter.

        Args:
            name: Metric name
            documentation: Metric help text
            namespace: Metric name prefix
            subsystem: Metric name infix
            registry: Optional custom registry (uses default if None)

        Returns:
            New PrometheusCounter

        Raises:
            ImportError: If prometheus_client is not installed
            CounterRegistrationError: If the metric is already registered
        """
        if not HAS_PROMETHEUS:
            raise ImportError(
                "prometheus_client not installed. "
                "Install with: pip install prometheus-client"
            )

        try:
            counter = Counter(
                name,
                documentation,
                [LEVEL_LABEL],
                namespace=namespace,
                subsystem=subsystem,
                registry=registry or REGISTRY
            )
        except ValueError as e:
            full_name = "_".join(part for part in (namespace, subsystem, name) if part)
            raise CounterRegistrationError(
                f"failed to register counter '{full_name}', {e}"
            ) from e

        return cls(counter)

    @property
    def metric(self) -> Any:
        """Underlying prometheus_client.Counter."""
        return self._counter

    def increment(self, label: str) -> None:
        """
        Add one to the series for label.

        Args:
            label: Severity name, e.g. "error"
        """
        self._counter.labels(**{LEVEL_LABEL: label}).inc()

    def __repr__(self) -> str:
        """String representation."""
        return f"PrometheusCounter(metric={self._counter!r})"


def register_or_none(
    name: str,
    documentation: str,
    namespace: str = "",
    subsystem: str = "",
    registry=None
) -> Optional[PrometheusCounter]:
    """
    Register a counter, or return None if the name is already taken.

    Lets a second logger with the same counter identity run without
    instrumentation instead of failing at construction.
    """
    try:
        return PrometheusCounter.register(
            name,
            documentation,
            namespace=namespace,
            subsystem=subsystem,
            registry=registry
        )
    except CounterRegistrationError:
        return None
