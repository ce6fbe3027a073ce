"""
Monitoring module for per-severity log counters

Example:
    from stdsync_logger import create_logger
    from stdsync_logger.monitoring import InMemoryCounter, PrometheusCounter

    counter = InMemoryCounter()
    logger = create_logger("orders", counter)
    logger.error("msg", "payment declined")
    print(counter.get("error"))

    # Or export to Prometheus
    counter = PrometheusCounter.register(
        "entries_total",
        "Number of log entries for each severity level.",
        namespace="myapp",
        subsystem="logger_orders"
    )
"""

from stdsync_logger.monitoring.counter import CounterRegistrationError, InMemoryCounter
from stdsync_logger.monitoring.prometheus_counter import (
    HAS_PROMETHEUS,
    PrometheusCounter,
    register_or_none,
)

__all__ = [
    "CounterRegistrationError",
    "InMemoryCounter",
    "PrometheusCounter",
    "register_or_none",
    "HAS_PROMETHEUS",
]
