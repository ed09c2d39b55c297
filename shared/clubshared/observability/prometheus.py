"""
Prometheus Metrics Implementation

Counters and histograms registered lazily on first use in the default
prometheus_client registry. Every metric carries a `service` label taken
from SERVICE_NAME.
"""
import os
import logging
from typing import Dict, Any

from prometheus_client import Counter, Histogram

logger = logging.getLogger(__name__)

_counters: Dict[str, Any] = {}
_histograms: Dict[str, Any] = {}


def _service_name() -> str:
    return os.getenv("SERVICE_NAME", "clubshared")


def increment_counter(name: str, description: str, labels: dict):
    """
    Increment a counter metric.

    Counters only go up (monotonic). Label names are fixed by the first call.
    """
    try:
        if name not in _counters:
            _counters[name] = Counter(
                name,
                description,
                labelnames=['service'] + list(labels.keys()),
            )
            logger.debug(f"Registered counter: {name}")

        _counters[name].labels(service=_service_name(), **labels).inc()

    except Exception as e:
        logger.error(f"Failed to increment counter {name}: {e}")


def observe_histogram(name: str, description: str, value: float, labels: dict):
    """
    Record a histogram observation.

    Histograms track distributions (latency, sizes, etc.).
    """
    try:
        if name not in _histograms:
            _histograms[name] = Histogram(
                name,
                description,
                labelnames=['service'] + list(labels.keys()),
            )
            logger.debug(f"Registered histogram: {name}")

        _histograms[name].labels(service=_service_name(), **labels).observe(value)

    except Exception as e:
        logger.error(f"Failed to observe histogram {name}: {e}")
