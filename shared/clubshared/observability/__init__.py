"""
clubshared Observability Module

Optional validation metrics for the service embedding this library.
Completely disabled unless ENABLE_METRICS=true in environment.

Zero-cost when disabled (all calls no-op, prometheus_client never imported).
"""
import os

# Feature flag - controls entire module behavior
ENABLED = os.getenv("ENABLE_METRICS", "false").lower() == "true"


def track_counter(name: str, description: str, labels: dict = None):
    """
    Increment a counter metric.

    Examples:
        track_counter("clubshared_validations_total", "Payloads validated",
                      {"schema": "login", "outcome": "accepted"})

    Args:
        name: Metric name
        description: Human-readable description
        labels: Optional label dict for metric dimensions

    No-op if ENABLE_METRICS != true
    """
    if not ENABLED:
        return

    from .prometheus import increment_counter
    increment_counter(name, description, labels or {})


def track_histogram(name: str, description: str, value: float, labels: dict = None):
    """
    Record a histogram observation (for timing, sizes, etc.).

    No-op if ENABLE_METRICS != true
    """
    if not ENABLED:
        return

    from .prometheus import observe_histogram
    observe_histogram(name, description, value, labels or {})


def observability_enabled() -> bool:
    """Check if observability is enabled"""
    return ENABLED


__all__ = [
    "track_counter",
    "track_histogram",
    "observability_enabled",
    "ENABLED",
]
