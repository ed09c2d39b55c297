"""
Tests for the optional validation metrics
"""
import pytest
from prometheus_client import REGISTRY

from clubshared import observability
from clubshared.validation import validate


def sample(name, labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


@pytest.fixture
def metrics_enabled(monkeypatch):
    monkeypatch.setattr(observability, "ENABLED", True)
    monkeypatch.delenv("SERVICE_NAME", raising=False)


class TestMetrics:

    def test_disabled_by_default_is_noop(self, monkeypatch):
        monkeypatch.setattr(observability, "ENABLED", False)
        assert observability.observability_enabled() is False
        observability.track_counter("never_registered_total", "unused", {"schema": "x"})
        assert REGISTRY.get_sample_value("never_registered_total", {"service": "clubshared", "schema": "x"}) is None

    def test_rejections_counted(self, metrics_enabled):
        labels = {"service": "clubshared", "schema": "login", "outcome": "rejected"}
        field_labels = {"service": "clubshared", "schema": "login", "field": "email"}
        before = sample("clubshared_validations_total", labels)
        field_before = sample("clubshared_field_errors_total", field_labels)

        validate("login", {"password": "x"})

        assert sample("clubshared_validations_total", labels) == before + 1
        assert sample("clubshared_field_errors_total", field_labels) == field_before + 1

    def test_acceptances_timed(self, metrics_enabled):
        labels = {"service": "clubshared", "schema": "create_post"}
        before = sample("clubshared_validation_seconds_count", labels)

        validate("create_post", {"content": "hello"})

        assert sample("clubshared_validation_seconds_count", labels) == before + 1
        assert sample(
            "clubshared_validations_total",
            {"service": "clubshared", "schema": "create_post", "outcome": "accepted"},
        ) >= 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
