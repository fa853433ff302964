"""Tests for Prometheus metrics."""

from collections.abc import Generator

import pytest
from prometheus_client import REGISTRY

from switchboard.observability.metrics import (
    ENGINE_FAILURES,
    RECOGNITION_LATENCY,
    RECOGNITIONS,
    ROUTING_DECISIONS,
    metrics_enabled,
    setup_metrics,
)


@pytest.fixture(autouse=True)
def enable_metrics() -> Generator[None, None, None]:
    """Restore the default metrics switch after each test."""
    setup_metrics(enabled=True)
    yield
    setup_metrics(enabled=True)


class TestRecognitions:
    """Tests for RECOGNITIONS counter."""

    def test_counter_increment(self) -> None:
        """Should increment counter with outcome label."""
        before = REGISTRY.get_sample_value(
            "switchboard_recognitions_total", {"outcome": "success"}
        ) or 0.0

        RECOGNITIONS.labels(outcome="success").inc()

        after = REGISTRY.get_sample_value("switchboard_recognitions_total", {"outcome": "success"})
        assert after == before + 1


class TestRecognitionLatency:
    """Tests for RECOGNITION_LATENCY histogram."""

    def test_histogram_observe(self) -> None:
        """Should observe latency values."""
        RECOGNITION_LATENCY.observe(0.015)
        # Should not raise


class TestEngineFailures:
    """Tests for ENGINE_FAILURES counter."""

    def test_counter_with_reason_label(self) -> None:
        """Should accept engine and reason labels."""
        ENGINE_FAILURES.labels(engine="llm", reason="timeout").inc()
        # Should not raise


class TestRoutingDecisions:
    """Tests for ROUTING_DECISIONS counter."""

    def test_counter_with_labels(self) -> None:
        """Should accept escalation type and priority labels."""
        ROUTING_DECISIONS.labels(escalation_type="immediate", priority="critical").inc()
        # Should not raise


class TestSetupMetrics:
    """Tests for setup_metrics function."""

    def test_enabled_by_default(self) -> None:
        assert metrics_enabled() is True

    def test_can_be_disabled(self) -> None:
        setup_metrics(enabled=False)
        assert metrics_enabled() is False
