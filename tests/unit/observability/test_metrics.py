"""Tests for Prometheus metrics."""

from prometheus_client import REGISTRY

from toolcreds.observability.metrics import (
    CREDENTIALS_DELETED,
    RECONCILE_COUNT,
    RECONCILE_LATENCY,
    SKIPPED_TOOLS,
    UNAUTHORIZED_TOOLS,
    setup_metrics,
)


class TestMetrics:
    """Tests for metric definitions."""

    def test_reconcile_counter_increments(self) -> None:
        labels = {"operation": "set_tool_info_status", "kind": "Agent", "outcome": "success"}
        before = REGISTRY.get_sample_value("toolcreds_reconcile_total", labels) or 0.0

        RECONCILE_COUNT.labels(**labels).inc()

        assert REGISTRY.get_sample_value("toolcreds_reconcile_total", labels) == before + 1

    def test_latency_histogram_observes(self) -> None:
        RECONCILE_LATENCY.labels(operation="remove_unneeded_credentials", kind="Workflow").observe(0.02)

    def test_unauthorized_histogram_is_labelled_by_kind_only(self) -> None:
        before = REGISTRY.get_sample_value(
            "toolcreds_unauthorized_tools_count", {"kind": "Workflow"}
        ) or 0.0

        UNAUTHORIZED_TOOLS.labels(kind="Workflow").observe(3)

        assert UNAUTHORIZED_TOOLS._labelnames == ("kind",)
        assert (
            REGISTRY.get_sample_value("toolcreds_unauthorized_tools_count", {"kind": "Workflow"})
            == before + 1
        )

    def test_counters_exist(self) -> None:
        assert CREDENTIALS_DELETED is not None
        assert SKIPPED_TOOLS is not None

    def test_setup_metrics_noop(self) -> None:
        setup_metrics()
