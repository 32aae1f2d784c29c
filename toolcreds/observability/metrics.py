"""Prometheus metrics for toolcreds.

Tracks reconciliation outcomes and latency, credential deletions, and the
tools left unauthorized by each pass.
"""

from prometheus_client import Counter, Histogram

RECONCILE_COUNT = Counter(
    "toolcreds_reconcile_total",
    "Total number of reconciliation passes",
    labelnames=["operation", "kind", "outcome"],
)

RECONCILE_LATENCY = Histogram(
    "toolcreds_reconcile_latency_seconds",
    "Reconciliation pass latency in seconds",
    labelnames=["operation", "kind"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

CREDENTIALS_DELETED = Counter(
    "toolcreds_credentials_deleted_total",
    "Total number of unreferenced credentials deleted",
    labelnames=["kind"],
)

UNAUTHORIZED_TOOLS = Histogram(
    "toolcreds_unauthorized_tools",
    "Tools missing at least one credential per tool info pass",
    labelnames=["kind"],
    buckets=(0, 1, 2, 3, 5, 10, 20, 50),
)

SKIPPED_TOOLS = Counter(
    "toolcreds_skipped_tools_total",
    "Tool references skipped because they were not found",
    labelnames=["kind"],
)


def setup_metrics() -> None:
    """Initialize metrics configuration.

    Called at startup. Currently a no-op as prometheus_client registers
    collectors when they are defined.
    """
    pass
