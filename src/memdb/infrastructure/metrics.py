"""Prometheus metrics for memdb."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all memdb metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Statement metrics
        self.statements_total = Counter(
            "memdb_statements_total",
            "Total number of statements executed",
            ["kind", "status"],  # status: success, error
            registry=self._registry,
        )

        self.statement_latency_seconds = Histogram(
            "memdb_statement_latency_seconds",
            "Statement latency from submission to completion in seconds",
            ["kind"],
            buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0),
            registry=self._registry,
        )

        # Storage metrics
        self.tables = Gauge(
            "memdb_tables",
            "Number of tables in the store",
            registry=self._registry,
        )

        self.rows = Gauge(
            "memdb_rows",
            "Number of rows per table",
            ["table"],
            registry=self._registry,
        )

        self.info = Info(
            "memdb",
            "memdb information",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 8001, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up Prometheus metrics server.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    global _metrics
    _metrics = MetricsRegistry(registry)

    from memdb import __version__
    _metrics.info.info({
        "version": __version__,
    })

    start_http_server(port, registry=registry or REGISTRY)

    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
