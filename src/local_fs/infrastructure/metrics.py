"""Prometheus metrics for the local filesystem layer."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all filesystem layer metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        self.operations_total = Counter(
            "fs_operations_total",
            "Total number of filesystem operations",
            ["operation", "status"],  # status: success, failure
            registry=self._registry,
        )

        self.operation_failures_total = Counter(
            "fs_operation_failures_total",
            "Total failed filesystem operations by failure kind",
            ["operation", "kind"],
            registry=self._registry,
        )

        self.operation_latency_seconds = Histogram(
            "fs_operation_latency_seconds",
            "Filesystem operation latency in seconds",
            ["operation"],
            buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0),
            registry=self._registry,
        )

        self.bytes_read_total = Counter(
            "fs_bytes_read_total",
            "Total bytes returned by read operations",
            registry=self._registry,
        )

        self.bytes_written_total = Counter(
            "fs_bytes_written_total",
            "Total bytes written by write operations",
            registry=self._registry,
        )

        self.info = Info(
            "local_fs",
            "Local filesystem layer information",
            registry=self._registry,
        )

    def record(
        self,
        operation: str,
        duration_seconds: float,
        failure_kind: str | None = None,
    ) -> None:
        """Record the outcome of one operation."""
        status = "success" if failure_kind is None else "failure"
        self.operations_total.labels(operation=operation, status=status).inc()
        self.operation_latency_seconds.labels(operation=operation).observe(duration_seconds)
        if failure_kind is not None:
            self.operation_failures_total.labels(operation=operation, kind=failure_kind).inc()


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 8001, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up Prometheus metrics server.

    Without a custom registry the global MetricsRegistry is reused, so
    adapters created before this call keep reporting to the served metrics.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    global _metrics
    if registry is None:
        _metrics = get_metrics()
    else:
        _metrics = MetricsRegistry(registry)

    from local_fs import __version__
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
