"""One-call setup of logging, tracing and metrics from configuration."""

from __future__ import annotations

from local_fs.infrastructure.config import Config, get_config
from local_fs.infrastructure.logging import get_logger, setup_logging
from local_fs.infrastructure.metrics import setup_metrics
from local_fs.infrastructure.tracing import setup_tracing


def setup_observability(config: Config | None = None) -> Config:
    """
    Configure logging, tracing and metrics for the process.

    Tracing is exported only when an OTLP endpoint is configured, and the
    metrics server is started only when metrics are enabled.

    Args:
        config: Configuration to apply (default from environment)

    Returns:
        The configuration that was applied
    """
    config = config or get_config()
    observability = config.observability

    setup_logging(level=observability.log_level, log_format=observability.log_format)

    if observability.otel_endpoint:
        setup_tracing(
            service_name=observability.otel_service_name,
            otlp_endpoint=observability.otel_endpoint,
        )

    if observability.metrics_enabled:
        setup_metrics(port=observability.metrics_port)

    get_logger(__name__).info(
        "local_fs_observability_configured",
        log_level=observability.log_level,
        tracing=observability.otel_endpoint is not None,
        metrics=observability.metrics_enabled,
    )

    return config
