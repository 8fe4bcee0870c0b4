"""Infrastructure layer - cross-cutting concerns."""

from local_fs.infrastructure.bootstrap import setup_observability
from local_fs.infrastructure.config import Config, IOConfig, ObservabilityConfig, get_config
from local_fs.infrastructure.logging import setup_logging, get_logger
from local_fs.infrastructure.metrics import setup_metrics, get_metrics, MetricsRegistry
from local_fs.infrastructure.tracing import setup_tracing, get_tracer, operation_span

__all__ = [
    "Config",
    "IOConfig",
    "ObservabilityConfig",
    "get_config",
    "setup_logging",
    "get_logger",
    "setup_metrics",
    "get_metrics",
    "MetricsRegistry",
    "setup_tracing",
    "get_tracer",
    "operation_span",
    "setup_observability",
]
