"""OpenTelemetry spans around filesystem operations.

Without setup_tracing() the global no-op tracer provider is used, so spans
cost almost nothing and are never exported.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter


_tracer: trace.Tracer | None = None


def setup_tracing(
    service_name: str = "local_fs",
    otlp_endpoint: str | None = None,
    console_export: bool = False,
) -> trace.Tracer:
    """
    Install an SDK tracer provider and return the layer's tracer.

    Args:
        service_name: Reported as service.name on every span
        otlp_endpoint: gRPC collector address; spans are only shipped when set
        console_export: Also print finished spans, for local debugging

    Returns:
        The tracer used for filesystem spans
    """
    global _tracer

    from local_fs import __version__

    provider = TracerProvider(
        resource=Resource.create(
            {"service.name": service_name, "service.version": __version__}
        )
    )

    if otlp_endpoint:
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True))
        )
    if console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    _tracer = trace.get_tracer(service_name)
    return _tracer


def get_tracer() -> trace.Tracer:
    """Return the configured tracer, falling back to the global provider's."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer("local_fs")
    return _tracer


@contextmanager
def operation_span(
    operation: str,
    path: str,
    target: str | None = None,
) -> Generator[trace.Span, None, None]:
    """
    Open the span `fs.<operation>` tagged with the paths involved.

    Args:
        operation: Snake-case operation name
        path: Primary path (source for two-path operations)
        target: Destination path for copy, rename and link operations

    Yields:
        The active span, for failure attributes
    """
    with get_tracer().start_as_current_span(f"fs.{operation}") as span:
        span.set_attribute("fs.path", path)
        if target is not None:
            span.set_attribute("fs.target", target)
        yield span
