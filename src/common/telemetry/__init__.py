"""
Telemetry Module.

Provides OpenTelemetry tracing helpers.

Usage:
    from src.common.telemetry import trace_span

    with trace_span("entity_lookup.resolve", {"entity.source": "Widget"}) as span:
        ...
"""

from src.common.telemetry.tracing import get_tracer, record_exception, trace_span

__all__ = [
    "get_tracer",
    "record_exception",
    "trace_span",
]
