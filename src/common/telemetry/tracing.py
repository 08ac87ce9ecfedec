"""
Tracing Utilities.

Thin helpers over the OpenTelemetry API. Spans are no-ops unless the
host application installs an SDK tracer provider.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

logger = logging.getLogger(__name__)

TRACER_NAME = "entity-lookup"


def get_tracer(name: str = TRACER_NAME) -> trace.Tracer:
    """Get a tracer from the globally configured provider."""
    return trace.get_tracer(name)


def record_exception(exception: BaseException, span: Any = None) -> None:
    """
    Record an exception on the current or specified span.

    Args:
        exception: The exception to record
        span: Optional span (uses current span if not provided)
    """
    if span is None:
        span = trace.get_current_span()

    if span.is_recording():
        span.record_exception(exception)
        span.set_status(Status(StatusCode.ERROR, str(exception)))


@contextmanager
def trace_span(
    name: str,
    attributes: dict[str, Any] | None = None,
) -> Generator[trace.Span, None, None]:
    """
    Context manager for creating a traced span.

    Args:
        name: Span name (e.g., "entity_lookup.resolve")
        attributes: Optional initial span attributes

    Yields:
        The active span

    Example:
        with trace_span("entity_lookup.resolve", {"entity.source": source}) as span:
            entity = await repository.find_by_slug(slug)
            span.set_attribute("entity.found", entity is not None)
    """
    tracer = get_tracer()

    with tracer.start_as_current_span(
        name,
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        if attributes:
            span.set_attributes(attributes)
        try:
            yield span
        except Exception as e:
            record_exception(e, span)
            raise
