"""Tests for tracing helpers."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from opentelemetry.trace import StatusCode

from src.common.telemetry.tracing import get_tracer, record_exception, trace_span


def make_mock_tracer() -> tuple[MagicMock, MagicMock]:
    tracer = MagicMock()
    span = MagicMock()
    span.is_recording.return_value = True
    tracer.start_as_current_span.return_value.__enter__.return_value = span
    return tracer, span


class TestTraceSpan:
    """Test suite for the trace_span context manager."""

    def test_works_without_sdk(self) -> None:
        """With only the API installed spans are no-ops."""
        with trace_span("entity_lookup.test", {"key": "value"}) as span:
            span.set_attribute("other", 1)

    def test_sets_attributes(self) -> None:
        tracer, span = make_mock_tracer()

        with patch("src.common.telemetry.tracing.get_tracer", return_value=tracer):
            with trace_span("entity_lookup.resolve", {"entity.source": "Widget"}):
                pass

        tracer.start_as_current_span.assert_called_once()
        assert tracer.start_as_current_span.call_args.args[0] == "entity_lookup.resolve"
        span.set_attributes.assert_called_once_with({"entity.source": "Widget"})

    def test_records_and_reraises(self) -> None:
        tracer, span = make_mock_tracer()
        error = LookupError("boom")

        with patch("src.common.telemetry.tracing.get_tracer", return_value=tracer):
            with pytest.raises(LookupError):
                with trace_span("entity_lookup.resolve"):
                    raise error

        span.record_exception.assert_called_once_with(error)
        status = span.set_status.call_args.args[0]
        assert status.status_code == StatusCode.ERROR


class TestRecordException:
    """Test suite for record_exception."""

    def test_skips_non_recording_span(self) -> None:
        span = MagicMock()
        span.is_recording.return_value = False

        record_exception(ValueError("x"), span)

        span.record_exception.assert_not_called()

    def test_uses_current_span_by_default(self) -> None:
        # Current span is the invalid no-op span outside any trace
        record_exception(ValueError("x"))


def test_get_tracer_returns_tracer() -> None:
    assert hasattr(get_tracer(), "start_as_current_span")
