"""Helper functions for OpenTelemetry span formatting."""

from __future__ import annotations

from typing import Optional

from opentelemetry.sdk.trace import ReadableSpan


def get_duration_ns(span: ReadableSpan) -> Optional[int]:
    """
    Get span duration in nanoseconds.

    Returns:
        Duration in nanoseconds, or None if span hasn't ended
    """
    if span.end_time is None or span.start_time is None:
        return None
    return span.end_time - span.start_time


def format_trace_id(trace_id: int) -> str:
    """Format an OTel trace_id as a 32-character hex string."""
    return format(trace_id, '032x')


def format_span_id(span_id: int) -> str:
    """Format an OTel span_id as a 16-character hex string."""
    return format(span_id, '016x')
