"""Utility functions for sampling-reset."""

from sampling_reset.utils.helpers import (
    get_duration_ns,
    format_trace_id,
    format_span_id,
)

__all__ = [
    "get_duration_ns",
    "format_trace_id",
    "format_span_id",
]
