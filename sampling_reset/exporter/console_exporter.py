"""Console exporter for operator visibility."""

from __future__ import annotations

import sys
from typing import Sequence

from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.sdk.trace.export import SpanExporter, SpanExportResult

from sampling_reset.utils.helpers import format_span_id, format_trace_id, get_duration_ns


class ConsoleExporter(SpanExporter):
    """Prints one summary line per span to stdout (or provided stream)."""

    def __init__(self, stream=None) -> None:
        self.stream = stream or sys.stdout

    def export(self, spans: Sequence[ReadableSpan]) -> SpanExportResult:
        for span in spans:
            context = span.get_span_context()
            line = (
                f"[span] name={span.name} trace_id={format_trace_id(context.trace_id)} "
                f"span_id={format_span_id(context.span_id)} status={span.status.status_code.name} "
                f"duration_ns={get_duration_ns(span)}"
            )
            if span.attributes:
                line += f" attrs={dict(span.attributes)}"
            print(line, file=self.stream)
        return SpanExportResult.SUCCESS

    def shutdown(self) -> None:
        return None

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        return True
