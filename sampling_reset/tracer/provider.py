"""TracerProvider construction for connection spans."""

from __future__ import annotations

import logging
from typing import Optional, TextIO

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource as OTelResource
from opentelemetry.sdk.trace import TracerProvider as OTelTracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SimpleSpanProcessor

from sampling_reset.config import TracingConfig
from sampling_reset.exporter.console_exporter import ConsoleExporter
from sampling_reset.exporter.otlp_exporter import create_otlp_exporter

logger = logging.getLogger(__name__)

TRACER_NAME = "sampling_reset"


def build_tracer_provider(
    config: Optional[TracingConfig] = None,
    console_stream: Optional[TextIO] = None,
) -> trace.TracerProvider:
    """
    Create the provider used by the responder.

    Returns the API's no-op provider when tracing is disabled, so callers
    never need to branch on whether spans are recorded.
    """
    config = config or TracingConfig()
    if not config.enabled:
        return trace.NoOpTracerProvider()

    provider = OTelTracerProvider(
        resource=OTelResource.create({"service.name": config.service_name})
    )
    if config.enable_console:
        provider.add_span_processor(SimpleSpanProcessor(ConsoleExporter(stream=console_stream)))
    if config.endpoint:
        exporter = create_otlp_exporter(endpoint=config.endpoint, api_key=config.api_key)
        provider.add_span_processor(BatchSpanProcessor(exporter))
        logger.info("exporting connection spans to %s", config.endpoint)
    return provider


def get_tracer(provider: Optional[trace.TracerProvider] = None) -> trace.Tracer:
    provider = provider or trace.NoOpTracerProvider()
    return provider.get_tracer(TRACER_NAME)


def shutdown_tracer_provider(provider: trace.TracerProvider) -> None:
    """Flush and stop exporters; no-op providers are left alone."""
    shutdown = getattr(provider, "shutdown", None)
    if shutdown is not None:
        shutdown()
