"""Tracer setup for connection spans."""

from sampling_reset.tracer.provider import (
    TRACER_NAME,
    build_tracer_provider,
    get_tracer,
    shutdown_tracer_provider,
)

__all__ = [
    "TRACER_NAME",
    "build_tracer_provider",
    "get_tracer",
    "shutdown_tracer_provider",
]
