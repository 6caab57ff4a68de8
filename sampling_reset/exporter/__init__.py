"""Exporters for delivering connection spans to backends."""

from sampling_reset.exporter.console_exporter import ConsoleExporter
from sampling_reset.exporter.otlp_exporter import create_otlp_exporter

__all__ = ["ConsoleExporter", "create_otlp_exporter"]
