"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import signal
import sys
from typing import Any, Dict, List, Optional

from sampling_reset import __version__
from sampling_reset.config import load_config
from sampling_reset.errors import BindError, ConfigError
from sampling_reset.log import configure_logging
from sampling_reset.server import Responder
from sampling_reset.tracer import build_tracer_provider, shutdown_tracer_provider

logger = logging.getLogger("sampling_reset.cli")

EXIT_OK = 0
EXIT_BIND_FAILED = 1
EXIT_BAD_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sampling-reset",
        description="Reset tracing sampling to the default probabilistic strategy "
        "by answering sampling-configuration polls.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", help="path to a TOML config file")
    parser.add_argument("--host", help="address to listen on (default 0.0.0.0)")
    parser.add_argument("-p", "--port", type=int, help="TCP port to listen on (default 5778)")
    parser.add_argument("--timeout", type=float, help="per-connection idle timeout in seconds")
    parser.add_argument("--log-level", choices=["debug", "info", "error"])
    parser.add_argument("--debug", action="store_true", default=None, help="shorthand for --log-level debug")
    parser.add_argument("--otlp-endpoint", help="export connection spans to this OTLP/HTTP traces URL")
    parser.add_argument(
        "--console-exporter", action="store_true", default=None,
        help="print connection spans to stdout",
    )
    return parser


def overrides_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Turn the flags that were actually given into a nested config override."""
    overrides: Dict[str, Dict[str, Any]] = {}

    def put(section: str, key: str, value: Any) -> None:
        if value is not None:
            overrides.setdefault(section, {})[key] = value

    put("server", "host", args.host)
    put("server", "port", args.port)
    put("server", "timeout", args.timeout)
    put("logging", "level", args.log_level)
    put("logging", "debug", args.debug)
    put("tracing", "endpoint", args.otlp_endpoint)
    put("tracing", "enable_console", args.console_exporter)
    if args.otlp_endpoint or args.console_exporter:
        put("tracing", "enabled", True)
    return overrides


def _exit_on_sigterm(signum, frame) -> None:
    raise SystemExit(EXIT_OK)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config(config_file=args.config, overrides=overrides_from_args(args))
    except ConfigError as e:
        print(f"sampling-reset: {e}", file=sys.stderr)
        if e.__cause__ is not None:
            print(e.__cause__, file=sys.stderr)
        return EXIT_BAD_CONFIG

    configure_logging(config.logging.effective_level)
    provider = build_tracer_provider(config.tracing)
    try:
        try:
            responder = Responder(
                config.server.host,
                config.server.port,
                timeout=config.server.timeout,
                backlog=config.server.backlog,
                tracer_provider=provider,
            )
        except BindError as e:
            logger.error("%s", e)
            return EXIT_BIND_FAILED

        signal.signal(signal.SIGTERM, _exit_on_sigterm)
        try:
            responder.serve_forever()
        except KeyboardInterrupt:
            logger.info("interrupted")
        finally:
            responder.shutdown()
    finally:
        shutdown_tracer_provider(provider)
    return EXIT_OK
