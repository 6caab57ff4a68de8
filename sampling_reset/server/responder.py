"""Threaded TCP listener serving the fixed sampling strategy."""

from __future__ import annotations

import logging
import socketserver
import threading
from typing import Optional, Tuple

from opentelemetry import trace

from sampling_reset.config import DEFAULT_PORT
from sampling_reset.errors import BindError
from sampling_reset.server.handler import ConnectionHandler
from sampling_reset.server.response import build_response
from sampling_reset.strategy import DEFAULT_STRATEGY
from sampling_reset.tracer.provider import get_tracer

logger = logging.getLogger(__name__)


class _ThreadingServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True
    block_on_close = False

    def __init__(self, server_address, handler_class, responder: "Responder", backlog: int) -> None:
        self.responder = responder
        self.request_queue_size = backlog
        super().__init__(server_address, handler_class)

    def handle_error(self, request, client_address) -> None:
        logger.exception("unexpected error while serving %s", client_address)


class Responder:
    """
    Listens on a TCP port and answers every connection with the same
    HTTP 200 response carrying the default sampling strategy.

    The socket is bound on construction; a bind failure raises BindError.
    Each accepted connection runs in its own daemon thread.
    """

    strategy = DEFAULT_STRATEGY

    def __init__(
        self,
        host: str = "0.0.0.0",
        port: int = DEFAULT_PORT,
        *,
        timeout: float = 1.0,
        backlog: int = 128,
        tracer_provider: Optional[trace.TracerProvider] = None,
    ) -> None:
        self.timeout = timeout
        self.payload = build_response(self.strategy)
        self.tracer = get_tracer(tracer_provider)
        self._thread: Optional[threading.Thread] = None
        try:
            self._server = _ThreadingServer((host, port), ConnectionHandler, self, backlog)
        except OSError as e:
            raise BindError(
                f"cannot listen on {host}:{port}: {e.strerror or e}",
                details={"host": host, "port": port},
            ) from e

    @property
    def address(self) -> Tuple[str, int]:
        host, port = self._server.server_address[:2]
        return host, port

    def serve_forever(self, poll_interval: float = 0.5) -> None:
        """Block serving connections until shutdown() is called from another thread."""
        host, port = self.address
        logger.info("serving %s sampling strategy on %s:%d", self.strategy.strategy_type.value, host, port)
        self._server.serve_forever(poll_interval=poll_interval)

    def start(self) -> "Responder":
        """Serve from a background daemon thread."""
        if self._thread is None:
            self._thread = threading.Thread(
                target=self.serve_forever, kwargs={"poll_interval": 0.05}, daemon=True
            )
            self._thread.start()
        return self

    def shutdown(self) -> None:
        """Stop accepting connections and close the listening socket."""
        if self._thread is not None:
            self._server.shutdown()
            self._thread.join()
            self._thread = None
        self._server.server_close()
        logger.info("listener on %s:%d closed", *self.address)

    def __enter__(self) -> "Responder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()
