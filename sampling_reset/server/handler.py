"""Per-connection handling: discard the request, write the fixed response."""

from __future__ import annotations

import logging
import socket
import socketserver

from opentelemetry.trace import SpanKind, Status, StatusCode

logger = logging.getLogger(__name__)

# Upper bound on request bytes read before answering anyway.
MAX_REQUEST_BYTES = 64 * 1024
RECV_SIZE = 4096
_HEAD_TERMINATORS = (b"\r\n\r\n", b"\n\n")


def drain_request(sock: socket.socket, limit: int = MAX_REQUEST_BYTES) -> int:
    """
    Read and discard the request head without interpreting it.

    Stops at the blank line ending the head, end of stream, ``limit`` bytes,
    the socket timeout, or any socket error. Returns the number of bytes read.
    """
    received = 0
    tail = b""
    while received < limit:
        try:
            chunk = sock.recv(RECV_SIZE)
        except OSError:
            break
        if not chunk:
            break
        received += len(chunk)
        # Keep a few trailing bytes so a terminator split across reads is seen.
        tail = (tail + chunk)[-RECV_SIZE - 4:]
        if any(term in tail for term in _HEAD_TERMINATORS):
            break
    return received


class ConnectionHandler(socketserver.BaseRequestHandler):
    """Answers every connection with the responder's payload."""

    def setup(self) -> None:
        self.request.settimeout(self.server.responder.timeout)

    def handle(self) -> None:
        responder = self.server.responder
        peer_host, peer_port = self.client_address[:2]
        attributes = {
            "net.peer.ip": peer_host,
            "net.peer.port": peer_port,
        }
        with responder.tracer.start_as_current_span(
            "sampling.reset", kind=SpanKind.SERVER, attributes=attributes
        ) as span:
            received = drain_request(self.request)
            span.set_attribute("sampling_reset.request_bytes", received)
            try:
                self.request.sendall(responder.payload)
            except OSError as e:
                span.set_status(Status(StatusCode.ERROR, str(e)))
                logger.debug("dropped %s:%s before response was written: %s", peer_host, peer_port, e)
                return
            span.set_attribute("http.status_code", 200)
        logger.debug(
            "served %s:%s (%d request bytes, %d response bytes)",
            peer_host, peer_port, received, len(responder.payload),
        )
