"""The listening side: socket server, connection handler, response bytes."""

from sampling_reset.server.handler import ConnectionHandler, drain_request
from sampling_reset.server.responder import Responder
from sampling_reset.server.response import build_response

__all__ = ["ConnectionHandler", "Responder", "build_response", "drain_request"]
