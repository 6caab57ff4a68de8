"""Wire bytes of the fixed HTTP response."""

from __future__ import annotations

from sampling_reset.strategy import SamplingStrategyResponse

STATUS_LINE = "HTTP/1.1 200 OK"
CONTENT_TYPE = "application/json"


def build_response(strategy: SamplingStrategyResponse) -> bytes:
    """
    Encode the complete HTTP/1.1 response for a strategy.

    Content-Length is always sent so clients do not have to rely on the
    connection closing to find the end of the body.
    """
    body = strategy.to_json().encode("utf-8")
    head = (
        f"{STATUS_LINE}\r\n"
        f"Content-Type: {CONTENT_TYPE}\r\n"
        f"Content-Length: {len(body)}\r\n"
        "Connection: close\r\n"
        "\r\n"
    )
    return head.encode("ascii") + body
