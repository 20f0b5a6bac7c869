"""Request handlers turning one request buffer into one response buffer.

A handler is anything with ``handle_request(data: bytes) -> bytes``. The
transport layer is given a handler instance and never inspects its type, so
the same accept loop can serve raw echo traffic or HTTP.
"""

from typing import Protocol

from crude_server.domain.connection_id import get_logger
from crude_server.domain.tables import DEFAULT_TABLES, ResponseTables
from crude_server.pipeline.parser import parse_request
from crude_server.pipeline.router import route_request

HANDLER_LOGGER = get_logger("handlers.request")


class RequestHandler(Protocol):  # pylint: disable=too-few-public-methods
    """Transforms a raw request buffer into a raw response buffer."""

    def handle_request(self, data: bytes) -> bytes: ...


class EchoHandler:  # pylint: disable=too-few-public-methods
    """Returns every request buffer unchanged."""

    def handle_request(self, data: bytes) -> bytes:
        return bytes(data)


class HttpHandler:  # pylint: disable=too-few-public-methods
    """Serves GET requests from the filesystem and answers 501 otherwise."""

    def __init__(
        self, directory: str = ".", tables: ResponseTables = DEFAULT_TABLES
    ) -> None:
        self.directory = directory
        self.tables = tables

    def handle_request(self, data: bytes) -> bytes:
        request = parse_request(data)
        HANDLER_LOGGER.info(
            "Request line parsed",
            extra={
                "event": "request_received",
                "method": request.method,
                "uri": request.uri,
                "version": request.version,
            },
        )
        return route_request(request, self.directory, self.tables)


def create_handler(
    name: str, directory: str = ".", tables: ResponseTables = DEFAULT_TABLES
) -> RequestHandler:
    """Build the handler registered under ``name`` (``http`` or ``echo``)."""
    if name == "echo":
        return EchoHandler()
    if name == "http":
        return HttpHandler(directory, tables)
    raise ValueError(f"Unknown request handler: {name!r}")
