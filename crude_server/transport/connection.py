"""Single-request connection handling."""

import logging
import socket

from crude_server.bootstrap.config import READ_BUFFER_SIZE
from crude_server.domain.connection_id import get_logger
from crude_server.handlers.request_handlers import RequestHandler

CONNECTION_LOGGER = get_logger("transport.connection")


def handle_connection(client_socket: socket.socket, handler: RequestHandler) -> None:
    """Serve exactly one request on ``client_socket`` and close it.

    A single read of at most READ_BUFFER_SIZE bytes is made; anything beyond
    that is never looked at. An empty read sends nothing back. Socket errors
    propagate to the caller; the socket is closed either way.
    """
    with client_socket:
        data = client_socket.recv(READ_BUFFER_SIZE)
        if not data:
            if CONNECTION_LOGGER.logger.isEnabledFor(logging.DEBUG):
                CONNECTION_LOGGER.debug(
                    "Client sent no data", extra={"event": "empty_request"}
                )
            return

        response = handler.handle_request(data)
        client_socket.sendall(response)
        CONNECTION_LOGGER.debug(
            "Response sent",
            extra={
                "event": "response_sent",
                "bytes_in": len(data),
                "bytes_out": len(response),
            },
        )
