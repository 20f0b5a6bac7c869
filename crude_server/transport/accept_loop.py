"""Main connection acceptance loop."""

import socket
from typing import Optional

from crude_server.bootstrap.config import ServerConfig
from crude_server.bootstrap.socket_factory import create_server_socket
from crude_server.domain.connection_id import connection_scope, get_logger
from crude_server.handlers.request_handlers import RequestHandler
from crude_server.lifecycle.state import ServerLifecycle
from crude_server.transport.connection import handle_connection

ACCEPT_LOGGER = get_logger("transport.accept")


def _serve_accepted_client(
    client_socket: socket.socket,
    client_address: tuple[str, int],
    handler: RequestHandler,
) -> None:
    """Run one connection to completion, logging instead of raising on failure."""
    client_addr_str = f"{client_address[0]}:{client_address[1]}"
    with connection_scope():
        ACCEPT_LOGGER.info(
            "Connected by %s",
            client_addr_str,
            extra={"event": "client_accepted", "client": client_addr_str},
        )
        client_socket.setblocking(True)
        try:
            handle_connection(client_socket, handler)
        except OSError as error:
            ACCEPT_LOGGER.error(
                "Error handling client connection",
                extra={
                    "event": "connection_error",
                    "client": client_addr_str,
                    "error_type": type(error).__name__,
                    "errno": error.errno,
                },
            )
        except Exception as error:  # pylint: disable=broad-except
            ACCEPT_LOGGER.error(
                "Unexpected error in request handler",
                extra={
                    "event": "worker_error",
                    "client": client_addr_str,
                    "error_type": type(error).__name__,
                    "error": str(error),
                },
                exc_info=True,
            )


def run_server(
    config: ServerConfig,
    handler: RequestHandler,
    lifecycle: Optional[ServerLifecycle] = None,
) -> None:
    """Bind the listening socket and serve connections one after another.

    A bind failure raises OSError to the caller. Without a lifecycle, or
    until its stop is requested, the loop does not return.
    """
    server_socket = create_server_socket(config)

    ACCEPT_LOGGER.info(
        "Listening at %s",
        config.address,
        extra={
            "event": "server_listening",
            "host": config.host,
            "port": config.port,
            "handler": config.handler,
        },
    )

    try:
        while lifecycle is None or not lifecycle.should_stop():
            try:
                client_socket, client_address = server_socket.accept()
            except socket.timeout:
                continue
            except OSError as error:
                ACCEPT_LOGGER.error(
                    "Socket accept failed",
                    extra={
                        "event": "accept_error",
                        "error_type": type(error).__name__,
                        "errno": error.errno,
                    },
                )
                continue

            _serve_accepted_client(client_socket, client_address, handler)
    finally:
        server_socket.close()
        ACCEPT_LOGGER.info("Server stopped", extra={"event": "server_stopped"})
