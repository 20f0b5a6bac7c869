"""Listening socket creation."""

import socket

from crude_server.bootstrap.config import ServerConfig

ACCEPT_POLL_SECONDS = 0.5


def create_server_socket(config: ServerConfig) -> socket.socket:
    """Bind and listen on the configured address; OSError from bind propagates.

    The listening socket polls so a stop request can be noticed between
    connections. Accepted sockets are returned in blocking mode.
    """
    server_socket = socket.create_server((config.host, config.port))
    server_socket.settimeout(ACCEPT_POLL_SECONDS)
    return server_socket
