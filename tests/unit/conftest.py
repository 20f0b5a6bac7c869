"""Shared fixtures for unit tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Ensure logs propagate to root so caplog can catch them."""
    logger = logging.getLogger("crude_server")
    old_propagate = logger.propagate
    old_level = logger.level
    old_handlers = list(logger.handlers)
    logger.propagate = True
    yield
    for handler in logger.handlers:
        if handler not in old_handlers:
            handler.close()
    logger.handlers[:] = old_handlers
    logger.setLevel(old_level)
    logger.propagate = old_propagate


class FakeSocket:
    """Minimal socket stub that returns predefined chunks and records writes."""

    def __init__(self, chunks=(), recv_error=None, send_error=None):
        self._chunks = list(chunks)
        self._recv_error = recv_error
        self._send_error = send_error
        self.recv_sizes = []
        self.sent = []
        self.closed = False
        self.blocking = None

    def recv(self, size):
        """Return the next chunk, truncated to ``size`` like a real socket."""
        self.recv_sizes.append(size)
        if self._recv_error is not None:
            raise self._recv_error
        if self._chunks:
            chunk = self._chunks.pop(0)
            return chunk[:size]
        return b""

    def sendall(self, data):
        """Record the outgoing bytes."""
        if self._send_error is not None:
            raise self._send_error
        self.sent.append(bytes(data))

    def setblocking(self, flag):
        """Record the requested blocking mode."""
        self.blocking = flag

    def close(self):
        """Mark the socket closed."""
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
        return False


@pytest.fixture()
def fake_socket_factory():
    """Expose FakeSocket to tests without importing conftest."""
    return FakeSocket
