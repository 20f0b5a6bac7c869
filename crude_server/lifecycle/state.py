"""Server lifecycle state management."""

import threading

from crude_server.domain.connection_id import get_logger

LIFECYCLE_LOGGER = get_logger("lifecycle")


class ServerLifecycle:
    """Carries the stop request from signal handlers to the accept loop."""

    def __init__(self) -> None:
        self._stop_event = threading.Event()

    def should_stop(self) -> bool:
        """Check if the server should stop accepting new connections."""
        return self._stop_event.is_set()

    def request_stop(self) -> None:
        """Ask the accept loop to exit once the current connection is done."""
        self._stop_event.set()
        LIFECYCLE_LOGGER.info(
            "Stop requested", extra={"event": "shutdown_requested"}
        )
