"""Per-connection identifiers for log correlation, held in contextvars."""

import contextvars
import logging
import uuid
from contextlib import contextmanager
from typing import Any, Iterator, MutableMapping, Optional

LOGGER_ROOT = "crude_server"

_connection_id_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "connection_id", default=None
)


def generate_connection_id() -> str:
    """Generate a new connection ID using UUID4."""
    return str(uuid.uuid4())


def get_connection_id() -> Optional[str]:
    """Retrieve the ID of the connection currently being served."""
    return _connection_id_var.get()


@contextmanager
def connection_scope() -> Iterator[str]:
    """Tag log records with a fresh connection ID for the duration of the block."""
    token = _connection_id_var.set(generate_connection_id())
    try:
        yield _connection_id_var.get()
    finally:
        _connection_id_var.reset(token)


class ConnectionLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that injects the connection ID and component into records."""

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        if "extra" not in kwargs:
            kwargs["extra"] = {}
        else:
            kwargs["extra"] = dict(kwargs["extra"])

        connection_id = get_connection_id()
        kwargs["extra"]["connection_id"] = (
            connection_id if connection_id is not None else "-"
        )

        logger_name = self.logger.name
        prefix = f"{LOGGER_ROOT}."
        if logger_name.startswith(prefix):
            component = logger_name[len(prefix) :]
        else:
            component = logger_name
        kwargs["extra"]["component"] = component

        return msg, kwargs


def get_logger(name: str) -> ConnectionLoggerAdapter:
    """Return an adapter for ``crude_server.<name>``."""
    return ConnectionLoggerAdapter(logging.getLogger(f"{LOGGER_ROOT}.{name}"), {})
