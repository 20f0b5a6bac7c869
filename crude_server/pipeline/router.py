"""Request routing logic."""

import logging

from crude_server.domain.connection_id import get_logger
from crude_server.domain.http_types import HttpRequest
from crude_server.domain.response_builders import (
    build_response,
    not_implemented_response,
)
from crude_server.domain.tables import DEFAULT_TABLES, ResponseTables
from crude_server.handlers.file_handler import resolve_static_file

ROUTER_LOGGER = get_logger("pipeline.router")

STATIC_METHOD = "GET"


def static_file_response(
    request: HttpRequest,
    directory: str = ".",
    tables: ResponseTables = DEFAULT_TABLES,
) -> bytes:
    """Serve the file named by the request URI, or the canned 404."""
    resolved = resolve_static_file(request.uri, directory, tables)
    return build_response(
        resolved.status_code,
        {"Content-Type": resolved.content_type},
        resolved.body,
        tables,
    )


def route_request(
    request: HttpRequest,
    directory: str = ".",
    tables: ResponseTables = DEFAULT_TABLES,
) -> bytes:
    """Route the request to the static file path or the 501 fallback."""
    if request.method == STATIC_METHOD:
        if ROUTER_LOGGER.logger.isEnabledFor(logging.DEBUG):
            ROUTER_LOGGER.debug(
                "Route matched",
                extra={
                    "event": "route_matched",
                    "method": request.method,
                    "uri": request.uri,
                },
            )
        return static_file_response(request, directory, tables)

    ROUTER_LOGGER.info(
        "Method not implemented",
        extra={
            "event": "route_not_implemented",
            "method": request.method,
            "uri": request.uri,
        },
    )
    return not_implemented_response(tables)
