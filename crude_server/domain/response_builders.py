"""Pure HTTP response builders."""

from typing import Mapping, Optional

from crude_server.domain.tables import DEFAULT_TABLES, ResponseTables

CRLF = "\r\n"
HTTP_VERSION_PREFIX = "HTTP/1.1"
NOT_FOUND_BODY = b"<h1>404 Not Found</h1>"
NOT_IMPLEMENTED_BODY = b"<h1>501 Not Implemented</h1>"


def status_line(status_code: int, tables: ResponseTables = DEFAULT_TABLES) -> str:
    """Format ``HTTP/1.1 <code> <reason>`` without the trailing CRLF."""
    return f"{HTTP_VERSION_PREFIX} {status_code} {tables.reason_phrase(status_code)}"


def merge_headers(
    extra_headers: Optional[Mapping[str, str]],
    tables: ResponseTables = DEFAULT_TABLES,
) -> dict[str, str]:
    """Combine the default headers with per-response overrides.

    Names are compared literally; an override replaces the default value in
    place, new names are appended after the defaults.
    """
    headers = dict(tables.default_headers)
    if extra_headers:
        headers.update(extra_headers)
    return headers


def build_response(
    status_code: int,
    extra_headers: Optional[Mapping[str, str]],
    body: bytes,
    tables: ResponseTables = DEFAULT_TABLES,
) -> bytes:
    """Serialize status line, headers, blank line and body into wire bytes.

    The body is appended verbatim and no Content-Length header is added.
    """
    lines = [status_line(status_code, tables)]
    headers = merge_headers(extra_headers, tables)
    lines.extend(f"{name}: {value}" for name, value in headers.items())
    head = CRLF.join(lines) + CRLF + CRLF
    return head.encode() + body


def not_found_response(tables: ResponseTables = DEFAULT_TABLES) -> bytes:
    """Produce the canned 404 response with default headers."""
    return build_response(404, None, NOT_FOUND_BODY, tables)


def not_implemented_response(tables: ResponseTables = DEFAULT_TABLES) -> bytes:
    """Produce the canned 501 response returned for every non-GET request."""
    return build_response(501, None, NOT_IMPLEMENTED_BODY, tables)
