"""Static lookup tables for status lines, content types and default headers.

The tables are built once at import time and shared by reference. Lookups
never fail: unknown status codes get the reason ``Unknown`` and unknown
extensions fall back to ``text/html``.
"""

from dataclasses import dataclass, field
from pathlib import PurePath
from types import MappingProxyType
from typing import Mapping

UNKNOWN_REASON = "Unknown"
DEFAULT_CONTENT_TYPE = "text/html"
SERVER_NAME = "CrudeServer"

STATUS_REASONS: Mapping[int, str] = MappingProxyType(
    {
        200: "OK",
        404: "Not Found",
        501: "Not Implemented",
    }
)

MIME_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "html": "text/html",
        "htm": "text/html",
        "css": "text/css",
        "js": "application/javascript",
        "jpg": "image/jpeg",
        "jpeg": "image/jpeg",
        "png": "image/png",
        "gif": "image/gif",
        "svg": "image/svg+xml",
        "ico": "image/x-icon",
    }
)

DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType(
    {
        "Server": SERVER_NAME,
        "Content-Type": DEFAULT_CONTENT_TYPE,
    }
)


@dataclass(frozen=True)
class ResponseTables:
    """Read-only configuration consumed by the response builder and resolver."""

    status_reasons: Mapping[int, str] = field(default_factory=lambda: STATUS_REASONS)
    mime_types: Mapping[str, str] = field(default_factory=lambda: MIME_TYPES)
    default_headers: Mapping[str, str] = field(default_factory=lambda: DEFAULT_HEADERS)
    default_content_type: str = DEFAULT_CONTENT_TYPE

    def reason_phrase(self, status_code: int) -> str:
        """Return the reason phrase for ``status_code`` or ``Unknown``."""
        return self.status_reasons.get(status_code, UNKNOWN_REASON)

    def content_type_for(self, path: str) -> str:
        """Return the content type for the extension of ``path``."""
        extension = PurePath(path).suffix[1:].lower()
        return self.mime_types.get(extension, self.default_content_type)


DEFAULT_TABLES = ResponseTables()
