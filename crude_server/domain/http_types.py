"""Shared HTTP type definitions to avoid circular imports."""

from dataclasses import dataclass
from typing import NamedTuple, Optional

DEFAULT_HTTP_VERSION = "1.1"


@dataclass(frozen=True)
class HttpRequest:
    """Represents a leniently parsed HTTP request line.

    ``method`` and ``uri`` are ``None`` when the request line did not carry
    them. ``version`` keeps its default unless a third word was present.
    """

    method: Optional[str] = None
    uri: Optional[str] = None
    version: str = DEFAULT_HTTP_VERSION


class ResolvedFile(NamedTuple):
    """Outcome of resolving a request URI against the filesystem."""

    status_code: int
    body: bytes
    content_type: str
