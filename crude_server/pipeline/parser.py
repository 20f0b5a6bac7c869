"""Lenient HTTP request-line parsing."""

from typing import Optional

from crude_server.bootstrap.config import READ_BUFFER_SIZE
from crude_server.domain.http_types import DEFAULT_HTTP_VERSION, HttpRequest

LINE_SEPARATOR = "\r\n"
WORD_SEPARATOR = " "


def _word(words: list[str], index: int) -> Optional[str]:
    if index < len(words) and words[index]:
        return words[index]
    return None


def parse_request_line(request_line: str) -> HttpRequest:
    """Split a request line into method, URI and version without validating them."""
    words = request_line.split(WORD_SEPARATOR)
    return HttpRequest(
        method=_word(words, 0),
        uri=_word(words, 1),
        version=_word(words, 2) or DEFAULT_HTTP_VERSION,
    )


def parse_request(data: bytes) -> HttpRequest:
    """Decode the first request line of ``data`` into an HttpRequest.

    Only the first READ_BUFFER_SIZE bytes are considered. Invalid UTF-8,
    including a sequence cut at the buffer boundary, is replaced rather than
    rejected, so this never raises.
    """
    text = data[:READ_BUFFER_SIZE].decode("utf-8", errors="replace")
    request_line = text.split(LINE_SEPARATOR, 1)[0]
    return parse_request_line(request_line)
