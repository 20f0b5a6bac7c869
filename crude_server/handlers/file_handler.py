"""Static file resolution for the HTTP GET path."""

import logging
from pathlib import Path
from typing import Optional

from crude_server.domain.connection_id import get_logger
from crude_server.domain.http_types import ResolvedFile
from crude_server.domain.response_builders import NOT_FOUND_BODY
from crude_server.domain.tables import DEFAULT_TABLES, ResponseTables

FILE_LOGGER = get_logger("handlers.file")


def relative_path_for(uri: Optional[str]) -> str:
    """Strip exactly one leading slash from ``uri``; ``None`` maps to ``""``."""
    path = uri or ""
    if path.startswith("/"):
        path = path[1:]
    return path


def _exists(target: Path) -> bool:
    """Report whether ``target`` exists; names the OS rejects count as missing."""
    try:
        return target.exists()
    except OSError:
        return False


def _not_found(tables: ResponseTables) -> ResolvedFile:
    return ResolvedFile(404, NOT_FOUND_BODY, tables.default_content_type)


def resolve_static_file(
    uri: Optional[str],
    directory: str = ".",
    tables: ResponseTables = DEFAULT_TABLES,
) -> ResolvedFile:
    """Load the file named by ``uri`` or fall back to a 404 result.

    Paths are joined onto ``directory`` as given; there is no confinement to
    that directory and no index document for directories. A file that exists
    but cannot be read is reported as 404 as well.
    """
    relative_path = relative_path_for(uri)
    if not relative_path:
        FILE_LOGGER.info(
            "Empty path requested",
            extra={"event": "file_not_found", "uri": uri},
        )
        return _not_found(tables)

    target = Path(directory) / relative_path
    if not _exists(target):
        FILE_LOGGER.info(
            "File not found",
            extra={"event": "file_not_found", "path": target.as_posix()},
        )
        return _not_found(tables)

    try:
        with open(target, "rb") as file_handle:
            body = file_handle.read()
    except OSError as error:
        FILE_LOGGER.warning(
            "File read failed",
            extra={
                "event": "file_read_failed",
                "path": target.as_posix(),
                "error_type": type(error).__name__,
                "error": str(error),
            },
        )
        return _not_found(tables)

    content_type = tables.content_type_for(relative_path)
    if FILE_LOGGER.logger.isEnabledFor(logging.DEBUG):
        FILE_LOGGER.debug(
            "File read complete",
            extra={
                "event": "file_served",
                "path": target.as_posix(),
                "content_type": content_type,
                "bytes_out": len(body),
            },
        )
    return ResolvedFile(200, body, content_type)
