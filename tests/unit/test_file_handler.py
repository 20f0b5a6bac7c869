"""Unit tests for static file resolution."""

import logging
from pathlib import Path

import pytest

from crude_server.domain.response_builders import NOT_FOUND_BODY
from crude_server.handlers.file_handler import relative_path_for, resolve_static_file


@pytest.mark.parametrize(
    "uri, expected",
    [
        ("/index.html", "index.html"),
        ("//etc/hosts", "/etc/hosts"),
        ("plain.txt", "plain.txt"),
        ("/", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_relative_path_strips_one_leading_slash(uri, expected):
    """Exactly one slash is removed; a missing URI becomes empty."""
    assert relative_path_for(uri) == expected


def test_resolve_existing_file(tmp_path: Path):
    """Existing files are read fully with the extension's content type."""
    (tmp_path / "index.html").write_bytes(b"<p>hi</p>")
    resolved = resolve_static_file("/index.html", str(tmp_path))
    assert resolved.status_code == 200
    assert resolved.body == b"<p>hi</p>"
    assert resolved.content_type == "text/html"


def test_resolve_nested_binary_file(tmp_path: Path):
    """Subdirectories and binary content are served as-is."""
    nested = tmp_path / "img"
    nested.mkdir()
    payload = b"\x89PNG\r\n\x1a\n\x00\x01"
    (nested / "logo.png").write_bytes(payload)
    resolved = resolve_static_file("/img/logo.png", str(tmp_path))
    assert resolved.status_code == 200
    assert resolved.body == payload
    assert resolved.content_type == "image/png"


def test_resolve_unknown_extension_defaults_to_html(tmp_path: Path):
    """Unlisted extensions fall back to text/html."""
    (tmp_path / "notes.txt").write_text("plain")
    resolved = resolve_static_file("/notes.txt", str(tmp_path))
    assert resolved.status_code == 200
    assert resolved.content_type == "text/html"


@pytest.mark.parametrize("uri", [None, "", "/", "/missing.html"])
def test_resolve_missing_returns_404(tmp_path: Path, uri):
    """Empty or nonexistent paths produce the 404 result."""
    resolved = resolve_static_file(uri, str(tmp_path))
    assert resolved.status_code == 404
    assert resolved.body == NOT_FOUND_BODY
    assert resolved.content_type == "text/html"


def test_resolve_unreadable_entry_returns_404_and_logs(tmp_path: Path, caplog):
    """A path that exists but cannot be read is reported as 404."""
    caplog.set_level(logging.WARNING)
    (tmp_path / "folder").mkdir()
    resolved = resolve_static_file("/folder", str(tmp_path))
    assert resolved.status_code == 404
    assert resolved.body == NOT_FOUND_BODY
    record = next(
        r for r in caplog.records if getattr(r, "event", None) == "file_read_failed"
    )
    assert record.path.endswith("folder")


def test_resolve_logs_missing_file(tmp_path: Path, caplog):
    """Missing files are logged at INFO with their path."""
    caplog.set_level(logging.INFO)
    resolve_static_file("/ghost.css", str(tmp_path))
    assert any(
        getattr(r, "event", None) == "file_not_found" for r in caplog.records
    )


def test_resolve_does_not_confine_to_directory(tmp_path: Path):
    """Parent references are followed without restriction."""
    served = tmp_path / "served"
    served.mkdir()
    (tmp_path / "outside.html").write_text("outside")
    resolved = resolve_static_file("/../outside.html", str(served))
    assert resolved.status_code == 200
    assert resolved.body == b"outside"


def test_resolve_overlong_name_returns_404(tmp_path: Path, caplog):
    """A name longer than the filesystem allows is treated as missing."""
    caplog.set_level(logging.INFO)
    resolved = resolve_static_file("/" + "a" * 300, str(tmp_path))
    assert resolved.status_code == 404
    assert resolved.body == NOT_FOUND_BODY
    assert resolved.content_type == "text/html"
    assert any(
        getattr(r, "event", None) == "file_not_found" for r in caplog.records
    )
