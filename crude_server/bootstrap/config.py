"""Server configuration and CLI argument parsing."""

import argparse
import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value is not None else default


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value else default


READ_BUFFER_SIZE = 1024
HANDLER_CHOICES = ("http", "echo")
LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_FORMAT_CHOICES = ["json", "text"]


@dataclass(frozen=True)
class ServerConfig:
    """Listen address plus the handler selection for one server process."""

    host: str
    port: int
    directory: str = "."
    handler: str = "http"

    @property
    def address(self) -> str:
        """Return the ``host:port`` form used in log lines."""
        return f"{self.host}:{self.port}"


def parse_cli_args(argv: list[str]) -> argparse.Namespace:
    """Return parsed CLI arguments for server configuration."""
    parser = argparse.ArgumentParser(description="CrudeServer configuration")
    parser.add_argument("--host", default=_env_str("CRUDE_SERVER_HOST", "127.0.0.1"))
    parser.add_argument(
        "--port", type=int, default=_env_int("CRUDE_SERVER_PORT", 8888)
    )
    parser.add_argument(
        "--directory",
        default=_env_str("CRUDE_SERVER_DIRECTORY", "."),
        help="Directory request paths are resolved against",
    )
    parser.add_argument(
        "--handler",
        default=_env_str("CRUDE_SERVER_HANDLER", "http").lower(),
        choices=HANDLER_CHOICES,
        type=str.lower,
        help="Request handler serving every connection",
    )
    parser.add_argument(
        "--log-level",
        default=_env_str("CRUDE_SERVER_LOG_LEVEL", "INFO").upper(),
        choices=LOG_LEVEL_CHOICES,
        type=str.upper,
    )
    parser.add_argument(
        "--log-destination",
        default=_env_str("CRUDE_SERVER_LOG_DESTINATION", "stdout"),
        help="stdout or a file path",
    )
    parser.add_argument(
        "--log-format",
        default=_env_str("CRUDE_SERVER_LOG_FORMAT", "json").lower(),
        choices=LOG_FORMAT_CHOICES,
        type=str.lower,
    )
    return parser.parse_args(argv)


def build_server_config(args: argparse.Namespace) -> ServerConfig:
    """Freeze the parsed CLI arguments into a ServerConfig."""
    return ServerConfig(
        host=args.host,
        port=args.port,
        directory=args.directory,
        handler=args.handler,
    )
