"""CrudeServer entry point: one connection at a time, echo or static HTTP."""

import signal
import sys

from crude_server.bootstrap.config import build_server_config, parse_cli_args
from crude_server.bootstrap.logging_setup import configure_logging
from crude_server.domain.connection_id import get_logger
from crude_server.domain.tables import DEFAULT_TABLES
from crude_server.handlers.request_handlers import create_handler
from crude_server.lifecycle.state import ServerLifecycle
from crude_server.transport.accept_loop import run_server

SERVER_LOGGER = get_logger("server")


def main(argv: list[str] | None = None) -> int:
    """Start the server and block until a stop signal arrives."""
    args = parse_cli_args(sys.argv[1:] if argv is None else argv)
    configure_logging(
        args.log_level, args.log_destination, use_json=args.log_format == "json"
    )

    config = build_server_config(args)
    handler = create_handler(config.handler, config.directory, DEFAULT_TABLES)
    lifecycle = ServerLifecycle()

    def shutdown_handler(signum: int, _frame) -> None:
        SERVER_LOGGER.info(
            "Received shutdown signal",
            extra={"signal": signum},
        )
        lifecycle.request_stop()

    signal.signal(signal.SIGTERM, shutdown_handler)
    signal.signal(signal.SIGINT, shutdown_handler)

    SERVER_LOGGER.info(
        "Starting CrudeServer",
        extra={
            "event": "server_starting",
            "host": config.host,
            "port": config.port,
            "directory": config.directory,
            "handler": config.handler,
            "log_destination": args.log_destination,
            "log_level": args.log_level,
        },
    )
    try:
        run_server(config, handler, lifecycle)
    except OSError as error:
        SERVER_LOGGER.critical(
            "Failed to bind listening socket",
            extra={
                "event": "server_bind_failed",
                "address": config.address,
                "error": str(error),
                "errno": error.errno,
            },
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
