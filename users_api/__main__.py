"""Serve the users API with uvicorn on the configured port."""

from __future__ import annotations

import logging
import socket

from uvicorn import Config, Server

from users_api.core.config import settings
from users_api.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind the listening socket or terminate the process with status 1."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as exc:
        sock.close()
        logger.exception("Failed to bind %s:%s", host, port)
        raise SystemExit(1) from exc
    sock.set_inheritable(True)
    return sock


def main() -> None:
    setup_logging(settings.log_level)
    sock = bind_socket(settings.host, settings.port)
    logger.info("Server is running on http://%s:%s", settings.host, settings.port)
    config = Config(app="users_api.main:app", log_level=settings.log_level.lower())
    Server(config).run(sockets=[sock])


if __name__ == "__main__":
    main()
