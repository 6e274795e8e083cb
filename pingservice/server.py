#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -e ".[test]"
#setup: pingservice   # or: python -m pingservice

"""Process entry point: bind the listener and serve until killed."""

import socket
import sys
from typing import Tuple

from flask import Flask
from werkzeug.serving import BaseWSGIServer, make_server

from pingservice.app import create_app
from pingservice.config import HOST, PORT, STARTUP_MESSAGE
from pingservice.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


class ServerStartError(RuntimeError):
    """The listening socket could not be bound."""


def bind_listener(host: str, port: int) -> Tuple[socket.socket, str]:
    """Open a listening socket, returning it with the address it is bound to.

    ``HOST`` means every interface, so it takes both IPv4 and IPv6 where the
    platform can share one socket between them.
    """
    if host == HOST and socket.has_dualstack_ipv6():
        listener = socket.create_server(
            ("::", port), family=socket.AF_INET6, dualstack_ipv6=True
        )
        return listener, "::"
    return socket.create_server((host, port)), host


def start_server(app: Flask, host: str = HOST, port: int = PORT) -> BaseWSGIServer:
    """Bind ``host:port`` and return a threaded server ready to serve ``app``.

    The socket is bound here rather than inside Werkzeug, which exits the
    process on bind errors. The startup line is fixed and always names
    ``PORT``, whatever ``port`` is bound.
    """
    logger.info(STARTUP_MESSAGE)
    try:
        listener, bound_host = bind_listener(host, port)
    except OSError as exc:
        raise ServerStartError(f"cannot listen on {host}:{port}: {exc}") from exc

    try:
        # Werkzeug duplicates the descriptor, so the original can be closed.
        return make_server(bound_host, port, app, threaded=True, fd=listener.fileno())
    finally:
        listener.close()


def main() -> int:
    setup_logging()
    app = create_app()
    try:
        server = start_server(app)
    except ServerStartError as exc:
        logger.critical("%s", exc)
        return 1

    server.serve_forever()
    return 0


if __name__ == "__main__":
    sys.exit(main())
