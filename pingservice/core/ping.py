"""Host identity lookup used by the ping endpoint."""

import socket

from pingservice.config import PING_PREFIX


class HostnameResolutionError(RuntimeError):
    """The operating system could not report the local host name."""


def get_hostname() -> str:
    """Return the name the OS reports for this machine."""
    try:
        hostname = socket.gethostname()
    except OSError as exc:
        raise HostnameResolutionError(str(exc)) from exc
    if not hostname:
        raise HostnameResolutionError("empty hostname")
    return hostname


def get_ping_message(hostname: str) -> str:
    return PING_PREFIX + hostname
