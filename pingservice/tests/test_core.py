import socket

import pytest
from pydantic import ValidationError

from pingservice.core.ping import (
    HostnameResolutionError,
    get_hostname,
    get_ping_message,
)
from pingservice.schemas.ping import PingResponse


def test_ping_message_prefix():
    assert get_ping_message("worker-1") == "pong from server : worker-1"


def test_get_hostname_matches_socket():
    assert get_hostname() == socket.gethostname()


def test_get_hostname_wraps_os_error(monkeypatch: pytest.MonkeyPatch):
    def broken() -> str:
        raise OSError("no name")

    monkeypatch.setattr(socket, "gethostname", broken)

    with pytest.raises(HostnameResolutionError, match="no name") as excinfo:
        get_hostname()
    assert isinstance(excinfo.value.__cause__, OSError)


def test_get_hostname_rejects_empty_name(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(socket, "gethostname", lambda: "")

    with pytest.raises(HostnameResolutionError):
        get_hostname()


def test_ping_response_requires_message():
    assert PingResponse(message="pong").model_dump() == {"message": "pong"}

    with pytest.raises(ValidationError):
        PingResponse(message="")
