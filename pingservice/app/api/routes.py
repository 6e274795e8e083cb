"""HTTP routes for the ping service."""

from http import HTTPStatus
from typing import Any

from flask import Blueprint, jsonify, request
from werkzeug.exceptions import MethodNotAllowed

from pingservice.config import (
    INTERNAL_ERROR_BODY,
    METHOD_NOT_ALLOWED_BODY,
    PING_PATH,
)
from pingservice.core.ping import (
    HostnameResolutionError,
    get_hostname,
    get_ping_message,
)
from pingservice.logging_config import get_logger
from pingservice.schemas.ping import PingResponse

logger = get_logger(__name__)

api_bp = Blueprint("api", __name__)

# The common methods are routed to the view so it can reject non-GET itself.
# Anything else is answered by method_not_allowed.
PING_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

PLAIN_TEXT_HEADERS = {
    "Content-Type": "text/plain; charset=utf-8",
    "X-Content-Type-Options": "nosniff",
}


def plain_text_error(body: str, status: HTTPStatus, **headers: str):
    return body, status, {**PLAIN_TEXT_HEADERS, **headers}


def method_not_allowed(exc: MethodNotAllowed):
    """Answer methods the URL map does not know the same way the view does."""
    return plain_text_error(
        METHOD_NOT_ALLOWED_BODY, HTTPStatus.METHOD_NOT_ALLOWED, Allow="GET"
    )


@api_bp.route(PING_PATH, methods=PING_METHODS)
def ping() -> Any:
    """Report which host answered."""
    if request.method != "GET":
        return plain_text_error(
            METHOD_NOT_ALLOWED_BODY, HTTPStatus.METHOD_NOT_ALLOWED, Allow="GET"
        )

    try:
        hostname = get_hostname()
    except HostnameResolutionError as exc:
        logger.error("Error : %s", exc)
        return plain_text_error(INTERNAL_ERROR_BODY, HTTPStatus.INTERNAL_SERVER_ERROR)

    response = PingResponse(message=get_ping_message(hostname))
    return jsonify(response.model_dump())
