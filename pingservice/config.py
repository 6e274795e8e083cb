"""Fixed service settings. Nothing here is read from the environment."""

HOST = "0.0.0.0"
PORT = 8080

PING_PATH = "/ping"
PING_PREFIX = "pong from server : "

STARTUP_MESSAGE = f"Server started on {PORT}"
METHOD_NOT_ALLOWED_BODY = "Method not allowed\n"
INTERNAL_ERROR_BODY = "Internal server error\n"
