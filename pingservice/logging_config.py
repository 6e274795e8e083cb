import logging
import sys


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Send every log record to stdout in a single line format.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL

    Returns:
        The ``pingservice`` logger
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(numeric_level)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(numeric_level)
    stdout_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(stdout_handler)

    app_logger = logging.getLogger("pingservice")
    app_logger.setLevel(numeric_level)

    # Werkzeug writes an access line per request at INFO
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    return app_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
