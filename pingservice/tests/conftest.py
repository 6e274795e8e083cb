import logging

import pytest
from flask.testing import FlaskClient

from pingservice.app import create_app


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app()
    app.config.update(TESTING=True)
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    for name in ("pingservice", "werkzeug"):
        logging.getLogger(name).setLevel(logging.NOTSET)
