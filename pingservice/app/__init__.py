"""Application factory."""

from flask import Flask

from pingservice.app.api.routes import api_bp, method_not_allowed


def create_app() -> Flask:
    """Build the Flask app instance with the ping route registered on it."""
    app = Flask(__name__)

    app.register_blueprint(api_bp)
    app.register_error_handler(405, method_not_allowed)
    return app
