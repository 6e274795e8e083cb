"""Single-endpoint HTTP ping service."""

__version__ = "0.1.0"
