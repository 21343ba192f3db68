"""Single-endpoint HTTP responder returning a fixed JSON payload."""

__version__ = "0.1.0"
