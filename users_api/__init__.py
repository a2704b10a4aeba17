"""In-memory users HTTP API."""

__version__ = "0.1.0"
