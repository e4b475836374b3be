"""Reading list service: an interactive book list behind a small HTTP API."""

__version__ = "1.0.0"
