"""Endpoint catalog crawler for paginated API documentation sites."""

__version__ = "0.1.0"
