"""Exception hierarchy shared by the crawler stages."""

from __future__ import annotations


class CatalogError(RuntimeError):
    """Base class for every error raised by the catalog crawler."""


class NavigationError(CatalogError):
    """Raised when a page cannot be loaded within the render timeout."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Navigation to {url} failed: {reason}")
        self.url = url
        self.reason = reason


class ExtractionError(CatalogError):
    """Raised when the snapshot script fails or returns malformed data."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Extraction on {url} failed: {reason}")
        self.url = url
        self.reason = reason


class SessionAcquisitionError(CatalogError):
    """Raised when no rendering session can be obtained at all."""
