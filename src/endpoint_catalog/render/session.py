"""Contracts for the rendering collaborator used by the crawler."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Protocol, Tuple

logger = logging.getLogger(__name__)


class PageHandle(Protocol):
    """A single browser tab that the crawler drives sequentially."""

    def navigate(self, url: str, *, timeout_ms: int, wait_until: str) -> None:
        """Loads ``url``; raises ``NavigationError`` on timeout or network failure."""

    def wait(self, delay_ms: int) -> None:
        ...

    def evaluate(self, script: str) -> Any:
        """Runs ``script`` in the rendered page; raises ``ExtractionError`` on failure."""

    def content(self) -> str:
        ...


class SessionProvider(Protocol):
    def acquire(self) -> Any:
        """Returns a session; raises ``SessionAcquisitionError`` when impossible."""

    def open_page(self, session: Any) -> PageHandle:
        ...

    def release(self, session: Any) -> None:
        ...


@contextmanager
def open_session(provider: SessionProvider) -> Iterator[Tuple[Any, PageHandle]]:
    """Acquires a session and one page, releasing the session on every exit path."""

    session = provider.acquire()
    try:
        page = provider.open_page(session)
        yield session, page
    finally:
        try:
            provider.release(session)
        except Exception:
            logger.debug("Session release failed", exc_info=True)
