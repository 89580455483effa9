"""Rendering collaborators: contracts and the Playwright adapter."""

from .session import PageHandle, SessionProvider, open_session

__all__ = ["PageHandle", "SessionProvider", "open_session"]
