"""Playwright-backed implementation of the rendering contracts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..core.errors import ExtractionError, NavigationError, SessionAcquisitionError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PlaywrightSession:
    """Owns the Playwright driver, the browser and its single context."""

    playwright: Playwright
    browser: Browser
    context: BrowserContext


class PlaywrightPage:
    """Adapts a Playwright ``Page`` to the crawler's ``PageHandle`` contract."""

    def __init__(self, page: Page) -> None:
        self._page = page

    @property
    def url(self) -> str:
        return self._page.url

    def navigate(self, url: str, *, timeout_ms: int, wait_until: str) -> None:
        try:
            self._page.goto(url, timeout=timeout_ms, wait_until=wait_until)
        except PlaywrightTimeoutError as exc:
            raise NavigationError(url, f"timeout after {timeout_ms} ms") from exc
        except PlaywrightError as exc:
            raise NavigationError(url, exc.message) from exc

    def wait(self, delay_ms: int) -> None:
        try:
            self._page.wait_for_timeout(delay_ms)
        except PlaywrightError as exc:
            raise NavigationError(self._page.url, exc.message) from exc

    def evaluate(self, script: str) -> Any:
        try:
            return self._page.evaluate(script)
        except PlaywrightError as exc:
            raise ExtractionError(self._page.url, exc.message) from exc

    def content(self) -> str:
        try:
            return self._page.content()
        except PlaywrightError as exc:
            raise ExtractionError(self._page.url, exc.message) from exc


@dataclass
class PlaywrightSessionProvider:
    """Launches Chromium once per run and hands out pages from one context."""

    headless: bool = True
    user_agent: Optional[str] = None

    def acquire(self) -> PlaywrightSession:
        try:
            playwright = sync_playwright().start()
        except PlaywrightError as exc:
            raise SessionAcquisitionError(f"Could not start Playwright: {exc.message}") from exc

        try:
            browser = playwright.chromium.launch(headless=self.headless)
            context = browser.new_context(user_agent=self.user_agent)
        except PlaywrightError as exc:
            playwright.stop()
            raise SessionAcquisitionError(f"Could not launch Chromium: {exc.message}") from exc
        logger.debug("Chromium launched (headless=%s)", self.headless)
        return PlaywrightSession(playwright=playwright, browser=browser, context=context)

    def open_page(self, session: PlaywrightSession) -> PlaywrightPage:
        try:
            return PlaywrightPage(session.context.new_page())
        except PlaywrightError as exc:
            raise SessionAcquisitionError(f"Could not open a page: {exc.message}") from exc

    def release(self, session: PlaywrightSession) -> None:
        try:
            session.browser.close()
        finally:
            session.playwright.stop()
