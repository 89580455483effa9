from pathlib import Path
from types import SimpleNamespace

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from endpoint_catalog.crawl.driver import CatalogCrawler  # type: ignore[import]
from endpoint_catalog.render import playwright_session  # type: ignore[import]
from endpoint_catalog.render.session import open_session  # type: ignore[import]

from tests.helpers.catalog_imports import (
    CrawlerConfig,
    ExtractionError,
    NavigationError,
    SessionAcquisitionError,
    StopReason,
)


class FakeRawPage:
    def __init__(self, goto_error=None, evaluate_error=None):
        self.url = "https://docs/current"
        self.goto_error = goto_error
        self.evaluate_error = evaluate_error
        self.goto_calls = []
        self.waited = []

    def goto(self, url, timeout, wait_until):
        self.goto_calls.append((url, timeout, wait_until))
        if self.goto_error:
            raise self.goto_error

    def wait_for_timeout(self, delay):
        self.waited.append(delay)

    def evaluate(self, script):
        if self.evaluate_error:
            raise self.evaluate_error
        return {"url": self.url}

    def content(self):
        return "<html></html>"


def test_navigate_passes_timeout_and_wait_condition():
    raw = FakeRawPage()
    page = playwright_session.PlaywrightPage(raw)

    page.navigate("https://docs/a", timeout_ms=500, wait_until="networkidle")
    page.wait(25)

    assert raw.goto_calls == [("https://docs/a", 500, "networkidle")]
    assert raw.waited == [25]
    assert page.evaluate("() => ({})") == {"url": "https://docs/current"}


def test_navigate_translates_timeout():
    page = playwright_session.PlaywrightPage(FakeRawPage(goto_error=PlaywrightTimeoutError("Timeout 500ms exceeded")))

    with pytest.raises(NavigationError) as excinfo:
        page.navigate("https://docs/a", timeout_ms=500, wait_until="networkidle")

    assert "timeout after 500 ms" in str(excinfo.value)


def test_navigate_translates_network_errors():
    page = playwright_session.PlaywrightPage(FakeRawPage(goto_error=PlaywrightError("net::ERR_NAME_NOT_RESOLVED")))

    with pytest.raises(NavigationError) as excinfo:
        page.navigate("https://docs/a", timeout_ms=500, wait_until="load")

    assert excinfo.value.reason == "net::ERR_NAME_NOT_RESOLVED"


def test_evaluate_translates_script_errors():
    page = playwright_session.PlaywrightPage(FakeRawPage(evaluate_error=PlaywrightError("ReferenceError")))

    with pytest.raises(ExtractionError) as excinfo:
        page.evaluate("() => missing")

    assert excinfo.value.url == "https://docs/current"


def _fake_driver(launch):
    stopped = []
    playwright = SimpleNamespace(chromium=SimpleNamespace(launch=launch), stop=lambda: stopped.append(True))
    return SimpleNamespace(start=lambda: playwright), stopped


def test_acquire_failure_raises_session_error_and_stops_driver(monkeypatch):
    def launch(headless):
        raise PlaywrightError("Executable doesn't exist")

    driver, stopped = _fake_driver(launch)
    monkeypatch.setattr(playwright_session, "sync_playwright", lambda: driver)

    provider = playwright_session.PlaywrightSessionProvider()
    with pytest.raises(SessionAcquisitionError):
        with open_session(provider):
            pass

    assert stopped == [True]


def test_session_is_released_after_use(monkeypatch):
    closed = []
    raw_page = FakeRawPage()
    context = SimpleNamespace(new_page=lambda: raw_page)
    browser = SimpleNamespace(new_context=lambda user_agent: context, close=lambda: closed.append(True))
    driver, stopped = _fake_driver(lambda headless: browser)
    monkeypatch.setattr(playwright_session, "sync_playwright", lambda: driver)

    provider = playwright_session.PlaywrightSessionProvider(headless=True)
    with open_session(provider) as (_session, page):
        assert page.content() == "<html></html>"

    assert closed == [True]
    assert stopped == [True]


def test_wait_translates_closed_page_errors():
    raw = FakeRawPage()

    def closed(delay):
        raise PlaywrightError("Target page, context or browser has been closed")

    raw.wait_for_timeout = closed
    page = playwright_session.PlaywrightPage(raw)

    with pytest.raises(NavigationError) as excinfo:
        page.wait(100)

    assert excinfo.value.url == "https://docs/current"
    assert "has been closed" in excinfo.value.reason


class ClosingRawPage(FakeRawPage):
    """Raw page whose settle wait fails while showing ``closing_url``."""

    def __init__(self, closing_url):
        super().__init__()
        self.closing_url = closing_url

    def goto(self, url, timeout, wait_until):
        super().goto(url, timeout, wait_until)
        self.url = url

    def wait_for_timeout(self, delay):
        if self.url == self.closing_url:
            raise PlaywrightError("Target page, context or browser has been closed")
        super().wait_for_timeout(delay)

    def evaluate(self, script):
        path = self.url.rsplit("/", 1)[-1]
        return {"url": self.url, "text": f"GET /{path}", "links": []}


def test_crawler_keeps_going_when_settle_wait_fails_on_a_real_page_adapter():
    a, b = "https://docs/api-reference/a", "https://docs/api-reference/b"
    raw = ClosingRawPage(closing_url=a)
    provider = SimpleNamespace(
        acquire=lambda: "session",
        open_page=lambda session: playwright_session.PlaywrightPage(raw),
        release=lambda session: None,
    )
    config = CrawlerConfig(section="core", seeds=(a, b), report_path=Path("/tmp/endpoints.json"))

    report = CatalogCrawler(config, provider).run()

    assert report.success is True
    assert [endpoint.path for endpoint in report.endpoints] == ["/b"]
    assert report.seeds[0].stop_reason is StopReason.ERROR
