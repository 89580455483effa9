"""In-memory stand-ins for the rendering collaborator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from endpoint_catalog.core.errors import NavigationError, SessionAcquisitionError  # type: ignore[import]

PageSpec = Union[Dict[str, Any], Exception]


def make_page(
    url: str,
    *,
    text: str = "",
    heading: Optional[str] = None,
    title: str = "",
    next_url: Optional[str] = None,
    next_text: str = "Next",
    extra_links: Optional[List[Dict[str, str]]] = None,
) -> Dict[str, Any]:
    """Builds the raw dictionary the snapshot script would return for a page."""

    links = list(extra_links or [])
    if next_url:
        links.append({"href": next_url, "text": next_text})
    return {"url": url, "title": title, "heading": heading, "text": text, "links": links}


@dataclass
class FakePage:
    pages: Dict[str, PageSpec]
    html: Dict[str, str] = field(default_factory=dict)
    navigations: List[str] = field(default_factory=list)
    waits: List[int] = field(default_factory=list)
    timeouts: List[int] = field(default_factory=list)
    current: Optional[str] = None

    def navigate(self, url: str, *, timeout_ms: int, wait_until: str) -> None:
        self.navigations.append(url)
        self.timeouts.append(timeout_ms)
        spec = self.pages.get(url)
        if spec is None and url not in self.html:
            raise NavigationError(url, "net::ERR_NAME_NOT_RESOLVED")
        if isinstance(spec, Exception):
            raise spec
        self.current = url

    def wait(self, delay_ms: int) -> None:
        self.waits.append(delay_ms)

    def evaluate(self, script: str) -> Any:
        assert self.current is not None
        return self.pages[self.current]

    def content(self) -> str:
        assert self.current is not None
        return self.html[self.current]


@dataclass
class FakeProvider:
    page: FakePage
    fail_acquire: bool = False
    acquired: int = 0
    released: int = 0

    def acquire(self) -> str:
        if self.fail_acquire:
            raise SessionAcquisitionError("browser unavailable")
        self.acquired += 1
        return "session"

    def open_page(self, session: str) -> FakePage:
        return self.page

    def release(self, session: str) -> None:
        self.released += 1
