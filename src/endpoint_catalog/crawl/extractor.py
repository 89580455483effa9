"""Heuristics that turn a rendered documentation page into a ``PageRecord``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from ..core.config import SECTION_MARKER
from ..core.models import HTTP_METHODS, DocLink, PageRecord, PageSnapshot

METHOD_PATH_PATTERN = re.compile(r"(%s)\s+(/\S*)" % "|".join(HTTP_METHODS))
NEXT_LABEL_PATTERN = re.compile(r"\bNext$")
TITLE_SEPARATOR = " - "

# Runs inside the page; everything returned must be JSON-serializable.
SNAPSHOT_SCRIPT = """
() => {
  const heading = document.querySelector('h1');
  return {
    url: window.location.href,
    title: document.title || '',
    heading: heading ? heading.innerText : null,
    text: document.body ? document.body.innerText : '',
    links: Array.from(document.querySelectorAll('a[href]')).map((anchor) => ({
      href: anchor.href,
      text: (anchor.innerText || anchor.textContent || '').trim(),
    })),
  };
}
"""


class ExtractionStrategy(Protocol):
    """Pluggable page heuristics used by the crawl driver."""

    snapshot_script: str

    def extract(self, snapshot: PageSnapshot) -> PageRecord:
        ...


@dataclass(frozen=True)
class HeuristicExtractor:
    """Finds ``VERB /path`` in the page text, the page title and the Next link."""

    section_marker: str = SECTION_MARKER
    title_separator: str = TITLE_SEPARATOR
    snapshot_script: str = SNAPSHOT_SCRIPT

    def extract(self, snapshot: PageSnapshot) -> PageRecord:
        method, path = find_method_and_path(snapshot.text)
        return PageRecord(
            url=snapshot.url,
            title=self.find_title(snapshot),
            method=method,
            path=path,
            next_url=self.find_next_url(snapshot.links),
        )

    def find_title(self, snapshot: PageSnapshot) -> str:
        heading = (snapshot.heading or "").strip()
        if heading:
            return heading
        return snapshot.title.split(self.title_separator, 1)[0].strip()

    def find_next_url(self, links: Tuple[DocLink, ...]) -> Optional[str]:
        for link in links:
            if not NEXT_LABEL_PATTERN.search(link.text.strip()):
                continue
            if self.section_marker in link.href:
                return link.href
        return None


def find_method_and_path(text: str) -> Tuple[str, str]:
    """Returns the first ``(method, path)`` pair in ``text`` or two empty strings."""

    match = METHOD_PATH_PATTERN.search(text or "")
    if not match:
        return "", ""
    return match.group(1), match.group(2)


def snapshot_from_html(html: str, url: str) -> PageSnapshot:
    """Builds a ``PageSnapshot`` from static HTML, resolving hrefs against ``url``."""

    soup = BeautifulSoup(html, "html.parser")

    title = soup.title.get_text(strip=True) if soup.title else ""
    heading_tag = soup.find("h1")
    heading = heading_tag.get_text(" ", strip=True) if heading_tag else None

    body = soup.body or soup
    text = body.get_text("\n", strip=True)

    links = []
    for anchor in soup.find_all("a", href=True):
        href = anchor.get("href")
        if not href:
            continue
        links.append(DocLink(href=urljoin(url, href), text=anchor.get_text(" ", strip=True)))

    return PageSnapshot(url=url, title=title, heading=heading, text=text, links=tuple(links))
