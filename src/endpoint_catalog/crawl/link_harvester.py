"""Lists the documentation links found on rendered pages, without crawling them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional
from urllib.parse import urlparse, urlunparse

from ..core.artifacts import LinkHarvestReport
from ..core.config import CrawlerConfig
from ..core.models import DocLink
from ..render.session import SessionProvider, open_session
from .extractor import snapshot_from_html

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LinkHarvester:
    """Collects section links in document order, without following any of them."""

    section_marker: str
    seen_urls: set[str] = field(default_factory=set)

    def gather(self, links: List[DocLink]) -> List[DocLink]:
        new_links: List[DocLink] = []
        for link in links:
            normalized = self.normalize(link.href)
            if not normalized or normalized in self.seen_urls:
                continue
            self.seen_urls.add(normalized)
            new_links.append(DocLink(href=normalized, text=link.text))
        return new_links

    def normalize(self, href: Optional[str]) -> Optional[str]:
        if not href or self.section_marker not in href:
            return None

        parsed = urlparse(href)
        if parsed.scheme not in {"http", "https"}:
            return None
        return urlunparse(parsed._replace(fragment=""))


def harvest_links(
    config: CrawlerConfig,
    urls: Iterable[str],
    provider: SessionProvider,
) -> LinkHarvestReport:
    """Renders each URL once and returns the section links found across them.

    Links keep first-seen order and are de-duplicated across pages.

    Navigation and extraction errors propagate: there is no traversal here
    whose partial results would be worth keeping.
    """

    harvester = LinkHarvester(section_marker=config.section_marker)
    report = LinkHarvestReport()

    with open_session(provider) as (_session, page):
        for url in urls:
            page.navigate(url, timeout_ms=config.render_timeout_ms, wait_until=config.wait_until)
            if config.settle_delay_ms > 0:
                page.wait(config.settle_delay_ms)
            snapshot = snapshot_from_html(page.content(), url)

            links = harvester.gather(list(snapshot.links))
            logger.info("Found %d new link(s) on %s", len(links), url)
            report.source_urls.append(url)
            report.links.extend(links)

    return report
