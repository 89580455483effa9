"""Sequential "Next"-link crawler that builds the endpoint catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional

from ..core.artifacts import CrawlReport
from ..core.config import CrawlerConfig
from ..core.errors import ExtractionError, NavigationError
from ..core.models import PageRecord, PageSnapshot, SeedOutcome, SeedStatus, StopReason
from ..core.report import Reporter
from ..render.session import PageHandle, SessionProvider, open_session
from .extractor import ExtractionStrategy, HeuristicExtractor
from .frontier import FrontierTracker

logger = logging.getLogger(__name__)


@dataclass
class CatalogCrawler:
    """Walks each seed's chain of "Next" links and collects endpoints.

    Seeds are drained one at a time on a single shared page, so the output
    order is seed order followed by traversal order within a seed.
    """

    config: CrawlerConfig
    provider: SessionProvider
    extractor: Optional[ExtractionStrategy] = None
    _frontier: FrontierTracker = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.extractor is None:
            self.extractor = HeuristicExtractor(section_marker=self.config.section_marker)
        self._frontier = self._new_frontier()

    @property
    def frontier(self) -> FrontierTracker:
        """Return the visited-set bookkeeping of the current (or last) run."""

        return self._frontier

    # ------------------------------------------------------------------
    # Core workflow
    # ------------------------------------------------------------------
    def run(self) -> CrawlReport:
        """Crawls every seed and returns the aggregated report.

        ``SessionAcquisitionError`` propagates; page level errors only end the
        seed they occurred in.
        """

        self._frontier = self._new_frontier()
        outcomes: List[SeedOutcome] = []

        with open_session(self.provider) as (_session, page):
            for index, seed in enumerate(self.config.seeds, start=1):
                logger.info("Seed %d/%d: %s", index, len(self.config.seeds), seed)
                outcomes.append(self.crawl_seed(page, seed))

        return CrawlReport.from_outcomes(self.config.section, outcomes)

    def crawl_seed(self, page: PageHandle, seed: str) -> SeedOutcome:
        outcome = SeedOutcome(seed=seed)
        budget = self._frontier.new_budget()

        target = seed
        stop_reason = self._frontier.claim(target, budget)
        while stop_reason is None:
            outcome.pages_visited += 1
            try:
                record = self._visit(page, target)
            except (NavigationError, ExtractionError) as exc:
                logger.warning("Stopping seed %s after %s: %s", seed, target, exc)
                outcome.status = SeedStatus.TERMINATED_BY_ERROR
                outcome.stop_reason = StopReason.ERROR
                outcome.error = str(exc)
                return outcome

            endpoint = record.to_endpoint()
            if endpoint is not None:
                outcome.endpoints.append(endpoint)
                logger.info("  %s %s (%s)", endpoint.method, endpoint.path, endpoint.title)
            else:
                logger.debug("No endpoint on %s", target)

            stop_reason = self._frontier.claim(record.next_url, budget)
            if stop_reason is None:
                target = record.next_url  # type: ignore[assignment]

        outcome.stop_reason = stop_reason
        logger.debug(
            "Seed %s finished (%s) after %d page(s)",
            seed,
            stop_reason.value,
            outcome.pages_visited,
        )
        return outcome

    # ------------------------------------------------------------------
    # Crawling primitives
    # ------------------------------------------------------------------
    def _visit(self, page: PageHandle, url: str) -> PageRecord:
        page.navigate(
            url,
            timeout_ms=self.config.render_timeout_ms,
            wait_until=self.config.wait_until,
        )
        if self.config.settle_delay_ms > 0:
            page.wait(self.config.settle_delay_ms)
        return self._extract(page, url)

    def _extract(self, page: PageHandle, url: str) -> PageRecord:
        assert self.extractor is not None
        raw = page.evaluate(self.extractor.snapshot_script)
        try:
            snapshot = PageSnapshot.from_raw(raw, fallback_url=url)
            record = self.extractor.extract(snapshot)
        except Exception as exc:
            raise ExtractionError(url, str(exc)) from exc
        # Endpoints are attributed to the URL that was requested, not the one
        # the page may have redirected to.
        if record.url != url:
            record = replace(record, url=url)
        return record

    def _new_frontier(self) -> FrontierTracker:
        return FrontierTracker(max_pages_per_seed=self.config.max_pages_per_seed)


def crawl_catalog(
    config: CrawlerConfig,
    provider: SessionProvider,
    *,
    extractor: Optional[ExtractionStrategy] = None,
    reporters: Iterable[Reporter] = (),
) -> CrawlReport:
    """Runs one crawl and hands the finished report to every reporter once."""

    report = CatalogCrawler(config, provider, extractor).run()
    for reporter in reporters:
        reporter.emit(report)
    return report
