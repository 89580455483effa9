"""Visited-set and per-seed budget bookkeeping for the crawl driver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.config import MAX_PAGES_PER_SEED
from ..core.models import StopReason


@dataclass(slots=True)
class CrawlBudget:
    """Remaining page visits for one seed's traversal."""

    remaining: int

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0

    def consume(self) -> None:
        self.remaining -= 1


@dataclass(slots=True)
class FrontierTracker:
    """Decides whether a traversal may move on to a candidate URL.

    URLs are marked visited when claimed, before the page is rendered, so a
    cycle of "Next" links or two converging seeds never render a page twice.
    """

    max_pages_per_seed: int = MAX_PAGES_PER_SEED
    visited_urls: set[str] = field(default_factory=set)

    def new_budget(self) -> CrawlBudget:
        return CrawlBudget(remaining=self.max_pages_per_seed)

    def check(self, url: Optional[str], budget: CrawlBudget) -> Optional[StopReason]:
        """Returns the reason to stop, or ``None`` when ``url`` may be visited."""

        if not url:
            return StopReason.NO_NEXT_LINK
        if url in self.visited_urls:
            return StopReason.ALREADY_VISITED
        if budget.exhausted:
            return StopReason.BUDGET_EXHAUSTED
        return None

    def claim(self, url: Optional[str], budget: CrawlBudget) -> Optional[StopReason]:
        """Like :meth:`check`, but also records the visit when allowed."""

        reason = self.check(url, budget)
        if reason is None:
            self.visited_urls.add(url)  # type: ignore[arg-type]
            budget.consume()
        return reason

    def is_visited(self, url: str) -> bool:
        return url in self.visited_urls
