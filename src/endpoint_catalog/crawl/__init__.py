"""Crawl engine: extraction heuristics, frontier bookkeeping and the driver."""

from .driver import CatalogCrawler, crawl_catalog
from .extractor import ExtractionStrategy, HeuristicExtractor, snapshot_from_html
from .frontier import CrawlBudget, FrontierTracker
from .link_harvester import LinkHarvester, harvest_links

__all__ = [
    "CatalogCrawler",
    "CrawlBudget",
    "ExtractionStrategy",
    "FrontierTracker",
    "HeuristicExtractor",
    "LinkHarvester",
    "crawl_catalog",
    "harvest_links",
    "snapshot_from_html",
]
