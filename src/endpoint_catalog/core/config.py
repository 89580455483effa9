"""Configuration loading for crawl runs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from .sections import get_seeds

MAX_PAGES_PER_SEED = 50
RENDER_TIMEOUT_MS = 30_000
SETTLE_DELAY_MS = 1_500
WAIT_UNTIL = "networkidle"
SECTION_MARKER = "/api-reference/"


@dataclass(slots=True)
class CrawlerConfig:
    """Holds runtime options for a single catalog crawl."""

    section: str
    seeds: Sequence[str]
    report_path: Path
    headless: bool = True
    max_pages_per_seed: int = MAX_PAGES_PER_SEED
    render_timeout_ms: int = RENDER_TIMEOUT_MS
    settle_delay_ms: int = SETTLE_DELAY_MS
    wait_until: str = WAIT_UNTIL
    section_marker: str = SECTION_MARKER


def default_report_name(section: str) -> str:
    return f"endpoints_{section}.json"


def load_configuration(
    section: str,
    report_name: Optional[str] = None,
) -> CrawlerConfig:
    """Builds a ``CrawlerConfig`` for a named section.

    Seeds and crawl limits are fixed in source; only the browser mode comes
    from the environment (or a ``.env`` file).
    """

    load_dotenv()  # Loads .env values if present

    seeds = get_seeds(section)
    report_path = Path(report_name or default_report_name(section)).resolve()

    return CrawlerConfig(
        section=section,
        seeds=seeds,
        report_path=report_path,
        headless=os.getenv("HEADLESS", "true").lower() in {"1", "true", "yes"},
    )
