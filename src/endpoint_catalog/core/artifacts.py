"""Result data structures produced by a crawl run."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from .models import DocLink, Endpoint, SeedOutcome


@dataclass
class CrawlReport:
    """Structured data emitted once at the end of a catalog crawl."""

    section: str = ""
    success: bool = True
    endpoints: List[Endpoint] = field(default_factory=list)
    seeds: List[SeedOutcome] = field(default_factory=list)

    @property
    def total_endpoints(self) -> int:
        return len(self.endpoints)

    @property
    def failed_seeds(self) -> List[SeedOutcome]:
        return [outcome for outcome in self.seeds if outcome.failed]

    @classmethod
    def from_outcomes(cls, section: str, outcomes: List[SeedOutcome]) -> "CrawlReport":
        endpoints: List[Endpoint] = []
        for outcome in outcomes:
            endpoints.extend(outcome.endpoints)
        return cls(section=section, success=True, endpoints=endpoints, seeds=list(outcomes))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "section": self.section,
            "totalEndpoints": self.total_endpoints,
            "endpoints": [endpoint.to_dict() for endpoint in self.endpoints],
            "seeds": [outcome.to_dict() for outcome in self.seeds],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json() + "\n", encoding="utf-8")

    @classmethod
    def load(cls, path: Path) -> "CrawlReport":
        """Reads back the endpoint list; per-seed diagnostics are not restored."""

        raw = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            section=raw.get("section", ""),
            success=bool(raw.get("success", False)),
            endpoints=[Endpoint.from_dict(item) for item in raw.get("endpoints", [])],
        )


@dataclass
class LinkHarvestReport:
    """Documentation links listed from a single page."""

    source_urls: List[str] = field(default_factory=list)
    links: List[DocLink] = field(default_factory=list)
    success: bool = True

    @property
    def total_links(self) -> int:
        return len(self.links)

    def to_json(self) -> str:
        data = {
            "success": self.success,
            "sourceUrls": self.source_urls,
            "totalLinks": self.total_links,
            "links": [link.to_dict() for link in self.links],
        }
        return json.dumps(data, indent=2, ensure_ascii=False)

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json() + "\n", encoding="utf-8")
