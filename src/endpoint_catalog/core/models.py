"""Shared data structures used across crawler stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD")


@dataclass(frozen=True)
class DocLink:
    """An anchor found on a rendered page, with its href already resolved."""

    href: str
    text: str

    def to_dict(self) -> Dict[str, str]:
        return {"href": self.href, "text": self.text}


@dataclass(frozen=True)
class PageSnapshot:
    """Serializable view of a rendered page, produced inside the browser."""

    url: str
    title: str = ""
    heading: Optional[str] = None
    text: str = ""
    links: Tuple[DocLink, ...] = ()

    @classmethod
    def from_raw(cls, raw: Any, *, fallback_url: str) -> "PageSnapshot":
        """Builds a snapshot from the dictionary returned by ``page.evaluate``.

        Raises ``ValueError`` when ``raw`` does not have the expected shape.
        """

        if not isinstance(raw, dict):
            raise ValueError(f"expected an object, got {type(raw).__name__}")

        links: List[DocLink] = []
        for item in raw.get("links") or []:
            if not isinstance(item, dict):
                continue
            href = item.get("href")
            if not isinstance(href, str) or not href:
                continue
            text = item.get("text")
            links.append(DocLink(href=href, text=text if isinstance(text, str) else ""))

        heading = raw.get("heading")
        return cls(
            url=str(raw.get("url") or fallback_url),
            title=str(raw.get("title") or ""),
            heading=heading if isinstance(heading, str) else None,
            text=str(raw.get("text") or ""),
            links=tuple(links),
        )


@dataclass(frozen=True)
class Endpoint:
    """A validated catalog entry."""

    method: str
    path: str
    title: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "method": self.method,
            "path": self.path,
            "title": self.title,
            "url": self.url,
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Endpoint":
        return cls(
            method=raw.get("method", ""),
            path=raw.get("path", ""),
            title=raw.get("title", ""),
            url=raw.get("url", ""),
        )


@dataclass(frozen=True)
class PageRecord:
    """Raw per-page extraction result, before validation."""

    url: str
    title: str = ""
    method: str = ""
    path: str = ""
    next_url: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return bool(self.method) and bool(self.path)

    def to_endpoint(self) -> Optional[Endpoint]:
        if not self.is_valid:
            return None
        return Endpoint(method=self.method, path=self.path, title=self.title, url=self.url)


class SeedStatus(str, Enum):
    COMPLETED = "completed"
    TERMINATED_BY_ERROR = "terminated_by_error"


class StopReason(str, Enum):
    NO_NEXT_LINK = "no_next_link"
    ALREADY_VISITED = "already_visited"
    BUDGET_EXHAUSTED = "budget_exhausted"
    ERROR = "error"


@dataclass
class SeedOutcome:
    """Why and where a single seed's traversal stopped."""

    seed: str
    status: SeedStatus = SeedStatus.COMPLETED
    stop_reason: StopReason = StopReason.NO_NEXT_LINK
    endpoints: List[Endpoint] = field(default_factory=list)
    pages_visited: int = 0
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status is SeedStatus.TERMINATED_BY_ERROR

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "status": self.status.value,
            "stopReason": self.stop_reason.value,
            "pagesVisited": self.pages_visited,
            "endpoints": len(self.endpoints),
            "error": self.error,
        }
