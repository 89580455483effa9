"""Reporters that receive the final crawl result."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .artifacts import CrawlReport, LinkHarvestReport

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    def emit(self, report: CrawlReport) -> None:
        ...


@dataclass(slots=True)
class JsonFileReporter:
    """Writes the report as a single JSON document."""

    path: Path

    def emit(self, report: CrawlReport) -> None:
        report.save(self.path)
        logger.info("Wrote %d endpoint(s) to %s", report.total_endpoints, self.path)


@dataclass(slots=True)
class ConsoleReporter:
    """Prints a short human-readable summary of a run."""

    show_endpoints: bool = True

    def emit(self, report: CrawlReport) -> None:
        print(f"[+] {report.total_endpoints} endpoint(s) encontrados em '{report.section}'")
        if self.show_endpoints:
            for endpoint in report.endpoints:
                print(f" - {endpoint.method:<6} {endpoint.path}  ({endpoint.title})")
        for outcome in report.failed_seeds:
            print(f"[!] Seed interrompida por erro: {outcome.seed} :: {outcome.error}")


__all__ = [
    "ConsoleReporter",
    "CrawlReport",
    "JsonFileReporter",
    "LinkHarvestReport",
    "Reporter",
]
