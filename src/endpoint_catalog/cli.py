"""Command line interface for the endpoint catalog crawler."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from .core.config import CrawlerConfig, load_configuration
from .core.errors import SessionAcquisitionError
from .core.report import ConsoleReporter, CrawlReport, JsonFileReporter
from .core.sections import SECTIONS
from .crawl.driver import crawl_catalog
from .crawl.link_harvester import harvest_links
from .render.playwright_session import PlaywrightSessionProvider


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Catálogo de endpoints a partir da documentação")
    parser.add_argument("section", choices=sorted(SECTIONS), help="Seção da documentação")
    parser.add_argument("--report", default=None, help="Arquivo de saída do relatório (JSON)")
    parser.add_argument(
        "--links",
        action="store_true",
        help="Lista apenas os links da primeira página de cada seed, sem seguir 'Next'",
    )
    return parser.parse_args(argv)


def configure_logging() -> None:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def run_crawl(config: CrawlerConfig) -> CrawlReport:
    provider = PlaywrightSessionProvider(headless=config.headless)
    print(f"[*] Iniciando crawler para a seção '{config.section}' ({len(config.seeds)} seed(s))")
    report = crawl_catalog(
        config,
        provider,
        reporters=(JsonFileReporter(config.report_path), ConsoleReporter()),
    )
    print(f"[+] Relatório salvo em {config.report_path}")
    return report


def run_link_listing(config: CrawlerConfig) -> None:
    provider = PlaywrightSessionProvider(headless=config.headless)
    print(f"[*] Listando links de {len(config.seeds)} página(s) da seção '{config.section}'")
    report = harvest_links(config, config.seeds, provider)
    for link in report.links:
        print(f" - {link.href}  ({link.text})")
    report.save(config.report_path)
    print(f"[+] {report.total_links} link(s) salvos em {config.report_path}")


def run_cli(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_arguments(argv)
    configure_logging()
    report_name = args.report
    if report_name is None and args.links:
        report_name = f"links_{args.section}.json"
    config = load_configuration(args.section, report_name)

    try:
        if args.links:
            run_link_listing(config)
        else:
            run_crawl(config)
    except SessionAcquisitionError as exc:
        print(f"[!] Não foi possível iniciar o navegador: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def run_section(section: str) -> None:
    """Entry point body shared by the per-section console scripts."""

    run_cli([section])


def crawl_core() -> None:
    run_section("core")


def crawl_stream() -> None:
    run_section("stream")


def crawl_storage() -> None:
    run_section("storage")


def crawl_shield() -> None:
    run_section("shield")


def crawl_scripting() -> None:
    run_section("scripting")


def crawl_containers() -> None:
    run_section("containers")


def main() -> None:
    run_cli()


if __name__ == "__main__":
    main()
