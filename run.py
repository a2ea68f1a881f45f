import argparse
import logging
import sys
from typing import Optional

from poolcrawl import config
from poolcrawl.container import Container
from poolcrawl.domain.crawl_report import CrawlReport
from poolcrawl.exceptions import ConfigurationError


def print_report(report: CrawlReport, out=None) -> None:
    out = out or sys.stdout
    out.write(f"Total pages crawled: {report.pages_crawled}\n")
    out.write(f"Succeeded: {len(report.succeeded)}  Failed: {len(report.failed)}\n")
    if report.stopped:
        out.write("Crawl was stopped before completion.\n")
    out.write("\nPage details:\n")
    for i, page in enumerate(report.results, start=1):
        status = "ok" if page.success else "failed"
        out.write(f"{i}. {page.url} - {page.links_found} links [{status}]\n")


def build_parser(defaults: dict) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Budgeted multi-threaded site crawler")
    parser.add_argument("url", help="Start URL; also the scope prefix for discovered links")
    parser.add_argument("--budget", type=int, default=defaults["POOLCRAWL_BUDGET"], help="Maximum pages to crawl")
    parser.add_argument("--workers", type=int, default=defaults["POOLCRAWL_WORKERS"], help="Number of worker threads")
    return parser


def main(argv=None, container: Optional[Container] = None) -> int:
    logging.basicConfig(
        level=config.log_level(),
        format="%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s",
    )
    container = container or Container()
    args = build_parser(container.config()).parse_args(argv)

    crawler = container.crawler()
    try:
        report = crawler.crawl(args.url, budget=args.budget, worker_count=args.workers)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print_report(report)
    return 0


if __name__ == '__main__':
    sys.exit(main())
