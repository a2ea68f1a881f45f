"""Crawl report data model."""
from typing import List, NamedTuple

from poolcrawl.domain.page_result import PageResult


class CrawlReport(NamedTuple):
    """Final outcome of a crawl run, available only after every worker stopped."""

    pages_crawled: int
    """Number of URLs claimed during the run (size of the visited set)"""

    results: List[PageResult]
    """One result per claimed URL, in the order workers recorded them"""

    stopped: bool = False
    """True if the crawl was cut short via stop_event"""

    @property
    def succeeded(self) -> List[PageResult]:
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> List[PageResult]:
        return [r for r in self.results if not r.success]
