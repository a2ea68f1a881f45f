import logging
import threading
from typing import Callable, Optional

from poolcrawl.domain.crawl_report import CrawlReport
from poolcrawl.domain.frontier import Frontier
from poolcrawl.domain.result_aggregator import ResultAggregator
from poolcrawl.domain.visited_set import VisitedSet
from poolcrawl.domain.work_tracker import WorkTracker
from poolcrawl.exceptions import ConfigurationError
from poolcrawl.services.crawl_worker import CrawlWorker
from poolcrawl.services.fetcher import Fetcher
from poolcrawl.services.link_extractor import LinkExtractor

logger = logging.getLogger(__name__)


def _positive_int(field: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(field, value, "must be an integer")
    if value <= 0:
        raise ConfigurationError(field, value, "must be > 0")
    return value


class Crawler:
    """Runs a budgeted breadth-first crawl over a fixed pool of worker threads.

    Every call to `crawl` builds its own visited set, frontier and result
    list, so one Crawler can serve several crawls, even concurrently.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        link_extractor: LinkExtractor,
        idle_wait_seconds: float = 0.1,
        worker_factory: Callable[..., CrawlWorker] = CrawlWorker,
    ):
        self.fetcher = fetcher
        self.link_extractor = link_extractor
        self.idle_wait_seconds = idle_wait_seconds
        self.worker_factory = worker_factory

    def crawl(self, base_url: str, budget: int, worker_count: int, stop_event: Optional[threading.Event] = None) -> CrawlReport:
        """Crawl from `base_url` until `budget` URLs are claimed or nothing is left.

        `base_url` doubles as the scope handed to the link extractor. Raises
        ConfigurationError before starting any worker if an argument is invalid.
        """
        if not isinstance(base_url, str) or base_url.strip() == "":
            raise ConfigurationError("base_url", base_url, "must be a non-empty string")
        budget = _positive_int("budget", budget)
        worker_count = _positive_int("worker_count", worker_count)

        visited = VisitedSet(budget=budget)
        frontier = Frontier()
        results = ResultAggregator()
        tracker = WorkTracker(frontier, idle_wait_seconds=self.idle_wait_seconds)

        frontier.push(base_url)

        workers = [
            self.worker_factory(
                worker_id,
                fetcher=self.fetcher,
                link_extractor=self.link_extractor,
                visited=visited,
                tracker=tracker,
                results=results,
                scope=base_url,
                stop_event=stop_event,
            )
            for worker_id in range(worker_count)
        ]
        threads = [
            threading.Thread(target=w.run, name=f"poolcrawl-worker-{w.worker_id}", daemon=True)
            for w in workers
        ]

        logger.info("Starting crawl: %s budget=%s workers=%s", base_url, budget, worker_count)
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        stopped = any(w.cancelled for w in workers)
        report = CrawlReport(
            pages_crawled=len(visited),
            results=results.snapshot(),
            stopped=stopped,
        )
        logger.info(
            "Crawl finished: %s pages_crawled=%s failed=%s stopped=%s",
            base_url,
            report.pages_crawled,
            len(report.failed),
            report.stopped,
        )
        return report
