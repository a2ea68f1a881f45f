import logging
import threading
from enum import Enum
from typing import Optional

from poolcrawl.domain.http_response import HttpResponse
from poolcrawl.domain.page_result import PageResult
from poolcrawl.domain.result_aggregator import ResultAggregator
from poolcrawl.domain.visited_set import VisitedSet
from poolcrawl.domain.work_tracker import WorkTracker, is_stopped
from poolcrawl.exceptions import FetchError

logger = logging.getLogger(__name__)


class WorkerState(Enum):
    POLLING = "polling"
    FETCHING = "fetching"
    EXTRACTING = "extracting"
    RECORDING = "recording"
    STOPPED = "stopped"


class CrawlWorker:
    """One member of the crawl pool.

    Loops: take a URL, claim it, fetch it, extract links, publish them,
    record a result. Per-page failures become failed results and the loop
    carries on. The worker stops when the tracker reports the crawl is
    exhausted, when the budget is spent, or when `stop_event` is set.
    """

    def __init__(
        self,
        worker_id: int,
        *,
        fetcher,
        link_extractor,
        visited: VisitedSet,
        tracker: WorkTracker,
        results: ResultAggregator,
        scope: str,
        stop_event: Optional[threading.Event] = None,
    ):
        self.worker_id = worker_id
        self.fetcher = fetcher
        self.link_extractor = link_extractor
        self.visited = visited
        self.tracker = tracker
        self.results = results
        self.scope = scope
        self.stop_event = stop_event
        self.state = WorkerState.POLLING
        self.pages_processed = 0
        self.cancelled = False

    def _set_state(self, state: WorkerState) -> None:
        logger.debug("worker %s: %s -> %s", self.worker_id, self.state.value, state.value)
        self.state = state

    def run(self) -> None:
        try:
            while True:
                self._set_state(WorkerState.POLLING)
                url = self.tracker.acquire(self.stop_event)
                if url is None:
                    if is_stopped(self.stop_event):
                        logger.info("worker %s cancelled", self.worker_id)
                        self.cancelled = True
                    break

                if not self.visited.try_claim(url):
                    self.tracker.release()
                    if self.visited.is_full():
                        logger.info("worker %s: budget of %s pages reached", self.worker_id, self.visited.budget)
                        break
                    logger.debug("Skipping (visited) %s", url)
                    continue

                try:
                    result = self.process(url)
                    self._set_state(WorkerState.RECORDING)
                    self.results.record(result)
                    self.pages_processed += 1
                finally:
                    self.tracker.release()
        finally:
            self._set_state(WorkerState.STOPPED)

    def process(self, url: str) -> PageResult:
        """Fetch a claimed URL and publish its links. Never raises."""
        self._set_state(WorkerState.FETCHING)
        try:
            response = self.fetcher.fetch(url)
        except FetchError as e:
            logger.warning("Fetch failed for %s: %s", url, e)
            return PageResult.failed(url)
        except Exception as e:
            logger.error("Fetch error for %s: %s", url, e, exc_info=True)
            return PageResult.failed(url)

        self._set_state(WorkerState.EXTRACTING)
        content = response.text if isinstance(response, HttpResponse) else response
        try:
            links = set(self.link_extractor.extract(content, self.scope, page_url=url))
        except Exception as e:
            logger.error("Link extraction error for %s: %s", url, e, exc_info=True)
            return PageResult.failed(url)

        if links:
            self.tracker.publish(links)
        logger.info("Fetched %s -> %s links", url, len(links))
        return PageResult(url=url, links_found=len(links), success=True)
