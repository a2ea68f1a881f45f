import threading
from typing import Iterable, Optional

from poolcrawl.domain.frontier import Frontier


def is_stopped(stop_event: Optional[threading.Event]) -> bool:
    return stop_event is not None and stop_event.is_set()


class WorkTracker:
    """
    Pairs the frontier with a count of in-flight workers.

    A worker is in flight from the moment it takes a URL until it releases
    it (claim lost, or result recorded). Taking a URL, publishing links and
    releasing all happen under one condition, so "frontier empty and nobody
    in flight" is observed atomically and is final once seen.
    """

    def __init__(self, frontier: Frontier, idle_wait_seconds: float = 0.1):
        self._frontier = frontier
        self._cond = threading.Condition()
        self._in_flight = 0
        self._idle_wait_seconds = idle_wait_seconds

    @property
    def in_flight(self) -> int:
        with self._cond:
            return self._in_flight

    def acquire(self, stop_event: Optional[threading.Event] = None) -> Optional[str]:
        """Take the next URL and mark the caller in flight.

        Waits while the frontier is empty but other workers may still publish
        links. Returns None when the crawl is exhausted or `stop_event` is set.
        """
        with self._cond:
            while True:
                if is_stopped(stop_event):
                    return None
                url = self._frontier.pop()
                if url is not None:
                    self._in_flight += 1
                    return url
                if self._in_flight == 0:
                    # wake idle peers so they observe the same terminal state
                    self._cond.notify_all()
                    return None
                # timeout keeps cancellation responsive
                self._cond.wait(timeout=self._idle_wait_seconds)

    def publish(self, urls: Iterable[str]) -> None:
        with self._cond:
            self._frontier.push_many(urls)
            self._cond.notify_all()

    def release(self) -> None:
        with self._cond:
            if self._in_flight <= 0:
                raise RuntimeError("release() called with no worker in flight")
            self._in_flight -= 1
            self._cond.notify_all()
