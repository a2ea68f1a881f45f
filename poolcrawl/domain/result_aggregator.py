import threading
from typing import List

from poolcrawl.domain.page_result import PageResult


class ResultAggregator:
    """Append-only, thread-safe collection of page results."""

    def __init__(self):
        self._lock = threading.Lock()
        self._results: List[PageResult] = []

    def record(self, result: PageResult) -> None:
        with self._lock:
            self._results.append(result)

    def snapshot(self) -> List[PageResult]:
        with self._lock:
            return list(self._results)

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
