import threading
from collections import deque
from typing import Deque, Iterable, Optional


class Frontier:
    """Thread-safe FIFO of discovered URLs waiting to be fetched.

    Duplicates are accepted here and resolved when a worker claims the URL.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._queue: Deque[str] = deque()

    def push(self, url: str) -> None:
        with self._lock:
            self._queue.append(url)

    def push_many(self, urls: Iterable[str]) -> None:
        with self._lock:
            self._queue.extend(urls)

    def pop(self) -> Optional[str]:
        """Return the oldest queued URL, or None if the frontier is empty right now."""
        with self._lock:
            if not self._queue:
                return None
            return self._queue.popleft()

    def is_empty(self) -> bool:
        with self._lock:
            return not self._queue

    def __len__(self) -> int:
        with self._lock:
            return len(self._queue)
