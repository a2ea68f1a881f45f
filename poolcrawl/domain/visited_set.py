import threading
from typing import List, Optional


class VisitedSet:
    """
    Thread-safe set of URLs already claimed during a crawl.

    Insertion is the claim: whichever worker inserts a URL owns its fetch.
    The set also enforces the crawl budget, so it never holds more than
    `budget` URLs.
    """

    def __init__(self, budget: Optional[int] = None):
        """Create a visited set.

        If `budget` is None the set is unbounded.
        """
        self._budget = int(budget) if budget is not None else None
        self._lock = threading.Lock()
        self._claimed: set[str] = set()
        # insertion order, for reporting
        self._order: List[str] = []

    @property
    def budget(self) -> Optional[int]:
        return self._budget

    def try_claim(self, url: str) -> bool:
        """Claim `url`. Returns True only for the call that inserts it.

        Budget exhaustion wins over novelty: once the set is full every
        call returns False, even for URLs never seen before.
        """
        with self._lock:
            if self._budget is not None and len(self._claimed) >= self._budget:
                return False
            if url in self._claimed:
                return False
            self._claimed.add(url)
            self._order.append(url)
            return True

    def is_full(self) -> bool:
        if self._budget is None:
            return False
        with self._lock:
            return len(self._claimed) >= self._budget

    def snapshot(self) -> List[str]:
        with self._lock:
            return list(self._order)

    def __contains__(self, url: str) -> bool:
        with self._lock:
            return url in self._claimed

    def __len__(self) -> int:
        with self._lock:
            return len(self._claimed)
