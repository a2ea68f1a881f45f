import threading

from poolcrawl.domain.visited_set import VisitedSet


def test_first_claim_wins_then_always_loses():
    visited = VisitedSet()
    assert visited.try_claim("https://x/a") is True
    assert visited.try_claim("https://x/a") is False
    assert visited.try_claim("https://x/a") is False


def test_different_urls_claimed_independently():
    visited = VisitedSet()
    assert visited.try_claim("https://x/a")
    assert visited.try_claim("https://x/b")
    assert "https://x/a" in visited
    assert "https://x/c" not in visited
    assert len(visited) == 2


def test_no_canonicalization_between_similar_urls():
    visited = VisitedSet()
    assert visited.try_claim("https://x/a")
    assert visited.try_claim("https://x/a/")


def test_budget_blocks_new_urls_once_full():
    visited = VisitedSet(budget=2)
    assert visited.try_claim("https://x/a")
    assert not visited.is_full()
    assert visited.try_claim("https://x/b")
    assert visited.is_full()
    assert visited.try_claim("https://x/c") is False
    assert len(visited) == 2


def test_unbounded_set_is_never_full():
    visited = VisitedSet(budget=None)
    for i in range(50):
        visited.try_claim(f"https://x/{i}")
    assert not visited.is_full()
    assert visited.budget is None


def test_snapshot_keeps_claim_order():
    visited = VisitedSet()
    for url in ["https://x/c", "https://x/a", "https://x/b", "https://x/a"]:
        visited.try_claim(url)
    assert visited.snapshot() == ["https://x/c", "https://x/a", "https://x/b"]


def test_concurrent_claims_of_same_url_have_one_winner():
    visited = VisitedSet()
    barrier = threading.Barrier(16)
    wins = []
    lock = threading.Lock()

    def claim():
        barrier.wait()
        if visited.try_claim("https://x/a"):
            with lock:
                wins.append(1)

    threads = [threading.Thread(target=claim) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(wins) == 1


def test_concurrent_claims_never_exceed_budget():
    visited = VisitedSet(budget=5)
    barrier = threading.Barrier(20)
    wins = []
    lock = threading.Lock()

    def claim(i):
        barrier.wait()
        if visited.try_claim(f"https://x/{i}"):
            with lock:
                wins.append(i)

    threads = [threading.Thread(target=claim, args=(i,)) for i in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(wins) == 5
    assert len(visited) == 5
