import threading

import pytest

from poolcrawl.domain.frontier import Frontier
from poolcrawl.domain.work_tracker import WorkTracker, is_stopped


def test_acquire_returns_none_when_empty_and_idle():
    tracker = WorkTracker(Frontier(), idle_wait_seconds=0.01)
    assert tracker.acquire() is None
    assert tracker.in_flight == 0


def test_acquire_marks_in_flight_and_release_clears():
    frontier = Frontier()
    frontier.push("https://x/a")
    tracker = WorkTracker(frontier, idle_wait_seconds=0.01)
    assert tracker.acquire() == "https://x/a"
    assert tracker.in_flight == 1
    tracker.release()
    assert tracker.in_flight == 0


def test_release_without_acquire_raises():
    tracker = WorkTracker(Frontier())
    with pytest.raises(RuntimeError):
        tracker.release()


def test_idle_worker_waits_for_in_flight_peer_to_publish():
    frontier = Frontier()
    frontier.push("https://x/a")
    tracker = WorkTracker(frontier, idle_wait_seconds=0.01)
    assert tracker.acquire() == "https://x/a"

    got = []
    waiter = threading.Thread(target=lambda: got.append(tracker.acquire()))
    waiter.start()
    waiter.join(timeout=0.1)
    # peer is still in flight, so the waiter must not give up
    assert waiter.is_alive()

    tracker.publish(["https://x/b"])
    waiter.join(timeout=2)
    assert not waiter.is_alive()
    assert got == ["https://x/b"]
    assert tracker.in_flight == 2


def test_idle_worker_stops_once_last_peer_releases():
    frontier = Frontier()
    frontier.push("https://x/a")
    tracker = WorkTracker(frontier, idle_wait_seconds=5)
    tracker.acquire()

    got = []
    waiter = threading.Thread(target=lambda: got.append(tracker.acquire()))
    waiter.start()
    tracker.release()
    waiter.join(timeout=2)
    assert not waiter.is_alive()
    assert got == [None]


def test_stop_event_ends_wait():
    frontier = Frontier()
    frontier.push("https://x/a")
    tracker = WorkTracker(frontier, idle_wait_seconds=0.01)
    tracker.acquire()
    stop = threading.Event()
    stop.set()
    assert tracker.acquire(stop) is None


def test_stop_event_wins_over_queued_urls():
    frontier = Frontier()
    frontier.push("https://x/a")
    tracker = WorkTracker(frontier)
    stop = threading.Event()
    stop.set()
    assert tracker.acquire(stop) is None
    assert len(frontier) == 1


def test_is_stopped_reads_event():
    stop = threading.Event()
    assert is_stopped(None) is False
    assert is_stopped(stop) is False
    stop.set()
    assert is_stopped(stop) is True
