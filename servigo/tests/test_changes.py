"""
Tests for the listing change feed.
"""
import threading
import time

import pytest

from servigo.client.changes import ChangeEvent, ChangeFeed, diff_snapshots
from servigo.models.listing import Listing


class ManualChangeFeed(ChangeFeed):
    """Change feed driven by explicit poll_once() calls instead of a thread."""

    def _start(self):
        pass


class TestDiffSnapshots:
    def test_insert_update_delete(self):
        previous = {"1": "a", "2": "b", "3": "c"}
        current = {"1": "a", "2": "B", "4": "d"}

        events = diff_snapshots(previous, current)

        assert events == [
            ChangeEvent("UPDATE", "2"),
            ChangeEvent("INSERT", "4"),
            ChangeEvent("DELETE", "3"),
        ]

    def test_no_changes(self):
        assert diff_snapshots({"1": "a"}, {"1": "a"}) == []


@pytest.fixture
def feed(backend):
    backend.listings = [Listing(id="1", location="Tunis")]
    return ChangeFeed(backend, poll_interval=60)


class TestChangeFeed:
    """Tests for ChangeFeed polling and dispatch."""

    def test_first_poll_is_baseline(self, feed):
        assert feed.poll_once() == []

    def test_update_detected(self, feed, backend):
        feed.poll_once()
        backend.listings[0] = Listing(id="1", location="Sfax")

        assert feed.poll_once() == [ChangeEvent("UPDATE", "1")]

    def test_poll_failure_returns_no_events(self, feed, backend):
        feed.poll_once()
        backend.failing.add("fetch_listing_signatures")

        assert feed.poll_once() == []

    def test_subscriber_failure_is_isolated(self, backend):
        """Test that one failing subscriber does not prevent delivery to others."""
        backend.listings = [Listing(id="1")]
        feed = ManualChangeFeed(backend, poll_interval=60)
        received = []

        def broken(event):
            raise RuntimeError("subscriber bug")

        feed.subscribe(broken)
        feed.subscribe(received.append)
        feed.poll_once()
        backend.listings.append(Listing(id="2"))
        feed.poll_once()

        assert received == [[ChangeEvent("INSERT", "2")]]

    def test_batch_per_poll(self, backend):
        """Test that all changes found by one poll reach a subscriber together."""
        backend.listings = [Listing(id="1")]
        feed = ManualChangeFeed(backend, poll_interval=60)
        received = []
        feed.subscribe(received.append)

        feed.poll_once()
        backend.listings = [Listing(id="2"), Listing(id="3")]
        feed.poll_once()

        assert len(received) == 1
        assert sorted((event.kind, event.record_id) for event in received[0]) == [
            ("DELETE", "1"),
            ("INSERT", "2"),
            ("INSERT", "3"),
        ]

    def test_thread_lifecycle(self, feed, backend):
        """Test that the poller starts with the first subscriber and stops with the last."""
        received = threading.Event()
        feed.poll_interval = 0.01

        subscription = feed.subscribe(lambda changes: received.set())
        assert feed._thread is not None

        # A second poll means the baseline is in place
        for _ in range(500):
            if backend.calls.count("fetch_listing_signatures") >= 2:
                break
            time.sleep(0.01)
        backend.listings.append(Listing(id="2"))

        assert received.wait(timeout=5)

        subscription.unsubscribe()
        assert feed._thread is None
        assert feed._stop is None

    def test_halted_poller_leaves_no_baseline(self, feed, backend):
        """Test that a poll finishing after unsubscribe does not seed the next start."""
        entered = threading.Event()
        release = threading.Event()
        real_fetch = backend.fetch_listing_signatures

        def blocking_fetch():
            entered.set()
            release.wait(timeout=5)
            return real_fetch()

        backend.fetch_listing_signatures = blocking_fetch
        received = []
        subscription = feed.subscribe(received.append)
        thread = feed._thread
        assert entered.wait(timeout=5)

        subscription.unsubscribe()
        release.set()
        thread.join(timeout=5)

        assert not thread.is_alive()
        assert feed._snapshot is None
        assert received == []

    def test_unsubscribe_twice_is_harmless(self, feed):
        subscription = feed.subscribe(lambda event: None)
        subscription.unsubscribe()
        subscription.unsubscribe()

        assert feed._subscriptions == []
