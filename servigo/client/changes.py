"""
Change feed - notifies subscribers of inserts, updates and deletes on the listings table.

The feed polls row fingerprints and diffs consecutive snapshots; subscribers
only learn that something changed, never receive a patch.
"""
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Literal, Optional

from .backend import BackendClient, BackendError


logger = logging.getLogger(__name__)

ChangeKind = Literal["INSERT", "UPDATE", "DELETE"]


@dataclass(frozen=True)
class ChangeEvent:
    kind: ChangeKind
    record_id: str


# Receives every change detected by one poll
ChangeCallback = Callable[[list[ChangeEvent]], None]


def diff_snapshots(previous: dict[str, str], current: dict[str, str]) -> list[ChangeEvent]:
    """Compare two id -> fingerprint snapshots."""
    events = []
    for record_id, signature in current.items():
        if record_id not in previous:
            events.append(ChangeEvent("INSERT", record_id))
        elif previous[record_id] != signature:
            events.append(ChangeEvent("UPDATE", record_id))
    for record_id in previous:
        if record_id not in current:
            events.append(ChangeEvent("DELETE", record_id))
    return events


class Subscription:
    """Handle returned by ChangeFeed.subscribe()."""

    def __init__(self, feed: "ChangeFeed", callback: ChangeCallback):
        self._feed = feed
        self.callback = callback
        self.active = True

    def unsubscribe(self) -> None:
        if self.active:
            self.active = False
            self._feed._remove(self)


class ChangeFeed:
    """
    Polling change feed for the listings table.
    The poller thread starts with the first subscriber and stops with the last.
    """

    def __init__(self, client: BackendClient, poll_interval: float = 5.0):
        self.client = client
        self.poll_interval = poll_interval
        self._subscriptions: list[Subscription] = []
        self._lock = threading.Lock()
        self._stop: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None
        self._snapshot: Optional[dict[str, str]] = None

    def subscribe(self, callback: ChangeCallback) -> Subscription:
        subscription = Subscription(self, callback)
        with self._lock:
            self._subscriptions.append(subscription)
            if self._thread is None:
                self._start()
        return subscription

    def _remove(self, subscription: Subscription) -> None:
        with self._lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)
            if not self._subscriptions:
                self._halt()

    def _start(self) -> None:
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._run, args=(self._stop,), name="listing-change-feed", daemon=True
        )
        self._thread.start()
        logger.info("Change feed started")

    def _halt(self) -> None:
        if self._stop is not None:
            self._stop.set()
        self._stop = None
        self._thread = None
        self._snapshot = None
        logger.info("Change feed stopped")

    def _run(self, stop: threading.Event) -> None:
        # Local to this thread; self._snapshot belongs to poll_once()
        baseline: Optional[dict[str, str]] = None
        while not stop.is_set():
            baseline, changes = self._poll(baseline)
            if changes and not stop.is_set():
                self._dispatch(changes)
            stop.wait(self.poll_interval)

    def poll_once(self) -> list[ChangeEvent]:
        """
        Take one snapshot and dispatch the differences as one batch.
        The first snapshot only establishes the baseline.
        """
        self._snapshot, changes = self._poll(self._snapshot)
        if changes:
            self._dispatch(changes)
        return changes

    def _poll(
        self, previous: Optional[dict[str, str]]
    ) -> tuple[Optional[dict[str, str]], list[ChangeEvent]]:
        try:
            current = self.client.fetch_listing_signatures()
        except BackendError as e:
            logger.warning(f"Change feed poll failed: {e}")
            return previous, []

        if previous is None:
            return current, []
        return current, diff_snapshots(previous, current)

    def _dispatch(self, changes: list[ChangeEvent]) -> None:
        with self._lock:
            subscriptions = list(self._subscriptions)
        for subscription in subscriptions:
            try:
                subscription.callback(changes)
            except Exception:
                logger.exception(f"Change feed subscriber failed on {len(changes)} changes")
