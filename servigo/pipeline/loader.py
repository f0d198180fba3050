"""
Listing loader - fetch, enrich and publish the listing set as one snapshot.
"""
import logging
import threading
from datetime import datetime
from typing import Callable, Literal, Optional

from pydantic import BaseModel

from ..client.backend import BackendClient, BackendError
from ..client.changes import ChangeEvent, ChangeFeed, Subscription
from ..config import get_config
from ..models.enrichment import EnrichedListing
from ..models.listing import Category

from .enrichment import ListingEnricher


logger = logging.getLogger(__name__)

LoadState = Literal["loading", "ready", "error"]


class ListingSnapshot(BaseModel):
    """The enriched listing set as last published. Replaced, never mutated."""
    generation: int = 0
    listings: tuple[EnrichedListing, ...] = ()
    categories: tuple[Category, ...] = ()
    error: Optional[str] = None
    loaded_at: Optional[datetime] = None

    @property
    def state(self) -> LoadState:
        if self.error is not None:
            return "error"
        if self.loaded_at is None:
            return "loading"
        return "ready"


SnapshotListener = Callable[[ListingSnapshot], None]


class ListingLoader:
    """
    Owns the published listing snapshot for one listing view.

    Each load takes a generation number when it starts. A finished load
    publishes only if no load that started after it has published already,
    so overlapping reloads never roll the view back to older data.
    """

    def __init__(
        self,
        client: BackendClient,
        enricher: Optional[ListingEnricher] = None,
        feed: Optional[ChangeFeed] = None,
    ):
        config = get_config()
        self.client = client
        self.enricher = enricher or ListingEnricher(client, max_workers=config.loader.max_workers)
        self.feed = feed
        self._lock = threading.Lock()
        self._started = 0
        self._snapshot = ListingSnapshot()
        self._listeners: list[SnapshotListener] = []
        self._subscription: Optional[Subscription] = None

    @property
    def snapshot(self) -> ListingSnapshot:
        return self._snapshot

    def add_listener(self, listener: SnapshotListener) -> None:
        self._listeners.append(listener)

    def load_listings(self) -> ListingSnapshot:
        """
        Run a full load: categories, active listings, per-listing enrichment.

        Only a failure of the listings query itself produces an error snapshot.

        Returns:
            The snapshot current after this load (which may be a newer one)
        """
        with self._lock:
            self._started += 1
            generation = self._started

        logger.info(f"Loading listings (generation {generation})")

        categories = self._load_categories()

        try:
            listings = self.client.fetch_active_listings()
        except BackendError as e:
            logger.error(f"Error fetching services: {e}")
            return self._publish(ListingSnapshot(
                generation=generation,
                categories=tuple(categories),
                error=str(e),
            ))

        active = [listing for listing in listings if listing.is_active]
        if len(active) != len(listings):
            logger.warning(f"Dropped {len(listings) - len(active)} inactive listings")

        enriched = self.enricher.enrich_batch(active)

        return self._publish(ListingSnapshot(
            generation=generation,
            listings=tuple(enriched),
            categories=tuple(categories),
            loaded_at=datetime.now(),
        ))

    def _load_categories(self) -> list[Category]:
        try:
            return self.client.fetch_categories()
        except BackendError as e:
            logger.warning(f"Could not fetch categories, keeping previous: {e}")
            return list(self._snapshot.categories)

    def _publish(self, snapshot: ListingSnapshot) -> ListingSnapshot:
        with self._lock:
            if snapshot.generation <= self._snapshot.generation:
                logger.info(
                    f"Discarding stale load {snapshot.generation} "
                    f"(published: {self._snapshot.generation})"
                )
                return self._snapshot
            self._snapshot = snapshot

        logger.info(f"Published {len(snapshot.listings)} listings (generation {snapshot.generation})")
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Snapshot listener failed")
        return snapshot

    # Lifecycle

    def start(self) -> ListingSnapshot:
        """Load once and reload on every change to the listings table."""
        snapshot = self.load_listings()
        if self.feed is not None and self._subscription is None:
            self._subscription = self.feed.subscribe(self._on_change)
        return snapshot

    def stop(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def _on_change(self, changes: list[ChangeEvent]) -> None:
        """One reload per batch, however many rows changed."""
        summary = ", ".join(f"{event.kind} {event.record_id}" for event in changes[:5])
        logger.info(f"{len(changes)} listing changes ({summary}), reloading")
        self.load_listings()

    def on_listing_created(self) -> None:
        """Callback for the post-service form."""
        self.load_listings()
