"""
Listing enrichment - join each listing with its profile, photo and provider.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from ..client.backend import BackendClient
from ..models.enrichment import EnrichedListing
from ..models.listing import PLACEHOLDER_PROVIDER_NAME, Listing, Profile, Provider


logger = logging.getLogger(__name__)


def placeholder_provider(listing: Listing) -> Provider:
    """Synthetic provider used when the listing's real provider is unavailable."""
    return Provider(
        id=listing.service_provider_id or "unknown",
        user_id=listing.user_id,
        business_name=listing.business_name or PLACEHOLDER_PROVIDER_NAME,
        business_description=None,
        rating=0,
        total_reviews=0,
        is_approved=False,
        job_category_id=listing.job_category_id,
        profile_photo_url=None,
        is_placeholder=True,
    )


def resolve_provider(listing: Listing, record: Optional[Provider]) -> Provider:
    """Total: always returns a provider, the placeholder on a miss."""
    if record is not None:
        return record
    return placeholder_provider(listing)


class ListingEnricher:
    """
    Enriches listings with provider, profile and primary photo.
    Every lookup is independent: a failure degrades that field only.
    """

    def __init__(self, client: BackendClient, max_workers: int = 8):
        self.client = client
        self.max_workers = max(1, max_workers)

    def _lookup_profile(self, listing: Listing) -> Optional[Profile]:
        if not listing.user_id:
            return None
        try:
            return self.client.fetch_profile(listing.user_id)
        except Exception as e:
            logger.warning(f"Could not fetch profile for user {listing.user_id}: {e}")
            return None

    def _lookup_photo(self, listing: Listing) -> Optional[str]:
        try:
            return self.client.fetch_primary_image(listing.id)
        except Exception as e:
            logger.warning(f"Service photo fetch failed for service {listing.id}: {e}")
            return None

    def _lookup_provider(self, listing: Listing) -> Optional[Provider]:
        if not listing.service_provider_id:
            return None
        try:
            return self.client.fetch_provider(listing.service_provider_id)
        except Exception as e:
            logger.warning(f"Could not fetch service provider for service {listing.id}: {e}")
            return None

    def enrich(self, listing: Listing) -> EnrichedListing:
        """
        Enrich a single listing.

        Args:
            listing: The listing to enrich

        Returns:
            EnrichedListing, with a placeholder provider when needed
        """
        profile = self._lookup_profile(listing)
        photo = self._lookup_photo(listing)
        provider = resolve_provider(listing, self._lookup_provider(listing))

        return EnrichedListing(
            listing=listing,
            provider=provider,
            profile=profile,
            service_photo=photo,
        )

    def enrich_batch(self, listings: list[Listing]) -> list[EnrichedListing]:
        """Enrich listings concurrently; results keep the input order."""
        logger.info(f"Enriching {len(listings)} listings")
        if not listings:
            return []
        workers = min(self.max_workers, len(listings))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="enrich") as pool:
            return list(pool.map(self.enrich, listings))
