"""
Shared fixtures: an in-memory stand-in for the hosted backend.
"""
import json
from typing import Any, Optional

import pytest

from servigo.client.backend import BackendError
from servigo.models.details import Review
from servigo.models.enrichment import EnrichedListing
from servigo.models.listing import Category, Listing, Profile, Provider, ServiceImage


class FakeBackend:
    """
    Implements the BackendClient query methods over plain lists.
    Method names listed in `failing` raise BackendError; entries in
    `failing_ids` make single-record lookups fail for that id only.
    """

    def __init__(self):
        self.listings: list[Listing] = []
        self.providers: dict[str, Provider] = {}
        self.profiles: dict[str, Profile] = {}
        self.images: list[ServiceImage] = []
        self.categories: list[Category] = []
        self.reviews: list[Review] = []
        self.failing: set[str] = set()
        self.failing_ids: set[str] = set()
        self.calls: list[str] = []

    def _check(self, method: str, record_id: Optional[str] = None) -> None:
        self.calls.append(method)
        if method in self.failing or (record_id is not None and record_id in self.failing_ids):
            raise BackendError(f"{method} failed")

    def fetch_categories(self) -> list[Category]:
        self._check("fetch_categories")
        return list(self.categories)

    def fetch_active_listings(self) -> list[Listing]:
        self._check("fetch_active_listings")
        active = [listing for listing in self.listings if listing.is_active]
        return sorted(
            active,
            key=lambda listing: listing.created_at.timestamp() if listing.created_at else 0,
            reverse=True,
        )

    def fetch_profile(self, user_id: str) -> Optional[Profile]:
        self._check("fetch_profile", user_id)
        return self.profiles.get(user_id)

    def fetch_primary_image(self, listing_id: str) -> Optional[str]:
        self._check("fetch_primary_image", listing_id)
        for image in self.images:
            if image.service_id == listing_id and image.is_primary:
                return image.image_url
        return None

    def fetch_provider(self, provider_id: str) -> Optional[Provider]:
        self._check("fetch_provider", provider_id)
        return self.providers.get(provider_id)

    def fetch_provider_listings(self, provider_id: str) -> list[Listing]:
        self._check("fetch_provider_listings")
        return [
            listing for listing in self.listings
            if listing.service_provider_id == provider_id and listing.is_active
        ]

    def fetch_listing_images(self, listing_ids: list[str]) -> list[ServiceImage]:
        self._check("fetch_listing_images")
        return [image for image in self.images if image.service_id in listing_ids]

    def fetch_reviews(self, provider_id: str) -> list[Review]:
        self._check("fetch_reviews")
        reviews = [review for review in self.reviews if review.service_provider_id == provider_id]
        return sorted(reviews, key=lambda review: review.created_at, reverse=True)

    def fetch_listing_signatures(self) -> dict[str, str]:
        self._check("fetch_listing_signatures")
        return {
            listing.id: json.dumps(listing.model_dump(mode="json"), sort_keys=True)
            for listing in self.listings
        }


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def make_enriched():
    """Factory for enriched listings with sensible defaults."""

    def _make(
        listing_id: str,
        location: Optional[str] = "Tunis",
        category: Optional[str] = "A",
        provider_category: Optional[str] = None,
        approved: bool = False,
        **listing_fields: Any,
    ) -> EnrichedListing:
        listing = Listing(
            id=listing_id,
            service_provider_id=f"p{listing_id}",
            location=location,
            job_category_id=category,
            **listing_fields,
        )
        provider = Provider(
            id=f"p{listing_id}",
            business_name=f"Provider {listing_id}",
            is_approved=approved,
            job_category_id=provider_category,
        )
        return EnrichedListing(listing=listing, provider=provider)

    return _make
