"""
Provider details - everything shown on a provider's profile page.
"""
import logging
from typing import Optional

from ..client.backend import BackendClient, BackendError, BackendNotFoundError
from ..models.details import ProviderDetails, Review, ServiceSummary
from ..models.listing import Category, Profile, ServiceImage


logger = logging.getLogger(__name__)


class ProviderNotFoundError(LookupError):
    """No provider exists with the requested id."""


class ProviderDetailsLoader:
    """
    Loads a provider with its profile, category, services and reviews.
    Only the provider lookup is required; the rest degrades to empty.
    """

    def __init__(self, client: BackendClient):
        self.client = client

    def load(self, provider_id: str) -> ProviderDetails:
        """
        Load provider details.

        Raises:
            ValueError: provider_id is blank
            ProviderNotFoundError: no such provider
            BackendError: the provider query itself failed
        """
        if not provider_id or not provider_id.strip():
            raise ValueError("No provider ID was provided")

        provider = self.client.fetch_provider(provider_id)
        if provider is None:
            raise ProviderNotFoundError(f'Service provider with ID "{provider_id}" not found')

        categories = self._categories()
        by_id = {category.id: category for category in categories}

        return ProviderDetails(
            provider=provider,
            profile=self._profile(provider.user_id),
            category=by_id.get(provider.job_category_id) if provider.job_category_id else None,
            services=self._services(provider_id, by_id),
            reviews=self._reviews(provider_id),
        )

    def _profile(self, user_id: Optional[str]) -> Optional[Profile]:
        if not user_id:
            return None
        try:
            return self.client.fetch_profile(user_id)
        except BackendError as e:
            logger.warning(f"Could not fetch profile for user {user_id}: {e}")
            return None

    def _categories(self) -> list[Category]:
        try:
            return self.client.fetch_categories()
        except BackendError as e:
            logger.warning(f"Could not fetch categories: {e}")
            return []

    def _services(self, provider_id: str, categories: dict[str, Category]) -> list[ServiceSummary]:
        try:
            listings = self.client.fetch_provider_listings(provider_id)
        except BackendError as e:
            logger.warning(f"Services fetch error for provider {provider_id}: {e}")
            return []

        try:
            images = self.client.fetch_listing_images([listing.id for listing in listings])
        except BackendError as e:
            logger.warning(f"Service images fetch error for provider {provider_id}: {e}")
            images = []

        images_by_service: dict[str, list[ServiceImage]] = {}
        for image in images:
            images_by_service.setdefault(image.service_id, []).append(image)

        return [
            ServiceSummary(
                listing=listing,
                category=categories.get(listing.job_category_id) if listing.job_category_id else None,
                images=images_by_service.get(listing.id, []),
            )
            for listing in listings
        ]

    def _reviews(self, provider_id: str) -> list[Review]:
        try:
            return self.client.fetch_reviews(provider_id)
        except BackendNotFoundError:
            logger.warning("Reviews table is not available")
            return []
        except BackendError as e:
            logger.warning(f"Reviews fetch error for provider {provider_id}: {e}")
            return []
