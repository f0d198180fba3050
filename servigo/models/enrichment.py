"""
Enrichment models - a listing joined with its provider, profile and photo.
"""
from typing import Optional

from pydantic import BaseModel, Field

from .listing import PLACEHOLDER_PROVIDER_NAME, Listing, Profile, Provider


class EnrichedListing(BaseModel):
    """
    A listing flattened for display.
    Computed on every load, never persisted. `provider` is always set:
    a placeholder stands in when the real record could not be resolved.
    """
    listing: Listing
    provider: Provider
    profile: Optional[Profile] = None
    service_photo: Optional[str] = Field(
        default=None,
        description="URL of the listing's primary photo"
    )

    @property
    def id(self) -> str:
        return self.listing.id

    @property
    def location(self) -> Optional[str]:
        return self.listing.location

    @property
    def category_id(self) -> Optional[str]:
        """Provider's category wins over the listing's own reference."""
        return self.provider.job_category_id or self.listing.job_category_id

    @property
    def provider_name(self) -> str:
        if self.profile is not None and self.profile.full_name:
            return self.profile.full_name
        return (
            self.provider.business_name
            or self.listing.business_name
            or PLACEHOLDER_PROVIDER_NAME
        )

    @property
    def provider_photo(self) -> Optional[str]:
        if self.profile is not None and self.profile.profile_photo_url:
            return self.profile.profile_photo_url
        return self.provider.profile_photo_url

    @property
    def display_photo(self) -> Optional[str]:
        return self.provider_photo or self.service_photo

    def price_label(self, currency: str = "TND") -> Optional[str]:
        rate = self.listing.hourly_rate
        if rate is None:
            return None
        amount = f"{rate:g}"
        return f"{amount} {currency}/hour"
