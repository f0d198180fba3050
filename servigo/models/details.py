"""
Provider details models - what the provider profile page shows.
"""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .listing import PLACEHOLDER_PROVIDER_NAME, Category, Listing, Profile, Provider, ServiceImage


class Review(BaseModel):
    """A customer review of a provider."""
    id: str
    service_provider_id: Optional[str] = None
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None
    created_at: Optional[datetime] = None
    reviewer_first_name: Optional[str] = None
    reviewer_last_name: Optional[str] = None

    @field_validator("id", "service_provider_id", mode="before")
    @classmethod
    def coerce_reference(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @property
    def reviewer_name(self) -> str:
        name = f"{self.reviewer_first_name or ''} {self.reviewer_last_name or ''}".strip()
        return name or "Anonymous"


class ServiceSummary(BaseModel):
    """One of the provider's active services with its category and photos."""
    listing: Listing
    category: Optional[Category] = None
    images: list[ServiceImage] = Field(default_factory=list)

    @property
    def primary_image(self) -> Optional[str]:
        for image in self.images:
            if image.is_primary:
                return image.image_url
        return self.images[0].image_url if self.images else None


class ProviderDetails(BaseModel):
    """Everything needed to render a provider profile."""
    provider: Provider
    profile: Optional[Profile] = None
    category: Optional[Category] = None
    services: list[ServiceSummary] = Field(default_factory=list)
    reviews: list[Review] = Field(default_factory=list)

    @property
    def display_name(self) -> str:
        if self.profile is not None and self.profile.full_name:
            return self.profile.full_name
        return self.provider.business_name or PLACEHOLDER_PROVIDER_NAME

    @property
    def photo_url(self) -> Optional[str]:
        if self.profile is not None and self.profile.profile_photo_url:
            return self.profile.profile_photo_url
        return self.provider.profile_photo_url

    @property
    def selected_service(self) -> Optional[ServiceSummary]:
        """The first service is selected by default."""
        return self.services[0] if self.services else None
