"""
Listing models - records as stored in the hosted backend tables.
"""
from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator


Classification = Literal["onsite", "online"]

PLACEHOLDER_PROVIDER_NAME = "Service Provider"

# Spellings seen in category rows, mapped to the canonical classification
_CLASSIFICATION_ALIASES = {
    "onsite": "onsite",
    "on-site": "onsite",
    "on_site": "onsite",
    "on site": "onsite",
    "online": "online",
    "on-line": "online",
    "remote": "online",
}


def normalize_classification(value: Any) -> Optional[str]:
    """Map a raw classification tag to 'onsite' / 'online', or None."""
    if not isinstance(value, str):
        return None
    return _CLASSIFICATION_ALIASES.get(value.strip().lower())


class Listing(BaseModel):
    """A service offering (row of the `services` table)."""
    id: str
    service_provider_id: Optional[str] = None
    user_id: Optional[str] = None
    job_category_id: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    hourly_rate: Optional[float] = None
    business_name: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None

    @field_validator("id", "service_provider_id", "user_id", "job_category_id", mode="before")
    @classmethod
    def coerce_reference(cls, v: Any) -> Any:
        """Backend ids may arrive as ints or uuids."""
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("hourly_rate", mode="before")
    @classmethod
    def parse_rate(cls, v: Any) -> Optional[float]:
        """Parse hourly rate from numeric or string formats."""
        if v is None or v == "":
            return None
        if isinstance(v, (int, float)):
            return float(v)
        if isinstance(v, str):
            cleaned = v.replace(" ", "").replace(",", ".").replace("TND", "").replace("DT", "")
            try:
                return float(cleaned)
            except ValueError:
                return None
        return None


class Provider(BaseModel):
    """A professional or business offering listings (`service_providers`)."""
    id: str
    user_id: Optional[str] = None
    business_name: str = PLACEHOLDER_PROVIDER_NAME
    business_description: Optional[str] = None
    rating: float = Field(default=0.0, ge=0, le=5)
    total_reviews: int = Field(default=0, ge=0)
    is_approved: bool = False
    job_category_id: Optional[str] = None
    profile_photo_url: Optional[str] = None
    is_placeholder: bool = Field(
        default=False,
        description="True when synthesized because the real record was unavailable",
    )

    @field_validator("id", "user_id", "job_category_id", mode="before")
    @classmethod
    def coerce_reference(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("business_name", mode="before")
    @classmethod
    def default_name(cls, v: Any) -> str:
        return v or PLACEHOLDER_PROVIDER_NAME

    @field_validator("rating", mode="before")
    @classmethod
    def clamp_rating(cls, v: Any) -> float:
        """Absent rating means unrated; out-of-range values are clamped."""
        if v is None:
            return 0.0
        try:
            value = float(v)
        except (TypeError, ValueError):
            return 0.0
        return min(5.0, max(0.0, value))

    @field_validator("total_reviews", "is_approved", mode="before")
    @classmethod
    def null_to_default(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            return 0 if info.field_name == "total_reviews" else False
        return v

    @property
    def is_rated(self) -> bool:
        return self.rating > 0


class Profile(BaseModel):
    """User profile (`profiles`) used for the provider's display name and photo."""
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_photo_url: Optional[str] = None

    @property
    def full_name(self) -> Optional[str]:
        if not self.first_name:
            return None
        return f"{self.first_name} {self.last_name or ''}".strip()


class ServiceImage(BaseModel):
    """A photo attached to a listing (`service_images`)."""
    service_id: Optional[str] = None
    image_url: str
    is_primary: bool = False

    @field_validator("service_id", mode="before")
    @classmethod
    def coerce_reference(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        return str(v)


class Category(BaseModel):
    """A job category with an optional explicit classification."""
    id: str
    name: str = ""
    description: Optional[str] = None
    service_type: Optional[Classification] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_reference(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("name", mode="before")
    @classmethod
    def null_name(cls, v: Any) -> str:
        return v or ""

    @field_validator("service_type", mode="before")
    @classmethod
    def parse_service_type(cls, v: Any) -> Optional[str]:
        """Unknown tags are treated as absent."""
        return normalize_classification(v)
