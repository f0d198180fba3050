"""
Pydantic models for ServiGO.
All remote records are validated into these contracts at the fetch boundary.
"""

from .listing import (
    PLACEHOLDER_PROVIDER_NAME,
    Category,
    Classification,
    Listing,
    Profile,
    Provider,
    ServiceImage,
    normalize_classification,
)
from .enrichment import EnrichedListing
from .filters import ALL, AvailabilityTag, FilterCriteria, Partition, Tab
from .details import ProviderDetails, Review, ServiceSummary

__all__ = [
    # Listing
    "PLACEHOLDER_PROVIDER_NAME",
    "Category",
    "Classification",
    "Listing",
    "Profile",
    "Provider",
    "ServiceImage",
    "normalize_classification",
    # Enrichment
    "EnrichedListing",
    # Filters
    "ALL",
    "AvailabilityTag",
    "FilterCriteria",
    "Partition",
    "Tab",
    # Details
    "ProviderDetails",
    "Review",
    "ServiceSummary",
]
