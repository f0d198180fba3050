"""Listing pipeline: load, enrich, filter, partition."""

from .enrichment import ListingEnricher, placeholder_provider, resolve_provider
from .filter import ListingFilter, available_locations
from .partition import CategoryPartitioner, categories_for_tab, classify
from .loader import ListingLoader, ListingSnapshot
from .browse import BrowseSession
from .details import ProviderDetailsLoader, ProviderNotFoundError

__all__ = [
    "ListingEnricher",
    "placeholder_provider",
    "resolve_provider",
    "ListingFilter",
    "available_locations",
    "CategoryPartitioner",
    "categories_for_tab",
    "classify",
    "ListingLoader",
    "ListingSnapshot",
    "BrowseSession",
    "ProviderDetailsLoader",
    "ProviderNotFoundError",
]
