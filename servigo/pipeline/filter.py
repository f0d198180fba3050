"""
Listing filter - reduce the enriched listing set to the ones matching the browse criteria.
"""
import logging

from ..models.enrichment import EnrichedListing
from ..models.filters import ALL, FilterCriteria


logger = logging.getLogger(__name__)

# Both availability tags are backed by the provider approval flag
APPROVAL_TAGS = frozenset({"verified", "licensed"})


class ListingFilter:
    """
    Filters enriched listings by category, location and availability.
    Pure and order-preserving: the result is a subsequence of the input.
    """

    def filter(
        self,
        listings: list[EnrichedListing],
        criteria: FilterCriteria,
    ) -> list[EnrichedListing]:
        """
        Filter listings.

        Args:
            listings: Enriched listings, newest first
            criteria: Active filter criteria

        Returns:
            The listings matching every criterion, in input order
        """
        if criteria.is_default:
            return list(listings)

        filtered = [listing for listing in listings if self.matches(listing, criteria)]
        logger.debug(f"Filtered {len(listings)} listings to {len(filtered)}")
        return filtered

    def matches(self, listing: EnrichedListing, criteria: FilterCriteria) -> bool:
        return (
            self._matches_category(listing, criteria.category)
            and self._matches_location(listing, criteria.location)
            and self._matches_availability(listing, criteria.availability)
        )

    def _matches_category(self, listing: EnrichedListing, category: str) -> bool:
        if category == ALL:
            return True
        return listing.category_id == category

    def _matches_location(self, listing: EnrichedListing, location: str) -> bool:
        # Literal match: no case folding or accent normalization
        if location == ALL:
            return True
        return listing.location == location

    def _matches_availability(self, listing: EnrichedListing, availability: frozenset) -> bool:
        if not availability:
            return True
        return bool(availability & APPROVAL_TAGS) and listing.provider.is_approved


def available_locations(listings: list[EnrichedListing]) -> list[str]:
    """Distinct non-empty locations, in order of first appearance."""
    seen: dict[str, None] = {}
    for listing in listings:
        if listing.location:
            seen.setdefault(listing.location, None)
    return list(seen)
