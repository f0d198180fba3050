"""
Category partitioner - split listings into the on-site and online tabs.
"""
import logging
from typing import Optional

from ..models.enrichment import EnrichedListing
from ..models.filters import Partition, Tab
from ..models.listing import Category


logger = logging.getLogger(__name__)


# Fallback classification by category name, used when a category row
# carries no explicit service_type. Keys are case-folded.
SERVICE_CATEGORIES: dict[str, str] = {
    # On-site: the professional comes to the customer
    "plumbing": "onsite",
    "plumber": "onsite",
    "electrical": "onsite",
    "electrician": "onsite",
    "cleaning": "onsite",
    "house cleaning": "onsite",
    "carpentry": "onsite",
    "painting": "onsite",
    "gardening": "onsite",
    "landscaping": "onsite",
    "moving": "onsite",
    "air conditioning": "onsite",
    "hvac": "onsite",
    "appliance repair": "onsite",
    "masonry": "onsite",
    "tiling": "onsite",
    "locksmith": "onsite",
    "pest control": "onsite",
    "home maintenance": "onsite",
    "car repair": "onsite",
    "mechanic": "onsite",
    "babysitting": "onsite",
    "elderly care": "onsite",
    "beauty": "onsite",
    "hairdressing": "onsite",
    "plomberie": "onsite",
    "électricité": "onsite",
    "nettoyage": "onsite",
    "menuiserie": "onsite",
    "peinture": "onsite",
    "jardinage": "onsite",
    "déménagement": "onsite",
    "climatisation": "onsite",
    # Online: delivered remotely
    "web development": "online",
    "mobile development": "online",
    "software development": "online",
    "graphic design": "online",
    "ui/ux design": "online",
    "digital marketing": "online",
    "social media": "online",
    "seo": "online",
    "content writing": "online",
    "copywriting": "online",
    "translation": "online",
    "video editing": "online",
    "photo editing": "online",
    "online tutoring": "online",
    "tutoring": "online",
    "accounting": "online",
    "consulting": "online",
    "data entry": "online",
    "virtual assistant": "online",
    "développement web": "online",
    "design graphique": "online",
    "marketing digital": "online",
    "traduction": "online",
    "rédaction": "online",
    "cours en ligne": "online",
}


def fallback_classification(name: Optional[str]) -> Optional[str]:
    if not name:
        return None
    return SERVICE_CATEGORIES.get(name.strip().casefold())


def classify(category: Optional[Category]) -> Optional[str]:
    """
    Resolve a category's classification.
    Explicit service_type first, then the name mapping, else None.
    """
    if category is None:
        return None
    if category.service_type:
        return category.service_type
    return fallback_classification(category.name)


class CategoryPartitioner:
    """
    Splits filtered listings into disjoint on-site / online sequences.
    Listings whose category cannot be classified land in neither.
    """

    def partition(
        self,
        listings: list[EnrichedListing],
        categories: list[Category],
    ) -> Partition:
        by_id = {category.id: category for category in categories}
        onsite: list[EnrichedListing] = []
        online: list[EnrichedListing] = []
        dropped = 0

        for listing in listings:
            category_id = listing.listing.job_category_id
            classification = classify(by_id.get(category_id)) if category_id else None
            if classification == "onsite":
                onsite.append(listing)
            elif classification == "online":
                online.append(listing)
            else:
                dropped += 1

        if dropped:
            logger.debug(f"{dropped} listings have no classifiable category")
        return Partition(onsite=tuple(onsite), online=tuple(online))


def categories_for_tab(categories: list[Category], tab: Tab) -> list[Category]:
    """Categories offered in the selector while a tab is active."""
    return [category for category in categories if classify(category) == tab]
