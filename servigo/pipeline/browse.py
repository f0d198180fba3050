"""
Browse session - per-user filter state and the views derived from a snapshot.
"""
import logging
from typing import Mapping, Optional

from ..models.enrichment import EnrichedListing
from ..models.filters import ALL, FilterCriteria, Partition, Tab
from ..models.listing import Category

from .filter import ListingFilter, available_locations
from .loader import ListingSnapshot
from .partition import CategoryPartitioner, categories_for_tab, classify


logger = logging.getLogger(__name__)


class BrowseSession:
    """
    Filter criteria and active tab for one UI session.
    Derived views are recomputed from the given snapshot on every access.
    """

    def __init__(self, criteria: Optional[FilterCriteria] = None, active_tab: Tab = "onsite"):
        self.criteria = criteria or FilterCriteria()
        self.active_tab: Tab = active_tab
        self._filter = ListingFilter()
        self._partitioner = CategoryPartitioner()

    def update(self, **changes) -> FilterCriteria:
        """Apply criterion changes (category, location, availability)."""
        self.criteria = FilterCriteria.model_validate({**self.criteria.model_dump(), **changes})
        return self.criteria

    def reset_filters(self) -> FilterCriteria:
        self.criteria = self.criteria.reset()
        return self.criteria

    def select_tab(self, tab: Tab) -> None:
        self.active_tab = tab

    def apply_query_params(self, params: Mapping[str, str], categories: list[Category]) -> None:
        """
        Preselect filters from link parameters.
        `location` is taken as is; `service` selects the category with that
        name, compared case-insensitively.
        """
        location = params.get("location")
        if location:
            self.update(location=location)

        service = params.get("service")
        if service:
            wanted = service.strip().casefold()
            match = next((c for c in categories if c.name.casefold() == wanted), None)
            if match is not None:
                self.update(category=match.id)
                tab = classify(match)
                if tab is not None:
                    self.select_tab(tab)
            else:
                logger.info(f"No category named {service!r}")

    # Derived views

    def filtered(self, snapshot: ListingSnapshot) -> list[EnrichedListing]:
        return self._filter.filter(list(snapshot.listings), self.criteria)

    def partition(self, snapshot: ListingSnapshot) -> Partition:
        return self._partitioner.partition(self.filtered(snapshot), list(snapshot.categories))

    def active_listings(self, snapshot: ListingSnapshot) -> tuple[EnrichedListing, ...]:
        return self.partition(snapshot).for_tab(self.active_tab)

    def locations(self, snapshot: ListingSnapshot) -> list[str]:
        return available_locations(list(snapshot.listings))

    def tab_categories(self, snapshot: ListingSnapshot) -> list[Category]:
        return categories_for_tab(list(snapshot.categories), self.active_tab)

    def category_options(self, snapshot: ListingSnapshot) -> list[str]:
        """
        Category ids for the selector: "all", the active tab's categories,
        and the selected category even when it belongs to the other tab.
        """
        options = [ALL] + [category.id for category in self.tab_categories(snapshot)]
        if self.criteria.category not in options:
            options.append(self.criteria.category)
        return options

    def category_name(self, snapshot: ListingSnapshot, category_id: Optional[str]) -> Optional[str]:
        if not category_id or category_id == ALL:
            return None
        for category in snapshot.categories:
            if category.id == category_id:
                return category.name
        return None
