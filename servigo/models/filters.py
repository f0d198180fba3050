"""
Filter models - user-selected browse criteria and the partition result.
"""
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from .enrichment import EnrichedListing


ALL = "all"

AvailabilityTag = Literal["verified", "licensed"]
Tab = Literal["onsite", "online"]


class FilterCriteria(BaseModel):
    """
    Active browse filters for one UI session.
    "all" (or an empty value) disables the category / location criterion.
    """
    category: str = ALL
    location: str = ALL
    availability: frozenset[AvailabilityTag] = Field(default_factory=frozenset)

    @field_validator("category", "location", mode="before")
    @classmethod
    def blank_is_all(cls, v):
        return v or ALL

    @property
    def is_default(self) -> bool:
        return self.category == ALL and self.location == ALL and not self.availability

    def reset(self) -> "FilterCriteria":
        """Return the default criteria."""
        return FilterCriteria()


class Partition(BaseModel):
    """Filtered listings split into the on-site and online tabs."""
    onsite: tuple[EnrichedListing, ...] = ()
    online: tuple[EnrichedListing, ...] = ()

    @property
    def counts(self) -> dict[str, int]:
        return {"onsite": len(self.onsite), "online": len(self.online)}

    def for_tab(self, tab: Tab) -> tuple[EnrichedListing, ...]:
        return self.onsite if tab == "onsite" else self.online
