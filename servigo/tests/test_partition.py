"""
Tests for the on-site / online partition.
"""
import pytest

from servigo.models.listing import Category
from servigo.pipeline.partition import (
    CategoryPartitioner,
    categories_for_tab,
    classify,
    fallback_classification,
)


@pytest.fixture
def categories():
    return [
        Category(id="A", name="Something New"),
        Category(id="B", name="Plumbing"),
        Category(id="C", name="Graphic Design"),
        Category(id="D", name="Plumbing", service_type="online"),
        Category(id="E", name="Traduction"),
    ]


class TestClassify:
    """Tests for classification resolution."""

    def test_explicit_tag_wins(self, categories):
        assert classify(categories[3]) == "online"

    def test_name_fallback(self, categories):
        assert classify(categories[1]) == "onsite"
        assert classify(categories[2]) == "online"
        assert classify(categories[4]) == "online"

    def test_unclassifiable(self, categories):
        assert classify(categories[0]) is None
        assert classify(None) is None

    def test_fallback_is_case_insensitive(self):
        assert fallback_classification("  PLUMBING ") == "onsite"
        assert fallback_classification("") is None
        assert fallback_classification(None) is None


class TestCategoryPartitioner:
    """Tests for CategoryPartitioner."""

    def test_partition_by_category(self, make_enriched, categories):
        listings = [
            make_enriched("1", category="B"),
            make_enriched("2", category="C"),
            make_enriched("3", category="B"),
            make_enriched("4", category="D"),
        ]

        partition = CategoryPartitioner().partition(listings, categories)

        assert [listing.id for listing in partition.onsite] == ["1", "3"]
        assert [listing.id for listing in partition.online] == ["2", "4"]
        assert partition.counts == {"onsite": 2, "online": 2}

    def test_unclassifiable_listing_in_neither(self, make_enriched, categories):
        """Test that a listing in an unmapped category appears in no tab."""
        listing = make_enriched("1", category="A")

        partition = CategoryPartitioner().partition([listing], categories)

        assert partition.onsite == ()
        assert partition.online == ()

    def test_unknown_or_missing_category(self, make_enriched, categories):
        listings = [make_enriched("1", category="Z"), make_enriched("2", category=None)]

        partition = CategoryPartitioner().partition(listings, categories)

        assert partition.counts == {"onsite": 0, "online": 0}

    def test_provider_category_not_used(self, make_enriched, categories):
        """Test that a listing without its own category lands in neither tab."""
        listing = make_enriched("1", category=None, provider_category="B")

        partition = CategoryPartitioner().partition([listing], categories)

        assert partition.counts == {"onsite": 0, "online": 0}

    def test_disjoint_and_order_preserving(self, make_enriched, categories):
        listings = [make_enriched(str(i), category="BC"[i % 2]) for i in range(10)]

        partition = CategoryPartitioner().partition(listings, categories)

        onsite_ids = [listing.id for listing in partition.onsite]
        online_ids = [listing.id for listing in partition.online]
        assert not set(onsite_ids) & set(online_ids)
        assert onsite_ids == ["0", "2", "4", "6", "8"]
        assert online_ids == ["1", "3", "5", "7", "9"]


class TestCategoriesForTab:
    def test_categories_for_tab(self, categories):
        assert [c.id for c in categories_for_tab(categories, "onsite")] == ["B"]
        assert [c.id for c in categories_for_tab(categories, "online")] == ["C", "D", "E"]
